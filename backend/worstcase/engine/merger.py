"""
Chronological merger: many per-file sample batches → one ordered sequence.
"""

import logging
from operator import attrgetter
from typing import Iterable

from worstcase.models.samples import Sample

log = logging.getLogger(__name__)


def merge_samples(batches: Iterable[Iterable[Sample]]) -> list[Sample]:
    """
    Combine all batches and sort ascending by timestamp.

    The sort is stable: samples sharing a timestamp (overlapping source
    files) are all kept, in encounter order.
    """
    merged = sorted(
        (s for batch in batches for s in batch),
        key=attrgetter("timestamp"),
    )

    duplicates = sum(
        1 for prev, cur in zip(merged, merged[1:]) if prev.timestamp == cur.timestamp
    )
    if duplicates:
        log.warning("%d sample(s) share a timestamp with their predecessor; all are kept.", duplicates)

    log.info("Merged %d sample(s) into chronological order.", len(merged))
    return merged
