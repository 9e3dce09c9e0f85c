"""
Sample normalizer: RawRecord → Sample.

With ignore_stated_year every row is placed on one reference year, so a
blended "typical year" dataset collapses onto a single calendar year.
"""

import math
from datetime import MAXYEAR, MINYEAR, datetime, timezone
from typing import Iterable, Optional

from worstcase.errors import ConfigurationError, MalformedRecordError
from worstcase.models.samples import RawRecord, Sample


def resolve_reference_year(reference_year: Optional[int] = None) -> int:
    """Year used for every row when the stated year is ignored (default: now)."""
    if reference_year is not None:
        if not MINYEAR <= reference_year <= MAXYEAR:
            raise ConfigurationError(
                f"reference_year must be between {MINYEAR} and {MAXYEAR}, got {reference_year}"
            )
        return reference_year
    return datetime.now(tz=timezone.utc).year


def normalize_record(
    record: RawRecord,
    ignore_stated_year: bool = False,
    reference_year: Optional[int] = None,
) -> Sample:
    """
    Convert one raw row into a Sample.

    Raises:
        MalformedRecordError: non-numeric fields, negative or fractional GHI,
            or a calendar combination that is not a real date-time.
    """
    month = _parse_int(record, "month", record.month)
    day = _parse_int(record, "day", record.day)
    hour = _parse_int(record, "hour", record.hour)
    minute = _parse_int(record, "minute", record.minute)
    if ignore_stated_year:
        year = resolve_reference_year(reference_year)
    else:
        year = _parse_int(record, "year", record.year)

    try:
        timestamp = datetime(year, month, day, hour, minute, tzinfo=timezone.utc)
    except ValueError as e:
        raise MalformedRecordError(
            record.source,
            record.row_number,
            f"invalid date {year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d} ({e})",
        ) from e

    ghi = _parse_float(record, "GHI", record.ghi)
    if not ghi.is_integer():
        raise MalformedRecordError(
            record.source, record.row_number, f"GHI must be a whole number, got {record.ghi!r}"
        )
    if ghi < 0:
        raise MalformedRecordError(
            record.source, record.row_number, f"GHI must be non-negative, got {record.ghi!r}"
        )

    temperature = _parse_float(record, "Temperature", record.temperature)

    return Sample(timestamp=timestamp, irradiance=int(ghi), temperature=temperature)


def normalize_records(
    records: Iterable[RawRecord],
    ignore_stated_year: bool = False,
    reference_year: Optional[int] = None,
) -> list[Sample]:
    """Normalize every row of one file."""
    if ignore_stated_year:
        reference_year = resolve_reference_year(reference_year)
    return [
        normalize_record(r, ignore_stated_year=ignore_stated_year, reference_year=reference_year)
        for r in records
    ]


def _parse_int(record: RawRecord, field: str, text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise MalformedRecordError(
            record.source, record.row_number, f"{field} is not an integer: {text!r}"
        ) from None


def _parse_float(record: RawRecord, field: str, text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise MalformedRecordError(
            record.source, record.row_number, f"{field} is not numeric: {text!r}"
        ) from None
    if not math.isfinite(value):
        raise MalformedRecordError(
            record.source, record.row_number, f"{field} is not a finite number: {text!r}"
        )
    return value
