"""
Orchestrator for the worst-case analysis pipeline.

Discover files → read + normalize each file (in parallel) → merge into
chronological order → single sliding-window pass → project results.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from worstcase.engine.aggregator import aggregate
from worstcase.engine.merger import merge_samples
from worstcase.engine.normalizer import normalize_records, resolve_reference_year
from worstcase.engine.projector import build_output, project_statistics
from worstcase.engine.record_source import discover_input_files, is_derived_file, load_file, read_records
from worstcase.errors import ConfigurationError
from worstcase.models.samples import Sample
from worstcase.models.worst_case import WorstCaseOutput

log = logging.getLogger(__name__)


def analyze_directory(
    data_directory: str | Path,
    ignore_stated_year: bool = False,
    reference_year: Optional[int] = None,
    max_workers: Optional[int] = None,
) -> WorstCaseOutput:
    """
    Run the full pipeline over every primary input file in a directory.

    Args:
        data_directory: Directory holding the hourly CSV files.
        ignore_stated_year: Place every row on one reference year.
        reference_year: Year used with ignore_stated_year (default: now).
        max_workers: Thread pool size for per-file normalization.

    Returns:
        WorstCaseOutput for all files combined.
    """
    if max_workers is not None and max_workers < 1:
        raise ConfigurationError(f"max_workers must be positive, got {max_workers}")
    if ignore_stated_year or reference_year is not None:
        reference_year = resolve_reference_year(reference_year)

    paths = discover_input_files(data_directory)
    if not paths:
        raise ConfigurationError(f"No input files found in {data_directory}")

    if ignore_stated_year:
        log.info("Ignoring stated years; all rows placed on %d.", reference_year)

    def _load(path: Path) -> list[Sample]:
        return normalize_records(
            load_file(path),
            ignore_stated_year=ignore_stated_year,
            reference_year=reference_year,
        )

    # map() re-raises the first worker error here, after submitting every file
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        batches = list(pool.map(_load, paths))

    return _run(batches, [p.name for p in paths], ignore_stated_year)


def analyze_contents(
    files: list[tuple[str, str]],
    ignore_stated_year: bool = False,
    reference_year: Optional[int] = None,
) -> WorstCaseOutput:
    """
    Run the pipeline over in-memory (filename, CSV text) pairs.

    Derived files are skipped just like in a directory scan.
    """
    primary = sorted(
        ((name, text) for name, text in files if not is_derived_file(name)),
        key=lambda f: f[0],
    )
    if not primary:
        raise ConfigurationError("No input files provided.")

    if ignore_stated_year or reference_year is not None:
        reference_year = resolve_reference_year(reference_year)

    batches = [
        normalize_records(
            read_records(text, source=name),
            ignore_stated_year=ignore_stated_year,
            reference_year=reference_year,
        )
        for name, text in primary
    ]
    return _run(batches, [name for name, _ in primary], ignore_stated_year)


def _run(
    batches: list[list[Sample]],
    source_files: list[str],
    ignore_stated_year: bool,
) -> WorstCaseOutput:
    samples = merge_samples(batches)
    state = aggregate(samples)
    statistics = project_statistics(state)

    result = build_output(
        statistics,
        total_samples=state.sample_count,
        source_files=source_files,
        ignore_stated_year=ignore_stated_year,
    )
    log.info(
        "Worst 24h irradiance %.0f W/m² (%.3f peak sun hours) ending %s.",
        result.WorstCaseSolarPowerGeneration24HourPeriod,
        result.WorstCasePeakSolarHours24HourPeriod,
        result.WorstCaseSolarTimestamp24HourPeriod.isoformat(),
    )
    return result
