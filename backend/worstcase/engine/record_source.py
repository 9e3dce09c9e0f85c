"""
Input file discovery and row reader.

Hourly record files are CSV in the NSRDB layout:
- Row 1: metadata keys (Source, Location ID, City, ...)
- Row 2: metadata values
- Row 3: column headers (Year, Month, Day, Hour, Minute, GHI, Temperature, ...)
- Rows 4+: hourly data rows

Only the seven columns needed downstream are extracted; values stay as text
and are typed by the normalizer.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Optional

from worstcase.config import (
    DERIVED_FILE_MARKER,
    HEADER_ROWS,
    INPUT_COLUMNS,
    INPUT_EXTENSION,
)
from worstcase.errors import ConfigurationError, MalformedRecordError
from worstcase.models.samples import RawRecord

log = logging.getLogger(__name__)


def discover_input_files(data_directory: str | Path) -> list[Path]:
    """
    List the primary input files in *data_directory*, sorted by name.

    Raises:
        ConfigurationError: if the path does not exist or is not a directory.
    """
    directory = Path(data_directory)
    if not directory.exists():
        raise ConfigurationError(f"Data directory does not exist: {directory}")
    if not directory.is_dir():
        raise ConfigurationError(f"Data path is not a directory: {directory}")

    files = []
    for path in sorted(directory.iterdir(), key=lambda p: p.name):
        if not path.is_file() or path.suffix.lower() != INPUT_EXTENSION:
            continue
        if is_derived_file(path.name):
            log.debug("Skipping derived file %s", path.name)
            continue
        files.append(path)

    log.info("Found %d input file(s) in %s", len(files), directory)
    return files


def is_derived_file(filename: str) -> bool:
    """True if *filename* carries the derived/intermediate-file marker."""
    return Path(filename).stem.lower().endswith(DERIVED_FILE_MARKER)


def load_file(path: Path) -> list[RawRecord]:
    """Read one input file from disk and return its data rows."""
    with open(path, "rb") as f:
        raw = f.read()
    return read_records(decode_content(raw, source=path.name), source=path.name)


def decode_content(raw: bytes, source: str) -> str:
    """
    Decode file bytes as UTF-8.

    Raises:
        MalformedRecordError: pointing at the line holding the first bad byte.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        row_number = raw.count(b"\n", 0, e.start) + 1
        raise MalformedRecordError(
            source, row_number, f"invalid UTF-8 at byte {e.start} ({e.reason})"
        ) from e


def read_records(file_content: str, source: str) -> list[RawRecord]:
    """
    Parse raw CSV text into RawRecords.

    The first HEADER_ROWS lines are skipped; the next line holds the column
    names (Year, Month, Day, Hour, Minute, GHI, Temperature, plus any others).

    Args:
        file_content: Raw CSV text
        source: File name, used to locate bad rows in error messages

    Returns:
        RawRecords in file order (blank lines skipped)

    Raises:
        MalformedRecordError: a required column is missing or a row is short.
    """
    lines = file_content.splitlines()
    if len(lines) <= HEADER_ROWS:
        return []

    header = next(csv.reader(io.StringIO(lines[HEADER_ROWS])), [])
    headers_lower = [h.strip().lower() for h in header]
    columns = []
    for name in INPUT_COLUMNS:
        col = _find_column(headers_lower, name.lower())
        if col is None:
            raise MalformedRecordError(
                source,
                HEADER_ROWS + 1,
                f"missing column {name!r} in header {header}",
            )
        columns.append(col)
    min_fields = max(columns) + 1

    records = []
    for line_idx in range(HEADER_ROWS + 1, len(lines)):
        line = lines[line_idx].strip()
        if not line:
            continue

        row = next(csv.reader(io.StringIO(line)))
        row_number = line_idx + 1
        if len(row) < min_fields:
            raise MalformedRecordError(
                source,
                row_number,
                f"expected at least {min_fields} fields, got {len(row)}",
            )

        year, month, day, hour, minute, ghi, temperature = (row[c].strip() for c in columns)
        records.append(RawRecord(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            ghi=ghi,
            temperature=temperature,
            source=source,
            row_number=row_number,
        ))

    log.debug("Read %d row(s) from %s", len(records), source)
    return records


def _find_column(headers: list[str], name: str) -> Optional[int]:
    """Index of the header equal to *name*, else the first starting with it."""
    match: Optional[int] = None
    for i, h in enumerate(headers):
        if h == name:
            return i
        if match is None and h.startswith(name):
            match = i
    return match
