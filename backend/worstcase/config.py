"""
Solar worst-case analysis configuration and constants.
"""

import logging
import os

from dotenv import load_dotenv

from worstcase.errors import ConfigurationError

load_dotenv()


# Rolling window lengths in samples (hourly data → hours).
# Order matters: it is the order windows are reported in.
WINDOW_HOURS: tuple[int, ...] = (24, 72, 120, 168)

HOURS_IN_DAY = 24

# Reporting labels used in the flat output record, keyed by window length
WINDOW_LABELS = {
    24: "24Hour",
    72: "3Day",
    120: "5Day",
    168: "7Day",
}

# Reference full-sun irradiance for peak sun hours (W/m²)
REFERENCE_IRRADIANCE_W_M2 = 1000.0

# Non-data lines (metadata keys, metadata values) before the column-header line
HEADER_ROWS = 2

# Required column names, looked up in the column-header line
INPUT_COLUMNS: tuple[str, ...] = (
    "Year",
    "Month",
    "Day",
    "Hour",
    "Minute",
    "GHI",
    "Temperature",
)

INPUT_EXTENSION = ".csv"

# Files whose stem ends with this marker are derived/intermediate outputs
DERIVED_FILE_MARKER = "_merged"

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Local frontend dev servers
DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",  # Vite default
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]


def env_int(name: str) -> int | None:
    """Optional integer environment variable; unset or blank means None."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None


def env_list(name: str, default: list[str]) -> list[str]:
    """Comma-separated environment variable."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return [v.strip() for v in value.split(",") if v.strip()]


class Settings:
    DATA_DIRECTORY: str = os.getenv("WORSTCASE_DATA_DIRECTORY", "")
    IGNORE_STATED_YEAR: bool = os.getenv("WORSTCASE_IGNORE_STATED_YEAR", "false").lower() == "true"
    REFERENCE_YEAR: int | None = env_int("WORSTCASE_REFERENCE_YEAR")
    MAX_WORKERS: int | None = env_int("WORSTCASE_MAX_WORKERS")
    LOG_LEVEL: str = os.getenv("WORSTCASE_LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS: list[str] = env_list("WORSTCASE_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install the root handler used by the CLI and the API app."""
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
