"""
Pydantic models for raw input rows and normalized hourly samples.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RawRecord(BaseModel):
    """One data row as read from an input file, fields still unparsed."""
    model_config = ConfigDict(frozen=True)

    year: str
    month: str
    day: str
    hour: str
    minute: str
    ghi: str
    temperature: str
    source: str
    row_number: int  # 1-based physical line in the source file


class Sample(BaseModel):
    """A single validated hourly observation."""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime             # UTC, minute precision
    irradiance: int = Field(ge=0)   # W/m²
    temperature: float              # °C
