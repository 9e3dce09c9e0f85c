"""
Pydantic models for worst-case rolling-window statistics.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

Metric = Literal["irradiance", "temperature"]


class WorstCaseInput(BaseModel):
    """Input for analyzing a directory of hourly records."""
    data_directory: str = Field(
        "",
        description="Directory holding the input CSV files. Empty = configured default."
    )
    ignore_stated_year: bool = False
    reference_year: Optional[int] = Field(
        None, ge=1, le=9999,
        description="Year used when ignore_stated_year is set. None = current year."
    )


class WindowStatistic(BaseModel):
    """Worst case for one (metric, window length) pair."""
    metric: Metric
    window_hours: int
    window_days: float
    aggregate: float                        # sum (W/m²) or mean (°C)
    peak_sun_hours: Optional[float] = None  # irradiance only
    timestamp: datetime                     # right edge of the window, UTC


class WorstCaseOutput(BaseModel):
    """Worst-case snapshot across all windows."""
    WorstCaseSolarPowerGeneration24HourPeriod: float
    WorstCasePeakSolarHours24HourPeriod: float
    WorstCaseSolarTimestamp24HourPeriod: datetime
    WorstCaseAverageTemperature24HourPeriod: float
    WorstCaseTemperatureTimestamp24HourPeriod: datetime

    WorstCaseSolarPowerGeneration3DayPeriod: float
    WorstCasePeakSolarHours3DayPeriod: float
    WorstCaseSolarTimestamp3DayPeriod: datetime
    WorstCaseAverageTemperature3DayPeriod: float
    WorstCaseTemperatureTimestamp3DayPeriod: datetime

    WorstCaseSolarPowerGeneration5DayPeriod: float
    WorstCasePeakSolarHours5DayPeriod: float
    WorstCaseSolarTimestamp5DayPeriod: datetime
    WorstCaseAverageTemperature5DayPeriod: float
    WorstCaseTemperatureTimestamp5DayPeriod: datetime

    WorstCaseSolarPowerGeneration7DayPeriod: float
    WorstCasePeakSolarHours7DayPeriod: float
    WorstCaseSolarTimestamp7DayPeriod: datetime
    WorstCaseAverageTemperature7DayPeriod: float
    WorstCaseTemperatureTimestamp7DayPeriod: datetime

    statistics: list[WindowStatistic]
    total_samples: int
    source_files: list[str]
    ignore_stated_year: bool
