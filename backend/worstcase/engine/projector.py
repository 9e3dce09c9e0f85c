"""
Result projector: window states → reporting statistics.
"""

from typing import Iterable

from worstcase.config import HOURS_IN_DAY, REFERENCE_IRRADIANCE_W_M2, WINDOW_LABELS
from worstcase.engine.aggregator import IRRADIANCE, TEMPERATURE, AggregationState
from worstcase.errors import InsufficientDataError
from worstcase.models.worst_case import WindowStatistic, WorstCaseOutput


def peak_sun_hours(ghi_sum: float, window_days: float) -> float:
    """Equivalent hours of 1000 W/m² sun per day over the window."""
    return ghi_sum / window_days / REFERENCE_IRRADIANCE_W_M2


def project_statistics(state: AggregationState) -> list[WindowStatistic]:
    """
    Map every window's best aggregate to a WindowStatistic.

    Raises:
        InsufficientDataError: if any window never reached full capacity.
    """
    missing = state.unfilled()
    if missing:
        raise InsufficientDataError(missing, state.sample_count)

    statistics = []
    for (metric, hours), window in state.windows.items():
        window_days = hours / HOURS_IN_DAY
        statistics.append(WindowStatistic(
            metric=metric,
            window_hours=hours,
            window_days=window_days,
            aggregate=window.best,
            peak_sun_hours=(
                peak_sun_hours(window.best, window_days) if metric == IRRADIANCE else None
            ),
            timestamp=window.best_timestamp,
        ))
    return statistics


def build_output(
    statistics: list[WindowStatistic],
    total_samples: int,
    source_files: Iterable[str],
    ignore_stated_year: bool,
) -> WorstCaseOutput:
    """Assemble the flat worst-case record from per-window statistics."""
    fields: dict = {}
    for stat in statistics:
        label = WINDOW_LABELS[stat.window_hours]
        if stat.metric == IRRADIANCE:
            fields[f"WorstCaseSolarPowerGeneration{label}Period"] = stat.aggregate
            fields[f"WorstCasePeakSolarHours{label}Period"] = stat.peak_sun_hours
            fields[f"WorstCaseSolarTimestamp{label}Period"] = stat.timestamp
        elif stat.metric == TEMPERATURE:
            fields[f"WorstCaseAverageTemperature{label}Period"] = stat.aggregate
            fields[f"WorstCaseTemperatureTimestamp{label}Period"] = stat.timestamp

    return WorstCaseOutput(
        **fields,
        statistics=statistics,
        total_samples=total_samples,
        source_files=list(source_files),
        ignore_stated_year=ignore_stated_year,
    )
