"""
Sliding-window minimum aggregator.

One pass over the ordered samples drives eight independent windows
(4 lengths × 2 metrics). Each window keeps a fixed-size numpy ring buffer
and a running sum, so every sample costs O(1) per window.

Irradiance windows track the minimum rolling sum (W/m²), temperature
windows the minimum rolling mean (°C). Windows count samples, not
wall-clock time: a missing hour silently widens the span of a window.
"""

from datetime import datetime
from typing import Iterable, Optional

import numpy as np

from worstcase.config import WINDOW_HOURS
from worstcase.models.samples import Sample

IRRADIANCE = "irradiance"
TEMPERATURE = "temperature"
METRICS: tuple[str, ...] = (IRRADIANCE, TEMPERATURE)

# Irradiance is integral, so its sums stay exact
_BUFFER_DTYPES = {
    IRRADIANCE: np.int64,
    TEMPERATURE: np.float64,
}


class WindowState:
    """Rolling window of the last `capacity` values of one metric."""

    def __init__(self, metric: str, capacity: int):
        if metric not in _BUFFER_DTYPES:
            raise ValueError(f"Unknown metric: {metric}")
        if capacity < 1:
            raise ValueError("capacity must be positive")

        self.metric = metric
        self.capacity = capacity
        self._buffer = np.zeros(capacity, dtype=_BUFFER_DTYPES[metric])
        self._head = 0      # index of the oldest value
        self._length = 0
        self._running = 0 if metric == IRRADIANCE else 0.0

        self.best: Optional[float] = None
        self.best_timestamp: Optional[datetime] = None

    def __len__(self) -> int:
        return self._length

    @property
    def is_mean(self) -> bool:
        return self.metric == TEMPERATURE

    @property
    def current(self) -> float:
        """Aggregate of the values currently buffered."""
        if self.is_mean:
            return self._running / self._length if self._length else 0.0
        return self._running

    @property
    def filled(self) -> bool:
        """True once at least one full window has been evaluated."""
        return self.best is not None

    def push(self, value: float, timestamp: datetime) -> None:
        """Add one value; evaluate the window if full, then evict the oldest."""
        tail = (self._head + self._length) % self.capacity
        self._buffer[tail] = value
        self._length += 1
        self._running += value

        if self._length < self.capacity:
            return

        aggregate = self.current
        # Strict < keeps the earliest window on ties
        if self.best is None or aggregate < self.best:
            self.best = aggregate
            self.best_timestamp = timestamp

        self._running -= self._buffer[self._head].item()
        self._head = (self._head + 1) % self.capacity
        self._length -= 1


class AggregationState:
    """All window states for one run, advanced in lockstep."""

    def __init__(self, window_hours: Iterable[int] = WINDOW_HOURS):
        self.window_hours = tuple(window_hours)
        self.windows: dict[tuple[str, int], WindowState] = {
            (metric, hours): WindowState(metric, hours)
            for metric in METRICS
            for hours in self.window_hours
        }
        self.sample_count = 0

    def push(self, sample: Sample) -> None:
        for (metric, _hours), window in self.windows.items():
            value = sample.irradiance if metric == IRRADIANCE else sample.temperature
            window.push(value, sample.timestamp)
        self.sample_count += 1

    def window(self, metric: str, hours: int) -> WindowState:
        return self.windows[(metric, hours)]

    def unfilled(self) -> list[tuple[str, int]]:
        """(metric, hours) pairs that never saw a full window."""
        return [key for key, w in self.windows.items() if not w.filled]


def aggregate(
    samples: Iterable[Sample],
    window_hours: Iterable[int] = WINDOW_HOURS,
) -> AggregationState:
    """Run the single pass over chronologically ordered samples."""
    state = AggregationState(window_hours)
    for sample in samples:
        state.push(sample)
    return state
