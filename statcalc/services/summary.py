"""Descriptive statistics over a numeric sequence."""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from statistics import mean, median, pstdev, pvariance
from typing import Sequence

__all__: list[str] = [
    "NO_MODE",
    "PERCENTILE_RANKS",
    "StatisticsSummary",
    "compute_statistics",
    "format_number",
    "percentile",
]

NO_MODE = "no mode"
PERCENTILE_RANKS: tuple[int, ...] = tuple(range(5, 100, 5))


@dataclass(frozen=True)
class StatisticsSummary:
    count: int
    mean: float
    median: float
    mode: str
    min: float
    max: float
    range: float
    variance: float
    stddev: float
    percentiles: dict[int, float]
    sorted: tuple[float, ...]


def format_number(value: float) -> str:
    """Shortest text form of a value: 12.0 -> "12", 1.5 -> "1.5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """
    Linear interpolation between order statistics.
    ``sorted_values`` must be non-empty and ascending; ``p`` is in 0..100.
    """
    index = (p / 100) * (len(sorted_values) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    weight = index - lower
    if lower == upper:
        return sorted_values[lower]
    return sorted_values[lower] * (1 - weight) + sorted_values[upper] * weight


def _overflow_to_inf(func, data: Sequence[float]) -> float:
    # Squared deviations of extreme values can exceed the float range
    try:
        return func(data)
    except OverflowError:
        return math.inf


def _mode(values: Sequence[float]) -> str:
    # Keys compare by exact float equality; nearly-equal values stay separate
    frequency = Counter(values)
    max_freq = max(frequency.values())
    modes = sorted(value for value, freq in frequency.items() if freq == max_freq)
    if len(modes) == len(values):
        return NO_MODE
    return ", ".join(format_number(value) for value in modes)


def compute_statistics(data: Sequence[float]) -> StatisticsSummary | None:
    """
    Compute count, mean, median, mode, min/max/range, population variance,
    standard deviation and P5..P95 for ``data``.
    Returns None if ``data`` is empty. Dispersion too large for a float is
    reported as infinity.
    """
    if not data:
        return None
    ordered = sorted(data)
    variance = _overflow_to_inf(pvariance, data)
    # stddev stays sqrt(variance) even where pstdev could still represent it
    stddev = pstdev(data) if math.isfinite(variance) else math.inf
    return StatisticsSummary(
        count=len(data),
        mean=mean(data),
        median=median(ordered),
        mode=_mode(data),
        min=ordered[0],
        max=ordered[-1],
        range=ordered[-1] - ordered[0],
        variance=variance,
        stddev=stddev,
        percentiles={p: percentile(ordered, p) for p in PERCENTILE_RANKS},
        sorted=tuple(ordered),
    )
