"""Histogram binning for the frequency chart."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

__all__: list[str] = [
    "HistogramBin",
    "bin_count_for",
    "compute_histogram",
]

MAX_BINS = 10


@dataclass(frozen=True)
class HistogramBin:
    label: str
    count: int
    start: float
    end: float


def _label(start: float, end: float) -> str:
    return f"{start:.1f}-{end:.1f}"


def bin_count_for(n: int, max_bins: int = MAX_BINS) -> int:
    """Square-root rule capped at ``max_bins``; never fewer than one bin."""
    return max(1, min(max_bins, math.ceil(math.sqrt(n))))


def compute_histogram(data: Sequence[float], max_bins: int = MAX_BINS) -> list[HistogramBin]:
    """
    Split [min, max] into equal-width half-open bins and count values per bin.
    The maximum value is clamped into the last bin. If the bin width cannot
    be represented (every value the same, a span too narrow to divide, or
    one wider than the float range) a single bin holds them all.
    """
    if not data:
        return []
    lo = min(data)
    hi = max(data)
    bin_count = bin_count_for(len(data), max_bins)
    bin_width = (hi - lo) / bin_count
    if bin_width == 0 or not math.isfinite(bin_width):
        return [HistogramBin(label=_label(lo, hi), count=len(data), start=lo, end=hi)]

    counts = [0] * bin_count
    for value in data:
        index = min(math.floor((value - lo) / bin_width), bin_count - 1)
        counts[index] += 1

    bins = []
    for i, count in enumerate(counts):
        start = lo + i * bin_width
        end = start + bin_width
        bins.append(HistogramBin(label=_label(start, end), count=count, start=start, end=end))
    return bins
