"""Proportional (pie chart) breakdown of histogram bins."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from statcalc.services.histogram import HistogramBin

__all__: list[str] = [
    "ProportionSlice",
    "compute_proportions",
]


@dataclass(frozen=True)
class ProportionSlice:
    label: str
    count: int
    percent: float


def compute_proportions(bins: Sequence[HistogramBin]) -> list[ProportionSlice]:
    """
    Share of the data falling in each non-empty histogram bin, in percent.
    """
    total = sum(b.count for b in bins)
    if total == 0:
        return []
    return [
        ProportionSlice(label=b.label, count=b.count, percent=round(b.count * 100 / total, 2))
        for b in bins
        if b.count > 0
    ]
