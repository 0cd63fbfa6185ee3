"""Calculation workflow: parse, gate on sample size, compute every result."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from statcalc.services.histogram import MAX_BINS, HistogramBin, compute_histogram
from statcalc.services.parser import parse_data
from statcalc.services.proportions import ProportionSlice, compute_proportions
from statcalc.services.summary import StatisticsSummary, compute_statistics

__all__: list[str] = [
    "MIN_VALUES",
    "Calculation",
    "CalculationError",
    "EmptyInputError",
    "InsufficientDataError",
    "calculate",
]

MIN_VALUES = 2

logger = logging.getLogger(__name__)


class CalculationError(ValueError):
    """Input that cannot be turned into statistics."""

    code = "invalid_input"


class EmptyInputError(CalculationError):
    code = "empty_input"

    def __init__(self) -> None:
        super().__init__("Please enter valid numeric data.")


class InsufficientDataError(CalculationError):
    code = "insufficient_data"

    def __init__(self, count: int) -> None:
        super().__init__(f"At least {MIN_VALUES} values are required.")
        self.count = count


@dataclass(frozen=True)
class Calculation:
    summary: StatisticsSummary
    histogram: list[HistogramBin]
    proportions: list[ProportionSlice]


def calculate(text: str, max_bins: int = MAX_BINS) -> Calculation:
    """
    Run the full pipeline on raw user text.
    Raises EmptyInputError if no number could be parsed and
    InsufficientDataError if fewer than MIN_VALUES were.
    """
    data = parse_data(text)
    if not data:
        logger.warning("Rejected input: no numeric values (%d chars)", len(text))
        raise EmptyInputError()
    if len(data) < MIN_VALUES:
        logger.warning("Rejected input: %d value(s), need %d", len(data), MIN_VALUES)
        raise InsufficientDataError(len(data))

    summary = compute_statistics(data)
    histogram = compute_histogram(data, max_bins)
    logger.info("Calculated statistics for %d values (%d bins)", summary.count, len(histogram))
    return Calculation(
        summary=summary,
        histogram=histogram,
        proportions=compute_proportions(histogram),
    )
