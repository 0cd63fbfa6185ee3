"""Chart state owned by the presentation layer.

The board keeps at most one bar chart (histogram) and one pie chart
(proportions). Rendering a new calculation disposes the old charts first.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from statcalc.services.calculator import Calculation

logger = logging.getLogger(__name__)

BAR = "bar"
PIE = "pie"


@dataclass
class Chart:
    kind: str
    title: str
    labels: list[str]
    values: list[float]
    disposed: bool = field(default=False)

    def dispose(self) -> None:
        self.disposed = True


def bar_chart(calculation: Calculation) -> Chart:
    return Chart(
        kind=BAR,
        title="Frequency",
        labels=[b.label for b in calculation.histogram],
        values=[b.count for b in calculation.histogram],
    )


def pie_chart(calculation: Calculation) -> Chart:
    return Chart(
        kind=PIE,
        title="Distribution",
        labels=[s.label for s in calculation.proportions],
        values=[s.percent for s in calculation.proportions],
    )


class ChartBoard:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._charts: dict[str, Chart] = {}
        self._calculation: Calculation | None = None

    @property
    def calculation(self) -> Calculation | None:
        return self._calculation

    def _dispose_all(self) -> None:
        for chart in self._charts.values():
            chart.dispose()
        self._charts = {}

    def render(self, calculation: Calculation) -> dict[str, Chart]:
        """Replace the current charts with ones built from ``calculation``."""
        with self._lock:
            self._dispose_all()
            self._charts = {BAR: bar_chart(calculation), PIE: pie_chart(calculation)}
            self._calculation = calculation
            logger.debug("Rendered charts for %d values", calculation.summary.count)
            return dict(self._charts)

    def clear(self) -> bool:
        """Dispose everything. Returns False if there was nothing to clear."""
        with self._lock:
            if self._calculation is None and not self._charts:
                return False
            self._dispose_all()
            self._calculation = None
            return True

    def snapshot(self) -> dict[str, Chart | None]:
        with self._lock:
            return {BAR: self._charts.get(BAR), PIE: self._charts.get(PIE)}
