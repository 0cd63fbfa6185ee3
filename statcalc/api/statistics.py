import math
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Request

from statcalc.api.schemas import (
    ChartOut,
    ChartsOut,
    ClearOut,
    StatisticsIn,
    StatisticsOut,
)
from statcalc.config import get_settings
from statcalc.observability.metrics import CALCULATION_COUNT, CALCULATION_SIZE
from statcalc.services.calculator import Calculation, CalculationError, calculate
from statcalc.services.charts import ChartBoard

router = APIRouter()


def _board(request: Request) -> ChartBoard:
    return request.app.state.chart_board


# Dispersion of extreme inputs can overflow; JSON has no Infinity, so it goes out as null
OVERFLOWABLE_FIELDS = ("mean", "median", "range", "variance", "stddev")


def _summary_out(calculation: Calculation) -> dict:
    summary = asdict(calculation.summary)
    for name in OVERFLOWABLE_FIELDS:
        if not math.isfinite(summary[name]):
            summary[name] = None
    return summary


def _to_out(calculation: Calculation, message=None) -> StatisticsOut:
    return StatisticsOut(
        summary=_summary_out(calculation),
        histogram=[asdict(b) for b in calculation.histogram],
        proportions=[asdict(s) for s in calculation.proportions],
        message=message,
    )


def _chart_out(chart):
    if chart is None:
        return None
    return ChartOut(kind=chart.kind, title=chart.title, labels=chart.labels, values=chart.values)


@router.post("/statistics", response_model=StatisticsOut)
def compute(body: StatisticsIn, request: Request):
    """
    Accepts freeform numeric text in 'data'.
    Returns summary statistics, histogram bins and pie proportions, and
    replaces the currently rendered charts.
    Responds with 400 Bad Request if no value or a single value could be parsed.
    """
    try:
        calculation = calculate(body.data, max_bins=get_settings().max_bins)
    except CalculationError as exc:
        CALCULATION_COUNT.labels(exc.code).inc()
        raise HTTPException(status_code=400, detail={"code": exc.code, "message": str(exc)}) from exc
    CALCULATION_COUNT.labels("ok").inc()
    CALCULATION_SIZE.observe(calculation.summary.count)
    _board(request).render(calculation)
    return _to_out(calculation, message="Statistics calculated successfully.")


@router.get("/statistics", response_model=StatisticsOut)
def latest(request: Request):
    """Last successful calculation, 404 if nothing has been calculated or it was cleared."""
    calculation = _board(request).calculation
    if calculation is None:
        raise HTTPException(status_code=404, detail="No statistics calculated yet")
    return _to_out(calculation)


@router.delete("/statistics", response_model=ClearOut)
def clear(request: Request):
    """Drop the stored result and dispose both charts."""
    if not _board(request).clear():
        return ClearOut(status="empty", message="No data to clear.")
    return ClearOut(status="cleared", message="Data cleared successfully.")


@router.get("/charts", response_model=ChartsOut)
def charts(request: Request):
    snapshot = _board(request).snapshot()
    return ChartsOut(bar=_chart_out(snapshot["bar"]), pie=_chart_out(snapshot["pie"]))
