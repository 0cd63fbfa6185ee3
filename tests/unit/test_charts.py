from statcalc.services.calculator import calculate
from statcalc.services.charts import ChartBoard

def test_board_starts_empty():
    board = ChartBoard()
    assert board.calculation is None
    assert board.snapshot() == {"bar": None, "pie": None}
    assert board.clear() is False

def test_render_builds_both_charts():
    board = ChartBoard()
    charts = board.render(calculate("1, 2, 2, 3, 4"))
    assert charts["bar"].labels == [b.label for b in board.calculation.histogram]
    assert charts["bar"].values == [1, 2, 2]
    assert sum(charts["pie"].values) == 100.0

def test_render_disposes_previous_charts():
    board = ChartBoard()
    first = board.render(calculate("1, 2, 3"))
    second = board.render(calculate("4, 5, 6"))
    assert first["bar"].disposed and first["pie"].disposed
    assert not second["bar"].disposed
    assert board.snapshot()["bar"] is second["bar"]
    assert board.calculation.summary.min == 4

def test_clear_disposes_everything():
    board = ChartBoard()
    charts = board.render(calculate("1, 2, 3"))
    assert board.clear() is True
    assert charts["pie"].disposed
    assert board.calculation is None
    assert board.clear() is False
