import math
import pytest
from statcalc.services.summary import NO_MODE, PERCENTILE_RANKS, compute_statistics, format_number, percentile

def test_statistics_empty():
    assert compute_statistics([]) is None

def test_statistics_basic():
    stats = compute_statistics([1, 2, 3, 4])
    assert stats.count == 4
    assert stats.mean == 2.5
    assert stats.median == 2.5
    assert stats.variance == 1.25
    assert stats.stddev == math.sqrt(1.25)
    assert stats.mode == NO_MODE

def test_statistics_scenario():
    stats = compute_statistics([12, 15, 18, 20, 22])
    assert stats.count == 5
    assert stats.mean == pytest.approx(17.4)
    assert stats.median == 18
    assert stats.min == 12
    assert stats.max == 22
    assert stats.range == 10
    assert stats.sorted == (12, 15, 18, 20, 22)

def test_statistics_single_value():
    stats = compute_statistics([5])
    assert stats.count == 1
    assert stats.mean == 5
    assert stats.median == 5
    assert stats.variance == 0
    assert stats.stddev == 0
    assert stats.mode == NO_MODE
    assert set(stats.percentiles.values()) == {5}

def test_statistics_unsorted_input():
    stats = compute_statistics([9, 1, 5, 3, 7])
    assert stats.median == 5
    assert stats.sorted == (1, 3, 5, 7, 9)
    assert stats.min <= stats.median <= stats.max

def test_percentiles():
    stats = compute_statistics(list(range(1, 11)))
    assert list(stats.percentiles) == list(PERCENTILE_RANKS)
    assert len(stats.percentiles) == 19
    assert stats.percentiles[50] == 5.5
    assert stats.percentiles[5] == pytest.approx(1.45)
    assert stats.percentiles[95] == pytest.approx(9.55)

def test_percentile_matches_median_for_odd_length():
    ordered = [2, 4, 6, 8, 10]
    assert percentile(ordered, 50) == compute_statistics(ordered).median
    assert percentile(ordered, 25) == 4

def test_mode_single_and_multiple():
    assert compute_statistics([1, 1, 2]).mode == "1"
    assert compute_statistics([3, 3, 1, 1, 2]).mode == "1, 3"
    assert compute_statistics([1.5, 1.5, 2]).mode == "1.5"
    assert compute_statistics([4, 4, 4]).mode == "4"

def test_mode_uses_exact_equality():
    assert compute_statistics([0.1 + 0.2, 0.3]).mode == NO_MODE

def test_format_number():
    assert format_number(12.0) == "12"
    assert format_number(-3.0) == "-3"
    assert format_number(0.25) == "0.25"

def test_statistics_is_pure():
    data = [4, 8, 15, 16, 23, 42]
    assert compute_statistics(data) == compute_statistics(data)
    assert data == [4, 8, 15, 16, 23, 42]

def test_statistics_extreme_values_overflow_to_inf():
    stats = compute_statistics([1e200, 1])
    assert stats.count == 2
    assert stats.mean == pytest.approx(5e199)
    assert stats.variance == math.inf
    assert stats.stddev == math.inf
    assert stats.range == 1e200
    assert stats.percentiles[50] == pytest.approx(5e199)

def test_statistics_population_dispersion():
    stats = compute_statistics([2, 4, 4, 4, 5, 5, 7, 9])
    assert stats.variance == 4
    assert stats.stddev == 2
