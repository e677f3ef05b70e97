"""Tests for workload statistics and ordering checks."""

import math

import pytest

from models import ProcessStep, UndefinedMetricError, WorkStation
from solution import balance_rate, std_dev, validate_level_order, validate_sequence_order, variance


def station(*specs):
    """station((level, sequence_index), ...) with 1-second steps."""
    ws = WorkStation()
    for n, (level, seq) in enumerate(specs):
        ws.add_step(ProcessStep(id=f"{level}-{seq}-{n}", name="s", level=level,
                                duration=1, sequence_index=seq))
    return ws


class TestVariance:

    def test_population_variance(self):
        assert variance([10, 20, 30]) == pytest.approx(200 / 3)

    def test_uniform_loads(self):
        assert variance([40, 40, 40]) == 0

    def test_empty_is_infinite(self):
        assert variance([]) == math.inf

    def test_std_dev(self):
        assert std_dev([40, 50]) == pytest.approx(5.0)


class TestBalanceRate:

    def test_formula(self):
        assert balance_rate(50, 2, 40) == pytest.approx(62.5)

    def test_perfect_balance(self):
        assert balance_rate(120, 3, 40) == pytest.approx(100.0)

    def test_zero_stations(self):
        with pytest.raises(UndefinedMetricError):
            balance_rate(10, 0, 10)

    def test_zero_max_load(self):
        with pytest.raises(ValueError):
            balance_rate(0, 2, 0)


class TestLevelOrder:

    def test_ascending_tiers(self):
        assert validate_level_order([station((1, 0), (1, 1)), station((2, 0)), station((2, 1), (3, 0))])

    def test_shared_tier_across_boundary(self):
        assert validate_level_order([station((1, 0), (2, 1)), station((2, 0))])

    def test_lower_tier_after_higher(self):
        assert not validate_level_order([station((1, 0), (3, 0)), station((2, 0))])

    def test_single_and_empty_lists(self):
        assert validate_level_order([])
        assert validate_level_order([station((4, 0))])

    def test_sequence_order_is_stricter(self):
        stations = [station((1, 1)), station((1, 0))]
        assert validate_level_order(stations)
        assert not validate_sequence_order(stations)
        assert validate_sequence_order([station((1, 0)), station((1, 1))])
