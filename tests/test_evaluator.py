"""Tests for the balance-rate selection rule."""

import pytest

from evaluation import BalanceEvaluator
from models import ProcessStep, WorkStation
from solution import Partition


def make_partition(loads, index=0):
    """Partition with one single-step station per load."""
    stations = []
    for n, load in enumerate(loads, start=1):
        step = ProcessStep(id=f"p{index}-{n}", name="s", level=n, duration=load)
        stations.append(WorkStation(number=n, steps=[step], total_seconds=load))
    return Partition(stations=stations, bottleneck_id=stations[0].steps[0].id, index=index)


class TestBalanceEvaluator:

    def test_higher_balance_rate_wins(self):
        low = make_partition([40, 20], index=0)      # 75%
        high = make_partition([40, 30], index=1)     # 87.5%
        assert BalanceEvaluator().select([low, high]) is high

    def test_equal_rate_prefers_lower_variance(self):
        uneven = make_partition([40, 40, 32], index=0)
        even = make_partition([40, 36, 36], index=1)
        assert uneven.get_balance_rate() == pytest.approx(even.get_balance_rate())
        assert BalanceEvaluator().select([uneven, even]) is even

    def test_tolerance_band(self):
        spiky = make_partition([40, 40, 40, 21], index=0)   # 88.125%, high variance
        smooth = make_partition([40, 30], index=1)          # 87.5%, lower variance
        assert BalanceEvaluator(tolerance=0.1).select([spiky, smooth]) is spiky
        assert BalanceEvaluator(tolerance=1.0).select([spiky, smooth]) is smooth

    def test_identical_scores_keep_enumeration_order(self):
        first = make_partition([40, 30], index=0)
        second = make_partition([30, 40], index=1)
        assert BalanceEvaluator().select([second, first]) is first

    def test_rank_is_total_order(self):
        candidates = [make_partition(loads, index=i) for i, loads in enumerate(
            [[40, 20], [40, 30], [40, 40, 32], [40, 36, 36], [40, 40]])]
        ranked = BalanceEvaluator().rank(candidates)
        assert [p.index for p in ranked] == [4, 3, 2, 1, 0]
        assert BalanceEvaluator().rank(list(reversed(candidates))) == ranked

    def test_select_empty(self):
        assert BalanceEvaluator().select([]) is None

    def test_get_components(self):
        components = BalanceEvaluator().get_components(make_partition([40, 10]))
        assert components['balance_rate'] == pytest.approx(62.5)
        assert components['station_count'] == 2
        assert components['cycle_time'] == 40
        assert components['variance'] == pytest.approx(225.0)
