"""Balance-rate evaluator implementation."""

from typing import List, Sequence, Tuple

from .base import Evaluator
from solution.partition import Partition


class BalanceEvaluator(Evaluator):
    """
    Evaluator that prefers the highest balance rate, then the lowest variance.

    Candidates whose balance rate is within `tolerance` percentage points of
    the best rate are treated as tied and ordered by workload variance; the
    rest follow by balance rate descending. Remaining ties keep enumeration
    order, so the ranking is a total order.

    Attributes:
        tolerance: Balance rate difference treated as a tie (default: 0.1)
    """

    def __init__(self, tolerance: float = 0.1):
        """
        Initialize the balance evaluator.

        Args:
            tolerance: Percentage points below which balance rates tie
        """
        self.tolerance = tolerance

    def sort_key(self, partition: Partition, best_rate: float) -> Tuple[int, float, float, int]:
        rate = partition.get_balance_rate()
        if best_rate - rate < self.tolerance:
            return 0, 0.0, partition.get_variance(), partition.index
        return 1, -rate, partition.get_variance(), partition.index

    def rank(self, candidates: Sequence[Partition]) -> List[Partition]:
        """
        Order candidates best first.

        Args:
            candidates: Partitions produced by one search

        Returns:
            Candidates sorted by (tie band, balance rate, variance, index)
        """
        if not candidates:
            return []
        best_rate = max(candidate.get_balance_rate() for candidate in candidates)
        return sorted(candidates, key=lambda p: self.sort_key(p, best_rate))

    def get_components(self, partition: Partition) -> dict:
        """
        Get individual components of the evaluation.

        Args:
            partition: The partition to evaluate

        Returns:
            Dictionary with balance rate, variance and load figures
        """
        return {
            'balance_rate': partition.get_balance_rate(),
            'variance': partition.get_variance(),
            'std_dev': partition.get_std_dev(),
            'station_count': partition.num_stations(),
            'cycle_time': partition.get_cycle_time(),
            'total_work_seconds': partition.get_total_work_seconds(),
        }

    def __repr__(self) -> str:
        return f"BalanceEvaluator(tolerance={self.tolerance})"
