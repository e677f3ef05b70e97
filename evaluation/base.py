"""Abstract base class for evaluators."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from solution.partition import Partition


class Evaluator(ABC):
    """
    Abstract base class for partition evaluators.
    Decides which candidate partition a search returns.
    """

    @abstractmethod
    def rank(self, candidates: Sequence[Partition]) -> List[Partition]:
        """
        Order candidates from best to worst.

        Args:
            candidates: Partitions produced by one search

        Returns:
            New list, best first; must be deterministic for a given input order
        """
        pass

    def select(self, candidates: Sequence[Partition]) -> Optional[Partition]:
        """Return the best candidate, or None when there are none."""
        if not candidates:
            return None
        return self.rank(candidates)[0]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
