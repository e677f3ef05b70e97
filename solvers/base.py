"""Abstract base class for solvers."""

from abc import ABC, abstractmethod
from typing import List, Optional

from models.problem import LineProblem
from models.station import WorkStation
from models.step import ProcessStep
from solution.partition import Partition
from solution.trace import SearchTrace
from evaluation.base import Evaluator


class Solver(ABC):
    """
    Abstract base class for all line balancing algorithms.
    Any algorithm must implement this interface.
    """

    mode = "base"

    @abstractmethod
    def solve(self, problem: LineProblem, evaluator: Evaluator,
              trace: Optional[SearchTrace] = None) -> Optional[Partition]:
        """
        Run algorithm and return best partition found.

        Args:
            problem: The problem instance to solve
            evaluator: The evaluator used to pick among candidates
            trace: Optional event collector for this call

        Returns:
            The best partition found, or None if the algorithm found none
        """
        pass

    @staticmethod
    def insert_bottleneck(stations: List[WorkStation], bottleneck: ProcessStep) -> Optional[List[WorkStation]]:
        """
        Place the bottleneck on its own station at its production position.

        The bottleneck station goes after every station whose latest step
        (highest level, then highest sequence index at that level) precedes
        the bottleneck in natural order. Steps sharing a tier may be
        reordered, so when that slot breaks the level order the first slot
        that keeps it is used instead.

        Args:
            stations: Level-ordered stations without the bottleneck
            bottleneck: The bottleneck step

        Returns:
            New station list, renumbered 1..N, or None if no slot keeps the
            level order
        """
        position = 0
        for i, station in enumerate(stations):
            if station.last_sequence_key() < bottleneck.sort_key():
                position = i + 1
        if not Solver._fits_slot(stations, position, bottleneck.level):
            position = next((k for k in range(len(stations) + 1)
                             if Solver._fits_slot(stations, k, bottleneck.level)), None)
            if position is None:
                return None
        full = list(stations)
        full.insert(position, WorkStation(steps=[bottleneck], total_seconds=bottleneck.duration))
        for number, station in enumerate(full, start=1):
            station.number = number
        return full

    @staticmethod
    def _fits_slot(stations: List[WorkStation], position: int, level: int) -> bool:
        if position > 0 and stations[position - 1].max_level() > level:
            return False
        if position < len(stations) and level > stations[position].min_level():
            return False
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
