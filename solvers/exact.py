"""Exhaustive solver for small lines: tier permutations plus backtracking."""

import itertools
import logging
import math
import time
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .base import Solver
from models.problem import LineProblem
from models.station import WorkStation
from models.step import ProcessStep
from solution.ordering import validate_level_order
from solution.partition import Partition
from solution.trace import SearchTrace
from evaluation.base import Evaluator

logger = logging.getLogger(__name__)


@dataclass
class _SearchState:
    """Per-call search state; never stored on the solver."""
    bottleneck: ProcessStep
    ceiling: float
    max_candidates: int
    deadline: Optional[float] = None
    trace: Optional[SearchTrace] = None
    candidates: List[Partition] = field(default_factory=list)
    orderings_tried: int = 0
    stop_reason: Optional[str] = None

    def out_of_time(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline


class ExactSolver(Solver):
    """
    Enumerates every station assignment consistent with the tier order.

    Algorithm:
    1. Group non-bottleneck steps by level
    2. Permute each tier of at most `max_permutation_group` steps; larger
       tiers keep their natural order only
    3. For every combination of tier orderings, assign steps one at a time
       to any open station that stays under the ceiling and keeps the tier
       order, or to a new station, backtracking over both choices
    4. Insert the bottleneck station, validate, and keep the candidate
    5. Let the evaluator pick the best candidate

    Search stops after `max_candidates` candidates, or when the optional
    time limit runs out (best effort; checked between assignments).
    """

    mode = "exact"

    def __init__(self, max_permutation_group: int = 6, max_candidates: int = 10000,
                 time_limit_seconds: Optional[float] = None):
        """
        Initialize the exact solver.

        Args:
            max_permutation_group: Largest tier whose orderings are all tried
            max_candidates: Maximum number of candidates retained
            time_limit_seconds: Optional wall-clock budget for one solve
        """
        self.max_permutation_group = max_permutation_group
        self.max_candidates = max_candidates
        self.time_limit_seconds = time_limit_seconds

    def solve(self, problem: LineProblem, evaluator: Evaluator,
              trace: Optional[SearchTrace] = None) -> Optional[Partition]:
        """
        Solve the line balancing problem exhaustively.

        Args:
            problem: The problem instance
            evaluator: Picks the best of the enumerated candidates
            trace: Optional event collector

        Returns:
            The best partition, or None if no candidate was found
        """
        candidates = self.enumerate_candidates(problem, trace)
        return evaluator.select(candidates)

    def enumerate_candidates(self, problem: LineProblem,
                             trace: Optional[SearchTrace] = None) -> List[Partition]:
        """
        Collect all valid candidate partitions, in enumeration order.

        Args:
            problem: The problem instance
            trace: Optional event collector

        Returns:
            Candidates (possibly empty when the time limit hits first)
        """
        bottleneck = problem.get_bottleneck()
        groups = problem.group_by_level(exclude_id=bottleneck.id)
        deadline = (time.monotonic() + self.time_limit_seconds) if self.time_limit_seconds else None
        state = _SearchState(bottleneck=bottleneck, ceiling=bottleneck.duration,
                             max_candidates=self.max_candidates, deadline=deadline, trace=trace)

        if not groups:
            self._accept([], state)
            return state.candidates

        tier_orderings = self.tier_orderings(groups)
        total = math.prod(len(orderings) for orderings in tier_orderings)
        logger.debug("Exact search over %d tier orderings of %d steps",
                     total, sum(len(steps) for steps in groups.values()))
        if trace is not None:
            trace.record("orderings", total=total,
                         tiers={level: len(steps) for level, steps in groups.items()},
                         permuted=[level for level, steps in groups.items()
                                   if len(steps) <= self.max_permutation_group])

        for ordering in self.generate_orderings(tier_orderings):
            if state.stop_reason is None and state.out_of_time():
                state.stop_reason = "time_limit"
            if state.stop_reason is not None:
                break
            state.orderings_tried += 1
            self._enumerate(0, [], ordering, state)

        if state.stop_reason == "cap_reached":
            logger.debug("Candidate cap of %d reached after %d orderings",
                         self.max_candidates, state.orderings_tried)
        elif state.stop_reason == "time_limit":
            logger.debug("Time limit reached after %d orderings", state.orderings_tried)
        if trace is not None:
            if state.stop_reason is not None:
                trace.record(state.stop_reason, orderings_tried=state.orderings_tried,
                             candidates=len(state.candidates))
            trace.record("search_complete", orderings_tried=state.orderings_tried,
                         candidates=len(state.candidates))
        return state.candidates

    def tier_orderings(self, groups: Dict[int, List[ProcessStep]]) -> List[List[Tuple[ProcessStep, ...]]]:
        """Orderings tried for each tier, tiers ascending."""
        result = []
        for steps in groups.values():
            if len(steps) <= self.max_permutation_group:
                result.append(list(itertools.permutations(steps)))
            else:
                result.append([tuple(steps)])
        return result

    @staticmethod
    def generate_orderings(tier_orderings: Sequence[Sequence[Tuple[ProcessStep, ...]]]) -> Iterator[List[ProcessStep]]:
        """Cartesian product of tier orderings, flattened into step sequences."""
        for combination in itertools.product(*tier_orderings):
            yield [step for tier in combination for step in tier]

    def _enumerate(self, index: int, stations: List[WorkStation],
                   ordering: List[ProcessStep], state: _SearchState) -> None:
        if state.stop_reason is not None:
            return
        if index == len(ordering):
            self._accept(stations, state)
            return

        step = ordering[index]

        # Join an open station
        for i, station in enumerate(stations):
            if not station.can_fit(step, state.ceiling):
                continue
            if i < len(stations) - 1 and step.level > stations[i + 1].min_level():
                continue
            # A station spanning the bottleneck's tier cannot sit before or after it
            if station.min_level() < state.bottleneck.level < step.level:
                continue
            station.add_step(step)
            self._enumerate(index + 1, stations, ordering, state)
            station.pop_step()
            if state.stop_reason is not None:
                return

        # Open a new station
        stations.append(WorkStation(steps=[step], total_seconds=step.duration))
        self._enumerate(index + 1, stations, ordering, state)
        stations.pop()

    def _accept(self, stations: List[WorkStation], state: _SearchState) -> None:
        """
        Turn a finished assignment into a candidate.

        When the time limit has passed, this leaf is dropped and the search
        stops; candidates accepted earlier are kept for selection.
        """
        if state.out_of_time():
            state.stop_reason = "time_limit"
            return
        if any(station.total_seconds > state.ceiling for station in stations):
            return
        if not validate_level_order(stations):
            return

        full = self.insert_bottleneck([station.copy() for station in stations], state.bottleneck)
        if full is None or not validate_level_order(full):
            return

        partition = Partition(stations=full, bottleneck_id=state.bottleneck.id,
                              search_mode=self.mode, index=len(state.candidates))
        partition.compute_metrics()
        state.candidates.append(partition)

        if state.trace is not None:
            state.trace.record("candidate", index=partition.index,
                               station_count=partition.num_stations(),
                               balance_rate=partition.metrics['balance_rate'],
                               variance=partition.metrics['variance'],
                               workloads=partition.get_workloads())

        if len(state.candidates) >= state.max_candidates:
            state.stop_reason = "cap_reached"

    def __repr__(self) -> str:
        return (f"ExactSolver(max_permutation_group={self.max_permutation_group}, "
                f"max_candidates={self.max_candidates})")
