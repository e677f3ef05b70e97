"""Greedy solver implementation for line balancing."""

import logging
from typing import List, Optional

from .base import Solver
from models.problem import LineProblem
from models.station import WorkStation
from solution.partition import Partition
from solution.trace import SearchTrace
from evaluation.base import Evaluator

logger = logging.getLogger(__name__)


class GreedySolver(Solver):
    """
    Greedy solver using next-fit packing in natural production order.

    Algorithm:
    1. Walk steps in (level, sequence_index) order
    2. Append each step to the current station if it stays under the
       bottleneck duration, otherwise open a new station
    3. The bottleneck closes the current station and takes one of its own

    Always yields exactly one partition for a non-empty problem.
    """

    mode = "greedy"

    def solve(self, problem: LineProblem, evaluator: Evaluator,
              trace: Optional[SearchTrace] = None) -> Optional[Partition]:
        """
        Solve the line balancing problem using the greedy approach.

        Args:
            problem: The problem instance
            evaluator: Unused; a single candidate needs no ranking
            trace: Optional event collector

        Returns:
            A complete partition
        """
        bottleneck = problem.get_bottleneck()
        ceiling = bottleneck.duration

        stations: List[WorkStation] = []
        current: Optional[WorkStation] = None

        for step in problem.sorted_steps():
            if step.id == bottleneck.id:
                stations.append(WorkStation(steps=[step], total_seconds=step.duration))
                current = None
                continue

            if current is not None and current.can_fit(step, ceiling):
                current.add_step(step)
            else:
                current = WorkStation()
                current.add_step(step)
                stations.append(current)

        partition = Partition(stations=stations, bottleneck_id=bottleneck.id, search_mode=self.mode)
        partition.renumber()
        partition.compute_metrics()

        logger.debug("Greedy packing produced %d stations", partition.num_stations())
        if trace is not None:
            trace.record("candidate", index=0, station_count=partition.num_stations(),
                         balance_rate=partition.metrics['balance_rate'],
                         variance=partition.metrics['variance'],
                         workloads=partition.get_workloads())
        return partition
