"""Entry point that picks a search mode and returns the selected partition."""

import logging
from typing import Any, Dict, Iterable, Optional, Union

from .exact import ExactSolver
from .greedy import GreedySolver
from models.config import BalancerConfig
from models.errors import EmptyInputError, InfeasiblePartitionError
from models.problem import LineProblem
from models.step import ProcessStep
from solution.ordering import validate_sequence_order
from solution.partition import Partition
from solution.trace import SearchTrace
from evaluation.balance import BalanceEvaluator
from evaluation.base import Evaluator

logger = logging.getLogger(__name__)

StepInput = Union[ProcessStep, Dict[str, Any]]


class LineBalancer:
    """
    Balances one product component's step list into workstations.

    Lines with at most `exact_search_threshold` steps are solved by
    ExactSolver; longer lines, or exact searches that yield nothing, use
    GreedySolver. The instance holds configuration only, so one balancer may
    serve concurrent calls.
    """

    def __init__(self, config: Optional[BalancerConfig] = None,
                 evaluator: Optional[Evaluator] = None):
        """
        Initialize the balancer.

        Args:
            config: Search guards (defaults to BalancerConfig())
            evaluator: Candidate selection rule (defaults to BalanceEvaluator
                with the configured tolerance)
        """
        self.config = config or BalancerConfig()
        self.evaluator = evaluator or BalanceEvaluator(tolerance=self.config.balance_rate_tolerance)
        self.exact_solver = ExactSolver(
            max_permutation_group=self.config.max_permutation_group,
            max_candidates=self.config.max_candidates,
            time_limit_seconds=self.config.time_limit_seconds,
        )
        self.greedy_solver = GreedySolver()

    def balance(self, steps: Union[LineProblem, Iterable[StepInput]],
                trace: Optional[SearchTrace] = None) -> Partition:
        """
        Partition the steps into ordered workstations.

        Args:
            steps: A LineProblem, or ProcessStep objects / step records
            trace: Optional event collector for this call

        Returns:
            The selected partition with metrics computed

        Raises:
            EmptyInputError: no steps supplied
            InvalidStepError: a step violates the input contract
            InfeasiblePartitionError: no valid partition could be produced
        """
        problem = steps if isinstance(steps, LineProblem) else self._build_problem(steps)

        bottleneck = problem.get_bottleneck()
        logger.debug("Bottleneck step %s (%gs) takes its own station", bottleneck.id, bottleneck.duration)
        if trace is not None:
            trace.record("bottleneck", step_id=bottleneck.id, duration=bottleneck.duration,
                         level=bottleneck.level)

        partition = None
        if problem.num_steps() <= self.config.exact_search_threshold:
            self._record_mode(trace, self.exact_solver.mode, problem)
            partition = self.exact_solver.solve(problem, self.evaluator, trace)
            if partition is None:
                logger.warning("Exact search found no candidate for %d steps; using greedy packing",
                               problem.num_steps())
                if trace is not None:
                    trace.record("fallback", reason="no_candidates")

        if partition is None:
            self._record_mode(trace, self.greedy_solver.mode, problem)
            partition = self.greedy_solver.solve(problem, self.evaluator, trace)

        if partition is None or not partition.is_valid(problem):
            raise InfeasiblePartitionError(
                f"No valid partition for {problem.num_steps()} steps "
                f"(bottleneck {bottleneck.id}, ceiling {bottleneck.duration:g}s)"
            )

        partition.compute_metrics()
        if not validate_sequence_order(partition.stations):
            logger.debug("Selected partition reorders steps within a tier")
        logger.debug("Selected %d stations, balance rate %.2f%%, variance %.2f",
                     partition.metrics['station_count'], partition.metrics['balance_rate'],
                     partition.metrics['variance'])
        if trace is not None:
            trace.record("selected", index=partition.index, search_mode=partition.search_mode,
                         station_count=partition.metrics['station_count'],
                         balance_rate=partition.metrics['balance_rate'],
                         variance=partition.metrics['variance'])
        return partition

    @staticmethod
    def _build_problem(steps: Iterable[StepInput]) -> LineProblem:
        steps = list(steps) if steps is not None else []
        if not steps:
            raise EmptyInputError()
        return LineProblem.from_steps(steps)

    @staticmethod
    def _record_mode(trace: Optional[SearchTrace], mode: str, problem: LineProblem) -> None:
        logger.debug("Using %s search for %d steps", mode, problem.num_steps())
        if trace is not None:
            trace.record("search_mode", mode=mode, steps=problem.num_steps())

    def __repr__(self) -> str:
        return f"LineBalancer(config={self.config}, evaluator={self.evaluator})"


def balance_line(steps: Union[LineProblem, Iterable[StepInput]],
                 config: Optional[BalancerConfig] = None,
                 trace: Optional[SearchTrace] = None) -> Partition:
    """
    Balance a step list with the given (or default) configuration.

    Args:
        steps: A LineProblem, or ProcessStep objects / step records
        config: Search guards
        trace: Optional event collector

    Returns:
        The selected partition
    """
    return LineBalancer(config).balance(steps, trace)
