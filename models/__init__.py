"""Models package for line balancing."""

from .errors import (
    LineBalancingError,
    EmptyInputError,
    InvalidStepError,
    InfeasiblePartitionError,
    UndefinedMetricError,
)
from .step import ProcessStep
from .station import WorkStation
from .problem import LineProblem
from .config import BalancerConfig
from .levels import apply_level_change, next_sequence_index

__all__ = [
    'ProcessStep', 'WorkStation', 'LineProblem', 'BalancerConfig',
    'LineBalancingError', 'EmptyInputError', 'InvalidStepError',
    'InfeasiblePartitionError', 'UndefinedMetricError',
    'apply_level_change', 'next_sequence_index',
]
