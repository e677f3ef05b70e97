"""Exception types for the line balancer."""


class LineBalancingError(Exception):
    """Base class for all line balancing failures."""


class EmptyInputError(LineBalancingError):
    """Raised when no process steps are supplied."""

    def __init__(self, message: str = "At least one process step is required"):
        super().__init__(message)


class InvalidStepError(LineBalancingError):
    """
    Raised when a process step violates the input contract.

    Covers duplicate ids, negative durations, non-positive or fractional
    levels and records missing a required field.
    """


class InfeasiblePartitionError(LineBalancingError):
    """Raised when neither exact search nor greedy produced a valid partition."""


class UndefinedMetricError(LineBalancingError, ValueError):
    """Raised when a metric is requested for a line with no stations or no load."""
