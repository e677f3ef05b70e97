"""Scoring helpers for station workloads."""

import math
from typing import Sequence

from models.errors import UndefinedMetricError


def variance(workloads: Sequence[float]) -> float:
    """
    Population variance of station loads.

    Returns math.inf for an empty list so an empty candidate always ranks last.
    """
    if not workloads:
        return math.inf
    mean = sum(workloads) / len(workloads)
    return sum((w - mean) ** 2 for w in workloads) / len(workloads)


def std_dev(workloads: Sequence[float]) -> float:
    """Standard deviation of station loads, in seconds."""
    return math.sqrt(variance(workloads))


def balance_rate(total_work: float, station_count: int, max_load: float) -> float:
    """
    Line balance rate in percent.

    balance_rate = total_work / (station_count * max_load) * 100

    Raises:
        UndefinedMetricError: if there are no stations or the slowest station carries no load
    """
    if station_count <= 0:
        raise UndefinedMetricError("Balance rate is undefined for a line with no stations")
    if max_load <= 0:
        raise UndefinedMetricError("Balance rate is undefined when no station carries load")
    return total_work / (station_count * max_load) * 100
