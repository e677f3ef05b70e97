"""Partition model: an ordered assignment of steps to workstations."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

import pandas as pd

from models.problem import LineProblem
from models.station import WorkStation
from .ordering import validate_level_order
from .statistics import balance_rate, std_dev, variance


@dataclass
class Partition:
    """
    Represents a complete line layout: which steps go to which stations,
    in production order.

    Attributes:
        stations: Stations in production order, numbered 1..N
        bottleneck_id: Id of the step that holds a station on its own
        search_mode: "exact" or "greedy", whichever produced this partition
        index: Enumeration order among candidates of one search
        metrics: Computed metrics (populated by compute_metrics)
    """
    stations: List[WorkStation] = field(default_factory=list)
    bottleneck_id: Optional[str] = None
    search_mode: str = "exact"
    index: int = 0
    metrics: Dict[str, float] = field(default_factory=dict)

    def renumber(self) -> None:
        """Number stations 1..N in list order."""
        for number, station in enumerate(self.stations, start=1):
            station.number = number

    def get_workloads(self) -> List[float]:
        """Per-station total seconds, in production order."""
        return [station.total_seconds for station in self.stations]

    def get_total_work_seconds(self) -> float:
        return sum(self.get_workloads())

    def get_cycle_time(self) -> float:
        """The slowest station dictates throughput."""
        workloads = self.get_workloads()
        return max(workloads) if workloads else 0.0

    def num_stations(self) -> int:
        """Stations equal operators on this line."""
        return len(self.stations)

    def get_variance(self) -> float:
        return variance(self.get_workloads())

    def get_std_dev(self) -> float:
        return std_dev(self.get_workloads())

    def get_balance_rate(self) -> float:
        """
        Balance rate in percent.

        A line whose every station carries zero seconds is reported as
        perfectly balanced (100%).
        """
        if self.stations and self.get_cycle_time() == 0:
            return 100.0
        return balance_rate(self.get_total_work_seconds(), self.num_stations(), self.get_cycle_time())

    def get_bottleneck_station(self) -> Optional[WorkStation]:
        for station in self.stations:
            if station.contains(self.bottleneck_id):
                return station
        return None

    def is_valid(self, problem: LineProblem) -> bool:
        """
        Check if the partition satisfies all constraints.

        Validates:
        1. Bottleneck isolation (alone in its station)
        2. Cycle ceiling on every other station
        3. Step assignment (each step exactly once, work conserved)
        4. Level ordering of adjacent stations
        """
        if not self.stations or any(station.is_empty() for station in self.stations):
            return False

        # 1. Bottleneck isolation
        bottleneck = problem.get_bottleneck()
        if self.bottleneck_id != bottleneck.id:
            return False
        bottleneck_station = self.get_bottleneck_station()
        if bottleneck_station is None or bottleneck_station.num_steps() != 1:
            return False

        # 2. Ceiling
        ceiling = bottleneck.duration
        for station in self.stations:
            if station is not bottleneck_station and station.total_seconds > ceiling + 1e-9:
                return False

        # 3. Step assignment
        assigned: Set[str] = set()
        for station in self.stations:
            for step in station.steps:
                if step.id in assigned:
                    return False
                assigned.add(step.id)
        if assigned != {step.id for step in problem.steps}:
            return False
        if abs(self.get_total_work_seconds() - problem.total_work_seconds()) > 1e-6:
            return False

        # 4. Ordering
        return validate_level_order(self.stations)

    def compute_metrics(self) -> Dict[str, float]:
        """Compute and store all metrics."""
        self.metrics = {
            'station_count': self.num_stations(),
            'cycle_time': self.get_cycle_time(),
            'total_work_seconds': self.get_total_work_seconds(),
            'balance_rate': self.get_balance_rate(),
            'variance': self.get_variance(),
            'std_dev': self.get_std_dev(),
        }
        return self.metrics

    def to_dict(self) -> Dict[str, Any]:
        """Result record handed back to callers."""
        return {
            "stations": [
                {
                    "stationNumber": station.number,
                    "steps": station.get_step_ids(),
                    "totalSeconds": station.total_seconds,
                }
                for station in self.stations
            ],
            "cycleTimeSeconds": self.get_cycle_time(),
            "stationCount": self.num_stations(),
            "balanceRatePercent": self.get_balance_rate(),
            "totalWorkSeconds": self.get_total_work_seconds(),
            "variance": self.get_variance(),
            "searchMode": self.search_mode,
            "bottleneckStepId": self.bottleneck_id,
        }

    def to_dataframe(self) -> pd.DataFrame:
        """One row per station, for tabular reporting."""
        cycle_time = self.get_cycle_time()
        rows = []
        for station in self.stations:
            rows.append({
                "station": station.number,
                "steps": ", ".join(step.name for step in station.steps),
                "step_ids": ", ".join(station.get_step_ids()),
                "levels": ", ".join(str(step.level) for step in station.steps),
                "total_seconds": station.total_seconds,
                "utilization_pct": (station.total_seconds / cycle_time * 100) if cycle_time else 100.0,
                "bottleneck": station.contains(self.bottleneck_id),
            })
        return pd.DataFrame(rows, columns=["station", "steps", "step_ids", "levels",
                                           "total_seconds", "utilization_pct", "bottleneck"])

    def summary(self) -> str:
        """Generate a summary string of the partition."""
        self.compute_metrics()
        lines = [
            "=" * 50,
            "LINE BALANCE SUMMARY",
            "=" * 50,
            f"Search mode: {self.search_mode}",
            f"Stations (operators): {self.metrics['station_count']}",
            f"Cycle time: {self.metrics['cycle_time']:.2f} s",
            f"Total work content: {self.metrics['total_work_seconds']:.2f} s",
            f"Balance rate: {self.metrics['balance_rate']:.2f}%",
            f"Workload variance: {self.metrics['variance']:.2f}",
            f"Workload std dev: {self.metrics['std_dev']:.2f} s",
            "-" * 50,
        ]
        for station in self.stations:
            names = ", ".join(step.name for step in station.steps)
            mark = " [bottleneck]" if station.contains(self.bottleneck_id) else ""
            lines.append(f"Station {station.number}: {names} = {station.total_seconds:g}s{mark}")
        lines.append("=" * 50)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (f"Partition(stations={self.num_stations()}, cycle_time={self.get_cycle_time():g}, "
                f"mode={self.search_mode})")
