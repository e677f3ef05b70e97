"""Configuration for the line balancer."""

import json
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional


@dataclass
class BalancerConfig:
    """
    Tunable search guards.

    The permutation and candidate caps are heuristic performance limits,
    not part of the optimality definition: a tier larger than
    max_permutation_group is only tried in its natural order, and search
    stops collecting once max_candidates partitions are retained.

    Attributes:
        exact_search_threshold: Largest step count (bottleneck included) solved exactly
        max_permutation_group: Largest tier whose orderings are fully permuted
        max_candidates: Maximum candidate partitions retained by exact search
        balance_rate_tolerance: Balance rate differences (percentage points)
            below this are treated as ties
        time_limit_seconds: Optional best-effort wall-clock limit for exact search
    """
    exact_search_threshold: int = 12
    max_permutation_group: int = 6
    max_candidates: int = 10000
    balance_rate_tolerance: float = 0.1
    time_limit_seconds: Optional[float] = None

    def __post_init__(self):
        if self.exact_search_threshold < 1:
            raise ValueError("exact_search_threshold must be at least 1")
        if self.max_permutation_group < 1:
            raise ValueError("max_permutation_group must be at least 1")
        if self.max_candidates < 1:
            raise ValueError("max_candidates must be at least 1")
        if self.balance_rate_tolerance < 0:
            raise ValueError("balance_rate_tolerance must be non-negative")
        if self.time_limit_seconds is not None and self.time_limit_seconds <= 0:
            raise ValueError("time_limit_seconds must be positive when set")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BalancerConfig':
        """
        Create config from a dictionary. Keys starting with an underscore
        (e.g. "_comment") are ignored; any other unknown key is an error.
        """
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if not k.startswith("_")}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown balancer config keys: {sorted(unknown)}")
        return cls(**values)

    @classmethod
    def load_from_file(cls, config_path: str) -> 'BalancerConfig':
        """
        Load config from a JSON file.

        The balancer settings may sit at the top level or under a
        "line_balancing" key.
        """
        with open(config_path, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data.get("line_balancing", data))
