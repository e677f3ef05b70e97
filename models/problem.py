"""Problem model for line balancing."""

import json
from collections import OrderedDict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

import pandas as pd

from .errors import EmptyInputError, InvalidStepError
from .step import ProcessStep


@dataclass
class LineProblem:
    """
    Encapsulates one balancing run: the full step list of a product component.
    This is the input to any solver.

    Attributes:
        steps: Process steps in the order the caller supplied them
    """
    steps: List[ProcessStep] = field(default_factory=list)

    def __post_init__(self):
        if not self.steps:
            raise EmptyInputError()
        seen = set()
        for step in self.steps:
            if step.id in seen:
                raise InvalidStepError(f"Duplicate step id {step.id!r}")
            seen.add(step.id)

    @classmethod
    def from_steps(cls, steps: Iterable[Union[ProcessStep, Dict[str, Any]]]) -> 'LineProblem':
        """Build a problem from ProcessStep objects or step records."""
        return cls(steps=[s if isinstance(s, ProcessStep) else ProcessStep.from_dict(s) for s in steps])

    def sorted_steps(self) -> List[ProcessStep]:
        """Steps in natural production order (stable on equal keys)."""
        return sorted(self.steps, key=lambda s: s.sort_key())

    def get_bottleneck(self) -> ProcessStep:
        """
        The step with the longest duration.

        Ties go to the first such step in natural order; since the sort is
        stable, steps with identical (level, sequence_index) keep input order.
        """
        bottleneck = None
        for step in self.sorted_steps():
            if bottleneck is None or step.duration > bottleneck.duration:
                bottleneck = step
        return bottleneck

    def group_by_level(self, exclude_id: str = None) -> "OrderedDict[int, List[ProcessStep]]":
        """Steps grouped by tier, tiers ascending, natural order inside each tier."""
        groups: "OrderedDict[int, List[ProcessStep]]" = OrderedDict()
        for step in self.sorted_steps():
            if step.id == exclude_id:
                continue
            groups.setdefault(step.level, []).append(step)
        return groups

    def total_work_seconds(self) -> float:
        """Get total work content of all steps."""
        return sum(step.duration for step in self.steps)

    def num_steps(self) -> int:
        """Get total number of steps."""
        return len(self.steps)

    def get_levels(self) -> List[int]:
        """Get ascending list of distinct tiers."""
        return sorted(set(step.level for step in self.steps))

    @classmethod
    def load_from_dataframe(cls, df: pd.DataFrame) -> 'LineProblem':
        """
        Create LineProblem from a pandas DataFrame.

        Args:
            df: DataFrame with one row per step. Recognized columns:
                id, name/process_name, level/sequence_level,
                durationSeconds/duration/work_seconds or work_hours,
                sequenceIndex/order_index, description

        Returns:
            LineProblem instance
        """
        steps = []
        for row_pos, (_, row) in enumerate(df.iterrows()):
            record = {key: (None if _is_missing(value) else value) for key, value in row.items()}
            if record.get("id") is None:
                record["id"] = f"step_{row_pos + 1:03d}"
            elif isinstance(record["id"], float) and record["id"].is_integer():
                record["id"] = str(int(record["id"]))
            if all(record.get(k) is None for k in ("sequenceIndex", "sequence_index", "order_index")):
                record["sequenceIndex"] = row_pos
            steps.append(ProcessStep.from_dict(record))
        return cls(steps=steps)

    @classmethod
    def load_from_files(cls, steps_path: str) -> 'LineProblem':
        """
        Load problem from an Excel, CSV or JSON file.

        JSON may hold a list of step records or an object with a "steps" list.

        Args:
            steps_path: Path to the step list

        Returns:
            LineProblem instance
        """
        path = Path(steps_path)
        suffix = path.suffix.lower()
        if suffix in (".xlsx", ".xls"):
            df = pd.read_excel(path)
        elif suffix == ".csv":
            df = pd.read_csv(path)
        elif suffix == ".json":
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            records = data.get("steps", []) if isinstance(data, dict) else data
            df = pd.DataFrame.from_records(records)
        else:
            raise ValueError(f"Unsupported step file type: {path.suffix}")
        return cls.load_from_dataframe(df)

    def __repr__(self) -> str:
        return (f"LineProblem(steps={self.num_steps()}, levels={len(self.get_levels())}, "
                f"total_work={self.total_work_seconds():g}s)")


def _is_missing(value: Any) -> bool:
    return not isinstance(value, (list, dict)) and pd.isna(value)
