"""Process step model for line balancing."""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .errors import InvalidStepError


@dataclass(frozen=True)
class ProcessStep:
    """
    A single manufacturing step to be assigned to a workstation.

    Attributes:
        id: Unique identifier (e.g., "step_001")
        name: Display label
        level: Precedence tier, a positive integer. Steps sharing a level are
            interchangeable and may be reordered freely.
        duration: Work time in seconds
        sequence_index: Order within the tier, used for the natural ordering
        description: Free text carried through from the source record
    """
    id: str
    name: str
    level: int
    duration: float
    sequence_index: int = 0
    description: str = ""

    def __post_init__(self):
        level = self.level
        if isinstance(level, bool) or not isinstance(level, numbers.Real):
            raise InvalidStepError(f"Step {self.id!r} has non-numeric level {level!r}")
        if isinstance(self.duration, bool) or not isinstance(self.duration, numbers.Real):
            raise InvalidStepError(f"Step {self.id!r} has non-numeric duration {self.duration!r}")
        if isinstance(level, float):
            if not math.isfinite(level) or not level.is_integer():
                raise InvalidStepError(
                    f"Step {self.id!r} has fractional level {level}; "
                    f"renumber levels before balancing"
                )
            object.__setattr__(self, "level", int(level))
        if self.level <= 0:
            raise InvalidStepError(f"Step {self.id!r} has non-positive level {self.level}")
        if not math.isfinite(self.duration):
            raise InvalidStepError(f"Step {self.id!r} has invalid duration {self.duration}")
        if self.duration < 0:
            raise InvalidStepError(f"Step {self.id!r} has negative duration {self.duration}")

    def sort_key(self) -> Tuple[int, int]:
        """Natural production order: level first, then sequence index."""
        return self.level, self.sequence_index

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProcessStep':
        """
        Create a ProcessStep from a record.

        Accepts the external field names (id, name, level, durationSeconds,
        sequenceIndex) as well as the store's column names (process_name,
        sequence_level, work_seconds, work_hours, order_index).

        Args:
            data: Mapping describing one step

        Returns:
            ProcessStep instance
        """
        if "id" not in data or data["id"] is None:
            raise InvalidStepError(f"Step record has no id: {data!r}")
        step_id = str(data["id"])

        level = _first_present(data, ("level", "sequence_level"))
        if level is None:
            raise InvalidStepError(f"Step {step_id!r} has no level")

        duration = _first_present(data, ("durationSeconds", "duration", "work_seconds"))
        if duration is None:
            hours = data.get("work_hours")
            if hours is None:
                raise InvalidStepError(f"Step {step_id!r} has no duration")
            duration = float(hours) * 3600

        return cls(
            id=step_id,
            name=str(_first_present(data, ("name", "process_name")) or step_id),
            level=float(level),
            duration=float(duration),
            sequence_index=int(_first_present(data, ("sequenceIndex", "sequence_index", "order_index")) or 0),
            description=str(data.get("description") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the external record format."""
        return {
            "id": self.id,
            "name": self.name,
            "level": self.level,
            "durationSeconds": self.duration,
            "sequenceIndex": self.sequence_index,
            "description": self.description,
        }

    def __repr__(self) -> str:
        return f"ProcessStep(id={self.id}, level={self.level}, duration={self.duration:g}s)"


def _first_present(data: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None
