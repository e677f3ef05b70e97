"""WorkStation model for line balancing."""

from dataclasses import dataclass, field
from typing import List

from .step import ProcessStep


@dataclass
class WorkStation:
    """
    A workstation staffed by one operator, holding an ordered set of steps.
    Stations are numbered 1..N in production order.

    Attributes:
        number: Position in the line (1-based, 0 while a candidate is being built)
        steps: Steps assigned to this station, in assignment order
        total_seconds: Summed duration of the assigned steps
    """
    number: int = 0
    steps: List[ProcessStep] = field(default_factory=list)
    total_seconds: float = 0.0

    def can_fit(self, step: ProcessStep, ceiling: float) -> bool:
        """Check if a step fits under the cycle-time ceiling."""
        return self.total_seconds + step.duration <= ceiling

    def add_step(self, step: ProcessStep) -> None:
        """Append a step and update the load."""
        self.steps.append(step)
        self.total_seconds += step.duration

    def pop_step(self) -> ProcessStep:
        """Remove the most recently added step (used when backtracking)."""
        step = self.steps.pop()
        self.total_seconds = sum(s.duration for s in self.steps)
        return step

    def max_level(self) -> int:
        return max(step.level for step in self.steps)

    def min_level(self) -> int:
        return min(step.level for step in self.steps)

    def last_sequence_key(self):
        """(level, sequence_index) of the latest step at the station's highest level."""
        top = self.max_level()
        return top, max(step.sequence_index for step in self.steps if step.level == top)

    def first_sequence_key(self):
        """(level, sequence_index) of the earliest step at the station's lowest level."""
        bottom = self.min_level()
        return bottom, min(step.sequence_index for step in self.steps if step.level == bottom)

    def contains(self, step_id: str) -> bool:
        return any(step.id == step_id for step in self.steps)

    def is_empty(self) -> bool:
        """True if no steps assigned."""
        return len(self.steps) == 0

    def num_steps(self) -> int:
        return len(self.steps)

    def get_step_ids(self) -> List[str]:
        """Return step IDs in assignment order."""
        return [step.id for step in self.steps]

    def copy(self) -> 'WorkStation':
        """Snapshot of this station; the step list is not shared."""
        return WorkStation(number=self.number, steps=list(self.steps),
                           total_seconds=sum(step.duration for step in self.steps))

    def __repr__(self) -> str:
        return (f"WorkStation(number={self.number}, steps={self.get_step_ids()}, "
                f"total={self.total_seconds:g}s)")
