"""
Caller-side tier maintenance.

Editors let a user type a fractional level such as 2.5 to splice a step
between tiers 2 and 3. The balancer only accepts integer tiers, so the step
list is renumbered here before it is balanced.
"""

import dataclasses
import math
from typing import List, Sequence

from .errors import InvalidStepError
from .step import ProcessStep


def apply_level_change(steps: Sequence[ProcessStep], step_id: str, new_level: float) -> List[ProcessStep]:
    """
    Move one step to a new tier, renumbering siblings for fractional levels.

    An integral level is assigned as is. A fractional level x shifts every
    other step at level >= ceil(x) up by one and places the step at
    ceil(x) with sequence index 0.

    Args:
        steps: Current step list
        step_id: Step being moved
        new_level: Requested level, must be positive

    Returns:
        New step list in the same order as the input
    """
    if not new_level > 0:
        raise InvalidStepError(f"Level must be positive, got {new_level}")
    if not any(step.id == step_id for step in steps):
        raise KeyError(step_id)

    if float(new_level).is_integer():
        return [dataclasses.replace(step, level=int(new_level)) if step.id == step_id else step
                for step in steps]

    target_level = math.ceil(new_level)
    renumbered = []
    for step in steps:
        if step.id == step_id:
            renumbered.append(dataclasses.replace(step, level=target_level, sequence_index=0))
        elif step.level >= target_level:
            renumbered.append(dataclasses.replace(step, level=step.level + 1))
        else:
            renumbered.append(step)
    return renumbered


def next_sequence_index(steps: Sequence[ProcessStep], level: int) -> int:
    """Sequence index for a step appended to a tier."""
    return max((step.sequence_index for step in steps if step.level == level), default=-1) + 1
