"""
Shared fixtures for the line balancing tests.
"""

import itertools
import random

import pytest

from models import ProcessStep


def build_steps(specs):
    """
    Build steps from (id, level, duration) tuples.

    Sequence indices follow list order within each level.
    """
    counters = {}
    steps = []
    for step_id, level, duration in specs:
        index = counters.get(level, 0)
        counters[level] = index + 1
        steps.append(ProcessStep(id=step_id, name=step_id.upper(), level=level,
                                 duration=duration, sequence_index=index))
    return steps


def random_steps(seed, count, max_level=4, max_duration=60):
    """Reproducible random step list with positive durations."""
    rng = random.Random(seed)
    specs = [(f"s{i:02d}", rng.randint(1, max_level), rng.randint(1, max_duration))
             for i in range(count)]
    return build_steps(specs)


def stopping_clock(free_calls, start=0, expired=1000):
    """Fake monotonic clock that jumps past any deadline after `free_calls` reads."""
    calls = itertools.count(1)
    return lambda: start if next(calls) <= free_calls else expired


@pytest.fixture
def step_factory():
    """Factory fixture: step_factory([("a", 1, 20), ...]) -> [ProcessStep, ...]"""
    return build_steps


@pytest.fixture
def sample_steps():
    """A small line with a mid-line bottleneck."""
    return build_steps([
        ("load", 1, 18),
        ("press", 2, 25),
        ("fit", 2, 20),
        ("gasket", 3, 12),
        ("torque", 3, 30),
        ("leak", 4, 45),
        ("label", 5, 8),
        ("pack", 5, 15),
    ])
