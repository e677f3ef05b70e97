"""Tests for caller-side level renumbering."""

import pytest

from models import InvalidStepError, apply_level_change, next_sequence_index


def levels_by_id(steps):
    return {step.id: step.level for step in steps}


class TestApplyLevelChange:

    def test_integral_level_only_moves_target(self, step_factory):
        steps = step_factory([("a", 1, 5), ("b", 2, 5), ("c", 3, 5)])
        result = apply_level_change(steps, "c", 1)
        assert levels_by_id(result) == {"a": 1, "b": 2, "c": 1}

    def test_fractional_level_splices_between_tiers(self, step_factory):
        steps = step_factory([("a", 1, 5), ("b", 2, 5), ("c", 3, 5), ("d", 4, 5)])
        result = apply_level_change(steps, "d", 2.5)
        assert levels_by_id(result) == {"a": 1, "b": 2, "c": 4, "d": 3}
        moved = next(step for step in result if step.id == "d")
        assert moved.sequence_index == 0

    def test_fractional_level_shifts_whole_tiers(self, step_factory):
        steps = step_factory([("a", 1, 5), ("b", 1, 5), ("c", 2, 5), ("d", 2, 5), ("new", 1, 5)])
        result = apply_level_change(steps, "new", 1.5)
        assert levels_by_id(result) == {"a": 1, "b": 1, "c": 3, "d": 3, "new": 2}

    def test_input_is_not_mutated(self, step_factory):
        steps = step_factory([("a", 1, 5), ("b", 2, 5)])
        apply_level_change(steps, "a", 1.5)
        assert levels_by_id(steps) == {"a": 1, "b": 2}

    def test_order_preserved(self, step_factory):
        steps = step_factory([("b", 2, 5), ("a", 1, 5)])
        result = apply_level_change(steps, "a", 0.5)
        assert [step.id for step in result] == ["b", "a"]
        assert levels_by_id(result) == {"a": 1, "b": 3}

    @pytest.mark.parametrize("level", [0, -2])
    def test_non_positive_rejected(self, step_factory, level):
        steps = step_factory([("a", 1, 5)])
        with pytest.raises(InvalidStepError):
            apply_level_change(steps, "a", level)

    def test_unknown_step(self, step_factory):
        with pytest.raises(KeyError):
            apply_level_change(step_factory([("a", 1, 5)]), "zz", 2)


def test_next_sequence_index(step_factory):
    steps = step_factory([("a", 1, 5), ("b", 1, 5), ("c", 2, 5)])
    assert next_sequence_index(steps, 1) == 2
    assert next_sequence_index(steps, 2) == 1
    assert next_sequence_index(steps, 7) == 0
