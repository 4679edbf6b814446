"""Tests for the plan models: DayPlan set totals and Program positional lookup."""

from __future__ import annotations

import dataclasses

import pytest

from forgefit.models.app_state import AppState
from forgefit.models.program import DayPlan, ExercisePlan, Prescription, Program
from forgefit.models.profile import Profile
from forgefit.models.scoring_state import ScoringState


def _plan(name: str, sets: int, done: int = 0) -> ExercisePlan:
    return ExercisePlan(
        name=name,
        category="push",
        muscle="chest",
        environment="gym",
        alternatives=(),
        prescription=Prescription(sets=sets, reps=8, rest=90),
        completed_sets=done,
    )


class TestDayPlan:
    def setup_method(self) -> None:
        self.day = DayPlan(
            index=0,
            label="Push",
            focus="Push",
            exercises=[_plan("Dips", 3, 3), _plan("Cable Fly", 4, 1)],
        )

    def test_totals(self) -> None:
        assert self.day.total_sets == 7
        assert self.day.completed_sets == 4

    def test_completion(self) -> None:
        assert self.day.completion == pytest.approx(4 / 7)

    def test_empty_day_completion_is_zero(self) -> None:
        assert DayPlan(index=1, label="Core", focus="Core").completion == 0.0


class TestProgram:
    def setup_method(self) -> None:
        self.program = Program(
            id="p1",
            created_at="2026-03-02T18:00:00+00:00",
            profile=Profile(),
            split="ppl",
            week=[DayPlan(index=0, label="Push", focus="Push", exercises=[_plan("Dips", 3)])],
        )

    def test_exercise_at(self) -> None:
        assert self.program.exercise_at(0, 0).name == "Dips"

    @pytest.mark.parametrize("day, ex", [(-1, 0), (1, 0), (0, -1), (0, 1)])
    def test_exercise_at_out_of_range(self, day: int, ex: int) -> None:
        assert self.program.exercise_at(day, ex) is None

    def test_default_version(self) -> None:
        assert self.program.version == 1


class TestImmutability:
    def test_profile_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Profile().days = 5  # type: ignore[misc]

    def test_scoring_defaults(self) -> None:
        state = ScoringState()
        assert (state.fatigue, state.recovery, state.performance) == (35.0, 55.0, 55.0)
        assert state.week_counter == 1
        assert state.deload_suggested_at_week is None

    def test_app_state_instances_do_not_share_history(self) -> None:
        a, b = AppState(), AppState()
        a.history.append(object())  # type: ignore[arg-type]
        assert b.history == []
