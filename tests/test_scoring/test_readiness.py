"""Tests for the readiness score and advice ladder."""

from __future__ import annotations

import pytest

from forgefit.models.scoring_state import ScoringState
from forgefit.scoring.readiness import (
    NO_PROGRAM_ADVICE,
    build_advice_text,
    compute_readiness,
    readiness_tag,
    round_half_up,
)


class TestComputeReadiness:
    def test_defaults(self, default_scoring: ScoringState) -> None:
        # 55*0.45 + 55*0.35 + 65*0.20 = 57.0
        assert compute_readiness(default_scoring) == 57

    def test_bounds(self, exhausted_scoring: ScoringState, fresh_scoring: ScoringState) -> None:
        assert compute_readiness(exhausted_scoring) == 0
        assert compute_readiness(fresh_scoring) == 100

    def test_fatigue_lowers_readiness(self) -> None:
        low = compute_readiness(ScoringState(fatigue=80.0))
        high = compute_readiness(ScoringState(fatigue=10.0))
        assert low < high

    def test_integer_in_range(self) -> None:
        for f in range(0, 101, 10):
            for r in range(0, 101, 10):
                for p in range(0, 101, 10):
                    score = compute_readiness(ScoringState(float(f), float(r), float(p)))
                    assert isinstance(score, int)
                    assert 0 <= score <= 100

    def test_half_rounds_up(self) -> None:
        assert round_half_up(56.5) == 57
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2


class TestAdvice:
    @pytest.mark.parametrize(
        "state, prefix",
        [(ScoringState(0.0, 100.0, 100.0), "You're fresh."),
         (ScoringState(35.0, 65.0, 60.0), "Solid readiness."),
         (ScoringState(), "Caution:"),
         (ScoringState(90.0, 20.0, 30.0), "Low readiness:")],
    )
    def test_ladder(self, state: ScoringState, prefix: str) -> None:
        assert build_advice_text(state).startswith(prefix)

    def test_threshold_is_inclusive(self) -> None:
        # readiness exactly 75
        state = ScoringState(fatigue=0.0, recovery=100.0, performance=100.0 * 10 / 35)
        assert compute_readiness(state) == 75
        assert build_advice_text(state).startswith("You're fresh.")

    def test_no_program(self, default_scoring: ScoringState) -> None:
        assert build_advice_text(default_scoring, has_program=False) == NO_PROGRAM_ADVICE


class TestTag:
    @pytest.mark.parametrize(
        "score, tag",
        [(100, "Push"), (70, "Push"), (69, "Normal"), (50, "Normal"),
         (49, "Caution"), (42, "Caution"), (41, "Recover"), (0, "Recover")],
    )
    def test_tag(self, score: int, tag: str) -> None:
        assert readiness_tag(score) == tag
