"""Readiness score and the advice text derived from it."""

from __future__ import annotations

import math

from forgefit.models.enums import (
    ADVICE_CAUTION_THRESHOLD,
    ADVICE_FRESH_THRESHOLD,
    ADVICE_SOLID_THRESHOLD,
    READINESS_FRESHNESS_WEIGHT,
    READINESS_PERFORMANCE_WEIGHT,
    READINESS_RECOVERY_WEIGHT,
    SCORE_MAX,
    SCORE_MIN,
)
from forgefit.models.scoring_state import ScoringState

NO_PROGRAM_ADVICE = "Create a plan to get adaptive recommendations."

_ADVICE_LADDER: tuple[tuple[int, str], ...] = (
    (ADVICE_FRESH_THRESHOLD,
     "You're fresh. Push performance today: add 1 rep on accessories or small weight increase."),
    (ADVICE_SOLID_THRESHOLD,
     "Solid readiness. Train normally and focus on clean reps and consistent rest."),
    (ADVICE_CAUTION_THRESHOLD,
     "Caution: slightly tired. Keep form strict. Reduce 1 set on accessories if needed."),
)
_LOW_READINESS_ADVICE = (
    "Low readiness: prioritize recovery. Consider a deload-style session "
    "(lighter weights, fewer sets)."
)


def clamp_score(value: float) -> float:
    return max(SCORE_MIN, min(SCORE_MAX, value))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (``round()`` would go to even)."""
    return int(math.floor(value + 0.5))


def compute_readiness(state: ScoringState) -> int:
    """Blend recovery, performance and inverted fatigue into a 0-100 integer.

    readiness = round(recovery*0.45 + performance*0.35 + (100-fatigue)*0.20)
    """
    raw = (
        state.recovery * READINESS_RECOVERY_WEIGHT
        + state.performance * READINESS_PERFORMANCE_WEIGHT
        + (100.0 - state.fatigue) * READINESS_FRESHNESS_WEIGHT
    )
    return int(clamp_score(round_half_up(raw)))


def build_advice_text(state: ScoringState, has_program: bool = True) -> str:
    """Four-tier advice keyed on readiness thresholds 75 / 58 / 42."""
    if not has_program:
        return NO_PROGRAM_ADVICE
    ready = compute_readiness(state)
    for threshold, text in _ADVICE_LADDER:
        if ready >= threshold:
            return text
    return _LOW_READINESS_ADVICE


def readiness_tag(score: int) -> str:
    """Short dashboard tag for a readiness score."""
    if score >= 70:
        return "Push"
    if score >= 50:
        return "Normal"
    if score >= 42:
        return "Caution"
    return "Recover"
