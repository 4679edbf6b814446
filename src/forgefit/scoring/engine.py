"""Scoring engine — state transitions for the fatigue / recovery / performance model.

All transitions are pure: they take a ScoringState and return a new one.
Nothing here raises on odd inputs; every scalar is re-clamped to [0, 100].

Transitions:
    update_after_workout   after a logged session
    recover_over_time      once per process start / resume
    maybe_suggest_deload   after each update, at most once per week counter
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from forgefit.models.enums import (
    DELOAD_FATIGUE_THRESHOLD,
    DELOAD_MIN_WEEK,
    DELOAD_READINESS_THRESHOLD,
    FATIGUE_DECAY_PER_DAY,
    PERFORMANCE_BASELINE,
    PERFORMANCE_DRIFT_PER_DAY,
    RECOVERY_GAIN_PER_DAY,
    SESSIONS_PER_WEEK_COUNTER,
    Intensity,
)
from forgefit.models.scoring_state import ScoringState
from forgefit.scoring.readiness import clamp_score, compute_readiness

_SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class DeloadSuggestion:
    """Raised (returned) at most once per week-counter value."""

    title: str = "Deload Suggestion"
    message: str = (
        "Your fatigue is high. Consider a lighter week (reduce volume 30–40%)."
    )
    week: int = 0


def intensity_modifier(intensity: str) -> int:
    if intensity == Intensity.HARD:
        return 8
    if intensity == Intensity.EASY:
        return -4
    return 2


def update_after_workout(
    state: ScoringState,
    rating: int,
    completed_pct: float,
    intensity: str,
    history_count: int,
    now: datetime | None = None,
) -> ScoringState:
    """Apply one logged session to the model.

    Args:
        state: Current scoring state.
        rating: Subjective session rating, 1-5.
        completed_pct: Fraction of prescribed sets completed, 0-1.
        intensity: easy / normal / hard.
        history_count: Number of history entries *including* this session.
            Every fourth entry bumps the week counter.
        now: Update timestamp (defaults to the current time).

    Returns:
        The updated ScoringState. Deload evaluation is separate, see
        ``maybe_suggest_deload``.
    """
    rating_boost = (rating - 3) * 3
    completion_boost = (completed_pct - 0.75) * 20
    high_rating_offset = 2 if rating >= 4 else 0

    fatigue = clamp_score(
        state.fatigue + intensity_modifier(intensity) + completed_pct * 6 - high_rating_offset
    )
    recovery_drop = 10 + (6 if intensity == Intensity.HARD else 3)
    recovery = clamp_score(state.recovery - recovery_drop + high_rating_offset)
    performance = clamp_score(state.performance + rating_boost + completion_boost)

    week_counter = state.week_counter
    if history_count % SESSIONS_PER_WEEK_COUNTER == 0:
        week_counter += 1

    return dataclasses.replace(
        state,
        fatigue=fatigue,
        recovery=recovery,
        performance=performance,
        last_updated=now or datetime.now(),
        week_counter=week_counter,
    )


def elapsed_whole_days(since: datetime, now: datetime) -> int:
    return math.floor((now - since).total_seconds() / _SECONDS_PER_DAY)


def recover_over_time(state: ScoringState, now: datetime | None = None) -> ScoringState:
    """Apply rest-day recovery for every whole day since the last update.

    Fatigue decays 5/day, recovery gains 9/day and performance drifts
    toward the 55 baseline by at most 2/day. A state that was never
    updated, or updated less than a day ago, is returned unchanged.
    ``last_updated`` advances by the whole days applied, so calling this
    again on the same day does not count those days twice.
    """
    if state.last_updated is None:
        return state
    days = elapsed_whole_days(state.last_updated, now or datetime.now())
    if days <= 0:
        return state

    fatigue = clamp_score(state.fatigue - FATIGUE_DECAY_PER_DAY * days)
    recovery = clamp_score(state.recovery + RECOVERY_GAIN_PER_DAY * days)

    gap = PERFORMANCE_BASELINE - state.performance
    drift = math.copysign(min(abs(gap), PERFORMANCE_DRIFT_PER_DAY * days), gap) if gap else 0.0
    performance = clamp_score(state.performance + drift)

    return dataclasses.replace(
        state,
        fatigue=fatigue,
        recovery=recovery,
        performance=performance,
        last_updated=state.last_updated + timedelta(days=days),
    )


def should_deload(state: ScoringState) -> bool:
    """Deload conditions, ignoring whether one was already suggested this week."""
    fatigue_high = state.fatigue >= DELOAD_FATIGUE_THRESHOLD
    readiness_low = compute_readiness(state) < DELOAD_READINESS_THRESHOLD
    return state.week_counter >= DELOAD_MIN_WEEK and (fatigue_high or readiness_low)


def maybe_suggest_deload(
    state: ScoringState, auto_deload: bool
) -> tuple[ScoringState, DeloadSuggestion | None]:
    """Suggest a deload once per distinct week counter when conditions hold.

    Returns:
        (state, suggestion). When a suggestion is made the returned state
        records the week so repeated calls stay silent until the counter
        moves on.
    """
    if not auto_deload:
        return state, None
    if not should_deload(state) or state.deload_suggested_at_week == state.week_counter:
        return state, None
    new_state = dataclasses.replace(state, deload_suggested_at_week=state.week_counter)
    return new_state, DeloadSuggestion(week=state.week_counter)


def touch(state: ScoringState, now: datetime | None = None) -> ScoringState:
    """Stamp ``last_updated`` without changing the scores.

    Used when a session is logged with smart adaptation off, so that
    time-based recovery still counts from the latest session.
    """
    return dataclasses.replace(state, last_updated=now or datetime.now())
