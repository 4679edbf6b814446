"""Prescription rule engine — sets, reps, rest, tempo and effort hint per exercise."""

from __future__ import annotations

from dataclasses import dataclass

from forgefit.models.enums import (
    HOME_REST_FLOOR_S,
    MAX_REPS,
    MAX_REST_S,
    MAX_SETS,
    MIN_REPS,
    MIN_REST_S,
    MIN_SETS,
    Environment,
    Goal,
    Level,
    Tone,
)
from forgefit.models.program import Prescription

COMPOUND_KEYWORDS = (
    "bench", "squat", "deadlift", "row", "pull-up", "press", "leg press", "lunge",
)
BODYWEIGHT_KEYWORDS = ("push-ups", "plank", "squat", "bridge")


@dataclass(frozen=True)
class GoalScheme:
    """Rep / rest scheme for one goal, split by compound vs. isolation."""

    compound_reps: int
    isolation_reps: int
    compound_rest: int
    isolation_rest: int
    tempo: str
    rpe_hint: str


_GOAL_SCHEMES: dict[str, GoalScheme] = {
    Goal.STRENGTH.value: GoalScheme(5, 8, 150, 90, "2-0-1", "Heavy but clean form (RPE 7–8)"),
    Goal.HYPERTROPHY.value: GoalScheme(8, 12, 105, 75, "2-0-2", "Control the negative, chase pump (RPE 7–9)"),
    Goal.FATLOSS.value: GoalScheme(10, 14, 75, 45, "2-0-2", "Move with intent, keep rest tight"),
    Goal.RECOMP.value: GoalScheme(8, 12, 90, 60, "2-0-2", "Progress slowly, recover well"),
}
_DEFAULT_SCHEME = GoalScheme(10, 10, 75, 75, "2-0-2", "Leave 1–2 reps in reserve")


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def is_compound(exercise_name: str) -> bool:
    """Multi-joint movement, judged by name keywords."""
    n = exercise_name.lower()
    return any(k in n for k in COMPOUND_KEYWORDS)


def is_bodyweight(exercise_name: str) -> bool:
    n = exercise_name.lower()
    return any(k in n for k in BODYWEIGHT_KEYWORDS)


def base_sets(minutes: int, tone: str, level: str, compound: bool) -> int:
    """Set count before clamping: session length, then tone, then level."""
    sets = 2 if minutes <= 20 else 3
    if tone == Tone.HIGHVOLUME:
        sets += 1
    if tone == Tone.MINIMAL:
        sets = max(MIN_SETS, sets - 1)
    if level == Level.BEGINNER:
        sets = max(MIN_SETS, sets - 1)
    if level == Level.ADVANCED and compound:
        sets += 1
    return sets


def prescribe(
    goal: str,
    level: str,
    minutes: int,
    tone: str,
    mode: str,
    exercise_name: str,
) -> Prescription:
    """Compute the prescription for one exercise.

    Args:
        goal: strength / hypertrophy / fatloss / recomp (others use a generic scheme).
        level: beginner / intermediate / advanced.
        minutes: Session length.
        tone: balanced / highvolume / minimal / athletic.
        mode: Training environment; "home" scales bodyweight work up.
        exercise_name: Catalog name, used for compound / bodyweight matching.

    Returns:
        A Prescription with sets in [2, 6], reps in [4, 20], rest in [25, 180].
    """
    compound = is_compound(exercise_name)
    sets = base_sets(minutes, tone, level, compound)

    scheme = _GOAL_SCHEMES.get(goal, _DEFAULT_SCHEME)
    reps = scheme.compound_reps if compound else scheme.isolation_reps
    rest = scheme.compound_rest if compound else scheme.isolation_rest
    tempo = scheme.tempo

    # Home scaling: harder tempo and more reps on bodyweight work
    if mode == Environment.HOME:
        if is_bodyweight(exercise_name):
            reps += 4
            tempo = "3-1-1" if goal == Goal.STRENGTH else "3-0-2"
            rest = max(HOME_REST_FLOOR_S, rest - 15)
        if tone == Tone.ATHLETIC:
            rest = max(HOME_REST_FLOOR_S, rest - 10)

    return Prescription(
        sets=clamp(sets, MIN_SETS, MAX_SETS),
        reps=clamp(reps, MIN_REPS, MAX_REPS),
        rest=clamp(rest, MIN_REST_S, MAX_REST_S),
        tempo=tempo,
        rpe_hint=scheme.rpe_hint,
    )
