"""Weighted exercise selection for one training day.

For a day label, derives the target categories, sizes the session from
its length, then fills it by cycling through the categories and drawing
one weighted-random exercise per slot. Weights favour compound movements
and shift with goal and experience level.
"""

from __future__ import annotations

import random
from typing import Protocol

from forgefit import config
from forgefit.catalog.eligibility import filter_eligible
from forgefit.catalog.exercises import EXERCISE_CATALOG
from forgefit.models.enums import Category, Goal, Level
from forgefit.models.exercise import Exercise


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1). ``random.Random`` qualifies."""

    def random(self) -> float: ...


# Process-wide generator used when no source is injected.
_PROCESS_RNG = random.Random(config.RANDOM_SEED)


def default_rng() -> RandomSource:
    return _PROCESS_RNG


# ---------------------------------------------------------------------------
# Weight table
# ---------------------------------------------------------------------------
COMPOUND_BONUS = 1.2
STRENGTH_BONUS = 1.1
FATLOSS_CORE_BONUS = 0.3
FATLOSS_LOCOMOTION_BONUS = 0.25
HYPERTROPHY_ISOLATION_BONUS = 0.35
BEGINNER_PENALTY = 0.2

_COMPOUND_KEYWORDS: dict[str, tuple[str, ...]] = {
    Category.PUSH.value: ("bench", "press", "dips"),
    Category.PULL.value: ("row", "pull"),
    Category.LEGS.value: ("squat", "press", "deadlift", "lunge"),
}
_STRENGTH_KEYWORDS = ("barbell", "back squat", "bench", "row")
_FATLOSS_KEYWORDS = ("walking", "lunge")
_HYPERTROPHY_KEYWORDS = ("cable", "machine", "raise", "fly")
_BEGINNER_HARD_MOVES = ("barbell row", "pull-ups")


def base_count(minutes: int) -> int:
    """Number of exercises in a session of the given length."""
    if minutes <= 20:
        return 4
    if minutes <= 30:
        return 5
    if minutes <= 45:
        return 6
    return 7


def category_targets(day_label: str) -> list[str]:
    """Ordered category cycle for a day, keyword-matched from its label."""
    s = day_label.lower()
    if "full body" in s:
        return ["legs", "push", "pull", "core"]
    if "upper" in s:
        return ["push", "pull", "core"]
    if "lower" in s:
        return ["legs", "core"]
    if "push" in s or "chest" in s or "shoulders" in s or "arms" in s:
        return ["push", "core"]
    if "pull" in s or "back" in s:
        return ["pull", "core"]
    if "legs" in s:
        return ["legs", "core"]
    return ["push", "pull", "legs", "core"]


def candidate_weight(exercise: Exercise, category: str, goal: str, level: str) -> float:
    """Selection weight of one candidate within its category."""
    n = exercise.name.lower()
    w = 1.0

    if any(k in n for k in _COMPOUND_KEYWORDS.get(category, ())):
        w += COMPOUND_BONUS

    if goal == Goal.STRENGTH:
        if any(k in n for k in _STRENGTH_KEYWORDS):
            w += STRENGTH_BONUS
    elif goal == Goal.FATLOSS:
        if category == Category.CORE:
            w += FATLOSS_CORE_BONUS
        if any(k in n for k in _FATLOSS_KEYWORDS):
            w += FATLOSS_LOCOMOTION_BONUS
    elif goal == Goal.HYPERTROPHY:
        if any(k in n for k in _HYPERTROPHY_KEYWORDS):
            w += HYPERTROPHY_ISOLATION_BONUS

    if level == Level.BEGINNER and any(k in n for k in _BEGINNER_HARD_MOVES):
        w -= BEGINNER_PENALTY

    return w


def weighted_pick(
    weighted: list[tuple[Exercise, float]], rng: RandomSource
) -> Exercise | None:
    """Single roulette-wheel draw.

    Scales one uniform draw to the weight sum and subtracts weights in list
    order until the remainder is non-positive. The last candidate is the
    fallback for floating-point leftovers.
    """
    if not weighted:
        return None
    total = sum(w for _, w in weighted)
    r = rng.random() * total
    for exercise, w in weighted:
        r -= w
        if r <= 0:
            return exercise
    return weighted[-1][0]


def choose_from_category(
    pool: list[Exercise],
    category: str,
    used_names: set[str],
    goal: str,
    level: str,
    rng: RandomSource,
) -> Exercise | None:
    """Draw one unused exercise of the category, or None if none remain."""
    candidates = [
        e for e in pool if e.category == category and e.name not in used_names
    ]
    weighted = [(e, candidate_weight(e, category, goal, level)) for e in candidates]
    return weighted_pick(weighted, rng)


def pick_exercises(
    mode: str,
    day_label: str,
    minutes: int,
    goal: str,
    level: str,
    limits: str = "",
    catalog: tuple[Exercise, ...] | list[Exercise] = EXERCISE_CATALOG,
    rng: RandomSource | None = None,
) -> list[Exercise]:
    """Select the exercises for one day.

    Slots are filled by cycling through ``category_targets(day_label)``
    until the session size is reached or the current category has no
    unused candidates left. If no core exercise was chosen and the
    session is at least 30 minutes, one core exercise is appended; the
    result is then truncated to the session size, so that extra core
    pick only survives when the cycle stopped short.

    Returns:
        Between 0 and ``base_count(minutes)`` exercises, no duplicate names.
    """
    rng = rng or default_rng()
    pool = filter_eligible(catalog, mode, limits)
    count = base_count(minutes)
    targets = category_targets(day_label)

    chosen: list[Exercise] = []
    used_names: set[str] = set()

    while len(chosen) < count:
        category = targets[len(chosen) % len(targets)]
        pick = choose_from_category(pool, category, used_names, goal, level, rng)
        if pick is None:
            break
        chosen.append(pick)
        used_names.add(pick.name)

    if minutes >= 30 and not any(e.category == Category.CORE for e in chosen):
        core_pick = choose_from_category(
            pool, Category.CORE.value, used_names, goal, level, rng
        )
        if core_pick is not None:
            chosen.append(core_pick)

    return chosen[:count]
