"""Eligibility filter — narrows the catalog by environment and stated limitations.

Limitation matching is a lower-cased substring test of the free-text notes
against a few keywords, then a substring test of each exercise *name*.
A "back" note therefore also excludes "Back Squat".
"""

from __future__ import annotations

from forgefit.models.enums import Environment
from forgefit.models.exercise import Exercise

# Environments admitted per training mode. Filtering is additive: home
# training still admits gym-labelled entries.
_ENVIRONMENTS_ALLOWED: dict[str, tuple[str, ...]] = {
    Environment.GYM.value: (Environment.GYM.value, Environment.HOME.value),
    Environment.HOME.value: (Environment.HOME.value, Environment.GYM.value),
}

# (limitation keywords, excluded exercise-name substrings)
LIMITATION_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("shoulder", "overhead"), ("overhead press", "shoulder press")),
    (("knee",), ("squat", "lunge", "leg press")),
    (("back",), ("deadlift", "row", "good morning", "back squat")),
)


def excluded_name_keywords(limits: str) -> tuple[str, ...]:
    """Return every exercise-name substring excluded by the limitation notes."""
    text = (limits or "").lower()
    excluded: list[str] = []
    for triggers, names in LIMITATION_RULES:
        if any(trigger in text for trigger in triggers):
            excluded.extend(names)
    return tuple(excluded)


def is_safe(exercise: Exercise, limits: str) -> bool:
    """Whether the exercise survives the limitation keyword rules."""
    name = exercise.name.lower()
    return not any(keyword in name for keyword in excluded_name_keywords(limits))


def filter_eligible(
    catalog: tuple[Exercise, ...] | list[Exercise],
    mode: str,
    limits: str = "",
) -> list[Exercise]:
    """Filter the catalog by training environment and limitation notes.

    Args:
        catalog: Full exercise catalog.
        mode: Training environment ("gym" or "home").
        limits: Free-text limitation notes, e.g. "bad knee, sore shoulder".

    Returns:
        Eligible exercises in catalog order.
    """
    allowed = _ENVIRONMENTS_ALLOWED.get(
        mode, (Environment.HOME.value, Environment.GYM.value)
    )
    excluded = excluded_name_keywords(limits)
    return [
        e for e in catalog
        if e.environment in allowed
        and not any(keyword in e.name.lower() for keyword in excluded)
    ]
