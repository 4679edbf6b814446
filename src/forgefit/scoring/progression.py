"""Progression advisor — next-session suggestion from one exercise's set completion."""

from __future__ import annotations

from forgefit.models.enums import PROGRESSION_MAINTAIN_THRESHOLD

PROGRESS = "Next time: add +1 rep (or small weight)."
MAINTAIN = "Next time: keep same target, aim to finish all sets."
REGRESS = "Next time: reduce target slightly or increase rest to hit quality reps."


def suggest_progression(target_sets: int, completed_sets: int) -> str:
    """Pure function of target vs. achieved sets; reads and writes no state."""
    completion = completed_sets / target_sets if target_sets > 0 else 0.0
    if completion >= 1.0:
        return PROGRESS
    if completion >= PROGRESSION_MAINTAIN_THRESHOLD:
        return MAINTAIN
    return REGRESS
