"""Fatigue / recovery / performance model state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from forgefit.models.enums import (
    DEFAULT_FATIGUE,
    DEFAULT_PERFORMANCE,
    DEFAULT_RECOVERY,
)


@dataclass(frozen=True)
class ScoringState:
    """Immutable snapshot of the scoring model.

    Transitions in ``forgefit.scoring.engine`` return a new ScoringState;
    every scalar is re-clamped to [0, 100] on each transition.
    """

    fatigue: float = DEFAULT_FATIGUE  # higher = more fatigued
    recovery: float = DEFAULT_RECOVERY  # higher = more recovered
    performance: float = DEFAULT_PERFORMANCE  # higher = better
    last_updated: datetime | None = None
    week_counter: int = 1
    deload_suggested_at_week: int | None = None
