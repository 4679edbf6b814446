"""Adaptive scoring: readiness, post-session update, recovery, deloads, progression."""

from forgefit.scoring.engine import (
    DeloadSuggestion,
    maybe_suggest_deload,
    recover_over_time,
    update_after_workout,
)
from forgefit.scoring.progression import suggest_progression
from forgefit.scoring.readiness import (
    build_advice_text,
    compute_readiness,
    readiness_tag,
)

__all__ = [
    "DeloadSuggestion",
    "build_advice_text",
    "compute_readiness",
    "maybe_suggest_deload",
    "readiness_tag",
    "recover_over_time",
    "suggest_progression",
    "update_after_workout",
]
