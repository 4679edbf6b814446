"""User profile — the generation parameters submitted by the caller."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Profile:
    """Immutable generation parameters.

    The engine only reads a Profile. A snapshot is echoed into every
    generated Program for traceability. Categorical fields hold the
    lower-case tokens from ``forgefit.models.enums``; values outside the
    known set are tolerated and fall through to the rule tables' defaults.
    """

    mode: str = "gym"
    goal: str = "hypertrophy"
    level: str = "intermediate"
    days: int = 3
    minutes: int = 45
    limits: str = ""
    preferred_split: str = "auto"
    tone: str = "balanced"
    equipment: str = ""  # Free-text equipment note, echoed only

    # Feature flags
    auto_progression: bool = True
    smart_adapt: bool = True
    auto_deload: bool = True
