"""Application state — the single struct owned by the session controller."""

from __future__ import annotations

from dataclasses import dataclass, field

from forgefit.models.history import HistoryLog
from forgefit.models.profile import Profile
from forgefit.models.program import Program
from forgefit.models.scoring_state import ScoringState


@dataclass
class RestTimer:
    """Rest-countdown state. The host does the ticking; the core only sets it."""

    seconds: int = 0
    running: bool = False


@dataclass(frozen=True)
class TrainingStats:
    """Consecutive-day logging streak."""

    streak: int = 0
    last_log_date: str | None = None  # ISO date


@dataclass(frozen=True)
class Notice:
    """A short title + message event for the host to surface to the user."""

    title: str
    message: str


@dataclass
class AppState:
    """Everything that must round-trip through persistence."""

    profile: Profile | None = None
    program: Program | None = None
    today_index: int = 0
    timer: RestTimer = field(default_factory=RestTimer)
    history: list[HistoryLog] = field(default_factory=list)
    stats: TrainingStats = field(default_factory=TrainingStats)
    scoring: ScoringState = field(default_factory=ScoringState)
