"""Session logging models: inbound SessionLog and the append-only HistoryLog."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionLog:
    """What the logging collaborator reports for one finished session."""

    rating: int  # 1-5 subjective
    completed_pct: float  # 0.0-1.0
    intensity: str = "normal"  # Intensity value: easy/normal/hard
    notes: str = ""


@dataclass(frozen=True)
class HistoryLog:
    """Immutable record of one logged session."""

    id: str
    date: str  # ISO date
    day_label: str
    focus: str
    goal: str
    mode: str
    completed_pct: float
    intensity: str
    rating: int
    readiness: int
    summary: str
