"""Training statistics over the session history and the current plan.

Streak tracking, recent-session counts, plan category balance and a
tabular view of the history for hosts that chart it.
"""

from __future__ import annotations

import dataclasses
from datetime import date, timedelta

import numpy as np
import pandas as pd

from forgefit.models.app_state import TrainingStats
from forgefit.models.enums import Category
from forgefit.models.history import HistoryLog
from forgefit.models.program import Program

HISTORY_COLUMNS = [
    "id", "date", "day_label", "focus", "goal", "mode",
    "completed_pct", "intensity", "rating", "readiness", "summary",
]


def update_streak(stats: TrainingStats, today: date) -> TrainingStats:
    """Advance the consecutive-day streak for a session logged ``today``.

    First log starts the streak at 1, a second log on the same day leaves
    it unchanged, the next calendar day extends it, any gap restarts it.
    """
    today_iso = today.isoformat()
    if stats.last_log_date is None:
        return TrainingStats(streak=1, last_log_date=today_iso)

    diff_days = (today - date.fromisoformat(stats.last_log_date)).days
    if diff_days == 0:
        return dataclasses.replace(stats, last_log_date=today_iso)
    if diff_days == 1:
        return TrainingStats(streak=stats.streak + 1, last_log_date=today_iso)
    return TrainingStats(streak=1, last_log_date=today_iso)


def history_frame(history: list[HistoryLog]) -> pd.DataFrame:
    """History as a DataFrame with a parsed ``date`` column, oldest first."""
    if not history:
        return pd.DataFrame(columns=HISTORY_COLUMNS)
    frame = pd.DataFrame([dataclasses.asdict(log) for log in history], columns=HISTORY_COLUMNS)
    frame["date"] = pd.to_datetime(frame["date"])
    return frame


def sessions_in_last_days(history: list[HistoryLog], today: date, days: int = 7) -> int:
    """Count sessions dated within the last ``days`` days, today included."""
    if not history:
        return 0
    frame = history_frame(history)
    cutoff = pd.Timestamp(today - timedelta(days=days - 1))
    return int((frame["date"] >= cutoff).sum())


def average_completion(history: list[HistoryLog]) -> float:
    if not history:
        return 0.0
    return float(np.mean([log.completed_pct for log in history]))


def category_distribution(program: Program | None) -> dict[str, int]:
    """Exercise count per category across the whole week."""
    dist = {c.value: 0 for c in Category}
    if program is None:
        return dist
    for day in program.week:
        for ex in day.exercises:
            if ex.category in dist:
                dist[ex.category] += 1
    return dist
