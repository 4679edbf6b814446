"""Data models for the program generator and scoring engine."""

from forgefit.models.app_state import AppState, Notice, RestTimer, TrainingStats
from forgefit.models.enums import (
    Category,
    Environment,
    Goal,
    Intensity,
    Level,
    Split,
    Tone,
)
from forgefit.models.exercise import Exercise
from forgefit.models.history import HistoryLog, SessionLog
from forgefit.models.profile import Profile
from forgefit.models.program import DayPlan, ExercisePlan, Prescription, Program
from forgefit.models.scoring_state import ScoringState

__all__ = [
    "AppState",
    "Category",
    "DayPlan",
    "Environment",
    "Exercise",
    "ExercisePlan",
    "Goal",
    "HistoryLog",
    "Intensity",
    "Level",
    "Notice",
    "Prescription",
    "Profile",
    "Program",
    "RestTimer",
    "ScoringState",
    "SessionLog",
    "Split",
    "Tone",
    "TrainingStats",
]
