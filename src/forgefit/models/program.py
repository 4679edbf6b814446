"""Generated program: Prescription, ExercisePlan, DayPlan and Program."""

from __future__ import annotations

from dataclasses import dataclass, field

from forgefit.models.profile import Profile

PROGRAM_VERSION = 1


@dataclass(frozen=True)
class Prescription:
    """Sets / reps / rest for one exercise. Numeric fields are always within clamps."""

    sets: int
    reps: int
    rest: int  # seconds
    tempo: str = "2-0-2"
    rpe_hint: str = ""


@dataclass
class ExercisePlan:
    """One prescribed exercise inside a day.

    Catalog fields are copied, not linked, so catalog edits never alter an
    existing plan. ``working_weight`` and ``notes`` persist across logged
    sessions; ``completed_sets`` is reset to 0 after each one.
    """

    name: str
    category: str
    muscle: str
    environment: str
    alternatives: tuple[str, ...]
    prescription: Prescription
    working_weight: str = ""
    completed_sets: int = 0
    notes: str = ""


@dataclass
class DayPlan:
    """One training day of the week."""

    index: int
    label: str
    focus: str
    exercises: list[ExercisePlan] = field(default_factory=list)
    id: str = ""

    @property
    def total_sets(self) -> int:
        return sum(ex.prescription.sets for ex in self.exercises)

    @property
    def completed_sets(self) -> int:
        return sum(ex.completed_sets for ex in self.exercises)

    @property
    def completion(self) -> float:
        """Fraction of prescribed sets completed (0.0 for an empty day)."""
        total = self.total_sets
        return self.completed_sets / total if total else 0.0


@dataclass
class Program:
    """One generated training week."""

    id: str
    created_at: str  # ISO-8601 timestamp
    profile: Profile
    split: str
    week: list[DayPlan] = field(default_factory=list)
    version: int = PROGRAM_VERSION

    def exercise_at(self, day_index: int, exercise_index: int) -> ExercisePlan | None:
        """Return the exercise at the given position, or None if out of range."""
        if not 0 <= day_index < len(self.week):
            return None
        exercises = self.week[day_index].exercises
        if not 0 <= exercise_index < len(exercises):
            return None
        return exercises[exercise_index]
