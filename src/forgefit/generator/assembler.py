"""ProgramAssembler — builds a full training week from a Profile."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from forgefit.catalog.exercises import EXERCISE_CATALOG
from forgefit.generator.exercise_selector import RandomSource, default_rng, pick_exercises
from forgefit.generator.prescription import clamp, prescribe
from forgefit.generator.split_selector import (
    build_week_template,
    choose_split,
    derive_focus_label,
)
from forgefit.models.enums import (
    HIGH_READINESS_THRESHOLD,
    LOW_READINESS_THRESHOLD,
    MAX_REPS,
    MAX_SETS,
    MIN_REPS,
    MIN_SETS,
)
from forgefit.models.exercise import Exercise
from forgefit.models.profile import Profile
from forgefit.models.program import DayPlan, ExercisePlan, Prescription, Program
from forgefit.models.scoring_state import ScoringState
from forgefit.scoring.readiness import compute_readiness

logger = logging.getLogger(__name__)

# Lifts shielded from fatigue-driven set cuts. Broader than the prescription
# compound list: any "pull" counts here.
_SHIELDED_KEYWORDS = (
    "bench", "squat", "deadlift", "row", "pull", "press", "leg press", "lunge",
)


@dataclass(frozen=True)
class AdaptiveDelta:
    """Global volume nudge derived from readiness."""

    set_delta: int = 0
    rep_delta: int = 0
    readiness: int | None = None


def adaptive_delta(scoring: ScoringState, smart_adapt: bool) -> AdaptiveDelta:
    """readiness < 42 -> (-1 set, -1 rep); > 70 -> (+0 sets, +1 rep); else no change."""
    if not smart_adapt:
        return AdaptiveDelta()
    readiness = compute_readiness(scoring)
    if readiness < LOW_READINESS_THRESHOLD:
        return AdaptiveDelta(set_delta=-1, rep_delta=-1, readiness=readiness)
    if readiness > HIGH_READINESS_THRESHOLD:
        return AdaptiveDelta(set_delta=0, rep_delta=1, readiness=readiness)
    return AdaptiveDelta(readiness=readiness)


def is_shielded(exercise_name: str) -> bool:
    n = exercise_name.lower()
    return any(k in n for k in _SHIELDED_KEYWORDS)


def apply_delta(prescription: Prescription, exercise_name: str, delta: AdaptiveDelta) -> Prescription:
    """Fold the adaptive delta into one prescription.

    Sets move only on non-compound work; reps move everywhere. Both are
    re-clamped.
    """
    sets = prescription.sets
    if not is_shielded(exercise_name):
        sets = clamp(sets + delta.set_delta, MIN_SETS, MAX_SETS)
    reps = clamp(prescription.reps + delta.rep_delta, MIN_REPS, MAX_REPS)
    return Prescription(
        sets=sets,
        reps=reps,
        rest=prescription.rest,
        tempo=prescription.tempo,
        rpe_hint=prescription.rpe_hint,
    )


def _new_id() -> str:
    return uuid.uuid4().hex


class ProgramAssembler:
    """Orchestrates split selection, exercise selection and prescription.

    Usage::

        assembler = ProgramAssembler()
        program = assembler.generate(profile, scoring_state)
        program = assembler.rebuild(program, profile, scoring_state)
    """

    def __init__(
        self,
        catalog: tuple[Exercise, ...] | list[Exercise] = EXERCISE_CATALOG,
        rng: RandomSource | None = None,
    ) -> None:
        self.catalog = catalog
        self.rng = rng or default_rng()

    def generate(self, profile: Profile, scoring: ScoringState | None = None) -> Program:
        """Generate a fresh week for the profile.

        The scoring state is only read, and only when ``profile.smart_adapt``
        is set.
        """
        split = choose_split(profile.days, profile.preferred_split)
        labels = build_week_template(split, profile.days)
        delta = adaptive_delta(scoring or ScoringState(), profile.smart_adapt)

        week = [self._build_day(i, label, profile, delta) for i, label in enumerate(labels)]

        logger.info(
            "Generated %s program: %d days, %d exercises (readiness=%s, delta=%+d sets/%+d reps)",
            split,
            len(week),
            sum(len(d.exercises) for d in week),
            delta.readiness,
            delta.set_delta,
            delta.rep_delta,
        )
        return Program(
            id=_new_id(),
            created_at=datetime.now(timezone.utc).isoformat(),
            profile=profile,
            split=split,
            week=week,
        )

    def rebuild(
        self,
        old_program: Program | None,
        profile: Profile,
        scoring: ScoringState | None = None,
    ) -> Program:
        """Regenerate and carry forward working weight and notes by exact name."""
        fresh = self.generate(profile, scoring)
        if old_program is not None:
            carried = carry_over(old_program, fresh)
            logger.debug("Carried weight/notes into %d exercises", carried)
        return fresh

    def _build_day(
        self, index: int, label: str, profile: Profile, delta: AdaptiveDelta
    ) -> DayPlan:
        picks = pick_exercises(
            mode=profile.mode,
            day_label=label,
            minutes=profile.minutes,
            goal=profile.goal,
            level=profile.level,
            limits=profile.limits,
            catalog=self.catalog,
            rng=self.rng,
        )
        exercises = []
        for exercise in picks:
            p = prescribe(
                goal=profile.goal,
                level=profile.level,
                minutes=profile.minutes,
                tone=profile.tone,
                mode=profile.mode,
                exercise_name=exercise.name,
            )
            exercises.append(ExercisePlan(
                name=exercise.name,
                category=exercise.category,
                muscle=exercise.muscle,
                environment=exercise.environment,
                alternatives=exercise.alternatives,
                prescription=apply_delta(p, exercise.name, delta),
            ))
        return DayPlan(
            index=index,
            label=label,
            focus=derive_focus_label(label),
            exercises=exercises,
            id=_new_id(),
        )


def carry_over(old_program: Program, new_program: Program) -> int:
    """Copy working weight and notes from old to new plan where names match.

    When a name occurs more than once in the old plan, each field takes the
    last non-empty value, so an untouched repeat never blanks a value
    entered on another day. ``completed_sets`` is never carried.

    Returns:
        Number of exercises in the new plan that received carried values.
    """
    saved: dict[str, tuple[str, str]] = {}
    for day in old_program.week:
        for ex in day.exercises:
            weight, notes = saved.get(ex.name, ("", ""))
            saved[ex.name] = (ex.working_weight or weight, ex.notes or notes)

    carried = 0
    for day in new_program.week:
        for ex in day.exercises:
            if ex.name in saved:
                ex.working_weight, ex.notes = saved[ex.name]
                carried += 1
    return carried
