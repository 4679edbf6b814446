"""In-place plan edits invoked by the swap / note / set-tracking dialogs.

Every operation addresses an exercise by (day_index, exercise_index) and
is a silent no-op returning False when the position or the replacement
does not exist.
"""

from __future__ import annotations

from forgefit.catalog.exercises import EXERCISE_CATALOG, find_exercise
from forgefit.generator.prescription import clamp, prescribe
from forgefit.models.exercise import Exercise
from forgefit.models.program import ExercisePlan, Prescription, Program

MAX_SWAP_CANDIDATES = 12


def swap_candidates(
    exercise: ExercisePlan,
    catalog: tuple[Exercise, ...] | list[Exercise] = EXERCISE_CATALOG,
) -> list[str]:
    """Names offered as replacements: listed alternatives first, then same-category entries."""
    same_category = [
        e.name for e in catalog
        if e.category == exercise.category and e.name != exercise.name
    ]
    merged = list(dict.fromkeys([*exercise.alternatives, *same_category]))
    return merged[:MAX_SWAP_CANDIDATES]


def swap_exercise(
    program: Program,
    day_index: int,
    exercise_index: int,
    replacement_name: str,
    catalog: tuple[Exercise, ...] | list[Exercise] = EXERCISE_CATALOG,
) -> bool:
    """Replace one exercise with a swap candidate, keeping its set/rep target.

    Rest, tempo and effort hint are re-derived for the new movement from
    the program's profile; notes and working weight stay; completed sets
    reset to 0.
    """
    current = program.exercise_at(day_index, exercise_index)
    if current is None or replacement_name not in swap_candidates(current, catalog):
        return False
    replacement = find_exercise(replacement_name, catalog)
    if replacement is None:
        return False

    profile = program.profile
    p = prescribe(
        goal=profile.goal,
        level=profile.level,
        minutes=profile.minutes,
        tone=profile.tone,
        mode=profile.mode,
        exercise_name=replacement.name,
    )
    current.name = replacement.name
    current.category = replacement.category
    current.muscle = replacement.muscle
    current.environment = replacement.environment
    current.alternatives = replacement.alternatives
    current.prescription = Prescription(
        sets=current.prescription.sets,
        reps=current.prescription.reps,
        rest=p.rest,
        tempo=p.tempo,
        rpe_hint=p.rpe_hint,
    )
    current.completed_sets = 0
    return True


def update_note(program: Program, day_index: int, exercise_index: int, text: str) -> bool:
    exercise = program.exercise_at(day_index, exercise_index)
    if exercise is None:
        return False
    exercise.notes = text.strip()
    return True


def set_working_weight(program: Program, day_index: int, exercise_index: int, weight: str) -> bool:
    exercise = program.exercise_at(day_index, exercise_index)
    if exercise is None:
        return False
    exercise.working_weight = weight.strip()
    return True


def adjust_completed_sets(program: Program, day_index: int, exercise_index: int, step: int) -> bool:
    """Move the completed-set counter by ``step``, clamped to 0..sets."""
    exercise = program.exercise_at(day_index, exercise_index)
    if exercise is None:
        return False
    exercise.completed_sets = clamp(
        exercise.completed_sets + step, 0, exercise.prescription.sets
    )
    return True


def reset_completed_sets(program: Program, day_index: int) -> None:
    if 0 <= day_index < len(program.week):
        for exercise in program.week[day_index].exercises:
            exercise.completed_sets = 0
