"""Exercise catalog — static reference data with gym and home variants.

Alternatives are listed by name and drive the swap dialog. Some listed
alternatives are not catalog entries themselves; they are shown as hints
but cannot be swapped in.
"""

from __future__ import annotations

from forgefit.models.enums import Category, Environment
from forgefit.models.exercise import Exercise

_PUSH = Category.PUSH.value
_PULL = Category.PULL.value
_LEGS = Category.LEGS.value
_CORE = Category.CORE.value
_GYM = Environment.GYM.value
_HOME = Environment.HOME.value


def _ex(name: str, category: str, muscle: str, environment: str, alternatives: list[str]) -> Exercise:
    return Exercise(
        name=name,
        category=category,
        muscle=muscle,
        environment=environment,
        alternatives=tuple(alternatives),
    )


EXERCISE_CATALOG: tuple[Exercise, ...] = (
    # --- PUSH (chest / shoulders / triceps) ---
    _ex("Barbell Bench Press", _PUSH, "chest", _GYM, ["Dumbbell Bench Press", "Machine Chest Press", "Push-ups"]),
    _ex("Dumbbell Bench Press", _PUSH, "chest", _GYM, ["Barbell Bench Press", "Machine Chest Press", "Push-ups"]),
    _ex("Machine Chest Press", _PUSH, "chest", _GYM, ["Barbell Bench Press", "Dumbbell Bench Press", "Push-ups"]),
    _ex("Incline Dumbbell Press", _PUSH, "chest", _GYM, ["Incline Bench Press", "Machine Incline Press", "Feet-elevated Push-ups"]),
    _ex("Cable Fly", _PUSH, "chest", _GYM, ["Pec Deck", "Dumbbell Fly", "Push-up Wide"]),
    _ex("Overhead Press", _PUSH, "shoulders", _GYM, ["Dumbbell Shoulder Press", "Arnold Press", "Pike Push-ups"]),
    _ex("Lateral Raise", _PUSH, "shoulders", _GYM, ["Cable Lateral Raise", "Band Lateral Raise", "Lean-away Lateral Raise"]),
    _ex("Triceps Pushdown", _PUSH, "triceps", _GYM, ["Overhead Triceps Extension", "Close-Grip Push-ups", "Bench Dips"]),
    _ex("Dips", _PUSH, "triceps", _GYM, ["Close-Grip Bench", "Bench Dips", "Push-ups Close"]),
    _ex("Push-ups", _PUSH, "chest", _HOME, ["Knee Push-ups", "Feet-elevated Push-ups", "Diamond Push-ups"]),
    _ex("Pike Push-ups", _PUSH, "shoulders", _HOME, ["Handstand Hold", "Dumbbell Shoulder Press", "Band Overhead Press"]),
    _ex("Band Overhead Press", _PUSH, "shoulders", _HOME, ["Dumbbell Shoulder Press", "Pike Push-ups", "Arnold Press"]),
    _ex("Diamond Push-ups", _PUSH, "triceps", _HOME, ["Close-Grip Push-ups", "Bench Dips", "Band Pushdown"]),
    # --- PULL (back / biceps / rear delts) ---
    _ex("Pull-ups", _PULL, "back", _GYM, ["Lat Pulldown", "Assisted Pull-ups", "Band Pull-down"]),
    _ex("Lat Pulldown", _PULL, "back", _GYM, ["Pull-ups", "Band Pull-down", "One-arm Cable Pulldown"]),
    _ex("Barbell Row", _PULL, "back", _GYM, ["Dumbbell Row", "Seated Cable Row", "Chest-Supported Row"]),
    _ex("Seated Cable Row", _PULL, "back", _GYM, ["Barbell Row", "Dumbbell Row", "Band Row"]),
    _ex("Dumbbell Row", _PULL, "back", _GYM, ["Barbell Row", "Cable Row", "Band Row"]),
    _ex("Face Pull", _PULL, "rear_delts", _GYM, ["Rear Delt Fly", "Band Face Pull", "High Row"]),
    _ex("Biceps Curl", _PULL, "biceps", _GYM, ["Hammer Curl", "Cable Curl", "Band Curl"]),
    _ex("Hammer Curl", _PULL, "biceps", _GYM, ["Biceps Curl", "Band Curl", "Incline DB Curl"]),
    _ex("Band Row", _PULL, "back", _HOME, ["One-arm DB Row", "Towel Row", "Band Lat Pulldown"]),
    _ex("Band Curl", _PULL, "biceps", _HOME, ["DB Curl", "Hammer Curl", "Isometric Curl Hold"]),
    _ex("Rear Delt Fly", _PULL, "rear_delts", _HOME, ["Band Face Pull", "Reverse Snow Angels", "Band Pull-aparts"]),
    _ex("Band Pull-aparts", _PULL, "rear_delts", _HOME, ["Rear Delt Fly", "Band Face Pull", "Scapular Retractions"]),
    # --- LEGS (quads / hamstrings / glutes / calves) ---
    _ex("Back Squat", _LEGS, "quads", _GYM, ["Front Squat", "Leg Press", "Goblet Squat"]),
    _ex("Leg Press", _LEGS, "quads", _GYM, ["Back Squat", "Goblet Squat", "Hack Squat"]),
    _ex("Romanian Deadlift", _LEGS, "hamstrings", _GYM, ["Hip Hinge DB", "Good Morning", "Hamstring Curl"]),
    _ex("Hamstring Curl", _LEGS, "hamstrings", _GYM, ["Romanian Deadlift", "Glute Bridge", "Nordic Curl (assisted)"]),
    _ex("Walking Lunges", _LEGS, "glutes", _GYM, ["Split Squat", "Step-ups", "Reverse Lunge"]),
    _ex("Calf Raise", _LEGS, "calves", _GYM, ["Seated Calf Raise", "Single-leg Calf Raise", "Calf Raise (stairs)"]),
    _ex("Goblet Squat", _LEGS, "quads", _HOME, ["Bodyweight Squat", "Split Squat", "Tempo Squat"]),
    _ex("Split Squat", _LEGS, "glutes", _HOME, ["Reverse Lunge", "Step-ups", "Walking Lunges"]),
    _ex("Glute Bridge", _LEGS, "glutes", _HOME, ["Hip Thrust", "Single-leg Bridge", "RDL DB"]),
    _ex("Bodyweight Squat", _LEGS, "quads", _HOME, ["Tempo Squat", "Jump Squat", "Goblet Squat"]),
    _ex("Single-leg Calf Raise", _LEGS, "calves", _HOME, ["Calf Raise (stairs)", "Seated Calf Raise", "Calf Raise"]),
    # --- CORE ---
    _ex("Plank", _CORE, "core", _HOME, ["Side Plank", "Dead Bug", "Hollow Hold"]),
    _ex("Dead Bug", _CORE, "core", _HOME, ["Plank", "Bird Dog", "Hollow Hold"]),
    _ex("Hanging Knee Raise", _CORE, "core", _GYM, ["Cable Crunch", "Reverse Crunch", "Plank"]),
    _ex("Cable Crunch", _CORE, "core", _GYM, ["Hanging Knee Raise", "Ab Wheel", "Reverse Crunch"]),
    _ex("Russian Twist", _CORE, "core", _HOME, ["Bicycle Crunch", "Dead Bug", "Side Plank"]),
)

# Name -> entry. First entry wins if a name is ever duplicated.
CATALOG_BY_NAME: dict[str, Exercise] = {}
for _entry in EXERCISE_CATALOG:
    CATALOG_BY_NAME.setdefault(_entry.name, _entry)


def find_exercise(
    name: str, catalog: tuple[Exercise, ...] | list[Exercise] | None = None
) -> Exercise | None:
    """Resolve an exercise by exact name, or None if it is not in the catalog."""
    if catalog is None:
        return CATALOG_BY_NAME.get(name)
    for exercise in catalog:
        if exercise.name == name:
            return exercise
    return None


def search_catalog(
    query: str, catalog: tuple[Exercise, ...] | list[Exercise] | None = None
) -> list[Exercise]:
    """Case-insensitive match on name, category or muscle. Empty query returns all."""
    entries = EXERCISE_CATALOG if catalog is None else catalog
    q = query.lower().strip()
    if not q:
        return list(entries)
    return [
        e for e in entries
        if q in e.name.lower() or q in e.category or q in e.muscle
    ]
