"""Split & template selection — fixed decision tables, not a scored optimisation.

Day labels produced here are the single source of truth for the rest of
the pipeline: focus tags and category targets are both derived from the
label text by keyword matching.
"""

from __future__ import annotations

from forgefit.models.enums import Split

_UPPERLOWER_TEMPLATES: dict[int, list[str]] = {
    3: ["Upper", "Lower", "Upper (lite)"],
    4: ["Upper A", "Lower A", "Upper B", "Lower B"],
    5: ["Upper A", "Lower A", "Upper B", "Lower B", "Upper (pump)"],
}

_PPL_TEMPLATES: dict[int, list[str]] = {
    3: ["Push", "Pull", "Legs"],
    4: ["Push", "Pull", "Legs", "Upper (lite)"],
    5: ["Push", "Pull", "Legs", "Push (lite)", "Pull (lite)"],
    6: ["Push", "Pull", "Legs", "Push", "Pull", "Legs"],
}

_BRO_SEQUENCE = ["Chest", "Back", "Legs", "Shoulders", "Arms", "Core"]

_SPLIT_LABELS: dict[str, str] = {
    Split.FULLBODY.value: "Full Body",
    Split.UPPERLOWER.value: "Upper/Lower",
    Split.PPL.value: "PPL",
    Split.BRO.value: "Bro Split",
    Split.AUTO.value: "Auto",
}

_GOAL_LABELS: dict[str, str] = {
    "hypertrophy": "Muscle",
    "fatloss": "Fat Loss",
    "strength": "Strength",
    "recomp": "Recomp",
}


def choose_split(days: int, preferred_split: str | None = None) -> str:
    """Pick a weekly split from the day count unless the user chose one.

    A preferred split other than "auto" is returned verbatim, even if it is
    not one of the known splits.
    """
    if preferred_split and preferred_split != Split.AUTO.value:
        return preferred_split
    if days <= 3:
        return Split.FULLBODY.value
    if days == 4:
        return Split.UPPERLOWER.value
    return Split.PPL.value


def build_week_template(split: str, days: int) -> list[str]:
    """Map (split, days) to an ordered list of day labels.

    The returned list length is the Program's day count: it equals ``days``
    for full body and bro (bro caps at six), and the nearest supported
    template length for upper/lower and PPL. Unknown splits use the
    three-day PPL template.
    """
    if split == Split.FULLBODY.value:
        return [f"Full Body {chr(ord('A') + i)}" for i in range(days)]
    if split == Split.UPPERLOWER.value:
        return list(_UPPERLOWER_TEMPLATES.get(days, _UPPERLOWER_TEMPLATES[4]))
    if split == Split.PPL.value:
        return list(_PPL_TEMPLATES.get(days, _PPL_TEMPLATES[6]))
    if split == Split.BRO.value:
        return _BRO_SEQUENCE[:days]
    return list(_PPL_TEMPLATES[3])


def derive_focus_label(day_label: str) -> str:
    """Derive the day focus tag from its label."""
    s = day_label.lower()
    if "push" in s or "chest" in s or "shoulder" in s or "arms" in s:
        return "Push"
    if "pull" in s or "back" in s:
        return "Pull"
    if "legs" in s or "lower" in s:
        return "Legs"
    if "core" in s:
        return "Core"
    if "upper" in s:
        return "Upper"
    if "full body" in s:
        return "Full Body"
    return "Workout"


def split_label(split: str | None) -> str:
    """Human-readable split name; unknown values are returned as-is."""
    if not split:
        return "—"
    return _SPLIT_LABELS.get(split, split)


def goal_label(goal: str) -> str:
    return _GOAL_LABELS.get(goal, goal)
