"""JSON serialization of the application state.

Converts AppState <-> plain dicts that ``json`` can round-trip. Top-level
keys missing from a document fall back to the default state (so older or
partial backups still load); keys that are present must have the right
shape, otherwise ``InvalidStateError`` is raised and nothing is returned.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from typing import Any

from forgefit.exceptions import InvalidProfileError, InvalidStateError
from forgefit.models.app_state import AppState, RestTimer, TrainingStats
from forgefit.models.enums import (
    MAX_REPS,
    MAX_REST_S,
    MAX_SETS,
    MIN_REPS,
    MIN_REST_S,
    MIN_SETS,
    SCORE_MAX,
    SCORE_MIN,
    Environment,
    Goal,
    Level,
    Tone,
)
from forgefit.models.history import HistoryLog
from forgefit.models.profile import Profile
from forgefit.models.program import (
    PROGRAM_VERSION,
    DayPlan,
    ExercisePlan,
    Prescription,
    Program,
)
from forgefit.models.scoring_state import ScoringState

logger = logging.getLogger(__name__)

STATE_SCHEMA_VERSION = 1

_MODES = {e.value for e in Environment}
_GOALS = {e.value for e in Goal}
_LEVELS = {e.value for e in Level}
_TONES = {e.value for e in Tone}


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def profile_to_dict(profile: Profile) -> dict:
    return {
        "mode": profile.mode,
        "goal": profile.goal,
        "level": profile.level,
        "days": profile.days,
        "minutes": profile.minutes,
        "limits": profile.limits,
        "preferredSplit": profile.preferred_split,
        "tone": profile.tone,
        "equipment": profile.equipment,
        "autoProgression": profile.auto_progression,
        "smartAdapt": profile.smart_adapt,
        "autoDeload": profile.auto_deload,
    }


def _exercise_to_dict(ex: ExercisePlan) -> dict:
    p = ex.prescription
    return {
        "name": ex.name,
        "category": ex.category,
        "muscle": ex.muscle,
        "environment": ex.environment,
        "alternatives": list(ex.alternatives),
        "prescription": {
            "sets": p.sets,
            "reps": p.reps,
            "rest": p.rest,
            "tempo": p.tempo,
            "rpeHint": p.rpe_hint,
        },
        "workingWeight": ex.working_weight,
        "completedSets": ex.completed_sets,
        "notes": ex.notes,
    }


def program_to_dict(program: Program) -> dict:
    return {
        "id": program.id,
        "createdAt": program.created_at,
        "profile": profile_to_dict(program.profile),
        "split": program.split,
        "version": program.version,
        "week": [
            {
                "id": day.id,
                "index": day.index,
                "label": day.label,
                "focus": day.focus,
                "exercises": [_exercise_to_dict(ex) for ex in day.exercises],
            }
            for day in program.week
        ],
    }


def _history_to_dict(log: HistoryLog) -> dict:
    return {
        "id": log.id,
        "date": log.date,
        "dayLabel": log.day_label,
        "focus": log.focus,
        "goal": log.goal,
        "mode": log.mode,
        "completedPct": log.completed_pct,
        "intensity": log.intensity,
        "rating": log.rating,
        "readiness": log.readiness,
        "summary": log.summary,
    }


def _scoring_to_dict(scoring: ScoringState) -> dict:
    return {
        "fatigue": scoring.fatigue,
        "recovery": scoring.recovery,
        "performance": scoring.performance,
        "lastUpdated": scoring.last_updated.isoformat() if scoring.last_updated else None,
        "weekCounter": scoring.week_counter,
        "deloadSuggestedAtWeek": scoring.deload_suggested_at_week,
    }


def state_to_dict(state: AppState) -> dict:
    """Convert the full application state to a JSON-compatible dict."""
    return {
        "version": STATE_SCHEMA_VERSION,
        "profile": profile_to_dict(state.profile) if state.profile else None,
        "program": program_to_dict(state.program) if state.program else None,
        "todayIndex": state.today_index,
        "timer": {"seconds": state.timer.seconds, "running": state.timer.running},
        "history": [_history_to_dict(log) for log in state.history],
        "stats": {"streak": state.stats.streak, "lastLogDate": state.stats.last_log_date},
        "scoring": _scoring_to_dict(state.scoring),
    }


def dumps_state(state: AppState, indent: int = 2) -> str:
    return json.dumps(state_to_dict(state), indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _get(data: dict, key: str, kinds: type | tuple[type, ...], path: str, default: Any = ...) -> Any:
    """Fetch ``data[key]`` checking its type. bool is never accepted as a number."""
    if key not in data:
        if default is ...:
            raise InvalidStateError(f"missing field '{key}'", path)
        return default
    value = data[key]
    kinds = kinds if isinstance(kinds, tuple) else (kinds,)
    is_bool_as_number = isinstance(value, bool) and bool not in kinds
    if not isinstance(value, kinds) or is_bool_as_number:
        names = "/".join(k.__name__ for k in kinds)
        raise InvalidStateError(f"field '{key}' must be {names}", path)
    return value


def _mapping(value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise InvalidStateError("expected an object", path)
    return value


def _in_range(value: float, low: float, high: float, key: str, path: str) -> None:
    if not low <= value <= high:
        raise InvalidStateError(f"field '{key}' out of range [{low}, {high}]", path)


def _number(data: dict, key: str, path: str, default: Any = ...) -> float:
    """Fetch an int/float field as float. Ints too large for a float are rejected."""
    value = _get(data, key, (int, float), path, default)
    try:
        return float(value)
    except OverflowError as exc:
        raise InvalidStateError(f"field '{key}' is not a finite number", path) from exc


def _iso_date(value: str | None, key: str, path: str) -> str | None:
    """Check a YYYY-MM-DD date string; None passes through."""
    if value is None:
        return None
    try:
        date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidStateError(f"field '{key}' is not an ISO date: '{value}'", path) from exc
    return value


def profile_from_dict(data: Any, path: str = "profile") -> Profile:
    """Build a Profile, rejecting unknown categorical values and bad numbers.

    Raises:
        InvalidProfileError: if any field is missing, mistyped or out of range.
    """
    try:
        data = _mapping(data, path)
        defaults = Profile()
        profile = Profile(
            mode=_get(data, "mode", str, path, defaults.mode),
            goal=_get(data, "goal", str, path, defaults.goal),
            level=_get(data, "level", str, path, defaults.level),
            days=_get(data, "days", int, path, defaults.days),
            minutes=_get(data, "minutes", int, path, defaults.minutes),
            limits=_get(data, "limits", str, path, defaults.limits),
            preferred_split=_get(data, "preferredSplit", str, path, defaults.preferred_split),
            tone=_get(data, "tone", str, path, defaults.tone),
            equipment=_get(data, "equipment", str, path, defaults.equipment),
            auto_progression=_get(data, "autoProgression", bool, path, defaults.auto_progression),
            smart_adapt=_get(data, "smartAdapt", bool, path, defaults.smart_adapt),
            auto_deload=_get(data, "autoDeload", bool, path, defaults.auto_deload),
        )
    except InvalidProfileError:
        raise
    except InvalidStateError as exc:
        raise InvalidProfileError(str(exc)) from exc

    for key, value, allowed in (
        ("mode", profile.mode, _MODES),
        ("goal", profile.goal, _GOALS),
        ("level", profile.level, _LEVELS),
        ("tone", profile.tone, _TONES),
    ):
        if value not in allowed:
            raise InvalidProfileError(f"unknown {key} '{value}'", path)
    if profile.days < 1:
        raise InvalidProfileError("field 'days' must be at least 1", path)
    if profile.minutes < 1:
        raise InvalidProfileError("field 'minutes' must be at least 1", path)
    return profile


def _prescription_from_dict(data: Any, path: str) -> Prescription:
    data = _mapping(data, path)
    sets = _get(data, "sets", int, path)
    reps = _get(data, "reps", int, path)
    rest = _get(data, "rest", int, path)
    _in_range(sets, MIN_SETS, MAX_SETS, "sets", path)
    _in_range(reps, MIN_REPS, MAX_REPS, "reps", path)
    _in_range(rest, MIN_REST_S, MAX_REST_S, "rest", path)
    return Prescription(
        sets=sets,
        reps=reps,
        rest=rest,
        tempo=_get(data, "tempo", str, path, "2-0-2"),
        rpe_hint=_get(data, "rpeHint", str, path, ""),
    )


def _exercise_from_dict(data: Any, path: str) -> ExercisePlan:
    data = _mapping(data, path)
    alternatives = _get(data, "alternatives", list, path, [])
    if not all(isinstance(a, str) for a in alternatives):
        raise InvalidStateError("field 'alternatives' must hold strings", path)
    prescription = _prescription_from_dict(data.get("prescription"), f"{path}.prescription")
    completed = _get(data, "completedSets", int, path, 0)
    _in_range(completed, 0, prescription.sets, "completedSets", path)
    return ExercisePlan(
        name=_get(data, "name", str, path),
        category=_get(data, "category", str, path),
        muscle=_get(data, "muscle", str, path, ""),
        environment=_get(data, "environment", str, path, ""),
        alternatives=tuple(alternatives),
        prescription=prescription,
        working_weight=_get(data, "workingWeight", str, path, ""),
        completed_sets=completed,
        notes=_get(data, "notes", str, path, ""),
    )


def program_from_dict(data: Any, path: str = "program") -> Program:
    data = _mapping(data, path)
    week_data = _get(data, "week", list, path)
    week = []
    for i, day_data in enumerate(week_data):
        day_path = f"{path}.week[{i}]"
        day_data = _mapping(day_data, day_path)
        exercises = [
            _exercise_from_dict(ex, f"{day_path}.exercises[{j}]")
            for j, ex in enumerate(_get(day_data, "exercises", list, day_path))
        ]
        week.append(DayPlan(
            index=_get(day_data, "index", int, day_path, i),
            label=_get(day_data, "label", str, day_path),
            focus=_get(day_data, "focus", str, day_path, "Workout"),
            exercises=exercises,
            id=_get(day_data, "id", str, day_path, ""),
        ))
    return Program(
        id=_get(data, "id", str, path),
        created_at=_get(data, "createdAt", str, path, ""),
        profile=profile_from_dict(data.get("profile"), f"{path}.profile"),
        split=_get(data, "split", str, path),
        week=week,
        version=_get(data, "version", int, path, PROGRAM_VERSION),
    )


def _history_from_dict(data: Any, path: str) -> HistoryLog:
    data = _mapping(data, path)
    completed_pct = _number(data, "completedPct", path)
    rating = _get(data, "rating", int, path)
    _in_range(completed_pct, 0.0, 1.0, "completedPct", path)
    _in_range(rating, 1, 5, "rating", path)
    return HistoryLog(
        id=_get(data, "id", str, path, ""),
        date=_iso_date(_get(data, "date", str, path), "date", path),
        day_label=_get(data, "dayLabel", str, path, ""),
        focus=_get(data, "focus", str, path, ""),
        goal=_get(data, "goal", str, path, ""),
        mode=_get(data, "mode", str, path, ""),
        completed_pct=completed_pct,
        intensity=_get(data, "intensity", str, path, "normal"),
        rating=rating,
        readiness=_get(data, "readiness", int, path, 0),
        summary=_get(data, "summary", str, path, ""),
    )


def _parse_datetime(value: str | None, path: str) -> datetime | None:
    if value is None:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
        # Scoring works in naive local time
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)
    except (ValueError, OverflowError) as exc:
        raise InvalidStateError(f"bad timestamp '{value}'", path) from exc
    return parsed


def _scoring_from_dict(data: Any, path: str = "scoring") -> ScoringState:
    data = _mapping(data, path)
    defaults = ScoringState()
    values = {}
    for key in ("fatigue", "recovery", "performance"):
        value = _number(data, key, path, getattr(defaults, key))
        _in_range(value, SCORE_MIN, SCORE_MAX, key, path)
        values[key] = value
    return ScoringState(
        **values,
        last_updated=_parse_datetime(_get(data, "lastUpdated", (str, type(None)), path, None), path),
        week_counter=_get(data, "weekCounter", int, path, defaults.week_counter),
        deload_suggested_at_week=_get(data, "deloadSuggestedAtWeek", (int, type(None)), path, None),
    )


def state_from_dict(data: Any) -> AppState:
    """Build an AppState from a decoded document.

    Raises:
        InvalidStateError: if the document does not conform to the schema.
    """
    data = _mapping(data, "state")
    defaults = AppState()

    profile_data = data.get("profile")
    program_data = data.get("program")
    timer_data = _mapping(data.get("timer", {}), "timer")
    stats_data = _mapping(data.get("stats", {}), "stats")

    state = AppState(
        profile=profile_from_dict(profile_data) if profile_data is not None else None,
        program=program_from_dict(program_data) if program_data is not None else None,
        today_index=_get(data, "todayIndex", int, "state", defaults.today_index),
        timer=RestTimer(
            seconds=_get(timer_data, "seconds", int, "timer", 0),
            running=_get(timer_data, "running", bool, "timer", False),
        ),
        history=[
            _history_from_dict(log, f"history[{i}]")
            for i, log in enumerate(_get(data, "history", list, "state", []))
        ],
        stats=TrainingStats(
            streak=_get(stats_data, "streak", int, "stats", 0),
            last_log_date=_iso_date(
                _get(stats_data, "lastLogDate", (str, type(None)), "stats", None), "lastLogDate", "stats"
            ),
        ),
        scoring=_scoring_from_dict(data.get("scoring", {})),
    )
    if state.program is not None and not 0 <= state.today_index < max(len(state.program.week), 1):
        raise InvalidStateError("field 'todayIndex' outside the program week", "state")
    return state


def loads_state(text: str) -> AppState:
    """Parse a JSON document into an AppState.

    Raises:
        InvalidStateError: on malformed JSON or a non-conforming document.
    """
    try:
        data = json.loads(text)
    except (ValueError, TypeError, RecursionError) as exc:
        # ValueError covers JSONDecodeError and the integer digit limit
        raise InvalidStateError(f"invalid JSON: {exc}") from exc
    state = state_from_dict(data)
    logger.debug(
        "Loaded state: program=%s, %d history entries",
        state.program.id if state.program else None,
        len(state.history),
    )
    return state
