"""SessionController — owns the application state and serializes every mutation.

The presentation layer (forms, dialogs, dashboards) calls into this
controller and never mutates the state directly. User-visible events
(generated, logged, deload suggestion, invalid backup, ...) are queued as
Notice values and drained by the host.
"""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime
from typing import Callable

from forgefit.exceptions import InvalidStateError
from forgefit.generator import editing
from forgefit.generator.assembler import ProgramAssembler
from forgefit.generator.split_selector import split_label
from forgefit.math.training_stats import update_streak
from forgefit.models.app_state import AppState, Notice
from forgefit.models.history import HistoryLog, SessionLog
from forgefit.models.profile import Profile
from forgefit.models.program import DayPlan, Program
from forgefit.scoring.engine import (
    maybe_suggest_deload,
    recover_over_time,
    touch,
    update_after_workout,
)
from forgefit.scoring.progression import suggest_progression
from forgefit.scoring.readiness import build_advice_text, compute_readiness, round_half_up
from forgefit.serialization.state_json import dumps_state, loads_state

logger = logging.getLogger(__name__)

MAX_SUMMARY_EXERCISES = 6
DEFAULT_TIMER_SECONDS = 60


def build_log_summary(
    day: DayPlan, completed_pct: float, intensity: str, rating: int, notes: str = ""
) -> str:
    """One-line summary of a finished session for the history log."""
    done = [
        f"{ex.name} ({ex.completed_sets}/{ex.prescription.sets} sets)"
        for ex in day.exercises
        if ex.completed_sets > 0
    ][:MAX_SUMMARY_EXERCISES]
    summary = (
        f"Finished {day.label} • {round_half_up(completed_pct * 100)}% completion • "
        f"intensity {intensity} • rating {rating}/5."
    )
    if done:
        summary += f" Top: {', '.join(done)}."
    if notes:
        summary += f" Notes: {notes}"
    return summary


def build_quick_summary(completed_pct: float, intensity: str, rating: int, notes: str = "") -> str:
    summary = (
        f"Quick log • {round_half_up(completed_pct * 100)}% • intensity {intensity} • "
        f"rating {rating}/5."
    )
    if notes:
        summary += f" Notes: {notes}"
    return summary


class SessionController:
    """Single owner of an AppState.

    Usage::

        controller = SessionController(state)
        controller.resume()                 # once per process start
        controller.generate(profile)
        controller.complete_set(0)
        controller.finish_workout(rating=4, intensity="normal")
        for notice in controller.drain_notices():
            ...
    """

    def __init__(
        self,
        state: AppState | None = None,
        assembler: ProgramAssembler | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._state = state or AppState()
        self.assembler = assembler or ProgramAssembler()
        self.clock = clock
        self._lock = threading.RLock()
        self._notices: list[Notice] = []

    @property
    def state(self) -> AppState:
        return self._state

    # ------------------------------------------------------------------
    # Notices
    # ------------------------------------------------------------------

    def _notify(self, title: str, message: str) -> None:
        self._notices.append(Notice(title=title, message=message))

    def drain_notices(self) -> list[Notice]:
        with self._lock:
            notices, self._notices = self._notices, []
            return notices

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def resume(self) -> None:
        """Apply time-based recovery. Call once per process start / app resume."""
        with self._lock:
            before = self._state.scoring
            self._state.scoring = recover_over_time(before, self.clock())
            if self._state.scoring is not before:
                logger.info(
                    "Recovered over time: fatigue %.1f -> %.1f, recovery %.1f -> %.1f",
                    before.fatigue,
                    self._state.scoring.fatigue,
                    before.recovery,
                    self._state.scoring.recovery,
                )

    def reset(self) -> None:
        """Discard everything, scoring included."""
        with self._lock:
            self._state = AppState()
            logger.info("State reset")
            self._notify("Reset", "App reset complete.")

    def export_state(self) -> str:
        with self._lock:
            return dumps_state(self._state)

    def restore(self, text: str) -> bool:
        """Replace the state from a JSON backup; on failure keep the current state."""
        with self._lock:
            try:
                restored = loads_state(text)
            except InvalidStateError as exc:
                logger.warning("Rejected backup: %s", exc)
                self._notify("Error", "Invalid JSON. Paste a valid backup.")
                return False
            self._state = restored
            self._notify("Restored", "Backup loaded successfully.")
            return True

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self, profile: Profile) -> Program:
        with self._lock:
            program = self.assembler.generate(profile, self._state.scoring)
            self._state.profile = profile
            self._state.program = program
            self._state.today_index = 0
            self._notify(
                "Generated",
                f"Program created: {split_label(program.split)} • {profile.days} days/week",
            )
            return program

    def rebuild(self) -> Program | None:
        """Regenerate with the current scoring, keeping weights and notes by name."""
        with self._lock:
            if self._state.profile is None:
                self._notify("No profile", "Generate a program first.")
                return None
            program = self.assembler.rebuild(
                self._state.program, self._state.profile, self._state.scoring
            )
            self._state.program = program
            if self._state.today_index >= len(program.week):
                self._state.today_index = 0
            self._notify("Rebuilt", "Today's plan refreshed based on readiness.")
            return program

    # ------------------------------------------------------------------
    # Plan edits
    # ------------------------------------------------------------------

    def today(self) -> DayPlan | None:
        with self._lock:
            program = self._state.program
            if program is None or not program.week:
                return None
            return program.week[self._state.today_index]

    def select_day(self, step: int) -> int:
        """Move the current day by ``step``, wrapping around the week."""
        with self._lock:
            program = self._state.program
            if program is None or not program.week:
                return self._state.today_index
            self._state.today_index = (self._state.today_index + step) % len(program.week)
            return self._state.today_index

    def swap(self, day_index: int, exercise_index: int, replacement_name: str) -> bool:
        with self._lock:
            program = self._state.program
            if program is None:
                return False
            swapped = editing.swap_exercise(
                program, day_index, exercise_index, replacement_name, self.assembler.catalog
            )
            if swapped:
                self._notify("Swap", "Exercise replaced and saved.")
            return swapped

    def note(self, day_index: int, exercise_index: int, text: str) -> bool:
        with self._lock:
            program = self._state.program
            if program is None or not editing.update_note(program, day_index, exercise_index, text):
                return False
            self._notify("Saved", "Notes updated.")
            return True

    def set_weight(self, exercise_index: int, weight: str) -> bool:
        with self._lock:
            program = self._state.program
            if program is None:
                return False
            return editing.set_working_weight(
                program, self._state.today_index, exercise_index, weight
            )

    def complete_set(self, exercise_index: int) -> bool:
        return self._adjust_sets(exercise_index, 1)

    def undo_set(self, exercise_index: int) -> bool:
        return self._adjust_sets(exercise_index, -1)

    def _adjust_sets(self, exercise_index: int, step: int) -> bool:
        with self._lock:
            program = self._state.program
            if program is None:
                return False
            return editing.adjust_completed_sets(
                program, self._state.today_index, exercise_index, step
            )

    # ------------------------------------------------------------------
    # Rest timer
    # ------------------------------------------------------------------

    def start_timer(self, seconds: int | None = None) -> int:
        """Start (or resume) the countdown. Without seconds, resume or default to 60."""
        with self._lock:
            timer = self._state.timer
            if seconds is None:
                seconds = timer.seconds if timer.seconds > 0 else DEFAULT_TIMER_SECONDS
            timer.seconds = max(0, seconds)
            timer.running = True
            return timer.seconds

    def start_rest_timer(self, exercise_index: int) -> int | None:
        """Start the countdown from today's exercise rest prescription."""
        with self._lock:
            program = self._state.program
            exercise = (
                program.exercise_at(self._state.today_index, exercise_index)
                if program else None
            )
            if exercise is None:
                return None
            seconds = self.start_timer(exercise.prescription.rest)
            self._notify("Rest Timer", f"{seconds}s started.")
            return seconds

    def stop_timer(self) -> None:
        with self._lock:
            self._state.timer.running = False

    def reset_timer(self) -> None:
        with self._lock:
            self._state.timer.seconds = 0
            self._state.timer.running = False

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def finish_workout(self, rating: int, intensity: str = "normal", notes: str = "") -> HistoryLog | None:
        """Log today's session from the tracked sets, then reset the set counters."""
        with self._lock:
            day = self.today()
            if day is None:
                self._notify("No plan", "Generate a program first.")
                return None
            completed_pct = day.completion
            summary = build_log_summary(day, completed_pct, intensity, rating, notes.strip())
            log = self._record(day, SessionLog(rating, completed_pct, intensity, notes), summary)
            editing.reset_completed_sets(self._state.program, self._state.today_index)
            self._notify("Logged", "Workout saved. Your program will adapt automatically.")
            return log

    def quick_log(self, session: SessionLog) -> HistoryLog | None:
        """Log a session without set tracking; completion comes from the caller."""
        with self._lock:
            day = self.today()
            if day is None:
                self._notify("No plan", "Generate a program first.")
                return None
            summary = build_quick_summary(
                session.completed_pct, session.intensity, session.rating, session.notes.strip()
            )
            log = self._record(day, session, summary)
            self._notify("Saved", "Quick log stored.")
            return log

    def _record(self, day: DayPlan, session: SessionLog, summary: str) -> HistoryLog:
        state = self._state
        now = self.clock()
        program = state.program
        log = HistoryLog(
            id=uuid.uuid4().hex,
            date=now.date().isoformat(),
            day_label=day.label,
            focus=day.focus,
            goal=program.profile.goal,
            mode=program.profile.mode,
            completed_pct=round(session.completed_pct, 3),
            intensity=session.intensity,
            rating=session.rating,
            readiness=compute_readiness(state.scoring),
            summary=summary,
        )
        # State changes only after every new value is computed
        stats = update_streak(state.stats, now.date())
        suggestion = None
        profile = state.profile
        if profile is not None and profile.smart_adapt:
            scoring = update_after_workout(
                state.scoring,
                rating=session.rating,
                completed_pct=session.completed_pct,
                intensity=session.intensity,
                history_count=len(state.history) + 1,
                now=now,
            )
            scoring, suggestion = maybe_suggest_deload(scoring, profile.auto_deload)
        else:
            scoring = touch(state.scoring, now)

        state.history.append(log)
        state.stats = stats
        state.scoring = scoring
        if suggestion is not None:
            logger.info("Deload suggested at week %d", suggestion.week)
            self._notify(suggestion.title, suggestion.message)

        logger.info(
            "Logged %s: %.0f%% complete, rating %d, readiness %d -> %d",
            day.label,
            session.completed_pct * 100,
            session.rating,
            log.readiness,
            compute_readiness(state.scoring),
        )
        return log

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def readiness(self) -> int:
        with self._lock:
            return compute_readiness(self._state.scoring)

    def advice(self) -> str:
        with self._lock:
            return build_advice_text(self._state.scoring, self._state.program is not None)

    def progression_suggestions(self) -> list[tuple[str, str]]:
        """(exercise name, suggestion) for today's exercises.

        Empty when the profile turned auto-progression display off.
        """
        with self._lock:
            day = self.today()
            profile = self._state.profile
            if day is None or (profile is not None and not profile.auto_progression):
                return []
            return [
                (ex.name, suggest_progression(ex.prescription.sets, ex.completed_sets))
                for ex in day.exercises
            ]
