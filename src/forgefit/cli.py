"""forgefit command-line host — file-backed state around the SessionController.

Usage:
    forgefit generate --profile profile.json
    forgefit status
    forgefit done 0                 # one more completed set on today's exercise 0
    forgefit log --rating 4 --intensity hard
    forgefit quick-log --rating 3 --completion 0.8
    forgefit swap 0 1 "Dumbbell Row"
    forgefit rebuild
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from forgefit import config
from forgefit.exceptions import InvalidProfileError, InvalidStateError
from forgefit.math.training_stats import (
    average_completion,
    category_distribution,
    sessions_in_last_days,
)
from forgefit.models.app_state import AppState
from forgefit.models.history import SessionLog
from forgefit.scoring.readiness import readiness_tag
from forgefit.serialization.state_json import (
    dumps_state,
    loads_state,
    profile_from_dict,
    program_to_dict,
)
from forgefit.session import SessionController

logger = logging.getLogger(__name__)


def load_state(path: Path) -> AppState:
    """Read the state file; a missing file means a fresh state."""
    if not path.exists():
        logger.info("No state at %s, starting fresh", path)
        return AppState()
    return loads_state(path.read_text(encoding="utf-8"))


def save_state(state: AppState, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_state(state), encoding="utf-8")


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _status(controller: SessionController) -> dict:
    state = controller.state
    today = controller.today()
    ready = controller.readiness()
    clock_today = controller.clock().date()
    return {
        "readiness": ready,
        "tag": readiness_tag(ready),
        "advice": controller.advice(),
        "scoring": {
            "fatigue": state.scoring.fatigue,
            "recovery": state.scoring.recovery,
            "performance": state.scoring.performance,
            "weekCounter": state.scoring.week_counter,
        },
        "today": today.label if today else None,
        "streak": state.stats.streak,
        "workouts": len(state.history),
        "thisWeek": sessions_in_last_days(state.history, clock_today),
        "averageCompletion": round(average_completion(state.history), 3),
        "balance": category_distribution(state.program),
        "progression": [
            {"exercise": name, "suggestion": text}
            for name, text in controller.progression_suggestions()
        ],
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="forgefit", description="Offline workout program maker")
    parser.add_argument("--state", type=Path, default=config.STATE_PATH, help="State JSON file")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a new program from a profile JSON file")
    gen.add_argument("--profile", type=Path, required=True)

    sub.add_parser("rebuild", help="Regenerate with current readiness, keeping weights/notes")
    sub.add_parser("status", help="Readiness, advice and training stats")
    sub.add_parser("show", help="Print the current program")

    log = sub.add_parser("log", help="Finish today's workout from tracked sets")
    log.add_argument("--rating", type=int, choices=range(1, 6), required=True)
    log.add_argument("--intensity", choices=["easy", "normal", "hard"], default="normal")
    log.add_argument("--notes", default="")

    quick = sub.add_parser("quick-log", help="Log a session without set tracking")
    quick.add_argument("--rating", type=int, choices=range(1, 6), required=True)
    quick.add_argument("--intensity", choices=["easy", "normal", "hard"], default="normal")
    quick.add_argument("--completion", type=float, default=1.0)
    quick.add_argument("--notes", default="")

    done = sub.add_parser("done", help="Mark one more set done on today's exercise")
    done.add_argument("exercise", type=int)
    done.add_argument("--undo", action="store_true")

    weight = sub.add_parser("weight", help="Set the working weight on today's exercise")
    weight.add_argument("exercise", type=int)
    weight.add_argument("value")

    swap = sub.add_parser("swap", help="Swap an exercise for one of its candidates")
    swap.add_argument("day", type=int)
    swap.add_argument("exercise", type=int)
    swap.add_argument("replacement")

    note = sub.add_parser("note", help="Attach a note to an exercise")
    note.add_argument("day", type=int)
    note.add_argument("exercise", type=int)
    note.add_argument("text")

    day = sub.add_parser("day", help="Move to the next or previous training day")
    day.add_argument("direction", choices=["next", "prev"])

    restore = sub.add_parser("restore", help="Replace state from a JSON backup")
    restore.add_argument("backup", type=Path)

    sub.add_parser("export", help="Print the full state as JSON")
    sub.add_parser("reset", help="Wipe all data")
    return parser


def run(args: argparse.Namespace, controller: SessionController) -> int:
    """Dispatch one command. Returns the process exit code."""
    cmd = args.command
    if cmd == "generate":
        try:
            profile = profile_from_dict(json.loads(args.profile.read_text(encoding="utf-8")))
        except (OSError, json.JSONDecodeError, InvalidProfileError) as exc:
            logger.error("Cannot use profile %s: %s", args.profile, exc)
            return 2
        _print_json(program_to_dict(controller.generate(profile)))
    elif cmd == "rebuild":
        program = controller.rebuild()
        if program is not None:
            _print_json(program_to_dict(program))
    elif cmd == "show":
        program = controller.state.program
        _print_json(program_to_dict(program) if program else None)
    elif cmd == "status":
        _print_json(_status(controller))
    elif cmd == "log":
        controller.finish_workout(args.rating, args.intensity, args.notes)
    elif cmd == "quick-log":
        completion = max(0.0, min(1.0, args.completion))
        controller.quick_log(SessionLog(args.rating, completion, args.intensity, args.notes))
    elif cmd == "done":
        ok = controller.undo_set(args.exercise) if args.undo else controller.complete_set(args.exercise)
        return 0 if ok else 1
    elif cmd == "weight":
        return 0 if controller.set_weight(args.exercise, args.value) else 1
    elif cmd == "swap":
        return 0 if controller.swap(args.day, args.exercise, args.replacement) else 1
    elif cmd == "note":
        return 0 if controller.note(args.day, args.exercise, args.text) else 1
    elif cmd == "day":
        controller.select_day(1 if args.direction == "next" else -1)
    elif cmd == "restore":
        try:
            text = args.backup.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot read backup %s: %s", args.backup, exc)
            return 2
        return 0 if controller.restore(text) else 1
    elif cmd == "export":
        print(controller.export_state())
    elif cmd == "reset":
        controller.reset()
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        state = load_state(args.state)
    except InvalidStateError as exc:
        # Leave the file untouched so nothing is lost
        logger.error("State file %s is invalid: %s", args.state, exc)
        return 1

    controller = SessionController(state)
    controller.resume()
    code = run(args, controller)
    save_state(controller.state, args.state)

    for notice in controller.drain_notices():
        print(f"{notice.title}: {notice.message}", file=sys.stderr)
    return code


if __name__ == "__main__":
    sys.exit(main())
