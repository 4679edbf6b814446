"""Environment-variable-based configuration."""

from __future__ import annotations

import os
from pathlib import Path

STATE_PATH: Path = Path(
    os.environ.get("FORGEFIT_STATE_PATH", "~/.forgefit/state.json")
).expanduser()
LOG_LEVEL: str = os.environ.get("FORGEFIT_LOG_LEVEL", "INFO").upper()

# Seeds the process-wide exercise-selection RNG; unset means non-deterministic.
_seed = os.environ.get("FORGEFIT_SEED", "")
RANDOM_SEED: int | None = int(_seed) if _seed.strip().lstrip("-").isdigit() else None
