"""Enumerations and rule-table constants for the program generator and scoring engine.

Enum values are the lower-case tokens used in profiles and persisted state.
"""

from enum import Enum


class Category(str, Enum):
    """Movement category of a catalog exercise."""

    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    CORE = "core"


class Environment(str, Enum):
    """Training environment: where an exercise can be done / where the user trains."""

    GYM = "gym"
    HOME = "home"


class Goal(str, Enum):
    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    FATLOSS = "fatloss"
    RECOMP = "recomp"


class Level(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Tone(str, Enum):
    """Training-style modifier that nudges set counts and rest duration."""

    BALANCED = "balanced"
    HIGHVOLUME = "highvolume"
    MINIMAL = "minimal"
    ATHLETIC = "athletic"


class Intensity(str, Enum):
    """Subjective intensity tag attached to a logged session."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


class Split(str, Enum):
    """Known weekly splits. Profiles may carry other values; those fall back to PPL."""

    AUTO = "auto"
    FULLBODY = "fullbody"
    UPPERLOWER = "upperlower"
    PPL = "ppl"
    BRO = "bro"


# ---------------------------------------------------------------------------
# Prescription clamps
# ---------------------------------------------------------------------------
MIN_SETS = 2
MAX_SETS = 6
MIN_REPS = 4
MAX_REPS = 20
MIN_REST_S = 25
MAX_REST_S = 180

# Home-mode rest never drops below this after bodyweight / athletic reductions
HOME_REST_FLOOR_S = 30

# ---------------------------------------------------------------------------
# Adaptive delta thresholds (readiness score)
# ---------------------------------------------------------------------------
LOW_READINESS_THRESHOLD = 42  # Below: -1 set on accessories, -1 rep everywhere
HIGH_READINESS_THRESHOLD = 70  # Above: +1 rep everywhere

# ---------------------------------------------------------------------------
# Scoring model constants
# ---------------------------------------------------------------------------
SCORE_MIN = 0.0
SCORE_MAX = 100.0

DEFAULT_FATIGUE = 35.0
DEFAULT_RECOVERY = 55.0
DEFAULT_PERFORMANCE = 55.0

READINESS_RECOVERY_WEIGHT = 0.45
READINESS_PERFORMANCE_WEIGHT = 0.35
READINESS_FRESHNESS_WEIGHT = 0.20  # Applied to (100 - fatigue)

# Per elapsed whole day without a logged session
FATIGUE_DECAY_PER_DAY = 5
RECOVERY_GAIN_PER_DAY = 9
PERFORMANCE_DRIFT_PER_DAY = 2
PERFORMANCE_BASELINE = 55.0

# A "week" is approximated as four logged sessions
SESSIONS_PER_WEEK_COUNTER = 4

# Deload suggestion
DELOAD_MIN_WEEK = 5
DELOAD_FATIGUE_THRESHOLD = 65
DELOAD_READINESS_THRESHOLD = 45

# Advice ladder thresholds
ADVICE_FRESH_THRESHOLD = 75
ADVICE_SOLID_THRESHOLD = 58
ADVICE_CAUTION_THRESHOLD = 42

# Progression advisor
PROGRESSION_MAINTAIN_THRESHOLD = 0.75
