"""Program generation: split selection, exercise selection, prescription, assembly."""

from forgefit.generator.assembler import ProgramAssembler, adaptive_delta, carry_over
from forgefit.generator.editing import swap_candidates, swap_exercise
from forgefit.generator.exercise_selector import base_count, pick_exercises
from forgefit.generator.prescription import is_compound, prescribe
from forgefit.generator.split_selector import build_week_template, choose_split

__all__ = [
    "ProgramAssembler",
    "adaptive_delta",
    "base_count",
    "build_week_template",
    "carry_over",
    "choose_split",
    "is_compound",
    "pick_exercises",
    "prescribe",
    "swap_candidates",
    "swap_exercise",
]
