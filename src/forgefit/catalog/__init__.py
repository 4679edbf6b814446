"""Exercise catalog and eligibility filtering."""

from forgefit.catalog.eligibility import filter_eligible, is_safe
from forgefit.catalog.exercises import (
    CATALOG_BY_NAME,
    EXERCISE_CATALOG,
    find_exercise,
    search_catalog,
)

__all__ = [
    "CATALOG_BY_NAME",
    "EXERCISE_CATALOG",
    "filter_eligible",
    "find_exercise",
    "is_safe",
    "search_catalog",
]
