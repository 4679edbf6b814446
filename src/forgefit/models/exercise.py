"""Catalog exercise — immutable reference data."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Exercise:
    """A single catalog entry.

    ``alternatives`` holds exercise *names*, not references. They are weak
    links resolved against the catalog at lookup time, so an alternative
    may name an exercise the catalog does not contain.
    """

    name: str
    category: str  # Category value: push/pull/legs/core
    muscle: str
    environment: str  # Environment value: gym/home
    alternatives: tuple[str, ...] = field(default_factory=tuple)
