"""Shared test fixtures: profiles, scoring states, deterministic random sources, programs."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

import pytest

from forgefit.generator.assembler import ProgramAssembler
from forgefit.models.profile import Profile
from forgefit.models.program import Program
from forgefit.models.scoring_state import ScoringState


class SequenceRandom:
    """Replays a fixed sequence of draws, cycling when exhausted."""

    def __init__(self, values: list[float]) -> None:
        self.values = values
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def rng_factory() -> Callable[..., SequenceRandom]:
    """Factory fixture for deterministic random sources.

    Usage:
        rng = rng_factory(0.0)          # always the first candidate
        rng = rng_factory(0.2, 0.9)     # alternates
    """

    def _make(*values: float) -> SequenceRandom:
        return SequenceRandom(list(values) or [0.0])

    return _make


@pytest.fixture
def first_pick_rng() -> SequenceRandom:
    """Always draws 0.0, so every weighted pick takes the first candidate in catalog order."""
    return SequenceRandom([0.0])


@pytest.fixture
def gym_profile() -> Profile:
    """Intermediate gym lifter, hypertrophy, 4 x 45 min, smart adaptation on."""
    return Profile(
        mode="gym",
        goal="hypertrophy",
        level="intermediate",
        days=4,
        minutes=45,
    )


@pytest.fixture
def home_profile() -> Profile:
    """Beginner training at home, fat loss, 3 x 30 min with a knee note."""
    return Profile(
        mode="home",
        goal="fatloss",
        level="beginner",
        days=3,
        minutes=30,
        limits="bad knee",
    )


@pytest.fixture
def default_scoring() -> ScoringState:
    """Fresh model: fatigue 35, recovery 55, performance 55 -> readiness 57."""
    return ScoringState()


@pytest.fixture
def exhausted_scoring() -> ScoringState:
    """Readiness 0."""
    return ScoringState(fatigue=100.0, recovery=0.0, performance=0.0)


@pytest.fixture
def fresh_scoring() -> ScoringState:
    """Readiness 100."""
    return ScoringState(fatigue=0.0, recovery=100.0, performance=100.0)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 2, 18, 0, 0)


@pytest.fixture
def sample_program(gym_profile: Profile, first_pick_rng: SequenceRandom) -> Program:
    """Deterministic upper/lower week for the gym profile at default readiness."""
    return ProgramAssembler(rng=first_pick_rng).generate(gym_profile, ScoringState())
