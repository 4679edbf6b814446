"""Custom exception hierarchy for forgefit."""

from __future__ import annotations


class ForgeFitError(Exception):
    """Base exception for all forgefit errors."""


class InvalidStateError(ForgeFitError):
    """Persisted state is corrupt or does not match the expected schema."""

    def __init__(self, message: str, path: str | None = None) -> None:
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path


class InvalidProfileError(InvalidStateError):
    """A submitted profile has a missing or out-of-range field."""
