"""Exceptions raised by the shot tracker core."""

from __future__ import annotations


class TrackerError(Exception):
    """Base class for tracker errors."""


class InvalidTransitionError(TrackerError):
    """Raised when a capture operation is not valid in the current state."""

    def __init__(self, state: object, operation: str) -> None:
        self.state = state
        self.operation = operation
        super().__init__(f"{operation} is not allowed while in state {state}")


class ReadOnlySessionError(TrackerError):
    """Raised when recording is attempted on a finalized session."""
