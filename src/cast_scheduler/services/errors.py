"""Domain errors raised by the scheduling services."""

from __future__ import annotations


class SchedulerError(RuntimeError):
    """Base class for failures surfaced to callers of the scheduling services."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SchedulerError):
    """Input is malformed or the requested status transition is not allowed."""


class NotFoundError(SchedulerError):
    """A referenced signer or scheduled post does not exist."""


class ConflictError(SchedulerError):
    """A record with the same key already exists."""
