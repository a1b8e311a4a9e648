"""Exception hierarchy for Railyard.

These are contract violations raised by the library itself. Domain errors
carried by failed outcomes are caller-defined and never appear here.
"""

from __future__ import annotations


class RailyardError(Exception):
    """Base exception for all Railyard contract violations."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidStateError(RailyardError, RuntimeError):
    """An accessor was used on the wrong shape (value of a failure, error of a success)."""


class NullArgumentError(RailyardError, TypeError):
    """A required callback or argument was ``None`` on the branch that needs it."""


class IllegalArgumentError(RailyardError, ValueError):
    """An argument was present but not acceptable (e.g. a failed runtime cast)."""


class CallbackContractError(RailyardError, TypeError):
    """A callback returned the wrong kind of object.

    Only raised when dev validation is enabled (``RAILYARD_VALIDATE=1``).
    """


def require_not_none[T](value: T | None, name: str) -> T:
    """Return *value* or raise ``NullArgumentError`` naming the argument."""
    if value is None:
        raise NullArgumentError(f"{name} must not be None")
    return value
