"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: callable doubles replace ad-hoc
lambdas with counters, and the message types exercise runtime casts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Recorder:
    """Argument-taking callable double.

    Records the arguments of every call and returns ``returns``. Its
    ``*args`` signature makes combinators pass the payload.
    """

    returns: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)


@dataclass
class Runnable:
    """Zero-argument callable double (runnable/supplier form)."""

    returns: Any = None
    call_count: int = 0

    def __call__(self) -> Any:
        self.call_count += 1
        return self.returns


@dataclass(frozen=True)
class Message:
    """Domain error payload."""

    text: str = "message"


@dataclass(frozen=True)
class SubMessage(Message):
    """Narrower domain error payload."""

    text: str = "sub-message"


@dataclass(frozen=True)
class Unrelated:
    """Payload unrelated to Message."""


class ExpectedError(Exception):
    """Raised by callbacks that must not run, or by or_else_throw factories."""
