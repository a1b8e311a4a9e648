"""Outcome: the read-only contract shared by ValueResult and VoidResult.

An outcome is either successful or failed, never both and never neither. The
shape is fixed at construction; every combinator returns either the same
instance or a new one.
"""

from __future__ import annotations

import abc
import typing

from railyard._callbacks import MISSING, check_returns, takes_argument
from railyard.errors import IllegalArgumentError, NullArgumentError

if typing.TYPE_CHECKING:
    from collections.abc import Iterator


class Outcome[E](abc.ABC):
    """Result of a computation that either succeeded or failed with an error."""

    __slots__ = ()

    if typing.TYPE_CHECKING:
        # Concrete shapes provide this as a field or a raising property.
        @property
        def error(self) -> E:
            """The held error; raises ``InvalidStateError`` on a success."""
            ...

    @abc.abstractmethod
    def is_successful(self) -> bool:
        """Return True when the outcome was constructed as a success."""

    def has_failed(self) -> bool:
        """Return True when the outcome was constructed as a failure."""
        return not self.is_successful()

    @abc.abstractmethod
    def error_stream(self) -> Iterator[E]:
        """Return a fresh iterator over the error: empty on success, one item on failure.

        Useful for flattening many outcomes into their errors::

            errors = [e for r in results for e in r.error_stream()]
        """


def evaluate_guard(
    condition: typing.Any,
    error: typing.Any,
    value: typing.Any = MISSING,
) -> tuple[bool, typing.Any]:
    """Evaluate an ``ensure()`` condition on a successful outcome.

    Returns ``(passed, error)`` where *error* is what a failed guard should
    carry. *value* is the success payload, or ``MISSING`` for void results,
    which only accept zero-argument callables.
    """
    if condition is None:
        raise NullArgumentError("condition must not be None")

    if isinstance(condition, Outcome):
        if condition.has_failed():
            return False, condition.error
        return True, None

    if callable(condition):
        if value is not MISSING and takes_argument(condition):
            result = condition(value)
        else:
            result = condition()

        if error is MISSING:
            if result is None:
                raise NullArgumentError("ensure() callback must not return None")
            if not isinstance(result, Outcome):
                raise NullArgumentError(
                    f"error must be given with a predicate guard; ensure() "
                    f"callback returned {type(result).__name__}",
                    hint="Pass an error for predicate guards: ensure(predicate, error).",
                )
            if result.has_failed():
                return False, result.error
            return True, None

        check_returns(result, bool, "ensure() predicate")
        return bool(result), error

    if error is MISSING:
        raise NullArgumentError(
            "error must be given with a flag guard",
            hint="Use ensure(flag, error) or pass an Outcome or a callable.",
        )
    return bool(condition), error


def check_cast(payload: typing.Any, target: type | None, kind: str) -> None:
    """Raise ``IllegalArgumentError`` unless *payload* is a *target* instance.

    ``None`` payloads pass for any target.
    """
    if target is None:
        raise NullArgumentError("target must not be None")
    if payload is None or isinstance(payload, target):
        return
    target_name = getattr(target, "__qualname__", repr(target))
    raise IllegalArgumentError(
        f"Can not cast the {kind} to the given type. The given type is not a "
        f"superclass of the type of the {kind}. {kind} type = "
        f"{type(payload).__qualname__!r}, given type = {target_name!r}, "
        f"{kind} = {payload!r}"
    )
