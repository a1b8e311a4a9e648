"""Internal callback helpers shared by the result types.

Python has no method overloading, so the runnable/consumer and
supplier/function families are told apart by the callback's signature.
These helpers also hold the opt-in checks on what callbacks return.
"""

from __future__ import annotations

import inspect
import logging
import typing

from railyard._dev_flags import dev_validate_enabled
from railyard.errors import CallbackContractError, require_not_none

logger = logging.getLogger(__name__)

T = typing.TypeVar("T")

#: Marks an omitted optional argument where ``None`` is a legitimate value.
MISSING: typing.Final[typing.Any] = object()

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def takes_argument(func: typing.Callable[..., typing.Any]) -> bool:
    """Return True when *func* must be called with a positional argument.

    A callable with only defaulted (or keyword-only) parameters counts as a
    zero-argument callable. ``*args`` counts as accepting an argument.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins have no introspectable signature
        logger.debug("No signature for %r; passing the payload", func)
        return True

    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty:
            return True
    return False


def call_with_optional_arg(
    func: typing.Callable[..., T] | None, arg: typing.Any, name: str
) -> T:
    """Call *func* with *arg* if it takes one, otherwise with no arguments."""
    func = require_not_none(func, name)
    if takes_argument(func):
        return func(arg)
    return func()


def check_returns(
    result: typing.Any,
    expected: type | tuple[type, ...],
    name: str,
) -> None:
    """Validate a callback result when dev validation is enabled."""
    if not dev_validate_enabled():
        return
    if not isinstance(result, expected):
        raise CallbackContractError(
            f"{name} returned {type(result).__name__}, expected {_describe(expected)}",
            hint="Unset RAILYARD_VALIDATE to disable callback result checks.",
        )


def _describe(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__
