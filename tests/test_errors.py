from __future__ import annotations

import pytest

from railyard.errors import (
    CallbackContractError,
    IllegalArgumentError,
    InvalidStateError,
    NullArgumentError,
    RailyardError,
    require_not_none,
)

pytestmark = pytest.mark.unit


def test_base_error_carries_optional_hint() -> None:
    err = RailyardError("boom", hint="do this")

    assert str(err) == "boom"
    assert err.hint == "do this"


def test_hint_defaults_to_none() -> None:
    assert RailyardError("fail").hint is None


@pytest.mark.parametrize(
    ("error_type", "builtin"),
    [
        (InvalidStateError, RuntimeError),
        (NullArgumentError, TypeError),
        (IllegalArgumentError, ValueError),
        (CallbackContractError, TypeError),
    ],
)
def test_subclass_hierarchy(error_type: type[Exception], builtin: type[Exception]) -> None:
    """Every contract violation is catchable as RailyardError and its builtin kin."""
    err = error_type("fail")

    assert isinstance(err, RailyardError)
    assert isinstance(err, builtin)


def test_require_not_none_returns_present_values() -> None:
    payload = object()

    assert require_not_none(payload, "payload") is payload
    assert require_not_none(0, "zero") == 0
    assert require_not_none("", "empty") == ""


def test_require_not_none_names_the_argument() -> None:
    with pytest.raises(NullArgumentError, match="mapper must not be None"):
        require_not_none(None, "mapper")
