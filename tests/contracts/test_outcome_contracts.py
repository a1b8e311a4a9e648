"""Architectural contract tests for the result types.

These pin invariants every shape must keep: fixed shape, immutability, value
semantics and the public import surface. If a test here fails, fix the type,
not the assertion.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging

import pytest

import railyard
from railyard import (
    Outcome,
    ValueFailure,
    ValueResult,
    ValueSuccess,
    VoidFailure,
    VoidResult,
    VoidSuccess,
)

pytestmark = pytest.mark.contract

SHAPES = [ValueSuccess, ValueFailure, VoidSuccess, VoidFailure]

SAMPLES = [
    ValueResult.ok("value"),
    ValueResult.fail("error"),
    VoidResult.ok(),
    VoidResult.fail("error"),
]


@pytest.mark.parametrize("shape", SHAPES)
def test_shapes_are_frozen_slotted_dataclasses(shape) -> None:
    params = shape.__dataclass_params__

    assert params.frozen is True
    assert "__slots__" in shape.__dict__
    assert issubclass(shape, Outcome)


@pytest.mark.parametrize("sample", SAMPLES, ids=lambda s: type(s).__name__)
def test_instances_reject_new_attributes(sample) -> None:
    with pytest.raises((AttributeError, TypeError)):
        sample.extra = 1  # type: ignore[attr-defined]


@pytest.mark.parametrize("sample", SAMPLES, ids=lambda s: type(s).__name__)
def test_instances_reject_field_updates(sample) -> None:
    for field in dataclasses.fields(sample):
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(sample, field.name, None)


@pytest.mark.parametrize("base", [Outcome, ValueResult, VoidResult])
def test_bases_are_abstract(base) -> None:
    assert inspect.isabstract(base)
    with pytest.raises(TypeError):
        base()


def test_shapes_are_distinct_per_type() -> None:
    """Equal payloads in different shapes never compare equal."""
    values = [
        ValueResult.ok(None),
        ValueResult.fail(None),
        VoidResult.ok(),
        VoidResult.fail(None),
    ]

    for i, left in enumerate(values):
        for j, right in enumerate(values):
            assert (left == right) is (i == j)


@pytest.mark.parametrize("sample", SAMPLES, ids=lambda s: type(s).__name__)
def test_results_are_usable_as_keys(sample) -> None:
    assert {sample: "x"}[type(sample)(*dataclasses.astuple(sample))] == "x"


def test_failed_combinators_return_self_or_an_equal_failure() -> None:
    failure = ValueResult.fail("error")

    assert failure.on_success(print) is failure
    assert failure.ensure(False, "other") is failure
    for derived in (
        failure.map(str),
        failure.flat_map(ValueResult.ok),
        failure.take(ValueResult.ok(1)),
        failure.combine(max, ValueResult.ok(1)),
    ):
        assert derived == failure


def test_successful_combinators_do_not_mutate_the_receiver() -> None:
    success = ValueResult.ok(1)

    success.map(lambda v: v + 1)
    success.ensure(False, "error")
    success.flat_map(lambda v: ValueResult.fail("x"))
    success.map_error(str)

    assert success == ValueResult.ok(1)


def test_public_surface() -> None:
    expected = {
        "CallbackContractError",
        "IllegalArgumentError",
        "InvalidStateError",
        "NullArgumentError",
        "Outcome",
        "RailyardError",
        "ValueFailure",
        "ValueResult",
        "ValueSuccess",
        "VoidFailure",
        "VoidResult",
        "VoidSuccess",
    }

    assert expected <= set(railyard.__all__)
    for name in railyard.__all__:
        assert hasattr(railyard, name)


def test_library_logger_has_a_null_handler() -> None:
    handlers = logging.getLogger("railyard").handlers

    assert any(isinstance(h, logging.NullHandler) for h in handlers)
