"""ValueResult: an outcome carrying a value on success or an error on failure.

Combinators never mutate the receiver. On the branch they do not act on they
return the receiver (or an equal failure) without calling any callback.

Example:
    total = (
        ValueResult.from_nullable(order, "no order")
        .ensure(lambda o: o.items, "empty order")
        .map(lambda o: sum(i.price for i in o.items))
        .or_else(0)
    )
"""

from __future__ import annotations

import abc
from collections.abc import Iterable
import dataclasses
import itertools
import logging
import typing

from railyard._callbacks import MISSING, call_with_optional_arg, check_returns
from railyard.errors import (
    IllegalArgumentError,
    InvalidStateError,
    NullArgumentError,
    require_not_none,
)
from railyard.outcome import Outcome, check_cast, evaluate_guard
from railyard.void_result import VoidResult

if typing.TYPE_CHECKING:
    from collections.abc import Callable, Iterator

logger = logging.getLogger(__name__)


class ValueResult[V, E](Outcome[E]):
    """Holds either a value of type ``V`` or an error of type ``E``.

    Construct with :meth:`ok`, :meth:`fail`, :meth:`from_nullable` or
    :meth:`from_optional`; the shapes are :class:`ValueSuccess` and
    :class:`ValueFailure`. ``None`` is a legitimate value and a legitimate
    error: which one is meaningful depends only on the shape.
    """

    __slots__ = ()

    if typing.TYPE_CHECKING:

        @property
        def value(self) -> V:
            """The held value; raises ``InvalidStateError`` on a failure."""
            ...

    # --- Construction ---

    @staticmethod
    def ok[T, F](value: T) -> ValueResult[T, F]:
        """Return a successful ValueResult holding *value* (``None`` allowed)."""
        return ValueSuccess(value)

    @staticmethod
    def fail[T, F](error: F) -> ValueResult[T, F]:
        """Return a failed ValueResult holding *error* (``None`` allowed)."""
        return ValueFailure(error)

    @staticmethod
    def from_optional[T, F](optional: Iterable[T], error: F) -> ValueResult[T, F]:
        """Succeed with the single element of *optional*, else fail with *error*.

        *optional* is any iterable holding at most one element, such as the
        iterator returned by :meth:`stream`, so that
        ``from_optional(result.stream(), error)`` rebuilds a successful
        *result*. Strings and bytes are rejected rather than read as
        characters. For the ``V | None`` returned by :meth:`to_optional`, use
        :meth:`from_nullable`.

        Raises:
            NullArgumentError: *optional* is ``None``.
            IllegalArgumentError: *optional* is not an iterable, is a string
                or bytes, or holds more than one element.
        """
        optional = require_not_none(optional, "optional")
        if isinstance(optional, str | bytes | bytearray) or not isinstance(
            optional, Iterable
        ):
            raise IllegalArgumentError(
                f"optional must be an iterable of at most one element, "
                f"got {type(optional).__name__}",
                hint="Use ValueResult.from_nullable() for a plain value or None.",
            )
        items = list(itertools.islice(optional, 2))
        if len(items) > 1:
            raise IllegalArgumentError(
                "optional must hold at most one element",
                hint="Use ValueResult.sequence() to combine many results.",
            )
        return ValueResult.ok(items[0]) if items else ValueResult.fail(error)

    @staticmethod
    def from_nullable[T, F](value: T | None, error: F) -> ValueResult[T, F]:
        """Succeed with *value* unless it is ``None``, else fail with *error*."""
        return ValueResult.fail(error) if value is None else ValueResult.ok(value)

    @staticmethod
    def up_cast[T, F](result: ValueResult[typing.Any, typing.Any]) -> ValueResult[T, F]:
        """Widen the value and error types for static typing.

        There is no runtime effect: *result* is returned as is.
        """
        return result

    @staticmethod
    def sequence[T, F](
        results: Iterable[ValueResult[T, F]],
    ) -> ValueResult[tuple[T, ...], tuple[F, ...]]:
        """Reduce many ValueResults into one.

        Returns ``ok`` with a tuple of every value (possibly empty) when no
        input failed, otherwise ``fail`` with a tuple of every error. Input
        order is preserved within each tuple.

        >>> ValueResult.sequence([ValueResult.ok(1), ValueResult.ok(2)])
        ValueSuccess(value=(1, 2))
        >>> ValueResult.sequence([ValueResult.fail("err1"), ValueResult.ok(2), ValueResult.fail("err2")])
        ValueFailure(error=('err1', 'err2'))
        """
        results = require_not_none(results, "results")
        values: list[T] = []
        errors: list[F] = []
        for result in results:
            if require_not_none(result, "result").is_successful():
                values.append(result.value)
            else:
                errors.append(result.error)
        logger.debug(
            "ValueResult.sequence collected %d value(s), %d error(s)",
            len(values),
            len(errors),
        )
        if errors:
            return ValueResult.fail(tuple(errors))
        return ValueResult.ok(tuple(values))

    # --- Casting ---

    @abc.abstractmethod
    def cast_value[W](self, target: type[W]) -> ValueResult[W, E]:
        """Narrow the value type after an ``isinstance`` check.

        Raises ``IllegalArgumentError`` when successful with a value that is
        not a *target* instance. Failures always pass.
        """

    @abc.abstractmethod
    def cast_error[F](self, target: type[F]) -> ValueResult[V, F]:
        """Narrow the error type after an ``isinstance`` check.

        Raises ``IllegalArgumentError`` when failed with an error that is not
        a *target* instance. Successes always pass.
        """

    # --- Access ---

    @abc.abstractmethod
    def stream(self) -> Iterator[V]:
        """Return a fresh iterator over the value: one item on success, empty on failure."""

    @abc.abstractmethod
    def or_else(self, other: V) -> V:
        """Return the value when successful, otherwise *other*."""

    @abc.abstractmethod
    def or_else_get(self, function: Callable[[E], V]) -> V:
        """Return the value when successful, otherwise ``function(error)``."""

    @abc.abstractmethod
    def or_else_throw(self, exception_factory: Callable[[], BaseException]) -> V:
        """Return the value when successful, otherwise raise ``exception_factory()``.

        An exception class works as the factory::

            user = find_user(name).or_else_throw(LookupError)
        """

    @abc.abstractmethod
    def fold[T](self, success: Callable[[V], T], failure: Callable[[E], T]) -> T:
        """Reduce to one value: ``success(value)`` or ``failure(error)``."""

    @abc.abstractmethod
    def to_optional(self) -> V | None:
        """Return the value when successful, otherwise ``None``.

        ``from_nullable(result.to_optional(), error)`` rebuilds a successful
        result whose value is not ``None``.
        """

    @abc.abstractmethod
    def to_void_result(self) -> VoidResult[E]:
        """Drop the value, keeping success or the error."""

    # --- Hooks ---

    @abc.abstractmethod
    def on_success(
        self, action: Callable[[], object] | Callable[[V], object]
    ) -> ValueResult[V, E]:
        """Run *action* (with or without the value) when successful; returns ``self``."""

    @abc.abstractmethod
    def on_failure(
        self, action: Callable[[], object] | Callable[[E], object]
    ) -> ValueResult[V, E]:
        """Run *action* (with or without the error) when failed; returns ``self``."""

    @abc.abstractmethod
    def on_both(
        self,
        success: Callable[[], object] | Callable[[V], object],
        failure: Callable[[], object] | Callable[[E], object],
    ) -> ValueResult[V, E]:
        """Run the callback for the active branch; returns ``self``."""

    # --- Guards and transformations ---

    @typing.overload
    def ensure(self, condition: Outcome[typing.Any], /) -> ValueResult[V, E]: ...

    @typing.overload
    def ensure(
        self,
        condition: Callable[[], Outcome[typing.Any]] | Callable[[V], Outcome[typing.Any]],
        /,
    ) -> ValueResult[V, E]: ...

    @typing.overload
    def ensure(
        self,
        condition: bool | Callable[[], bool] | Callable[[V], bool],
        error: E,
        /,
    ) -> ValueResult[V, E]: ...

    @abc.abstractmethod
    def ensure(
        self, condition: typing.Any, error: typing.Any = MISSING, /
    ) -> ValueResult[V, E]:
        """Fail with a guard's error when the guard does not hold.

        Accepted guards:

        - ``ensure(flag, error)``: fails with *error* when *flag* is falsy.
        - ``ensure(supplier, error)``: calls ``supplier()`` for the flag.
        - ``ensure(predicate, error)``: calls ``predicate(value)`` for the flag.
        - ``ensure(outcome)``: fails with ``outcome.error`` when it failed.
        - ``ensure(supplier)``: calls ``supplier()`` for the outcome.
        - ``ensure(function)``: calls ``function(value)`` for the outcome.

        A failed ValueResult returns itself and evaluates nothing.
        """

    @abc.abstractmethod
    def take[W](
        self,
        other: ValueResult[W, E]
        | Callable[[], ValueResult[W, E]]
        | Callable[[V], ValueResult[W, E]],
    ) -> ValueResult[W, E]:
        """Continue with another result when successful.

        *other* is returned verbatim, or called (with the value if it takes an
        argument) to produce the result. A failure carries its error forward
        without evaluating *other*.
        """

    @abc.abstractmethod
    def map[W](self, mapper: Callable[[V], W]) -> ValueResult[W, E]:
        """Return ``ok(mapper(value))`` when successful."""

    @abc.abstractmethod
    def map_error[F](self, mapper: Callable[[E], F]) -> ValueResult[V, F]:
        """Return ``fail(mapper(error))`` when failed."""

    @abc.abstractmethod
    def flat_map[W](
        self, function: Callable[[V], ValueResult[W, E]]
    ) -> ValueResult[W, E]:
        """Return ``function(value)`` when successful; it must not return ``None``."""

    @abc.abstractmethod
    def combine[W, X](
        self, function: Callable[[V, W], X], other: ValueResult[W, E]
    ) -> ValueResult[X, E]:
        """Join two values with *function*.

        Fails with this result's error first, then with *other*'s error.
        """


@dataclasses.dataclass(frozen=True, slots=True)
class ValueSuccess[V, E](ValueResult[V, E]):
    """Successful shape of ValueResult."""

    value: V

    def is_successful(self) -> bool:
        return True

    @property
    def error(self) -> E:
        raise InvalidStateError("Successful ValueResult has no error")

    def error_stream(self) -> Iterator[E]:
        return iter(())

    def stream(self) -> Iterator[V]:
        yield self.value

    def cast_value[W](self, target: type[W]) -> ValueResult[W, E]:
        check_cast(self.value, target, "value")
        return typing.cast("ValueResult[W, E]", self)

    def cast_error[F](self, target: type[F]) -> ValueResult[V, F]:
        return typing.cast("ValueResult[V, F]", self)

    def on_success(
        self, action: Callable[[], object] | Callable[[V], object]
    ) -> ValueResult[V, E]:
        call_with_optional_arg(action, self.value, "action")
        return self

    def on_failure(
        self, action: Callable[[], object] | Callable[[E], object]
    ) -> ValueResult[V, E]:
        return self

    def on_both(
        self,
        success: Callable[[], object] | Callable[[V], object],
        failure: Callable[[], object] | Callable[[E], object],
    ) -> ValueResult[V, E]:
        call_with_optional_arg(success, self.value, "success")
        return self

    def ensure(
        self, condition: typing.Any, error: typing.Any = MISSING, /
    ) -> ValueResult[V, E]:
        passed, guard_error = evaluate_guard(condition, error, self.value)
        return self if passed else ValueResult.fail(guard_error)

    def take[W](
        self,
        other: ValueResult[W, E]
        | Callable[[], ValueResult[W, E]]
        | Callable[[V], ValueResult[W, E]],
    ) -> ValueResult[W, E]:
        other = require_not_none(other, "other")
        if isinstance(other, ValueResult):
            return other
        if not callable(other):
            raise IllegalArgumentError(
                f"take() expects a ValueResult or a callable, got {type(other).__name__}"
            )
        result = call_with_optional_arg(other, self.value, "other")
        if result is None:
            raise NullArgumentError("take() callback must not return None")
        check_returns(result, ValueResult, "take() callback")
        return result

    def map[W](self, mapper: Callable[[V], W]) -> ValueResult[W, E]:
        mapper = require_not_none(mapper, "mapper")
        return ValueResult.ok(mapper(self.value))

    def map_error[F](self, mapper: Callable[[E], F]) -> ValueResult[V, F]:
        return ValueResult.ok(self.value)

    def flat_map[W](
        self, function: Callable[[V], ValueResult[W, E]]
    ) -> ValueResult[W, E]:
        function = require_not_none(function, "function")
        result = function(self.value)
        if result is None:
            raise NullArgumentError("flat_map() function must not return None")
        check_returns(result, ValueResult, "flat_map() function")
        return result

    def combine[W, X](
        self, function: Callable[[V, W], X], other: ValueResult[W, E]
    ) -> ValueResult[X, E]:
        function = require_not_none(function, "function")
        other = require_not_none(other, "other")
        if other.has_failed():
            return ValueResult.fail(other.error)
        return ValueResult.ok(function(self.value, other.value))

    def or_else(self, other: V) -> V:
        return self.value

    def or_else_get(self, function: Callable[[E], V]) -> V:
        return self.value

    def or_else_throw(self, exception_factory: Callable[[], BaseException]) -> V:
        return self.value

    def fold[T](self, success: Callable[[V], T], failure: Callable[[E], T]) -> T:
        return require_not_none(success, "success")(self.value)

    def to_optional(self) -> V | None:
        return self.value

    def to_void_result(self) -> VoidResult[E]:
        return VoidResult.ok()


@dataclasses.dataclass(frozen=True, slots=True)
class ValueFailure[V, E](ValueResult[V, E]):
    """Failed shape of ValueResult."""

    error: E

    def is_successful(self) -> bool:
        return False

    @property
    def value(self) -> V:
        raise InvalidStateError("Failed ValueResult has no value")

    def error_stream(self) -> Iterator[E]:
        yield self.error

    def stream(self) -> Iterator[V]:
        return iter(())

    def cast_value[W](self, target: type[W]) -> ValueResult[W, E]:
        return typing.cast("ValueResult[W, E]", self)

    def cast_error[F](self, target: type[F]) -> ValueResult[V, F]:
        check_cast(self.error, target, "error")
        return typing.cast("ValueResult[V, F]", self)

    def on_success(
        self, action: Callable[[], object] | Callable[[V], object]
    ) -> ValueResult[V, E]:
        return self

    def on_failure(
        self, action: Callable[[], object] | Callable[[E], object]
    ) -> ValueResult[V, E]:
        call_with_optional_arg(action, self.error, "action")
        return self

    def on_both(
        self,
        success: Callable[[], object] | Callable[[V], object],
        failure: Callable[[], object] | Callable[[E], object],
    ) -> ValueResult[V, E]:
        call_with_optional_arg(failure, self.error, "failure")
        return self

    def ensure(
        self, condition: typing.Any, error: typing.Any = MISSING, /
    ) -> ValueResult[V, E]:
        return self

    def take[W](
        self,
        other: ValueResult[W, E]
        | Callable[[], ValueResult[W, E]]
        | Callable[[V], ValueResult[W, E]],
    ) -> ValueResult[W, E]:
        return ValueResult.fail(self.error)

    def map[W](self, mapper: Callable[[V], W]) -> ValueResult[W, E]:
        return ValueResult.fail(self.error)

    def map_error[F](self, mapper: Callable[[E], F]) -> ValueResult[V, F]:
        mapper = require_not_none(mapper, "mapper")
        return ValueResult.fail(mapper(self.error))

    def flat_map[W](
        self, function: Callable[[V], ValueResult[W, E]]
    ) -> ValueResult[W, E]:
        return ValueResult.fail(self.error)

    def combine[W, X](
        self, function: Callable[[V, W], X], other: ValueResult[W, E]
    ) -> ValueResult[X, E]:
        return ValueResult.fail(self.error)

    def or_else(self, other: V) -> V:
        return other

    def or_else_get(self, function: Callable[[E], V]) -> V:
        return require_not_none(function, "function")(self.error)

    def or_else_throw(self, exception_factory: Callable[[], BaseException]) -> V:
        exception_factory = require_not_none(exception_factory, "exception_factory")
        exc = exception_factory()
        logger.debug(
            "or_else_throw raising %s for error %r", type(exc).__name__, self.error
        )
        raise exc

    def fold[T](self, success: Callable[[V], T], failure: Callable[[E], T]) -> T:
        return require_not_none(failure, "failure")(self.error)

    def to_optional(self) -> V | None:
        return None

    def to_void_result(self) -> VoidResult[E]:
        return VoidResult.fail(self.error)
