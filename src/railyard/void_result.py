"""VoidResult: an outcome with no success payload.

Used for computations that either complete or fail with an error, e.g.
validations and side-effecting steps. Mirrors ``ValueResult``'s guard, hook
and fold vocabulary without the value-carrying operations.

Example:
    result = (
        VoidResult.ok()
        .ensure(user.is_active, "inactive")
        .ensure(lambda: check_quota(user))
        .on_failure(lambda err: logger.info("rejected: %s", err))
    )
"""

from __future__ import annotations

import abc
import dataclasses
import logging
import typing

from railyard._callbacks import MISSING, call_with_optional_arg
from railyard.errors import InvalidStateError, require_not_none
from railyard.outcome import Outcome, check_cast, evaluate_guard

if typing.TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

logger = logging.getLogger(__name__)


class VoidResult[E](Outcome[E]):
    """Success or failure of a computation that produces no value.

    Construct with :meth:`ok` or :meth:`fail`; the shapes are
    :class:`VoidSuccess` and :class:`VoidFailure`.
    """

    __slots__ = ()

    @staticmethod
    def ok() -> VoidResult[typing.Any]:
        """Return the canonical successful VoidResult."""
        return _SUCCESS

    @staticmethod
    def fail[F](error: F) -> VoidResult[F]:
        """Return a failed VoidResult carrying *error* (``None`` allowed)."""
        return VoidFailure(error)

    @staticmethod
    def up_cast[F](result: VoidResult[typing.Any]) -> VoidResult[F]:
        """Widen the error type for static typing; returns *result* unchanged."""
        return result

    @staticmethod
    def sequence[F](results: Iterable[Outcome[F]]) -> VoidResult[tuple[F, ...]]:
        """Reduce many outcomes into one.

        Successful when every input succeeded; otherwise failed with a tuple of
        all errors in input order. Success values of ValueResult inputs are
        discarded.

        >>> VoidResult.sequence([VoidResult.fail("err1"), VoidResult.ok(), VoidResult.fail("err2")])
        VoidFailure(error=('err1', 'err2'))
        """
        results = require_not_none(results, "results")
        errors = tuple(
            error
            for result in results
            for error in require_not_none(result, "result").error_stream()
        )
        logger.debug("VoidResult.sequence collected %d error(s)", len(errors))
        return VoidResult.fail(errors) if errors else VoidResult.ok()

    @typing.overload
    def ensure(self, condition: Outcome[typing.Any], /) -> VoidResult[E]: ...

    @typing.overload
    def ensure(self, condition: Callable[[], Outcome[typing.Any]], /) -> VoidResult[E]: ...

    @typing.overload
    def ensure(
        self, condition: bool | Callable[[], bool], error: E, /
    ) -> VoidResult[E]: ...

    @abc.abstractmethod
    def ensure(
        self, condition: typing.Any, error: typing.Any = MISSING, /
    ) -> VoidResult[E]:
        """Fail with a guard's error when the guard does not hold.

        Accepted guards:

        - ``ensure(flag, error)``: fails with *error* when *flag* is falsy.
        - ``ensure(supplier, error)``: calls ``supplier()`` for the flag.
        - ``ensure(outcome)``: fails with ``outcome.error`` when it failed.
        - ``ensure(supplier)``: calls ``supplier()`` for the outcome.

        A failed VoidResult returns itself and evaluates nothing.
        """

    @abc.abstractmethod
    def map_error[F](self, mapper: Callable[[E], F]) -> VoidResult[F]:
        """Replace the error with ``mapper(error)``; successes pass through."""

    @abc.abstractmethod
    def on_success(self, action: Callable[[], object]) -> VoidResult[E]:
        """Run *action* when successful; returns ``self``."""

    @abc.abstractmethod
    def on_failure(
        self, action: Callable[[], object] | Callable[[E], object]
    ) -> VoidResult[E]:
        """Run *action* (with or without the error) when failed; returns ``self``."""

    @abc.abstractmethod
    def on_both(
        self,
        success: Callable[[], object],
        failure: Callable[[], object] | Callable[[E], object],
    ) -> VoidResult[E]:
        """Run the callback for the active branch; returns ``self``."""

    @abc.abstractmethod
    def fold[T](self, success: Callable[[], T], failure: Callable[[E], T]) -> T:
        """Reduce to one value: ``success()`` or ``failure(error)``."""

    @abc.abstractmethod
    def cast_error[F](self, target: type[F]) -> VoidResult[F]:
        """Narrow the error type after an ``isinstance`` check.

        Raises ``IllegalArgumentError`` when failed with an error that is not a
        *target* instance. Successes always pass.
        """


@dataclasses.dataclass(frozen=True, slots=True)
class VoidSuccess[E](VoidResult[E]):
    """Successful shape of VoidResult. Holds nothing; all instances are equal."""

    def is_successful(self) -> bool:
        return True

    @property
    def error(self) -> E:
        raise InvalidStateError("Successful VoidResult has no error")

    def error_stream(self) -> Iterator[E]:
        return iter(())

    def ensure(
        self, condition: typing.Any, error: typing.Any = MISSING, /
    ) -> VoidResult[E]:
        passed, guard_error = evaluate_guard(condition, error)
        return self if passed else VoidResult.fail(guard_error)

    def map_error[F](self, mapper: Callable[[E], F]) -> VoidResult[F]:
        return VoidResult.ok()

    def on_success(self, action: Callable[[], object]) -> VoidResult[E]:
        require_not_none(action, "action")()
        return self

    def on_failure(
        self, action: Callable[[], object] | Callable[[E], object]
    ) -> VoidResult[E]:
        return self

    def on_both(
        self,
        success: Callable[[], object],
        failure: Callable[[], object] | Callable[[E], object],
    ) -> VoidResult[E]:
        require_not_none(success, "success")()
        return self

    def fold[T](self, success: Callable[[], T], failure: Callable[[E], T]) -> T:
        return require_not_none(success, "success")()

    def cast_error[F](self, target: type[F]) -> VoidResult[F]:
        return typing.cast("VoidResult[F]", self)


@dataclasses.dataclass(frozen=True, slots=True)
class VoidFailure[E](VoidResult[E]):
    """Failed shape of VoidResult."""

    error: E

    def is_successful(self) -> bool:
        return False

    def error_stream(self) -> Iterator[E]:
        yield self.error

    def ensure(
        self, condition: typing.Any, error: typing.Any = MISSING, /
    ) -> VoidResult[E]:
        return self

    def map_error[F](self, mapper: Callable[[E], F]) -> VoidResult[F]:
        mapper = require_not_none(mapper, "mapper")
        return VoidResult.fail(mapper(self.error))

    def on_success(self, action: Callable[[], object]) -> VoidResult[E]:
        return self

    def on_failure(
        self, action: Callable[[], object] | Callable[[E], object]
    ) -> VoidResult[E]:
        call_with_optional_arg(action, self.error, "action")
        return self

    def on_both(
        self,
        success: Callable[[], object],
        failure: Callable[[], object] | Callable[[E], object],
    ) -> VoidResult[E]:
        call_with_optional_arg(failure, self.error, "failure")
        return self

    def fold[T](self, success: Callable[[], T], failure: Callable[[E], T]) -> T:
        return require_not_none(failure, "failure")(self.error)

    def cast_error[F](self, target: type[F]) -> VoidResult[F]:
        check_cast(self.error, target, "error")
        return typing.cast("VoidResult[F]", self)


_SUCCESS: VoidSuccess[typing.Any] = VoidSuccess()
