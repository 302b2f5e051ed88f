"""
Result type for GS1 Scanner

A two-variant container holding either a success value or an error value.
Decoding composes through these combinators instead of raising exceptions
for expected failures.

Example:
    >>> success(2).map(lambda v: v * 10)
    Success(value=20)
    >>> failure("boom").map(lambda v: v * 10)
    Failure(error='boom')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    List,
    Optional,
    TypeVar,
    Union,
)


T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
V = TypeVar("V")


class IllegalStateError(RuntimeError):
    """Raised when a result is unwrapped on the wrong side."""


class _ResultOps(Generic[T, E]):
    """Combinators shared by Success and Failure."""

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    # -- transformations -------------------------------------------------

    def map(self, f: Callable[[T], U]) -> "Result[U, E]":
        """Transform the success value, pass a failure through unchanged."""
        if isinstance(self, Success):
            return Success(f(self.value))
        return self  # type: ignore[return-value]

    def map_error(self, f: Callable[[E], F]) -> "Result[T, F]":
        """Transform the error value, pass a success through unchanged."""
        if isinstance(self, Failure):
            return Failure(f(self.error))
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Sequence a dependent operation, short-circuiting on failure."""
        if isinstance(self, Success):
            return f(self.value)
        return self  # type: ignore[return-value]

    chain = flat_map

    def filter(self, predicate: Callable[[T], bool], error: E) -> "Result[T, E]":
        """
        Keep a success only if the predicate holds, else fail with `error`.
        A failure is returned unchanged.
        """
        if isinstance(self, Success) and not predicate(self.value):
            return Failure(error)
        return self  # type: ignore[return-value]

    def recover(self, f: Callable[[E], T]) -> "Result[T, E]":
        """Turn a failure into a success using a fallback value."""
        if isinstance(self, Failure):
            return Success(f(self.error))
        return self  # type: ignore[return-value]

    def recover_with(self, f: Callable[[E], "Result[T, E]"]) -> "Result[T, E]":
        """Turn a failure into whatever result the fallback produces."""
        if isinstance(self, Failure):
            return f(self.error)
        return self  # type: ignore[return-value]

    def combine(
        self,
        other: "Result[U, E]",
        f: Callable[[T, U], V],
        error_mapper: Optional[Callable[[E, E], E]] = None,
    ) -> "Result[V, Any]":
        """
        Merge two results with a binary function.

        If both succeed, `f` is applied to both values. A failure on either
        side is propagated. Without `error_mapper` the errors are collected
        into a list (one or two entries); with it, two errors are reduced to
        one and a single error is passed as-is.
        """
        if isinstance(self, Success) and isinstance(other, Success):
            return Success(f(self.value, other.value))

        errors = [r.error for r in (self, other) if isinstance(r, Failure)]
        if error_mapper is None:
            return Failure(errors)
        if len(errors) == 2:
            return Failure(error_mapper(errors[0], errors[1]))
        return Failure(errors[0])

    # -- accessors -------------------------------------------------------

    def get_or_else(self, default: T) -> T:
        if isinstance(self, Success):
            return self.value
        return default

    def get_or_else_get(self, supplier: Callable[[], T]) -> T:
        if isinstance(self, Success):
            return self.value
        return supplier()

    def or_else(self, other: Union["Result[T, E]", Callable[[], "Result[T, E]"]]) -> "Result[T, E]":
        """Return self when successful, otherwise `other` (called if callable)."""
        if isinstance(self, Success):
            return self  # type: ignore[return-value]
        if callable(other):
            return other()
        return other

    def get_or_raise(self, exc_factory: Callable[[], BaseException]) -> T:
        if isinstance(self, Success):
            return self.value
        raise exc_factory()

    def unwrap(self) -> T:
        """Return the success value; raises IllegalStateError on a failure."""
        return self.get_or_raise(lambda: IllegalStateError("Not successful"))

    def unwrap_error(self) -> E:
        """Return the error value; raises IllegalStateError on a success."""
        if isinstance(self, Failure):
            return self.error
        raise IllegalStateError("No error")

    # -- side effects ----------------------------------------------------

    def if_success(self, f: Callable[[T], Any]) -> None:
        if isinstance(self, Success):
            f(self.value)

    def if_failure(self, f: Callable[[E], Any]) -> None:
        if isinstance(self, Failure):
            f(self.error)

    def if_success_or_else(self, f: Callable[[T], Any], g: Callable[[], Any]) -> None:
        if isinstance(self, Success):
            f(self.value)
        else:
            g()


@dataclass(frozen=True)
class Success(_ResultOps[T, E]):
    value: T


@dataclass(frozen=True)
class Failure(_ResultOps[T, E]):
    error: E


Result = Union[Success[T, E], Failure[T, E]]


def success(value: T) -> "Result[T, Any]":
    return Success(value)


def failure(error: E) -> "Result[Any, E]":
    return Failure(error)


def of_nullable(value: Optional[T], error: Any = "Object is None") -> "Result[T, Any]":
    """Success for a non-None value, Failure(error) otherwise."""
    if value is None:
        return Failure(error)
    return Success(value)


def sequence(results: Iterable["Result[T, E]"]) -> "Result[List[T], List[E]]":
    """
    Turn a sequence of results into one result.

    Returns Success(list of values) when every result succeeded, otherwise
    Failure(list of every error, in order).
    """
    values: List[T] = []
    errors: List[E] = []
    for result in results:
        if isinstance(result, Success):
            values.append(result.value)
        else:
            errors.append(result.error)
    if errors:
        return Failure(errors)
    return Success(values)


def sequence_with_error_mapper(
    results: Iterable["Result[T, E]"],
    error_mapper: Callable[[E, E], E],
) -> "Result[List[T], E]":
    """Like `sequence`, but reduces all collected errors into one."""
    combined = sequence(results)
    if isinstance(combined, Failure):
        errors = combined.error
        reduced = errors[0]
        for error in errors[1:]:
            reduced = error_mapper(reduced, error)
        return Failure(reduced)
    return combined  # type: ignore[return-value]


def sequence_or(results: Iterable["Result[T, E]"], error: E) -> "Result[List[T], E]":
    """Like `sequence`, but any failure is reported as the constant `error`."""
    return sequence_with_error_mapper(results, lambda _a, _b: error).map_error(lambda _e: error)


def failable(producer: Callable[[], Optional[T]], error: E) -> "Result[T, E]":
    """Run `producer`, mapping an exception or a None return to Failure(error)."""
    try:
        value = producer()
    except Exception:
        return Failure(error)
    return of_nullable(value, error)
