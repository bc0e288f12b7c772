"""Result pattern for explicit error handling.

Provides Success and Failure types to replace exception-based control flow.
A chain of ``flat_map`` calls runs each fallible step with the previous
step's output and stops at the first Failure; errors travel as data and are
only ever passed through, relabelled with ``map_error`` or selected by
``sequence``.

Operator sugar mirrors the named methods:

    >>> result >> f      # result.flat_map(f)
    >>> f @ result       # result.map(f)
    >>> f ^ result       # result.tap(f), outcome discarded
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from fp_utils.exceptions import UnwrapError
from fp_utils.shared.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful result."""

    value: T

    @property
    def error(self) -> None:
        """Successes carry no error."""
        return None

    def is_success(self) -> bool:
        """Check if result is success."""
        return True

    def is_failure(self) -> bool:
        """Check if result is failure."""
        return False

    def map(self, f: Callable[[T], U]) -> Success[U]:
        """Apply a total function to the value."""
        return Success(f(self.value))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a fallible step; its result is returned as is."""
        return f(self.value)

    bind = flat_map

    def map_error(self, f: Callable[[Any], F]) -> Success[T]:
        """Successes pass through untouched."""
        return self

    def tap(self, f: Callable[[T], Any]) -> Success[T]:
        """Run ``f`` for its side effect and return this result."""
        f(self.value)
        return self

    def unwrap(self) -> T:
        """Get the value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get the value or default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:
        """Get the value; ``f`` is not called."""
        return self.value

    def __rshift__(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return self.flat_map(f)

    def __rmatmul__(self, f: Callable[[T], U]) -> Success[U]:
        return self.map(f)

    def __rxor__(self, f: Callable[[T], Any]) -> None:
        self.tap(f)


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """Failed result."""

    error: E

    @property
    def value(self) -> None:
        """Failures carry no value."""
        return None

    def is_success(self) -> bool:
        """Check if result is success."""
        return False

    def is_failure(self) -> bool:
        """Check if result is failure."""
        return True

    def map(self, f: Callable[[Any], Any]) -> Failure[E]:
        """Short-circuit: ``f`` is never called."""
        return self

    def flat_map(self, f: Callable[[Any], Any]) -> Failure[E]:
        """Short-circuit: ``f`` is never called."""
        return self

    bind = flat_map

    def map_error(self, f: Callable[[E], F]) -> Failure[F]:
        """Translate the error, e.g. across an abstraction boundary."""
        return Failure(f(self.error))

    def tap(self, f: Callable[[Any], Any]) -> Failure[E]:
        """Short-circuit: ``f`` is never called."""
        return self

    def unwrap(self) -> NoReturn:
        """Raise error when unwrapping failure."""
        raise UnwrapError(self.error)

    def unwrap_or(self, default: T) -> T:
        """Get default value for failure."""
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Compute a fallback value from the error."""
        return f(self.error)

    def __rshift__(self, f: Callable[[Any], Any]) -> Failure[E]:
        return self

    def __rmatmul__(self, f: Callable[[Any], Any]) -> Failure[E]:
        return self

    def __rxor__(self, f: Callable[[Any], Any]) -> None:
        return None


# Type alias
Result = Success[T] | Failure[E]


def ok(value: T) -> Success[T]:
    """Create a Success result.

    Args:
        value: The success value

    Returns:
        Success wrapping the value
    """
    return Success(value)


def err(error: E) -> Failure[E]:
    """Create a Failure result.

    Args:
        error: The error value

    Returns:
        Failure wrapping the error
    """
    return Failure(error)


def attempt(f: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """Call ``f`` and capture a raised exception as a Failure.

    This is the bridge from exception-raising code into Result chains.

    Args:
        f: Callable to invoke
        *args: Positional arguments for ``f``
        **kwargs: Keyword arguments for ``f``

    Returns:
        Success with the return value, or Failure with the exception
    """
    try:
        return Success(f(*args, **kwargs))
    except Exception as e:
        logger.debug(
            "Captured exception as failure",
            function=getattr(f, "__qualname__", repr(f)),
            error=str(e),
        )
        return Failure(e)


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collapse results into a result of a list.

    Scans left to right and returns the first Failure encountered; later
    items are not inspected. An empty input is ``Success([])``.

    Args:
        results: Ordered results

    Returns:
        Success with the unwrapped values in input order, or the first Failure
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Failure):
            return result
        values.append(result.value)
    return Success(values)


def traverse(f: Callable[[T], Result[U, E]], items: Iterable[T]) -> Result[list[U], E]:
    """Map a fallible function over items and sequence the results.

    ``f`` is not called for items after the first Failure.
    """
    return sequence(f(item) for item in items)
