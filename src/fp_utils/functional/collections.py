"""Collection combinators.

Every helper accepts any iterable and returns fresh lists; inputs are never
mutated.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import reduce
from itertools import islice, product
from itertools import takewhile as _takewhile
from typing import TypeVar

from fp_utils.exceptions import InvalidArgumentError

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
Acc = TypeVar("Acc")


def all_match(pred: Callable[[T], bool], items: Iterable[T]) -> bool:
    """Check that every item satisfies ``pred`` (True for empty input)."""
    return all(pred(item) for item in items)


def any_match(pred: Callable[[T], bool], items: Iterable[T]) -> bool:
    """Check that at least one item satisfies ``pred``."""
    return any(pred(item) for item in items)


def span(pred: Callable[[T], bool], items: Iterable[T]) -> tuple[list[T], list[T]]:
    """Split into the longest prefix satisfying ``pred`` and the rest.

    Example:
        >>> span(lambda x: x < 3, [1, 2, 3, 1])
        ([1, 2], [3, 1])
    """
    values = list(items)
    for index, item in enumerate(values):
        if not pred(item):
            return values[:index], values[index:]
    return values, []


def take_while(pred: Callable[[T], bool], items: Iterable[T]) -> list[T]:
    """Get the longest prefix satisfying ``pred``."""
    return list(_takewhile(pred, items))


def take_first(n: int, items: Iterable[T]) -> list[T]:
    """Get the first ``n`` items, or all of them if there are fewer.

    Raises:
        InvalidArgumentError: If ``n`` is negative
    """
    if n < 0:
        raise InvalidArgumentError("n", "must not be negative", n)
    return list(islice(items, n))


def pop(items: Iterable[T]) -> tuple[T | None, list[T]]:
    """Split off the head; the head is None for empty input."""
    values = list(items)
    if not values:
        return None, []
    return values[0], values[1:]


def map_optional(f: Callable[[T], U | None], items: Iterable[T]) -> list[U]:
    """Map ``f`` over items, dropping None results."""
    return [mapped for mapped in (f(item) for item in items) if mapped is not None]


def first_optional(f: Callable[[T], U | None], items: Iterable[T]) -> U | None:
    """Get the first non-None ``f(item)``; ``f`` is not called past it."""
    for item in items:
        mapped = f(item)
        if mapped is not None:
            return mapped
    return None


def zip_with(f: Callable[[T, U], V], xs: Iterable[T], ys: Iterable[U]) -> list[V]:
    """Combine items pairwise; the longer input is truncated."""
    return [f(x, y) for x, y in zip(xs, ys)]


def cartesian(xs: Iterable[T], ys: Iterable[U]) -> list[tuple[T, U]]:
    """Get every ``(x, y)`` pair, ``xs`` varying slowest."""
    return list(product(xs, ys))


def fold(initial: Acc, items: Iterable[T], reducer: Callable[[Acc, T], Acc]) -> Acc:
    """Left fold of ``items`` starting from ``initial``."""
    return reduce(reducer, items, initial)


def repeat(items: Iterable[T], times: int) -> list[T]:
    """Concatenate ``items`` with itself ``times`` times.

    Raises:
        InvalidArgumentError: If ``times`` is negative
    """
    if times < 0:
        raise InvalidArgumentError("times", "must not be negative", times)
    return list(items) * times
