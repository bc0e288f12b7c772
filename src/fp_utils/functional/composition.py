"""Function composition and currying helpers."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


def pipe(value: Any, *funcs: Callable[[Any], Any]) -> Any:
    """Thread a value through functions left to right.

    Example:
        >>> pipe(3, lambda x: x + 1, str)
        '4'
    """
    for f in funcs:
        value = f(value)
    return value


def apply(f: Callable[[A], B], value: A) -> B:
    """Apply ``f`` to ``value``."""
    return f(value)


def compose(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left to right.

    ``compose(f, g)(x)`` evaluates to ``g(f(x))``. Composing zero functions
    gives the identity.
    """

    def composed(x: Any) -> Any:
        return pipe(x, *funcs)

    return composed


def compose_right(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions right to left.

    ``compose_right(f, g)(x)`` evaluates to ``f(g(x))``.
    """
    return compose(*reversed(funcs))


def curry(f: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """Turn a two-argument function into a chain of one-argument functions."""
    return lambda a: lambda b: f(a, b)


def curry3(f: Callable[[A, B, C], D]) -> Callable[[A], Callable[[B], Callable[[C], D]]]:
    """Turn a three-argument function into a chain of one-argument functions."""
    return lambda a: lambda b: lambda c: f(a, b, c)


def flip(f: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """Swap the arguments of a two-argument function."""

    def flipped(b: B, a: A) -> C:
        return f(a, b)

    return flipped


def fst(pair: tuple[A, B]) -> A:
    return pair[0]


def snd(pair: tuple[A, B]) -> B:
    return pair[1]
