"""Shared test helpers."""
from __future__ import annotations

from typing import Any, Callable


class CallCounter:
    """Callable stub recording every invocation."""

    def __init__(self, f: Callable[..., Any] = lambda x: x) -> None:
        self.f = f
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.f(*args)

    @property
    def count(self) -> int:
        return len(self.calls)
