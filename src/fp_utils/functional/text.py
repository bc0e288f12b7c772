"""String, mapping and duration helpers."""
from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from fp_utils.exceptions import InvalidArgumentError

K = TypeVar("K")
V = TypeVar("V")

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY


def count_occurrences(text: str, needle: str) -> int:
    """Count non-overlapping occurrences of ``needle`` in ``text``.

    Raises:
        InvalidArgumentError: If ``needle`` is empty
    """
    if not needle:
        raise InvalidArgumentError("needle", "must not be empty", needle)
    return text.count(needle)


def words(text: str) -> list[str]:
    """Split on single spaces, keeping empty segments."""
    return text.split(" ")


def with_item(mapping: Mapping[K, V], key: K, value: V) -> dict[K, V]:
    """Copy ``mapping`` with ``key`` set to ``value``."""
    return {**mapping, key: value}


def seconds(n: int) -> int:
    return n


def minutes(n: int) -> int:
    return n * SECONDS_PER_MINUTE


def hours(n: int) -> int:
    return n * SECONDS_PER_HOUR


def days(n: int) -> int:
    return n * SECONDS_PER_DAY


def weeks(n: int) -> int:
    return n * SECONDS_PER_WEEK
