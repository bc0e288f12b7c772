"""Functional helpers.

Composition, currying, collection combinators and small extensions on
booleans, strings, mappings and durations.
"""
from fp_utils.functional.collections import (
    all_match,
    any_match,
    cartesian,
    first_optional,
    fold,
    map_optional,
    pop,
    repeat,
    span,
    take_first,
    take_while,
    zip_with,
)
from fp_utils.functional.composition import (
    apply,
    compose,
    compose_right,
    curry,
    curry3,
    flip,
    fst,
    pipe,
    snd,
)
from fp_utils.functional.logic import implies, xor
from fp_utils.functional.text import (
    count_occurrences,
    days,
    hours,
    minutes,
    seconds,
    weeks,
    with_item,
    words,
)

__all__ = [
    # Composition
    "apply",
    "compose",
    "compose_right",
    "curry",
    "curry3",
    "flip",
    "fst",
    "pipe",
    "snd",
    # Collections
    "all_match",
    "any_match",
    "cartesian",
    "first_optional",
    "fold",
    "map_optional",
    "pop",
    "repeat",
    "span",
    "take_first",
    "take_while",
    "zip_with",
    # Logic
    "implies",
    "xor",
    # Text, mappings, durations
    "count_occurrences",
    "days",
    "hours",
    "minutes",
    "seconds",
    "weeks",
    "with_item",
    "words",
]
