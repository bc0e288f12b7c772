"""Tests for functional helpers."""
from __future__ import annotations

import operator

import pytest

from fp_utils import InvalidArgumentError
from fp_utils.functional import (
    all_match,
    any_match,
    apply,
    cartesian,
    compose,
    compose_right,
    count_occurrences,
    curry,
    curry3,
    days,
    first_optional,
    flip,
    fold,
    fst,
    hours,
    implies,
    map_optional,
    minutes,
    pipe,
    pop,
    repeat,
    seconds,
    snd,
    span,
    take_first,
    take_while,
    weeks,
    with_item,
    words,
    xor,
    zip_with,
)
from tests.helpers import CallCounter


def inc(x: int) -> int:
    return x + 1


def halve(x: int) -> float:
    return x / 2


class TestComposition:
    """Tests for composition and currying."""

    def test_pipe(self) -> None:
        assert pipe(3, inc, str) == "4"
        assert pipe(3) == 3

    def test_apply(self) -> None:
        assert apply(inc, 1) == 2

    def test_compose_left_to_right(self) -> None:
        """Test compose(f, g)(x) == g(f(x))."""
        assert compose(inc, halve)(3) == 2.0

    def test_compose_right_to_left(self) -> None:
        """Test compose_right(f, g)(x) == f(g(x))."""
        assert compose_right(inc, halve)(3) == 2.5

    def test_compose_empty_is_identity(self) -> None:
        assert compose()("x") == "x"

    def test_curry(self) -> None:
        assert curry(operator.sub)(10)(3) == 7

    def test_curry3(self) -> None:
        assert curry3(lambda a, b, c: a * 100 + b * 10 + c)(1)(2)(3) == 123

    def test_flip(self) -> None:
        assert flip(operator.sub)(10, 3) == -7

    def test_tuple_projections(self) -> None:
        assert fst(("a", 1)) == "a"
        assert snd(("a", 1)) == 1


class TestCollections:
    """Tests for collection combinators."""

    def test_all_match(self) -> None:
        assert all_match(lambda x: x > 0, [1, 2])
        assert not all_match(lambda x: x > 0, [1, -2])
        assert all_match(lambda x: x > 0, [])

    def test_any_match(self) -> None:
        assert any_match(lambda x: x > 1, [1, 2])
        assert not any_match(lambda x: x > 1, [])

    def test_all_match_short_circuits(self) -> None:
        pred = CallCounter(lambda x: x > 0)
        assert not all_match(pred, [1, -1, 2, 3])
        assert pred.count == 2

    @pytest.mark.parametrize(
        "items,expected",
        [
            ([1, 2, 3, 1], ([1, 2], [3, 1])),
            ([1, 2], ([1, 2], [])),
            ([5, 1], ([], [5, 1])),
            ([], ([], [])),
        ],
    )
    def test_span(self, items: list[int], expected: tuple[list[int], list[int]]) -> None:
        assert span(lambda x: x < 3, items) == expected

    def test_take_while(self) -> None:
        assert take_while(str.isdigit, ["1", "2", "a", "3"]) == ["1", "2"]

    def test_take_first(self) -> None:
        assert take_first(2, [1, 2, 3]) == [1, 2]
        assert take_first(5, [1, 2]) == [1, 2]
        assert take_first(0, [1, 2]) == []

    def test_take_first_negative(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must not be negative"):
            take_first(-1, [1])

    def test_pop(self) -> None:
        assert pop([1, 2, 3]) == (1, [2, 3])
        assert pop([]) == (None, [])

    def test_map_optional(self) -> None:
        assert map_optional(lambda s: int(s) if s.isdigit() else None, ["1", "x", "2"]) == [1, 2]

    def test_first_optional_stops_at_match(self) -> None:
        f = CallCounter(lambda x: x * 10 if x > 1 else None)
        assert first_optional(f, [1, 2, 3]) == 20
        assert f.count == 2
        assert first_optional(f, []) is None

    def test_zip_with_truncates(self) -> None:
        assert zip_with(operator.add, [1, 2, 3], [10, 20]) == [11, 22]

    def test_cartesian(self) -> None:
        assert cartesian([1, 2], "ab") == [(1, "a"), (1, "b"), (2, "a"), (2, "b")]
        assert cartesian([], [1]) == []

    def test_fold(self) -> None:
        assert fold("", ["a", "b", "c"], operator.add) == "abc"
        assert fold(0, [], operator.add) == 0

    def test_repeat(self) -> None:
        assert repeat([1, 2], 3) == [1, 2, 1, 2, 1, 2]
        assert repeat([1], 0) == []

    def test_repeat_negative(self) -> None:
        with pytest.raises(InvalidArgumentError):
            repeat([1], -2)

    def test_inputs_not_mutated(self) -> None:
        items = [1, 2, 3]
        span(lambda x: x < 2, items)
        pop(items)
        repeat(items, 2)
        assert items == [1, 2, 3]


class TestLogic:
    """Tests for boolean connectives."""

    @pytest.mark.parametrize(
        "a,b,expected",
        [(True, True, True), (True, False, False), (False, True, True), (False, False, True)],
    )
    def test_implies(self, a: bool, b: bool, expected: bool) -> None:
        assert implies(a, b) is expected

    @pytest.mark.parametrize(
        "a,b,expected",
        [(True, True, False), (True, False, True), (False, True, True), (False, False, False)],
    )
    def test_xor(self, a: bool, b: bool, expected: bool) -> None:
        assert xor(a, b) is expected


class TestText:
    """Tests for string, mapping and duration helpers."""

    def test_count_occurrences(self) -> None:
        assert count_occurrences("a,b,,c", ",") == 3
        assert count_occurrences("abc", "x") == 0
        assert count_occurrences("aaaa", "aa") == 2

    def test_count_occurrences_empty_needle(self) -> None:
        with pytest.raises(InvalidArgumentError, match="needle"):
            count_occurrences("abc", "")

    def test_words(self) -> None:
        assert words("hello big world") == ["hello", "big", "world"]
        assert words("a  b") == ["a", "", "b"]

    def test_with_item_copies(self) -> None:
        original = {"a": 1}
        updated = with_item(original, "b", 2)
        assert updated == {"a": 1, "b": 2}
        assert original == {"a": 1}
        assert with_item(original, "a", 5) == {"a": 5}

    def test_durations(self) -> None:
        assert seconds(5) == 5
        assert minutes(2) == 120
        assert hours(1) == 3600
        assert days(1) == 86400
        assert weeks(1) == 604800
