"""Tests for the default equality engine: equals, same, compare and invert."""

import numpy as np
import pytest

from collectforge import Comparable, DefaultEqualityComparer, InvalidArgument
from collectforge.operators.relational import compare, equals, invert, same


class Score(Comparable):
    def __init__(self, value=1):
        self.value = value

    def compare_to(self, other):
        return (self.value > other.value) - (self.value < other.value)


class Rank(Comparable):
    def __init__(self, value=1):
        self.value = value

    def compare_to(self, other):
        return (self.value > other.value) - (self.value < other.value)


class Plain:
    pass


class BrokenScore(Comparable):
    def compare_to(self, other):
        return "greater"


class LoudScore(Comparable):
    def __init__(self, value):
        self.value = value

    def compare_to(self, other):
        return (self.value - other.value) * 10


ONE = Score(1)
TWO = Score(2)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1, 1, True),
        (0, 0, True),
        (1, 0, False),
        (0, 1, False),
        (1, 2, False),
        (1.0, 1.0, True),
        (1.0, 1.1, False),
        (True, True, True),
        (True, False, False),
        (False, False, True),
        ("a", "a", True),
        ("a", "b", False),
        ("a", "A", False),
        ("1", 1, True),
        (True, 1, True),
        (False, 1, False),
        (0, False, True),
        ("0", False, True),
        ([], False, True),
        (None, False, True),
        (None, None, True),
        (None, [], True),
        (ONE, ONE, True),
        (ONE, TWO, False),
        (1, ONE, False),
        (ONE, Plain(), False),
        (Plain(), ONE, False),
    ],
)
def test_equals(a, b, expected):
    assert equals(a, b) is expected
    assert equals(b, a) is expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("1e1", "10", True),
        (" 1", 1, True),
        ("1.0", 1, True),
        ("abc", 0, False),
        (1.5, "1.5", True),
        (None, "", True),
        (None, "0", False),
        (None, 0.0, True),
        ("", False, True),
        ([1, 2], (1, 2), True),
        ([1, 2], {0: "1", 1: 2}, True),
        ([1, 2], [2, 1], False),
        ([1], 1, False),
        ([0], True, True),
        ([ONE], [Score(1)], True),
        ({"0": 1}, [1], True),
        ({"1": "a", "0": "b"}, ["b", "a"], True),
        ({"-1": 1}, {-1: 1}, True),
        ({"01": 1}, [1], False),
        ({"+0": 1}, [1], False),
        ({" 0": 1}, [1], False),
    ],
)
def test_equals_coercion_rules(a, b, expected):
    assert equals(a, b) is expected
    assert equals(b, a) is expected


def test_equals_plain_objects_by_identity():
    obj = Plain()
    assert equals(obj, obj)
    assert not equals(obj, Plain())
    assert not equals(obj, 1)
    assert not equals(obj, None)
    assert not equals(True, obj)


def test_equals_mismatched_comparable_variants():
    assert not equals(Score(1), Rank(1))
    assert not equals(Rank(1), Score(1))


def test_equals_numpy_scalars():
    assert equals(np.int64(1), "1")
    assert equals(np.float32(0.5), 0.5)
    assert equals(np.bool_(True), 1)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1, 1, True),
        (1, 2, False),
        (None, False, False),
        (None, None, True),
        (None, [], False),
        (1.1, 1, False),
        ("1", 1, False),
        (1, 1.0, False),
        (True, 1, False),
        ([1, 2], [1, 2], True),
        ([1, 2], (1, 2), False),
        ([1, "2"], [1, 2], False),
        ({"a": 1, "b": 2}, {"a": 1, "b": 2}, True),
        ({"a": 1, "b": 2}, {"b": 2, "a": 1}, False),
        (ONE, ONE, True),
        (ONE, TWO, False),
        (ONE, Score(1), True),
        (1, ONE, False),
        (ONE, Plain(), False),
        (Plain(), ONE, False),
    ],
)
def test_same(a, b, expected):
    assert same(a, b) is expected
    assert invert(same)(a, b) is (not expected)


def test_same_plain_objects_by_identity():
    obj = Plain()
    assert same(obj, obj)
    assert not same(obj, Plain())


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1, 1, 0),
        (1, 2, -1),
        (2, 1, 1),
        (1.1, 1, 1),
        (1.1, 1.1, 0),
        (1.1, 1.2, -1),
        (Plain(), Plain(), 0),
        (ONE, ONE, 0),
        (ONE, TWO, -1),
        (TWO, ONE, 1),
        (ONE, Plain(), 1),
        (Plain(), ONE, 1),
    ],
)
def test_compare_and_invert(a, b, expected):
    assert compare(a, b) == expected
    assert invert(compare)(a, b) == -expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("a", "b", -1),
        ("b", "a", 1),
        ("10", "9", 1),
        ("10", 9, 1),
        ("abc", 1, 1),
        (None, "a", -1),
        (None, "", 0),
        (False, True, -1),
        (None, 1, -1),
        ([1, 2], [1, 3], -1),
        ([1, 2, 3], [9], 1),
        ([1], 100, 1),
        ("x", [1], -1),
        ({"0": 1}, [2], -1),
        ({"0": 1}, [1], 0),
    ],
)
def test_compare_coercion_rules(a, b, expected):
    assert compare(a, b) == expected


def test_compare_is_antisymmetric():
    values = [0, 1, 2.5, "3", "abc", None, True, [1], [1, 2]]
    for a in values:
        for b in values:
            assert compare(a, b) == -compare(b, a), (a, b)


def test_compare_mismatched_variants_is_greater_both_ways():
    assert compare(Score(1), Rank(1)) == 1
    assert compare(Rank(1), Score(1)) == 1


def test_compare_clamps_comparable_result():
    assert compare(LoudScore(1), LoudScore(5)) == -1
    assert compare(LoudScore(5), LoudScore(1)) == 1


def test_compare_rejects_non_numeric_comparable_result():
    with pytest.raises(InvalidArgument):
        compare(BrokenScore(), BrokenScore())


@pytest.mark.parametrize(
    "a, b",
    [
        (1, ONE),
        (ONE, 1),
        ("1", ONE),
        (ONE, None),
        ([1], ONE),
        (Plain(), True),
        (True, Plain()),
        (Plain(), 1),
    ],
)
def test_invalid_compare(a, b):
    with pytest.raises(InvalidArgument):
        compare(a, b)


def test_invalid_compare_is_a_value_error():
    with pytest.raises(ValueError, match="cannot order"):
        compare(1, ONE)


def test_comparable_reflexive_properties():
    for value in (Score(0), Score(5), Rank(3)):
        assert compare(value, value) == 0
        assert equals(value, value)
        assert same(value, value)


def test_invert_twice_restores_result():
    for fn in (equals, same, compare):
        twice = invert(invert(fn))
        for a, b in ((1, 2), (2, 1), ("1", 1), (None, None)):
            assert twice(a, b) == fn(a, b)


def test_invert_comparables():
    assert compare(Score(1), Score(2)) == -1
    assert invert(compare)(Score(1), Score(2)) == 1


def test_invert_invalid_result_raises_on_call():
    inverted = invert(lambda a, b: "text")

    with pytest.raises(InvalidArgument):
        inverted(1, 2)


def test_invert_rejects_out_of_range_int():
    with pytest.raises(InvalidArgument):
        invert(lambda a, b: 2)(1, 2)


def test_invert_with_kind_checks_shape():
    assert invert(same, kind="predicate")(1, 1) is False
    assert invert(compare, kind="comparator")(1, 2) == 1

    with pytest.raises(InvalidArgument):
        invert(compare, kind="predicate")(1, 2)
    with pytest.raises(InvalidArgument):
        invert(same, kind="comparator")(1, 1)


def test_invert_rejects_bad_arguments_eagerly():
    with pytest.raises(InvalidArgument):
        invert(same, kind="ordering")
    with pytest.raises(InvalidArgument):
        invert("not callable")


def test_invert_keeps_signature_metadata():
    inverted = invert(compare)
    assert inverted.__name__ == "compare"
    assert inverted.__wrapped__ is compare


def test_default_equality_comparer_namespace():
    assert DefaultEqualityComparer.equals(1, "1")
    assert not DefaultEqualityComparer.same(1, "1")
    assert DefaultEqualityComparer.compare(1, 2) == -1
    assert DefaultEqualityComparer.invert(DefaultEqualityComparer.compare)(1, 2) == 1
