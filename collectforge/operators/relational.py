# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import functools
import re
from collections.abc import Callable
from typing import Any

from ..core import error as cf_error
from ..core import types as cf

# PHP-style numeric string: optional surrounding whitespace, sign, digits,
# optional fraction and exponent
_NUMERIC_RE = re.compile(r"^[ \t\n\r\v\f]*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?[ \t\n\r\v\f]*$")
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
_ARRAY_INT_KEY_RE = re.compile(r"^(0|-?[1-9][0-9]*)\Z")


def _classify(value: Any) -> tuple[Any, int]:
    value = cf.normalize(value)
    return value, cf.kind_of(value)


def _is_numeric(s: str) -> bool:
    return _NUMERIC_RE.match(s) is not None


def _to_number(s: str) -> int | float:
    s = s.strip()
    if _INTEGER_RE.match(s):
        return int(s)
    return float(s)


def _number_string(n: int | float) -> str:
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


def _truthy(value: Any) -> bool:
    # "0" is the one non-empty falsy string
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def _cmp(x: Any, y: Any) -> int:
    return (x > y) - (x < y)


def _array_key(key: Any) -> Any:
    # decimal integer strings without sign or leading zeros name integer keys
    if isinstance(key, str) and _ARRAY_INT_KEY_RE.match(key):
        return int(key)
    return key


def _entries(array: list | tuple | dict) -> dict:
    if isinstance(array, dict):
        return {_array_key(key): value for key, value in array.items()}
    return dict(enumerate(array))


# =============================================================================
# LOOSE RULES
# Neither operand is Comparable when these are reached
# =============================================================================

def _loose_equals(a: Any, ka: int, b: Any, kb: int) -> bool:
    if ka == cf.T_OBJECT or kb == cf.T_OBJECT:
        return a is b

    if ka == cf.T_BOOL or kb == cf.T_BOOL:
        return _truthy(a) == _truthy(b)

    if ka == cf.T_NULL or kb == cf.T_NULL:
        if ka == kb:
            return True
        other, other_kind = (b, kb) if ka == cf.T_NULL else (a, ka)
        if other_kind == cf.T_STRING:
            return other == ""
        return not _truthy(other)

    if ka == cf.T_ARRAY or kb == cf.T_ARRAY:
        if ka != kb:
            return False
        ea, eb = _entries(a), _entries(b)
        if len(ea) != len(eb):
            return False
        return all(k in eb and equals(v, eb[k]) for k, v in ea.items())

    if ka in cf.NUMERIC_TYPES and kb in cf.NUMERIC_TYPES:
        return a == b

    if ka == cf.T_STRING and kb == cf.T_STRING:
        if _is_numeric(a) and _is_numeric(b):
            return _to_number(a) == _to_number(b)
        return a == b

    # number against string
    n, s = (a, b) if ka in cf.NUMERIC_TYPES else (b, a)
    if _is_numeric(s):
        return n == _to_number(s)
    return _number_string(n) == s


def _loose_compare(a: Any, ka: int, b: Any, kb: int) -> int:
    if ka == cf.T_NULL and kb == cf.T_STRING:
        return _cmp("", b)
    if kb == cf.T_NULL and ka == cf.T_STRING:
        return _cmp(a, "")

    if ka in (cf.T_BOOL, cf.T_NULL) or kb in (cf.T_BOOL, cf.T_NULL):
        return _cmp(_truthy(a), _truthy(b))

    if ka == cf.T_ARRAY or kb == cf.T_ARRAY:
        if ka != kb:
            # arrays order after every scalar
            return cf.COMPARE_GREATER if ka == cf.T_ARRAY else cf.COMPARE_LESS
        ea, eb = _entries(a), _entries(b)
        if len(ea) != len(eb):
            return _cmp(len(ea), len(eb))
        for k, v in ea.items():
            if k not in eb:
                return cf.COMPARE_GREATER
            result = compare(v, eb[k])
            if result != cf.COMPARE_EQUAL:
                return result
        return cf.COMPARE_EQUAL

    if ka in cf.NUMERIC_TYPES and kb in cf.NUMERIC_TYPES:
        return _cmp(a, b)

    if ka == cf.T_STRING and kb == cf.T_STRING:
        if _is_numeric(a) and _is_numeric(b):
            return _cmp(_to_number(a), _to_number(b))
        return _cmp(a, b)

    # number against string
    if ka in cf.NUMERIC_TYPES:
        return _cmp(a, _to_number(b)) if _is_numeric(b) else _cmp(_number_string(a), b)
    return _cmp(_to_number(a), b) if _is_numeric(a) else _cmp(a, _number_string(b))


def _compare_to(a: cf.Comparable, b: cf.Comparable, op_name: str) -> int:
    result = cf.normalize(a.compare_to(b))
    if isinstance(result, bool) or not isinstance(result, (int, float)) or result != result:
        cf_error.e(
            cf_error.INVALIDARGUMENT, op_name,
            f"{type(a).__name__}.compare_to returned {result!r}, expected -1, 0 or 1",
        )
    return _cmp(result, 0)


# =============================================================================
# PUBLIC OPERATIONS
# =============================================================================

def equals(a: Any, b: Any) -> bool:
    """
    a b **equals** bool


    returns true if the operands are loosely equal. Two Comparables of the same
    class are equal when **compare_to** reports 0. A Comparable is never equal to
    a value of any other kind or class. Distinct plain objects are never equal;
    an object is only equal to itself.

    All other values are compared after coercion: numbers and numeric strings
    compare by mathematical value, booleans compare by truthiness against any
    scalar or array (``""``, ``"0"``, ``0``, ``0.0``, ``None`` and empty arrays are
    falsy), ``None`` equals ``""``, ``0``, ``False``, empty arrays and itself.
    Arrays (lists, tuples, dicts) are equal when they hold the same keys with
    loosely equal values. A list element's key is its position, and a dict key
    such as ``"0"`` or ``"-3"`` (a decimal integer without leading zeros) names
    the same key as the integer it spells.

    **Examples**
        equals(1, "1")          -> True
        equals(True, 1)         -> True
        equals(False, 1)        -> False
        equals("0", False)      -> True
        equals([], False)       -> True
        equals(None, [])        -> True
        equals("a", "A")        -> False

    **Errors**:     **invalidargument** if **compare_to** returns a non-number
    **See Also**:   **same**, **compare**
    """
    a, ka = _classify(a)
    b, kb = _classify(b)

    if ka == cf.T_COMPARABLE and kb == cf.T_COMPARABLE:
        if cf.same_variant(a, b):
            return _compare_to(a, b, "equals") == cf.COMPARE_EQUAL
        return False
    if ka == cf.T_COMPARABLE or kb == cf.T_COMPARABLE:
        return a is b

    return _loose_equals(a, ka, b, kb)


def same(a: Any, b: Any) -> bool:
    """
    a b **same** bool


    returns true if the operands are strictly equal: of the same kind and the same
    value, with no coercion. Objects must be the very same instance. Arrays must be
    of the same Python type with strictly equal elements in the same order.

    Comparables of the same class are the exception: they opt out of the identity
    rule and are the same when **compare_to** reports 0.

    **Examples**
        same(None, None)        -> True
        same(None, False)       -> False
        same(1.1, 1)            -> False
        same("1", 1)            -> False

    **Errors**:     **invalidargument** if **compare_to** returns a non-number
    **See Also**:   **equals**, **compare**
    """
    a, ka = _classify(a)
    b, kb = _classify(b)

    if ka == cf.T_COMPARABLE and kb == cf.T_COMPARABLE and cf.same_variant(a, b):
        return _compare_to(a, b, "same") == cf.COMPARE_EQUAL

    if ka != kb:
        return False
    if ka in cf.OBJECT_TYPES:
        return a is b
    if ka == cf.T_ARRAY:
        if type(a) is not type(b) or len(a) != len(b):
            return False
        if isinstance(a, dict):
            return all(
                same(k1, k2) and same(v1, v2)
                for (k1, v1), (k2, v2) in zip(a.items(), b.items())
            )
        return all(same(x, y) for x, y in zip(a, b))
    return a == b


def compare(a: Any, b: Any) -> int:
    """
    a b **compare** int


    returns -1, 0 or 1 as the first operand orders before, with or after the
    second. Comparables of the same class are ordered by **compare_to**. A
    Comparable paired with a plain object or with a Comparable of another class
    always compares as 1, whichever side it is on. Two plain objects compare as 0.

    Other values are ordered using the same coercion as **equals**: numbers and
    numeric strings by value, other strings lexically, booleans and ``None`` by
    truthiness (false before true), arrays by size and then element by element.
    An array orders after any scalar.

    **Examples**
        compare(1, 2)           -> -1
        compare(1.1, 1)         -> 1
        compare(object(), object()) -> 0

    **Errors**:     **invalidargument** when a Comparable or a plain object is
                    ordered against a scalar, ``None`` or an array
    **See Also**:   **equals**, **same**, **invert**
    """
    a, ka = _classify(a)
    b, kb = _classify(b)

    if ka == cf.T_COMPARABLE and kb == cf.T_COMPARABLE:
        if cf.same_variant(a, b):
            return _compare_to(a, b, "compare")
        return cf.COMPARE_GREATER

    if ka == cf.T_COMPARABLE or kb == cf.T_COMPARABLE:
        other_kind = kb if ka == cf.T_COMPARABLE else ka
        if other_kind == cf.T_OBJECT:
            return cf.COMPARE_GREATER
        cf_error.e(
            cf_error.INVALIDARGUMENT, "compare",
            f"cannot order a comparable against a value of kind {cf.KIND_NAMES[other_kind]}",
        )

    if ka == cf.T_OBJECT or kb == cf.T_OBJECT:
        if ka == kb:
            return cf.COMPARE_EQUAL
        other_kind = kb if ka == cf.T_OBJECT else ka
        cf_error.e(
            cf_error.INVALIDARGUMENT, "compare",
            f"cannot order an object against a value of kind {cf.KIND_NAMES[other_kind]}",
        )

    return _loose_compare(a, ka, b, kb)


def invert(fn: Callable[..., Any], kind: str | None = None) -> Callable[..., Any]:
    """
    fn **invert** fn'


    returns a callable taking the same arguments as *fn* that negates its result:
    a boolean is logically negated, a three-way result (-1, 0, 1) is arithmetically
    negated. Inverting twice gives back the original results.

    Without *kind* the shape of the result is checked on every call. Passing
    ``kind="predicate"`` or ``kind="comparator"`` pins the expected shape.

    **Examples**
        invert(same)(1, 1)      -> False
        invert(compare)(1, 2)   -> 1

    **Errors**:     **invalidargument** if *fn* is not callable or *kind* is unknown
                    (raised here), or if *fn* returns anything else than the
                    expected shape (raised when the inverted callable is called)
    **See Also**:   **compare**, **same**
    """
    if kind is not None and kind not in cf.INVERT_KINDS:
        cf_error.e(cf_error.INVALIDARGUMENT, "invert", f"unknown result kind {kind!r}")
    if not callable(fn):
        cf_error.e(cf_error.INVALIDARGUMENT, "invert", f"{fn!r} is not callable")

    @functools.wraps(fn)
    def inverted(*args, **kwargs):
        result = cf.normalize(fn(*args, **kwargs))
        if isinstance(result, bool):
            if kind != cf.INVERT_COMPARATOR:
                return not result
        elif isinstance(result, int) and result in cf.COMPARE_RESULTS:
            if kind != cf.INVERT_PREDICATE:
                return -result
        expected = {
            cf.INVERT_PREDICATE: "a bool",
            cf.INVERT_COMPARATOR: "-1, 0 or 1",
        }.get(kind, "a bool or -1, 0 or 1")
        cf_error.e(
            cf_error.INVALIDARGUMENT, "invert",
            f"{getattr(fn, '__name__', fn)!s} returned {result!r}, expected {expected}",
        )

    return inverted


class DefaultEqualityComparer:
    """Namespace bundling the equality engine's operations."""

    equals = staticmethod(equals)
    same = staticmethod(same)
    compare = staticmethod(compare)
    invert = staticmethod(invert)
