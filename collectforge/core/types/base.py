# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CollectForge Types Base Module

This module contains the Comparable capability and the value classifier
that every equality and ordering decision starts from.

Values are sorted into a small, closed set of kinds (see constants.py).
The classifier never inspects attributes or method names: a value is
Comparable only if its class derives from (or is registered with) the
Comparable abstract base class.
"""

from abc import ABC, abstractmethod
from typing import Any

import numpy

from .constants import (
    T_NULL, T_BOOL, T_INT, T_REAL, T_STRING, T_ARRAY, T_OBJECT, T_COMPARABLE
)

# Python container types treated as the "array" kind
ARRAY_CLASSES = (list, tuple, dict)


class Comparable(ABC):
    """
    Capability for value types that supply their own ordering.

    ``compare_to`` must return -1, 0 or 1. It is only called with another
    instance of the same concrete class; pairing a Comparable with anything
    else is decided by the equality engine.
    """

    __slots__ = ()

    @abstractmethod
    def compare_to(self, other: Any) -> int:
        ...


def normalize(value: Any) -> Any:
    """Unwrap NumPy scalars into the equivalent Python scalar."""
    if isinstance(value, numpy.generic):
        return value.item()
    return value


def kind_of(value: Any) -> int:
    """Return the T_* kind of *value*."""
    value = normalize(value)

    # bool before int - bool is an int subclass
    if value is None:
        return T_NULL
    if isinstance(value, bool):
        return T_BOOL
    if isinstance(value, int):
        return T_INT
    if isinstance(value, float):
        return T_REAL
    if isinstance(value, str):
        return T_STRING
    if isinstance(value, ARRAY_CLASSES):
        return T_ARRAY
    if isinstance(value, Comparable):
        return T_COMPARABLE
    return T_OBJECT


def same_variant(a: Comparable, b: Comparable) -> bool:
    """Two Comparables are of the same variant when their classes match."""
    return type(a) is type(b)
