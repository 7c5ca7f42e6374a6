# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CollectForge - generic collections with a configurable equality policy.

Typical use:

    from collectforge import ArrayMap, DefaultEqualityComparer

    m = ArrayMap({"x": 5})
    m.put("x", 6)                               # -> False (overwrite)
    DefaultEqualityComparer.equals(1, "1")      # -> True
"""

__version__ = "1.0.0"

from .core.error import CollectionError, InvalidArgument, InvalidKey, KeyNotFound
from .core.types import (
    ArrayList,
    ArrayMap,
    ArraySet,
    Comparable,
    GenericCollection,
    GenericMap,
    KeyValuePair,
    ReadonlyMap,
    ReadonlyMapView,
    ReadonlySet,
    WeakMap,
)
from .operators.relational import DefaultEqualityComparer, compare, equals, invert, same

__all__ = [
    "ArrayList",
    "ArrayMap",
    "ArraySet",
    "CollectionError",
    "Comparable",
    "DefaultEqualityComparer",
    "GenericCollection",
    "GenericMap",
    "InvalidArgument",
    "InvalidKey",
    "KeyNotFound",
    "KeyValuePair",
    "ReadonlyMap",
    "ReadonlyMapView",
    "ReadonlySet",
    "WeakMap",
    "compare",
    "equals",
    "invert",
    "same",
]
