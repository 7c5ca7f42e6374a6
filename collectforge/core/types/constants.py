# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CollectForge Types Constants Module

This module contains the constants used throughout the CollectForge
collection library. Value kinds classify arbitrary Python values for the
equality engine's coercion rules; the comparison results are the only
values a three-way comparator may produce.
"""

# value kinds
T_NULL = 0
T_BOOL = 1
T_INT = 2
T_REAL = 3
T_STRING = 4
T_ARRAY = 5
T_OBJECT = 6
T_COMPARABLE = 7

KIND_NAMES = {
    T_NULL: "null",
    T_BOOL: "bool",
    T_INT: "int",
    T_REAL: "real",
    T_STRING: "string",
    T_ARRAY: "array",
    T_OBJECT: "object",
    T_COMPARABLE: "comparable",
}

# Type grouping constants for fast kind checking
# These frozensets provide O(1) membership testing for common kind groups
NUMERIC_TYPES = frozenset({T_INT, T_REAL})
SCALAR_TYPES = frozenset({T_BOOL, T_INT, T_REAL, T_STRING})
OBJECT_TYPES = frozenset({T_OBJECT, T_COMPARABLE})

# three-way comparison results
COMPARE_LESS = -1
COMPARE_EQUAL = 0
COMPARE_GREATER = 1
COMPARE_RESULTS = frozenset({COMPARE_LESS, COMPARE_EQUAL, COMPARE_GREATER})

# invert() result shapes
INVERT_PREDICATE = "predicate"
INVERT_COMPARATOR = "comparator"
INVERT_KINDS = frozenset({INVERT_PREDICATE, INVERT_COMPARATOR})
