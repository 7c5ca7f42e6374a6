# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CollectForge Types Composite Sub-Package

This sub-package contains the concrete collection types, each in its own
module, behind a single public interface.

**Module Organization:**
- array_map.py: ArrayMap - ordered map with integer/string keys
- weak_map.py: WeakMap - identity-keyed map with weakly held keys
- readonly.py: ReadonlyMapView - read-only view sharing a map's storage
- array_set.py: ArraySet - ordered set with comparer-defined uniqueness

**Public Interface:**
All classes are re-exported so that `from collectforge.core import types as cf`
exposes them as `cf.ArrayMap`, `cf.WeakMap`, and so on.
"""

from .array_map import ArrayMap
from .weak_map import WeakMap
from .readonly import ReadonlyMapView
from .array_set import ArraySet

__all__ = [
    'ArrayMap',
    'WeakMap',
    'ReadonlyMapView',
    'ArraySet',
]
