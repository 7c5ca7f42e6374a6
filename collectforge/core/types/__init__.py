# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CollectForge Types Package - Public API

This package provides the unified collection types interface for CollectForge.
All kinds, constants, contracts and collection classes are available through
this single namespace to support the standard import pattern:
`from collectforge.core import types as cf`

**Internal Module Organization:**
- constants.py: value kinds, kind groups and comparison results
- base.py: Comparable capability and the value classifier
- primitive.py: KeyValuePair and ArrayList
- contract.py: GenericCollection, ReadonlySet, ReadonlyMap, GenericMap
- composite/: ArrayMap, WeakMap, ReadonlyMapView, ArraySet

**Usage:**
```python
from collectforge.core import types as cf

m = cf.ArrayMap({0: "a", 1: "b"})
m.remove(0)
m.get(0)        # -> "b"
```
"""

# =============================================================================
# PUBLIC API EXPORTS
# Order matters: contract.py needs primitive.py, composite/ needs contract.py
# =============================================================================

from .constants import *
from .base import Comparable, kind_of, normalize, same_variant
from .primitive import ArrayList, KeyValuePair
from .contract import GenericCollection, GenericMap, ReadonlyMap, ReadonlySet
from .composite import *
