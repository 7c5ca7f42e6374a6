# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CollectForge Types Composite ArraySet Module

This module contains the ArraySet type, an insertion-ordered set whose
notion of "already present" comes from a comparer instead of __hash__/__eq__.
With the default comparer (loose equality) 1 and "1" are the same element;
pass DefaultEqualityComparer.same for strict membership.

Membership is a linear scan, so unhashable values are fine.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ....operators import relational as cf_rel
from ..contract import ReadonlySet


class ArraySet(ReadonlySet):
    """Ordered set with comparer-defined uniqueness."""

    def __init__(
        self,
        values: Iterable[Any] = (),
        comparer: Callable[[Any, Any], bool] | None = None,
    ) -> None:
        self._items: list[Any] = []
        self.comparer = comparer or cf_rel.equals
        for value in values:
            self.add(value)

    def _index(self, value: Any, comparer: Callable[[Any, Any], bool]) -> int:
        for index, item in enumerate(self._items):
            if comparer(item, value):
                return index
        return -1

    def contains(self, value: Any, comparer: Callable[[Any, Any], bool] | None = None) -> bool:
        return self._index(value, comparer or self.comparer) >= 0

    def add(self, value: Any) -> bool:
        """Add *value* unless an equal element exists; return whether it was added."""
        if self._index(value, self.comparer) >= 0:
            return False
        self._items.append(value)
        return True

    def remove(self, value: Any) -> bool:
        index = self._index(value, self.comparer)
        if index < 0:
            return False
        del self._items[index]
        return True

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __copy__(self) -> ArraySet:
        return ArraySet(self._items, self.comparer)

    def __repr__(self) -> str:
        return f"ArraySet({self._items!r})"
