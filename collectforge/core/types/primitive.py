# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CollectForge Types Primitive Classes Module

This module contains the small value types that the maps hand back to their
callers: the key/value pair yielded while iterating a map, and the ordered
list returned by keys(), values() and reduce().
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence
from typing import Any, NamedTuple

from ...operators import relational as cf_rel


class KeyValuePair(NamedTuple):
    """A map entry. Unpacks like a ``(key, value)`` tuple."""

    key: Any
    value: Any

    def get_key(self) -> Any:
        return self.key

    def get_value(self) -> Any:
        return self.value


class ArrayList(MutableSequence):
    """Ordered, mutable list of values produced by map queries."""

    __slots__ = ("_items",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ArrayList(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value

    def __delitem__(self, index) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, value)

    def add(self, value: Any) -> bool:
        self._items.append(value)
        return True

    def contains(self, value: Any, comparer: Callable[[Any, Any], bool] | None = None) -> bool:
        comparer = comparer or cf_rel.equals
        return any(comparer(item, value) for item in self._items)

    def to_list(self) -> list:
        return list(self._items)

    def __copy__(self) -> ArrayList:
        return ArrayList(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, ArrayList):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None

    def __str__(self) -> str:
        return f"[{', '.join(repr(item) for item in self._items)}]"

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r})"
