# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CollectForge Types Composite ArrayMap Module

This module contains the ArrayMap type, an insertion-ordered map whose keys
are restricted to integers and strings.

Integer keys behave like positions in a sequence rather than stable
identifiers: removing an integer key splices the entry out and renumbers the
remaining integer keys 0..n-1 in map order. String keys are never renamed.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from ... import error as cf_error
from ..base import normalize
from ..contract import GenericMap, ReadonlyMap
from ..primitive import KeyValuePair


def _is_key(key: Any) -> bool:
    key = normalize(key)
    # bool is an int subclass but never a valid key
    return (isinstance(key, int) and not isinstance(key, bool)) or isinstance(key, str)


class ArrayMap(GenericMap):
    """Ordered map with integer and string keys."""

    def __init__(self, items: ReadonlyMap | Mapping | list | tuple | None = None) -> None:
        self._items: dict[int | str, Any] = {}

        if items is None:
            return
        if isinstance(items, (ReadonlyMap, Mapping)):
            pairs = items.items()
        elif isinstance(items, (list, tuple)):
            pairs = enumerate(items)
        else:
            cf_error.e(
                cf_error.INVALIDARGUMENT, "ArrayMap",
                f"cannot create ArrayMap from {type(items).__name__}",
            )
        for key, value in pairs:
            self.put(key, value)

    @classmethod
    def from_value(cls, value: Any) -> ArrayMap:
        """
        Build an ArrayMap from *value*.

        An ArrayMap is returned as-is. Other maps (views and WeakMaps included),
        mappings, lists and tuples are copied with their keys.
        Any other iterable is drained: KeyValuePair elements keep their key,
        other elements are keyed by position.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, (ReadonlyMap, Mapping, list, tuple)):
            return cls(value)
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            result = cls()
            for index, element in enumerate(value):
                if isinstance(element, KeyValuePair):
                    result.put(element.key, element.value)
                else:
                    result.put(index, element)
            return result
        cf_error.e(cf_error.INVALIDARGUMENT, "from_value", f"cannot create ArrayMap from {type(value).__name__}")

    @classmethod
    def from_sequences(cls, keys: Iterable[Any], values: Mapping | list | tuple) -> ArrayMap:
        """
        Build an ArrayMap pairing keys[i] with values[i].

        Fails with InvalidArgument at the first key index without a value;
        values without a key are ignored.
        """
        result = cls()
        for index, key in enumerate(keys):
            try:
                value = values[index]
            except (IndexError, KeyError):
                cf_error.e(cf_error.INVALIDARGUMENT, "from_sequences", f"no value for key index {index}")
            result.put(key, value)
        return result

    def _validate_key(self, key: Any, op_name: str) -> int | str:
        key = normalize(key)
        if not _is_key(key):
            cf_error.e(cf_error.INVALIDKEY, op_name, key)
        return key

    def put(self, key: int | str, value: Any) -> bool:
        key = self._validate_key(key, "put")
        existed = key in self._items
        self._items[key] = value
        return not existed

    def get(self, key: int | str) -> Any:
        key = self._validate_key(key, "get")
        try:
            return self._items[key]
        except KeyError:
            cf_error.e(cf_error.KEYNOTFOUND, "get", key)

    def has(self, key: Any) -> bool:
        if not _is_key(key):
            return False
        return key in self._items

    def remove(self, key: int | str) -> bool:
        key = self._validate_key(key, "remove")
        if key not in self._items:
            return False

        del self._items[key]
        if isinstance(key, int):
            self._renumber()
        return True

    def _renumber(self) -> None:
        """Renumber integer keys 0..n-1 in map order; string keys are kept."""
        renumbered = {}
        position = 0
        for key, value in self._items.items():
            if isinstance(key, int):
                renumbered[position] = value
                position += 1
            else:
                renumbered[key] = value
        self._items = renumbered

    def items(self) -> Iterator[KeyValuePair]:
        return iter([KeyValuePair(key, value) for key, value in self._items.items()])

    def _derive(self) -> ArrayMap:
        return ArrayMap()

    def __len__(self) -> int:
        return len(self._items)

    def __copy__(self) -> ArrayMap:
        """Copy for ArrayMap - new backing store, shared values."""
        new_map = ArrayMap.__new__(ArrayMap)
        new_map._items = dict(self._items)
        return new_map

    def to_dict(self) -> dict[int | str, Any]:
        return dict(self._items)
