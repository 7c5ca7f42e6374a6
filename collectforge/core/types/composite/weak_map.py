# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CollectForge Types Composite WeakMap Module

This module contains the WeakMap type, a map keyed by object identity that
does not keep its keys alive.

Each key is held through a weakref.ref whose callback drops the entry once
the key is reclaimed, so an unreachable key disappears from the map without
an explicit remove(). Entries are indexed by id(key); the stored reference is
dereferenced on every lookup so a recycled id never resolves to the wrong
entry. Keys are matched by identity: custom __eq__/__hash__ are ignored and
unhashable objects are valid keys.

Reclamation may happen between any two calls. Lookups therefore resolve the
key in a single step, and iteration first resolves every live key into a
snapshot, skipping keys that are already gone.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from ... import error as cf_error
from ..contract import GenericMap
from ..primitive import KeyValuePair

logger = logging.getLogger(__name__)


class WeakMap(GenericMap):
    """Identity-keyed map holding weak references to its keys."""

    def __init__(self, keys: Iterable[Any] = (), values: Mapping | list | tuple = ()) -> None:
        # {id(key): (weakref to key, value)} - insertion ordered
        self._entries: dict[int, tuple[weakref.ref, Any]] = {}

        for index, key in enumerate(keys):
            try:
                value = values[index]
            except (IndexError, KeyError):
                cf_error.e(cf_error.INVALIDARGUMENT, "WeakMap", f"no value for key index {index}")
            self.put(key, value)

    def _validate_key(self, key: Any, op_name: str) -> None:
        try:
            weakref.ref(key)
        except TypeError:
            cf_error.e(cf_error.INVALIDKEY, op_name, key)

    def _make_ref(self, key: Any) -> weakref.ref:
        # The callback holds the map weakly; keys must not keep it alive
        map_ref = weakref.ref(self)
        key_id = id(key)

        def _reclaimed(ref: weakref.ref) -> None:
            owner = map_ref()
            if owner is None:
                return
            entry = owner._entries.get(key_id)
            if entry is not None and entry[0] is ref:
                del owner._entries[key_id]
                logger.debug("WeakMap key %#x reclaimed, %d entries left", key_id, len(owner._entries))

        return weakref.ref(key, _reclaimed)

    def _lookup(self, key: Any) -> tuple[weakref.ref, Any] | None:
        entry = self._entries.get(id(key))
        if entry is None or entry[0]() is not key:
            return None
        return entry

    def put(self, key: Any, value: Any) -> bool:
        self._validate_key(key, "put")
        entry = self._lookup(key)
        if entry is not None:
            self._entries[id(key)] = (entry[0], value)
            return False
        self._entries[id(key)] = (self._make_ref(key), value)
        return True

    def get(self, key: Any) -> Any:
        self._validate_key(key, "get")
        entry = self._lookup(key)
        if entry is None:
            cf_error.e(cf_error.KEYNOTFOUND, "get", key)
        return entry[1]

    def has(self, key: Any) -> bool:
        return self._lookup(key) is not None

    def remove(self, key: Any) -> bool:
        self._validate_key(key, "remove")
        if self._lookup(key) is None:
            return False
        del self._entries[id(key)]
        return True

    def items(self) -> Iterator[KeyValuePair]:
        pairs = []
        for ref, value in list(self._entries.values()):
            key = ref()
            if key is not None:
                pairs.append(KeyValuePair(key, value))
        return iter(pairs)

    def _derive(self) -> WeakMap:
        return WeakMap()

    def __len__(self) -> int:
        return sum(1 for ref, _ in list(self._entries.values()) if ref() is not None)

    def __copy__(self) -> WeakMap:
        """Copy for WeakMap - new reference table over the same live keys."""
        new_map = WeakMap()
        for key, value in self.items():
            new_map.put(key, value)
        return new_map
