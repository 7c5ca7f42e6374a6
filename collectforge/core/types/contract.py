# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CollectForge Types Contract Module

This module contains the abstract collection contracts shared by every map
and set implementation:

- GenericCollection: sized container with value membership
- ReadonlySet: a collection of unique values
- ReadonlyMap: key lookup plus the query operations (where, map, reduce, ...)
- GenericMap: a ReadonlyMap that can be mutated with put/remove

Implementations only supply storage primitives (get, has, items, put,
remove and a factory for derived maps); every query operation is written
once here on top of items(), which always yields a snapshot so that callers
may mutate the map while consuming a query result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from ...operators import relational as cf_rel
from .. import error as cf_error
from .primitive import ArrayList, KeyValuePair

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


class GenericCollection(ABC, Generic[T]):
    """Sized container that can answer value membership."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def contains(self, value: T, comparer: Callable[[Any, Any], bool] | None = None) -> bool:
        ...

    def is_empty(self) -> bool:
        return len(self) == 0


class ReadonlySet(GenericCollection[T]):
    """A collection holding each value at most once."""

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        ...

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)


class ReadonlyMap(GenericCollection[V], Generic[K, V]):
    """Read access and queries over a key/value store with unique keys."""

    # ------------------------------------------------------------------
    # Storage primitives
    # ------------------------------------------------------------------

    @abstractmethod
    def get(self, key: K) -> V:
        """Return the value for *key*; raise KeyNotFound if it is absent."""

    @abstractmethod
    def has(self, key: Any) -> bool:
        """Return whether *key* is present. Keys of the wrong kind are simply absent."""

    @abstractmethod
    def items(self) -> Iterator[KeyValuePair]:
        """Yield the entries, in map order, from a snapshot taken at call time."""

    @abstractmethod
    def _derive(self) -> GenericMap:
        """Return a new empty map of the type used for derived results."""

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def where(self, predicate: Callable[[V, K], bool]) -> GenericMap[K, V]:
        result = self._derive()
        for key, value in self.items():
            if predicate(value, key):
                result.put(key, value)
        return result

    def where_key(self, predicate: Callable[[K, V], bool]) -> GenericMap[K, V]:
        result = self._derive()
        for key, value in self.items():
            if predicate(key, value):
                result.put(key, value)
        return result

    def map(self, callback: Callable[[V, K], Any]) -> GenericMap[K, Any]:
        result = self._derive()
        for key, value in self.items():
            result.put(key, callback(value, key))
        return result

    def map_keys(self, callback: Callable[[K, V], Any]) -> GenericMap[Any, V]:
        """
        Return a new map whose keys are produced by *callback*.

        A produced key the result map cannot hold raises InvalidKey. When two
        entries produce the same key the later entry wins.
        """
        result = self._derive()
        for key, value in self.items():
            result.put(callback(key, value), value)
        return result

    def reduce(self, callback: Callable[[V, K], T]) -> ArrayList:
        return ArrayList(callback(value, key) for key, value in self.items())

    def first(self, predicate: Callable[[V, K], bool] | None = None) -> V | None:
        return self.first_or_default(None, predicate)

    def first_or_default(self, default: Any, predicate: Callable[[V, K], bool] | None = None) -> Any:
        for key, value in self.items():
            if predicate is None or predicate(value, key):
                return value
        return default

    def first_key(self, predicate: Callable[[K, V], bool] | None = None) -> K | None:
        for key, value in self.items():
            if predicate is None or predicate(key, value):
                return key
        return None

    def any(self, predicate: Callable[[V, K], bool] | None = None) -> bool:
        # a matching None value still counts as a match
        for key, value in self.items():
            if predicate is None or predicate(value, key):
                return True
        return False

    def any_key(self, predicate: Callable[[K, V], bool] | None = None) -> bool:
        for key, value in self.items():
            if predicate is None or predicate(key, value):
                return True
        return False

    def contains(self, value: Any, comparer: Callable[[Any, Any], bool] | None = None) -> bool:
        comparer = comparer or cf_rel.equals
        return any(comparer(item, value) for _, item in self.items())

    def keys(self) -> ArrayList:
        return ArrayList(pair.key for pair in self.items())

    def values(self) -> ArrayList:
        return ArrayList(pair.value for pair in self.items())

    def as_readonly(self) -> ReadonlyMap[K, V]:
        return self

    # ------------------------------------------------------------------
    # Python mapping protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[K]:
        for pair in self.items():
            yield pair.key

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{body}}})"


class GenericMap(ReadonlyMap[K, V]):
    """A ReadonlyMap that can be mutated."""

    @abstractmethod
    def put(self, key: K, value: V) -> bool:
        """Insert or overwrite; return True only if *key* was not present before."""

    @abstractmethod
    def remove(self, key: K) -> bool:
        """Remove *key*; return True only if an entry was removed."""

    def as_readonly(self) -> ReadonlyMap[K, V]:
        # Late import to break circular dependency:
        # - composite/readonly.py subclasses ReadonlyMap from this module
        # - as_readonly() needs the view class to wrap self
        from .composite.readonly import ReadonlyMapView
        return ReadonlyMapView(self)

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.remove(key):
            cf_error.e(cf_error.KEYNOTFOUND, "__delitem__", key)
