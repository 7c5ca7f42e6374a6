# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CollectForge Types Composite Readonly Module

This module contains ReadonlyMapView, the object returned by
GenericMap.as_readonly(). The view shares the source map's storage: nothing
is copied, and later changes to the source are visible through the view.
The view itself offers no way to mutate the source.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ..contract import GenericMap, ReadonlyMap
from ..primitive import KeyValuePair


class ReadonlyMapView(ReadonlyMap):
    """Read-only window onto another map."""

    __slots__ = ("_source",)

    def __init__(self, source: GenericMap) -> None:
        self._source = source

    def get(self, key: Any) -> Any:
        return self._source.get(key)

    def has(self, key: Any) -> bool:
        return self._source.has(key)

    def items(self) -> Iterator[KeyValuePair]:
        return self._source.items()

    def _derive(self) -> GenericMap:
        # derived maps are ordinary maps of the source's type
        return self._source._derive()

    def __len__(self) -> int:
        return len(self._source)

    def __repr__(self) -> str:
        return f"ReadonlyMapView({self._source!r})"
