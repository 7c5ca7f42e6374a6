# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import logging
from typing import Any, NoReturn

logger = logging.getLogger(__name__)

# error types
INVALIDARGUMENT = 0
INVALIDKEY = 1
KEYNOTFOUND = 2

error_names = (
    "invalidargument",
    "invalidkey",
    "keynotfound",
)


class CollectionError(Exception):
    """Base class for every error raised by CollectForge."""

    code: int = -1

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


class InvalidArgument(CollectionError, ValueError):
    """A comparer, combinator or constructor received unusable input."""

    code = INVALIDARGUMENT


class InvalidKey(CollectionError, TypeError):
    """A key is of a kind the map does not accept."""

    code = INVALIDKEY

    def __init__(self, key: Any, operation: str | None = None, message: str | None = None) -> None:
        super().__init__(message or f"key {key!r} is not allowed", operation)
        self.key = key


class KeyNotFound(CollectionError, KeyError):
    """A lookup named a key that is absent from the map."""

    code = KEYNOTFOUND

    def __init__(self, key: Any, operation: str | None = None, message: str | None = None) -> None:
        super().__init__(message or f"key {key!r} not found", operation)
        self.key = key

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])


_error_classes = {
    INVALIDARGUMENT: InvalidArgument,
    INVALIDKEY: InvalidKey,
    KEYNOTFOUND: KeyNotFound,
}


def e(error_code: int, func_name: str, detail: Any = None) -> NoReturn:
    """
    Raise the exception registered for *error_code*.

    *func_name* is the operation that detected the failure. For the key
    errors *detail* is the offending key; for INVALIDARGUMENT it is the
    message text.
    """
    error_name = error_names[error_code] if error_code < len(error_names) else f"error#{error_code}"
    logger.debug("/%s in --%s-- (%r)", error_name, func_name, detail)

    error_class = _error_classes.get(error_code)
    if error_class is None:
        raise RuntimeError(f"unknown error code {error_code} raised by --{func_name}--")

    if error_code == INVALIDARGUMENT:
        message = detail if detail is not None else f"invalid argument to {func_name}"
        raise InvalidArgument(f"{func_name}: {message}", func_name)
    raise error_class(detail, func_name)
