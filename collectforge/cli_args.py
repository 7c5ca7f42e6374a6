# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for CollectForge.

Handles command-line argument definition and the decoding of operand
literals.
"""

from __future__ import annotations

import argparse
import json
from typing import Any

OPERATIONS = ("equals", "same", "compare")


def parse_literal(text: str) -> Any:
    """Decode a command-line operand.

    Operands are JSON literals (``null``, ``true``, ``1.5``, ``"1"``,
    ``[1, 2]``, ``{"a": 1}``). A bare word that is not valid JSON is taken
    as a string, so ``abc`` and ``'"abc"'`` mean the same thing.

    Args:
        text: The raw command-line argument.

    Returns:
        The decoded Python value.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        stripped = text.strip()
        if stripped[:1] in ("[", "{", '"'):
            raise ValueError(f"Malformed operand: '{text}'")
        return text


def _get_version() -> str:
    # Late import: the package __init__ pulls in the whole library
    from . import __version__
    return __version__


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the CollectForge argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="collectforge",
        description="CollectForge - evaluate the default equality policy on two values",
        epilog="Operands are JSON literals; bare words are read as strings.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"CollectForge {_get_version()}"
    )
    parser.add_argument("operation", choices=OPERATIONS, help="Engine operation to apply")
    parser.add_argument("a", help="First operand (JSON literal)")
    parser.add_argument("b", help="Second operand (JSON literal)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--invert", action="store_true",
        help="Apply the operation through invert() (negated result)"
    )

    return parser
