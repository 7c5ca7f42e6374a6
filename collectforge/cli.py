#!/usr/bin/env python3
# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CollectForge - command-line probe for the equality engine

Evaluates one of the DefaultEqualityComparer operations on two operands and
prints the result, which makes it easy to check how a pair of values is
treated by loose equality, strict equality or ordering.

Usage:
    collectforge equals 1 '"1"'         -> true
    collectforge same null false        -> false
    collectforge compare 1.1 1          -> 1
    collectforge --invert compare 1 2   -> 1
"""

import logging
import sys

from .cli_args import build_argument_parser, parse_literal
from .core import error as cf_error
from .operators import relational as cf_rel

logger = logging.getLogger(__name__)


def _format_result(result) -> str:
    if isinstance(result, bool):
        return str(result).lower()
    return str(result)


def main(argv=None) -> int:
    """
    Main entry point for the CollectForge command line.

    Returns:
        Exit code: 0 for success, 1 for an engine error, 2 for bad operands
    """
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        a = parse_literal(args.a)
        b = parse_literal(args.b)
    except ValueError as e:
        print(f"CollectForge Error: {e}")
        return 2

    operation = getattr(cf_rel, args.operation)
    if args.invert:
        operation = cf_rel.invert(operation)
    logger.debug("%s(%r, %r)%s", args.operation, a, b, " inverted" if args.invert else "")

    try:
        result = operation(a, b)
    except cf_error.InvalidArgument as e:
        print(f"CollectForge Error: {e}")
        return 1

    print(_format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
