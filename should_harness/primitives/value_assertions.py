# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Single-value assertion primitives.

Mostly useful as element validators for ``assert_collection`` and
``assert_all``.
"""

import logging
from typing import Any, Optional

from should_harness.errors import ContainsFailure, EqualFailure, SameFailure
from should_harness.formatting import format_value

logger = logging.getLogger(__name__)


def assert_equal(expected: Any, actual: Any) -> None:
    """Verify that ``actual == expected``."""
    if actual == expected:
        return
    logger.debug("assert_equal failed: %r != %r", actual, expected)
    raise EqualFailure(
        f"Expected: {format_value(expected)}\n"
        f"Actual:   {format_value(actual)}",
        expected=expected,
        actual=actual,
    )


def assert_same(expected: Any, actual: Any) -> None:
    """Verify that *actual* is the very object *expected*."""
    if actual is expected:
        return
    logger.debug("assert_same failed: %r is not %r", actual, expected)
    raise SameFailure(
        f"Values are not the same instance\n"
        f"Expected: {format_value(expected)}\n"
        f"Actual:   {format_value(actual)}",
        expected=expected,
        actual=actual,
    )


def assert_contains_text(expected: str, actual: Optional[str]) -> None:
    """Verify that *actual* contains the substring *expected*."""
    if actual is not None and expected in actual:
        return
    logger.debug("assert_contains_text failed: %r not in %r", expected, actual)
    raise ContainsFailure(
        f"Not found: {format_value(expected)}\n"
        f"In value:  {format_value(actual)}",
        expected=expected,
        collection=actual,
    )
