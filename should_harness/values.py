# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Fluent single-value assertions, handy as element criteria."""

from typing import Any, Optional

from should_harness.primitives.value_assertions import (
    assert_contains_text,
    assert_equal,
    assert_same,
)


def should_equal(actual: Any, expected: Any) -> None:
    assert_equal(expected, actual)


def should_be_the_same_as(actual: Any, expected: Any) -> None:
    """Should be the very same object as *expected* (identity)."""
    assert_same(expected, actual)


def should_contain_text(actual: Optional[str], expected: str) -> None:
    """String should contain the substring *expected*."""
    assert_contains_text(expected, actual)
