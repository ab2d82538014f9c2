#!/usr/bin/env python3
# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for value assertions and comparers."""

import pytest

from should_harness import (
    CaseInsensitiveComparer,
    ContainsFailure,
    EqualFailure,
    EqualityComparer,
    SameFailure,
    should_be_the_same_as,
    should_contain_text,
    should_equal,
)
from should_harness.comparers import default_equals, resolve_comparer


class TestValueAssertions:
    """Tests for should_equal, should_be_the_same_as, should_contain_text."""

    def test_equal(self):
        """Test equal values pass."""
        should_equal([1, 2], [1, 2])

    def test_not_equal(self):
        """Test unequal values carry both sides."""
        with pytest.raises(EqualFailure) as exc_info:
            should_equal("nunit", "xunit")

        assert exc_info.value.expected == "xunit"
        assert exc_info.value.actual == "nunit"

    def test_same_instance(self):
        """Test identity passes for the same object."""
        value = ["xunit"]
        should_be_the_same_as(value, value)

    def test_equal_but_not_same(self):
        """Test equal but distinct objects fail the identity check."""
        with pytest.raises(SameFailure):
            should_be_the_same_as(["xunit"], ["xunit"])

    def test_same_failure_is_equal_failure(self):
        """Test SameFailure is catchable as EqualFailure."""
        assert issubclass(SameFailure, EqualFailure)

    def test_contains_text(self):
        """Test substring search."""
        should_contain_text("msunit", "unit")

    def test_contains_text_missing(self):
        """Test a missing substring fails."""
        with pytest.raises(ContainsFailure):
            should_contain_text("mocha", "unit")

    def test_contains_text_none(self):
        """Test None never contains text."""
        with pytest.raises(ContainsFailure):
            should_contain_text(None, "unit")


class TestComparers:
    """Tests for comparer resolution."""

    def test_default(self):
        """Test None resolves to ==."""
        assert resolve_comparer(None) is default_equals

    def test_protocol_object(self):
        """Test objects with equals() satisfy the protocol."""
        comparer = CaseInsensitiveComparer()
        assert isinstance(comparer, EqualityComparer)
        assert resolve_comparer(comparer)("XUnit", "xunit")

    def test_callable(self):
        """Test plain functions are used as-is."""
        def same_length(x, y):
            return len(x) == len(y)

        assert resolve_comparer(same_length) is same_length

    def test_case_insensitive(self):
        """Test casefold comparison."""
        comparer = CaseInsensitiveComparer()
        assert comparer.equals("STRASSE", "strasse")
        assert not comparer.equals("xunit", "nunit")
