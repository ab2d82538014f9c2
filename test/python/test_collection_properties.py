#!/usr/bin/env python3
# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Property-based tests for the collection assertions."""

import os

import pytest

hypothesis = pytest.importorskip("hypothesis")

from hypothesis import given, strategies as st  # noqa: E402

from should_harness import (  # noqa: E402
    AllFailure,
    AssertionFailed,
    CaseInsensitiveComparer,
    CollectionFailure,
    should_all_pass,
    should_contain,
    should_contain_elements_with_criteria_as,
    should_contain_matching,
    should_equal,
    should_not_contain,
    should_not_contain_matching,
)
from should_harness.core.should_property import (  # noqa: E402
    case_variants,
    sequences,
    should_property,
    text_sequences,
)

WORDS = st.text(alphabet='abcxyzXYZ', max_size=6)


def _fails(check, *args) -> bool:
    try:
        check(*args)
    except AssertionFailed:
        return True
    return False


class TestMembershipProperties:
    """Contains / DoesNotContain agree with Python membership."""

    @should_property(max_examples=200)
    @given(items=text_sequences(), value=WORDS)
    def test_contains_iff_member(self, items, value):
        """Contains fails exactly when the value is absent."""
        assert _fails(should_contain, items, value) == (value not in items)

    @should_property(max_examples=200)
    @given(items=text_sequences(), value=WORDS)
    def test_does_not_contain_is_negation(self, items, value):
        """Exactly one of Contains / DoesNotContain fails."""
        assert _fails(should_contain, items, value) != _fails(should_not_contain, items, value)

    @should_property(max_examples=200)
    @given(items=text_sequences(), value=WORDS)
    def test_comparer_negation(self, items, value):
        """Negation also holds under a comparer."""
        comparer = CaseInsensitiveComparer()
        assert (_fails(should_contain, items, value, comparer)
                != _fails(should_not_contain, items, value, comparer))

    @should_property(max_examples=200)
    @given(items=text_sequences(), value=WORDS)
    def test_comparer_contains_iff_equivalent_member(self, items, value):
        """Contains with a comparer fails exactly when no element is equivalent."""
        has_equivalent = any(e.casefold() == value.casefold() for e in items)
        assert (_fails(should_contain, items, value, CaseInsensitiveComparer())
                == (not has_equivalent))

    @should_property(max_examples=200)
    @given(items=text_sequences(), prefix=WORDS)
    def test_predicate_negation(self, items, prefix):
        """Negation also holds for predicates."""
        def predicate(item):
            return item.startswith(prefix)

        assert (_fails(should_contain_matching, items, predicate)
                != _fails(should_not_contain_matching, items, predicate))

    @should_property(max_examples=100)
    @given(items=text_sequences(min_size=1), data=st.data())
    def test_case_variant_found(self, items, data):
        """Any re-casing of a member is found case-insensitively."""
        target = data.draw(st.sampled_from(items))
        variant = data.draw(case_variants(target))
        should_contain(items, variant, CaseInsensitiveComparer())


class TestInspectionProperties:
    """ContainsElementsWithCriteria and AllPass properties."""

    @should_property(max_examples=100)
    @given(items=text_sequences())
    def test_equal_criteria_pass(self, items):
        """One equality criterion per element, in order, passes."""
        criteria = [lambda e, v=v: should_equal(e, v) for v in items]
        should_contain_elements_with_criteria_as(items, *criteria)

    @should_property(max_examples=100)
    @given(items=text_sequences(), extra=st.integers(1, 3))
    def test_count_mismatch_fails(self, items, extra):
        """Too many criteria always fail on the count."""
        criteria = [lambda e: None] * (len(items) + extra)
        with pytest.raises(CollectionFailure) as exc_info:
            should_contain_elements_with_criteria_as(items, *criteria)
        assert exc_info.value.index == -1

    @should_property(max_examples=200)
    @given(items=sequences(st.integers(-5, 5)))
    def test_all_pass_reports_first_failure(self, items):
        """AllPass fails at the first element the action rejects."""
        def non_negative(n):
            if n < 0:
                raise ValueError(n)

        negatives = [i for i, n in enumerate(items) if n < 0]
        if not negatives:
            should_all_pass(items, non_negative)
            return

        with pytest.raises(AllFailure) as exc_info:
            should_all_pass(items, non_negative)
        assert exc_info.value.index == negatives[0]


class TestShouldProperty:
    """Tests for the should_property settings helper."""

    def setup_method(self):
        """Save the nightly flag."""
        self._nightly = os.environ.pop('SHOULD_HARNESS_NIGHTLY', None)

    def teardown_method(self):
        """Restore the nightly flag."""
        if self._nightly is not None:
            os.environ['SHOULD_HARNESS_NIGHTLY'] = self._nightly
        elif 'SHOULD_HARNESS_NIGHTLY' in os.environ:
            del os.environ['SHOULD_HARNESS_NIGHTLY']

    def test_defaults(self):
        """Test no deadline and too_slow suppressed."""
        configured = should_property(max_examples=7)

        assert configured.max_examples == 7
        assert configured.deadline is None
        assert hypothesis.HealthCheck.too_slow in configured.suppress_health_check

    def test_nightly_environment(self):
        """Test the nightly flag multiplies examples."""
        os.environ['SHOULD_HARNESS_NIGHTLY'] = '1'

        assert should_property(max_examples=3).max_examples == 30

    def test_nightly_argument(self):
        """Test nightly=True multiplies examples."""
        assert should_property(max_examples=3, nightly=True).max_examples == 30
