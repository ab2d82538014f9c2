# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
should_harness - Fluent collection assertions for Python tests.

A subject-first layer over a small set of assertion primitives:
- Membership checks with default equality, a comparer, or a predicate
- Ordered per-element criteria checks
- All-pass checks applying an action to every element
- A chainable ``should(actual)`` form of all of the above

Example usage:
    from should_harness import should, should_contain, should_contain_text

    def test_frameworks():
        frameworks = ["xunit", "nunit", "msunit"]
        should_contain(frameworks, "xunit")
        should(frameworks).not_contain("junit").all_pass(
            lambda f: should_contain_text(f, "unit"))
"""

import logging

from should_harness.errors import (
    AssertionFailed,
    ContainsFailure,
    DoesNotContainFailure,
    CollectionFailure,
    AllFailure,
    EqualFailure,
    SameFailure,
)
from should_harness.comparers import (
    EqualityComparer,
    CaseInsensitiveComparer,
)
from should_harness.config import ShouldConfig, get_config

from should_harness.primitives.collection_assertions import (
    assert_contains,
    assert_contains_matching,
    assert_does_not_contain,
    assert_does_not_contain_matching,
    assert_collection,
    assert_all,
)
from should_harness.primitives.value_assertions import (
    assert_equal,
    assert_same,
    assert_contains_text,
)

from should_harness.collection import (
    CollectionShould,
    should,
    should_contain,
    should_contain_matching,
    should_contain_elements_with_criteria_as,
    should_not_contain,
    should_not_contain_matching,
    should_all_pass,
)
from should_harness.values import (
    should_equal,
    should_be_the_same_as,
    should_contain_text,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    'AssertionFailed',
    'ContainsFailure',
    'DoesNotContainFailure',
    'CollectionFailure',
    'AllFailure',
    'EqualFailure',
    'SameFailure',
    # Comparers
    'EqualityComparer',
    'CaseInsensitiveComparer',
    # Configuration
    'ShouldConfig',
    'get_config',
    # Primitives
    'assert_contains',
    'assert_contains_matching',
    'assert_does_not_contain',
    'assert_does_not_contain_matching',
    'assert_collection',
    'assert_all',
    'assert_equal',
    'assert_same',
    'assert_contains_text',
    # Fluent collection assertions
    'CollectionShould',
    'should',
    'should_contain',
    'should_contain_matching',
    'should_contain_elements_with_criteria_as',
    'should_not_contain',
    'should_not_contain_matching',
    'should_all_pass',
    # Fluent value assertions
    'should_equal',
    'should_be_the_same_as',
    'should_contain_text',
]
