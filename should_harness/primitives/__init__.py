# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Primitive assertion functions.

Imperative, collection-last call shapes that the fluent ``should_*``
layer forwards to.
"""

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

__all__ = [
    # Collection assertions
    'assert_contains',
    'assert_contains_matching',
    'assert_does_not_contain',
    'assert_does_not_contain_matching',
    'assert_collection',
    'assert_all',
    # Value assertions
    'assert_equal',
    'assert_same',
    'assert_contains_text',
]
