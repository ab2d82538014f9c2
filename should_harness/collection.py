# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Fluent collection assertions.

Subject-first wrappers over ``should_harness.primitives``. Each function
forwards to exactly one primitive and lets its ``AssertionFailed``
propagate unchanged.

Example:
    from should_harness import should, should_contain, should_equal

    frameworks = ["xunit", "nunit"]
    should_contain(frameworks, "xunit")

    (should(frameworks)
        .contain("nunit")
        .not_contain("msunit")
        .contain_elements_with_criteria_as(
            lambda e: should_equal(e, "xunit"),
            lambda e: should_equal(e, "nunit"),
        ))
"""

from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from should_harness.comparers import Comparer
from should_harness.primitives.collection_assertions import (
    assert_all,
    assert_collection,
    assert_contains,
    assert_contains_matching,
    assert_does_not_contain,
    assert_does_not_contain_matching,
)

T = TypeVar('T')


def should_contain(
    actual: Iterable[T],
    expected: T,
    comparer: Optional[Comparer] = None,
) -> None:
    """
    Should contain a given object, optionally using an equality comparer.

    Args:
        actual: The collection to be inspected.
        expected: The object expected to be in the collection.
        comparer: ``EqualityComparer`` or ``(x, y) -> bool``.
    """
    assert_contains(expected, actual, comparer)


def should_contain_matching(
    actual: Iterable[T],
    predicate: Callable[[T], bool],
) -> None:
    """Should contain at least one element the predicate accepts."""
    assert_contains_matching(actual, predicate)


def should_contain_elements_with_criteria_as(
    actual: Iterable[T],
    *criteria: Callable[[T], Any],
) -> None:
    """
    Should contain exactly one element per criterion, each meeting its
    criterion in order.

    A criterion fails by raising, typically another ``should_*`` call.
    """
    assert_collection(actual, *criteria)


def should_not_contain(
    actual: Iterable[T],
    expected: T,
    comparer: Optional[Comparer] = None,
) -> None:
    """Should not contain a given object, optionally using a comparer."""
    assert_does_not_contain(expected, actual, comparer)


def should_not_contain_matching(
    actual: Iterable[T],
    predicate: Callable[[T], bool],
) -> None:
    """Should not contain any element the predicate accepts."""
    assert_does_not_contain_matching(actual, predicate)


def should_all_pass(
    actual: Iterable[T],
    action: Callable[[T], Any],
) -> None:
    """All items should pass when executed against *action*."""
    assert_all(actual, action)


class CollectionShould(Generic[T]):
    """
    Chainable form of the collection assertions.

    Every method returns the wrapper, so several checks read as one
    sentence. The first failing check raises and ends the chain.
    """

    def __init__(self, actual: Iterable[T]):
        # Generators would be exhausted by the first check in a chain.
        self.actual = None if actual is None else list(actual)

    def contain(self, expected: T, comparer: Optional[Comparer] = None) -> 'CollectionShould[T]':
        should_contain(self.actual, expected, comparer)
        return self

    def contain_matching(self, predicate: Callable[[T], bool]) -> 'CollectionShould[T]':
        should_contain_matching(self.actual, predicate)
        return self

    def contain_elements_with_criteria_as(
        self, *criteria: Callable[[T], Any],
    ) -> 'CollectionShould[T]':
        should_contain_elements_with_criteria_as(self.actual, *criteria)
        return self

    def not_contain(self, expected: T, comparer: Optional[Comparer] = None) -> 'CollectionShould[T]':
        should_not_contain(self.actual, expected, comparer)
        return self

    def not_contain_matching(self, predicate: Callable[[T], bool]) -> 'CollectionShould[T]':
        should_not_contain_matching(self.actual, predicate)
        return self

    def all_pass(self, action: Callable[[T], Any]) -> 'CollectionShould[T]':
        should_all_pass(self.actual, action)
        return self


def should(actual: Iterable[T]) -> CollectionShould[T]:
    """Start a chain of collection assertions on *actual*."""
    return CollectionShould(actual)
