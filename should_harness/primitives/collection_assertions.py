# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Assertion primitives over sequences.

Each primitive takes the collection as an arbitrary iterable, materializes
it once, and raises a subclass of ``AssertionFailed`` when the property
does not hold. Success returns ``None``.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from should_harness.comparers import Comparer, resolve_comparer
from should_harness.errors import (
    AllFailure,
    CollectionFailure,
    ContainsFailure,
    DoesNotContainFailure,
    cause_summary,
)
from should_harness.formatting import format_collection, format_value

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Interpreter shutdown signals; never treated as an element failure.
_PASSTHROUGH = (KeyboardInterrupt, SystemExit, GeneratorExit)

# ── Internal helpers ──────────────────────────────────────────────────────


def _materialize(collection: Optional[Iterable[T]]) -> List[T]:
    if collection is None:
        raise TypeError("collection must not be None")
    return list(collection)


def _require(value: Any, name: str) -> None:
    if value is None:
        raise TypeError(f"{name} must not be None")


def _find(items: List[T], matches: Callable[[T], bool]) -> int:
    """Index of the first item satisfying *matches*, or -1."""
    for i, item in enumerate(items):
        if matches(item):
            return i
    return -1


# ── Membership ────────────────────────────────────────────────────────────


def assert_contains(
    expected: T,
    collection: Iterable[T],
    comparer: Optional[Comparer] = None,
) -> None:
    """
    Verify that a collection contains a given object.

    Args:
        expected: The object expected to be in the collection.
        collection: The collection to be inspected.
        comparer: Optional equality comparer; default ``==``.

    Raises:
        ContainsFailure: If no element is equal to *expected*.
    """
    items = _materialize(collection)
    equals = resolve_comparer(comparer)
    if _find(items, lambda item: equals(item, expected)) >= 0:
        return

    logger.debug("assert_contains failed: %r not in %d items", expected, len(items))
    raise ContainsFailure(
        f"Not found: {format_value(expected)}\n"
        f"In value:  {format_collection(items)}",
        expected=expected,
        collection=items,
    )


def assert_contains_matching(
    collection: Iterable[T],
    predicate: Callable[[T], bool],
) -> None:
    """
    Verify that a collection contains an element satisfying *predicate*.

    Raises:
        ContainsFailure: If no element satisfies the predicate.
    """
    _require(predicate, "predicate")
    items = _materialize(collection)
    if _find(items, predicate) >= 0:
        return

    logger.debug("assert_contains_matching failed over %d items", len(items))
    raise ContainsFailure(
        f"No item matched the filter\n"
        f"Collection: {format_collection(items)}",
        collection=items,
    )


def assert_does_not_contain(
    expected: T,
    collection: Iterable[T],
    comparer: Optional[Comparer] = None,
) -> None:
    """
    Verify that a collection does not contain a given object.

    Args:
        expected: The object expected not to be in the collection.
        collection: The collection to be inspected.
        comparer: Optional equality comparer; default ``==``.

    Raises:
        DoesNotContainFailure: Carrying the index of the first match.
    """
    items = _materialize(collection)
    equals = resolve_comparer(comparer)
    index = _find(items, lambda item: equals(item, expected))
    if index < 0:
        return

    logger.debug("assert_does_not_contain failed: %r at index %d", expected, index)
    raise DoesNotContainFailure(
        f"Found:    {format_value(expected)} at index {index}\n"
        f"In value: {format_collection(items)}",
        expected=expected,
        collection=items,
        counterexample=items[index],
        index=index,
    )


def assert_does_not_contain_matching(
    collection: Iterable[T],
    predicate: Callable[[T], bool],
) -> None:
    """
    Verify that no element of a collection satisfies *predicate*.

    Raises:
        DoesNotContainFailure: Carrying the first matching element.
    """
    _require(predicate, "predicate")
    items = _materialize(collection)
    index = _find(items, predicate)
    if index < 0:
        return

    logger.debug("assert_does_not_contain_matching failed at index %d", index)
    raise DoesNotContainFailure(
        f"Item {format_value(items[index])} at index {index} matched the filter\n"
        f"Collection: {format_collection(items)}",
        collection=items,
        counterexample=items[index],
        index=index,
    )


# ── Per-element inspection ────────────────────────────────────────────────


def assert_collection(
    collection: Iterable[T],
    *inspectors: Callable[[T], Any],
) -> None:
    """
    Verify a collection element by element, in order.

    The collection must hold exactly one element per inspector. Inspector
    ``i`` is applied to element ``i``; an inspector fails by raising. The
    length is checked before any inspector runs.

    Args:
        collection: The collection to be inspected.
        *inspectors: One validator per expected element.

    Raises:
        CollectionFailure: On a length mismatch (``index == -1``) or at the
            first inspector that raises (chained to the inspector's error).
    """
    items = _materialize(collection)
    expected_count = len(inspectors)
    actual_count = len(items)

    if expected_count != actual_count:
        logger.debug(
            "assert_collection failed: expected %d items, got %d",
            expected_count, actual_count,
        )
        raise CollectionFailure(
            f"Mismatched item count: expected {expected_count}, "
            f"actual {actual_count}\n"
            f"Collection: {format_collection(items)}",
            expected_count=expected_count,
            actual_count=actual_count,
        )

    for i, (inspector, item) in enumerate(zip(inspectors, items)):
        try:
            inspector(item)
        except _PASSTHROUGH:
            raise
        except BaseException as exc:
            logger.debug("assert_collection failed at index %d: %s", i, exc)
            raise CollectionFailure(
                f"Item comparison failure at index {i}: {format_value(item)}\n"
                f"Collection: {format_collection(items)}\n"
                f"Error: {cause_summary(exc)}",
                expected_count=expected_count,
                actual_count=actual_count,
                counterexample=item,
                index=i,
            ) from exc


def assert_all(
    collection: Iterable[T],
    action: Callable[[T], Any],
) -> None:
    """
    Verify that *action* does not raise for any element.

    Stops at the first failing element.

    Raises:
        AllFailure: With the failing element and index, chained to the
            action's error.
    """
    _require(action, "action")
    items = _materialize(collection)

    for i, item in enumerate(items):
        try:
            action(item)
        except _PASSTHROUGH:
            raise
        except BaseException as exc:
            logger.debug("assert_all failed at index %d/%d: %s", i, len(items), exc)
            raise AllFailure(
                f"Item at index {i}/{len(items)} failed: {format_value(item)}\n"
                f"Error: {cause_summary(exc)}",
                counterexample=item,
                index=i,
            ) from exc
