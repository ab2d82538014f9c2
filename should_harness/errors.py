# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Assertion failure types.

Every primitive signals failure with a subclass of ``AssertionFailed``,
which is itself an ``AssertionError`` so pytest and unittest report it as
an ordinary test failure.
"""

from typing import Any, Optional


class AssertionFailed(AssertionError):
    """
    Raised when an expected property of a value or sequence does not hold.

    Attributes:
        counterexample: The element that caused the failure, if any.
        index: Position of that element in the sequence, or -1.
    """

    def __init__(
        self,
        message: str,
        counterexample: Any = None,
        index: int = -1,
    ):
        self.counterexample = counterexample
        self.index = index
        super().__init__(message)


class ContainsFailure(AssertionFailed):
    """An expected element (or substring) was not found."""

    def __init__(self, message: str, expected: Any = None, collection: Any = None):
        self.expected = expected
        self.collection = collection
        super().__init__(message)


class DoesNotContainFailure(AssertionFailed):
    """An element that should be absent was found."""

    def __init__(
        self,
        message: str,
        expected: Any = None,
        collection: Any = None,
        counterexample: Any = None,
        index: int = -1,
    ):
        self.expected = expected
        self.collection = collection
        super().__init__(message, counterexample=counterexample, index=index)


class CollectionFailure(AssertionFailed):
    """
    Element inspectors did not match the collection.

    ``index`` is -1 when the failure is a length mismatch.
    """

    def __init__(
        self,
        message: str,
        expected_count: int,
        actual_count: int,
        counterexample: Any = None,
        index: int = -1,
    ):
        self.expected_count = expected_count
        self.actual_count = actual_count
        super().__init__(message, counterexample=counterexample, index=index)


class AllFailure(AssertionFailed):
    """An element failed the action applied to every item."""


class EqualFailure(AssertionFailed):

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class SameFailure(EqualFailure):
    pass


def cause_summary(exc: Optional[BaseException]) -> str:
    """One-line description of a wrapped validator error."""
    if exc is None:
        return ""
    text = str(exc).strip().splitlines()
    first = text[0] if text else ""
    return f"{type(exc).__name__}: {first}" if first else type(exc).__name__
