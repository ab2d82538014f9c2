# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Equality comparers.

A comparer decides whether two elements should be treated as equal when
searching a collection. Either form is accepted wherever a comparer is:

- an object with an ``equals(x, y) -> bool`` method (``EqualityComparer``)
- a plain callable ``(x, y) -> bool``

Example:
    from should_harness import should_contain, CaseInsensitiveComparer

    should_contain(["nunit", "xunit"], "xUnit", CaseInsensitiveComparer())
    should_contain(["nunit", "xunit"], "xUnit", lambda a, b: a.lower() == b.lower())
"""

from typing import Callable, Optional, Protocol, TypeVar, Union, runtime_checkable

T = TypeVar('T')

EqualsFn = Callable[[T, T], bool]


@runtime_checkable
class EqualityComparer(Protocol[T]):
    """Anything with an ``equals`` method deciding element equivalence."""

    def equals(self, x: T, y: T) -> bool:
        ...


Comparer = Union[EqualityComparer, EqualsFn]


class CaseInsensitiveComparer:
    """Compares strings ignoring case (``str.casefold``)."""

    def equals(self, x: str, y: str) -> bool:
        return x.casefold() == y.casefold()


def default_equals(x, y) -> bool:
    return x == y


def resolve_comparer(comparer: Optional[Comparer]) -> EqualsFn:
    """
    Turn a comparer argument into a plain ``(x, y) -> bool`` function.

    Args:
        comparer: ``None`` for default ``==`` equality, an
            ``EqualityComparer`` or a callable.

    Returns:
        The equality function to apply.

    Raises:
        TypeError: If *comparer* is neither form.
    """
    if comparer is None:
        return default_equals
    if isinstance(comparer, EqualityComparer):
        return comparer.equals
    if callable(comparer):
        return comparer
    raise TypeError(
        f"comparer must have an equals() method or be callable, "
        f"got {type(comparer).__name__}"
    )
