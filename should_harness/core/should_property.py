# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Hypothesis integration for property-based testing of assertions.

Optional module: requires ``pip install hypothesis`` (or
``pip install should_harness[hypothesis]``).

Provides:

- ``should_property`` -- a pre-configured Hypothesis ``@settings``
  decorator (no deadline, ``too_slow`` suppressed, nightly scaling).
- ``sequences`` / ``text_sequences`` -- strategies for collections under
  test, duplicates included.
- ``case_variants`` -- random re-casings of a string, for exercising
  case-insensitive comparers.

Example::

    from hypothesis import given, strategies as st
    from should_harness.core.should_property import should_property, text_sequences

    @should_property(max_examples=200)
    @given(items=text_sequences(), value=st.text())
    def test_contains_matches_membership(items, value):
        if value in items:
            should_contain(items, value)
"""

from typing import Optional

from should_harness.config import get_config

try:
    from hypothesis import settings, HealthCheck
    from hypothesis import strategies as st
    from hypothesis.strategies import SearchStrategy
    HAS_HYPOTHESIS = True
except ImportError:
    HAS_HYPOTHESIS = False


def _require_hypothesis():
    """Raise ImportError if hypothesis is not installed."""
    if not HAS_HYPOTHESIS:
        raise ImportError(
            "hypothesis is required for property-based testing. "
            "Install it with: pip install hypothesis"
        )


def should_property(
    max_examples: int = 100,
    deadline: Optional[int] = None,
    derandomize: bool = False,
    nightly: bool = False,
    **extra_settings,
):
    """
    Hypothesis ``@settings`` pre-configured for assertion property tests.

    Args:
        max_examples: Number of test cases to generate.
        deadline: Per-example time limit in ms. None (default) disables it.
        derandomize: If True, use deterministic example generation.
        nightly: If True, use 10x more examples. Also enabled by the
            ``SHOULD_HARNESS_NIGHTLY`` environment variable.
        **extra_settings: Additional keyword args passed to
            ``hypothesis.settings``.

    Returns:
        A ``hypothesis.settings`` decorator.
    """
    _require_hypothesis()

    if nightly or get_config().nightly:
        max_examples = max_examples * 10

    suppressed = list(extra_settings.pop('suppress_health_check', []))
    if HealthCheck.too_slow not in suppressed:
        suppressed.append(HealthCheck.too_slow)

    return settings(
        max_examples=max_examples,
        deadline=deadline,
        suppress_health_check=suppressed,
        derandomize=derandomize,
        **extra_settings,
    )


def sequences(
    elements: 'SearchStrategy',
    min_size: int = 0,
    max_size: int = 10,
) -> 'SearchStrategy[list]':
    """Lists drawn from *elements*; duplicates allowed."""
    _require_hypothesis()
    return st.lists(elements, min_size=min_size, max_size=max_size)


def text_sequences(
    min_size: int = 0,
    max_size: int = 10,
    alphabet: str = 'abcxyzXYZ',
    max_length: int = 6,
) -> 'SearchStrategy[list]':
    """
    Lists of short strings over a small alphabet.

    The small alphabet makes collisions (and therefore both passing and
    failing membership checks) common.
    """
    _require_hypothesis()
    return sequences(
        st.text(alphabet=alphabet, max_size=max_length),
        min_size=min_size,
        max_size=max_size,
    )


def case_variants(text: str) -> 'SearchStrategy[str]':
    """Strings equal to *text* apart from the case of each character."""
    _require_hypothesis()

    @st.composite
    def make_variant(draw):
        flips = draw(st.lists(st.booleans(), min_size=len(text), max_size=len(text)))
        return ''.join(
            ch.swapcase() if flip else ch for ch, flip in zip(text, flips)
        )

    return make_variant()
