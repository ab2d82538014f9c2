# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Environment-driven configuration.

Settings are read on every call so tests can change the environment
between assertions without reloading the package.
"""

import os
from dataclasses import dataclass

DEFAULT_MAX_ITEMS = 5
DEFAULT_MAX_VALUE_LENGTH = 50


@dataclass
class ShouldConfig:
    """Configuration for failure rendering and property tests."""

    max_items: int = DEFAULT_MAX_ITEMS
    """Collection items rendered in a failure message before ``...``."""

    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH
    """Characters rendered per value before ``...``."""

    nightly: bool = False
    """Run property tests with 10x the examples."""


def _env_int(name: str, default: int) -> int:
    try:
        value = int(os.environ.get(name, default))
    except ValueError:
        return default
    return max(1, value)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, '').lower() in ('1', 'true', 'yes')


def get_config() -> ShouldConfig:
    """
    Build configuration from the environment.

    Reads ``SHOULD_HARNESS_MAX_ITEMS``, ``SHOULD_HARNESS_MAX_VALUE_LENGTH``
    and ``SHOULD_HARNESS_NIGHTLY``. Malformed numbers fall back to the
    defaults and values below 1 are clamped to 1.

    Returns:
        ShouldConfig populated from the environment
    """
    return ShouldConfig(
        max_items=_env_int('SHOULD_HARNESS_MAX_ITEMS', DEFAULT_MAX_ITEMS),
        max_value_length=_env_int(
            'SHOULD_HARNESS_MAX_VALUE_LENGTH', DEFAULT_MAX_VALUE_LENGTH,
        ),
        nightly=_env_flag('SHOULD_HARNESS_NIGHTLY'),
    )
