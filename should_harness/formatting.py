# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of values and collections in failure messages."""

from typing import Any, Optional, Sequence

from should_harness.config import ShouldConfig, get_config


def format_value(value: Any, config: Optional[ShouldConfig] = None) -> str:
    """``repr`` of *value*, truncated to ``max_value_length`` characters."""
    config = config or get_config()
    try:
        text = repr(value)
    except Exception:
        text = f"<{type(value).__name__} (repr failed)>"
    if len(text) > config.max_value_length:
        return text[:config.max_value_length] + '...'
    return text


def format_collection(
    items: Sequence[Any],
    config: Optional[ShouldConfig] = None,
) -> str:
    """Render *items* as ``[a, b, ...]`` showing at most ``max_items``."""
    config = config or get_config()
    shown = [format_value(item, config) for item in items[:config.max_items]]
    if len(items) > config.max_items:
        shown.append('...')
    return '[' + ', '.join(shown) + ']'
