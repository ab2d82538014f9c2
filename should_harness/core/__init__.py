# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Property-based testing support (optional Hypothesis dependency)."""

from should_harness.core.should_property import (
    should_property,
    sequences,
    text_sequences,
    case_variants,
)

__all__ = [
    'should_property',
    'sequences',
    'text_sequences',
    'case_variants',
]
