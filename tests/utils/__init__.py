"""Shared test utilities.

Helpers used across the test suite:
- Numeric assertion helpers for comparing evaluator results
"""

from __future__ import annotations

from tests.utils.numeric import EQUALITY_TOLERANCE, assert_close

__all__ = [
    "EQUALITY_TOLERANCE",
    "assert_close",
]
