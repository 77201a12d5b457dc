"""Numeric assertion helpers for evaluator tests."""

from __future__ import annotations

import math

#: Relative tolerance used when comparing evaluator results
EQUALITY_TOLERANCE = 1e-9


def assert_close(actual: float, expected: float) -> None:
    """Assert that two results agree within EQUALITY_TOLERANCE.

    Finite values are compared relatively (absolutely when ``expected`` is
    zero). A finite ``actual`` is accepted for an infinite ``expected`` only
    if it is beyond 1/EQUALITY_TOLERANCE with the same sign. Non-finite
    ``actual`` values must match exactly, with NaN matching NaN.
    """
    if math.isfinite(actual) and math.isfinite(expected):
        if expected != 0:
            assert abs(actual / expected - 1) <= EQUALITY_TOLERANCE, (
                f"Miscompare: {actual} != {expected}"
            )
        else:
            assert abs(actual) <= EQUALITY_TOLERANCE, (
                f"Miscompare: {actual} != {expected}"
            )
    elif math.isfinite(actual):
        limit = 1 / EQUALITY_TOLERANCE
        assert not (expected > 0 and actual < limit), (
            f"Miscompare: {actual} != {expected}"
        )
        assert not (expected < 0 and actual > -limit), (
            f"Miscompare: {actual} != {expected}"
        )
    elif math.isnan(actual):
        assert math.isnan(expected), f"Miscompare: {actual} != {expected}"
    else:
        assert actual == expected, f"Miscompare: {actual} != {expected}"
