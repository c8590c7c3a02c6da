"""
Scale-relative approximate equality for floats.

Coordinates span many orders of magnitude, so two values are compared relative
to the larger of their magnitudes rather than against an absolute epsilon.
Only is_almost_zero is absolute: zero has no scale to relate to.
"""
import math
import sys

from geometry_helpers.geometry.constants import DEFAULT_TOLERANCE, MIN_TOLERANCE

# 2 ** 1023, the largest power of two that is a finite float
_LARGEST_FINITE_POWER = math.ldexp(1.0, sys.float_info.max_exp - 1)


def is_almost_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """
    Check whether two floats are equal within a relative tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Maximum allowed relative deviation, in [epsilon, 1)

    Returns:
        True if |a - b| < max(|a|, |b|, least normal float) * tolerance.
        NaN is never almost equal to anything, including NaN.
    """
    assert MIN_TOLERANCE <= tolerance < 1, "tolerance should be in [epsilon, 1)."

    if not (math.isfinite(a) and math.isfinite(b)):
        return _rescaled_almost_equal(a, b, tolerance)

    scale = max(abs(a), abs(b), sys.float_info.min)
    return abs(a - b) < scale * tolerance


def _rescaled_almost_equal(a: float, b: float, tolerance: float) -> bool:
    """Compare values where at least one is NaN or infinite."""
    if math.isnan(a) or math.isnan(b):
        return False
    if math.isinf(a):
        if math.isinf(b):
            return a == b
        # Move the infinity to the top of the finite range and halve the other value.
        scaled_a = math.copysign(_LARGEST_FINITE_POWER, a)
        scaled_b = math.ldexp(b, -1)
        return is_almost_equal(scaled_a, scaled_b, tolerance)
    return _rescaled_almost_equal(b, a, tolerance)


def is_smaller_or_almost_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """True if a < b or a is almost equal to b."""
    return a < b or is_almost_equal(a, b, tolerance)


def is_larger_or_almost_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """True if a > b or a is almost equal to b."""
    return a > b or is_almost_equal(a, b, tolerance)


def is_almost_zero(a: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """True if |a| < tolerance (absolute comparison)."""
    assert tolerance > 0, "tolerance should be positive."
    return abs(a) < tolerance
