import pytest
import math
import sys
from geometry_helpers.geometry.constants import DEFAULT_TOLERANCE
from geometry_helpers.geometry.tolerance import (
    is_almost_equal,
    is_almost_zero,
    is_larger_or_almost_equal,
    is_smaller_or_almost_equal,
)


class TestIsAlmostEqual:
    @pytest.mark.parametrize("value", [0.0, 1.0, -1.0, 1e-300, 1e300, 123.456, -7.5e-8])
    def test_reflexive(self, value):
        assert is_almost_equal(value, value)
        assert is_almost_equal(value, value, tolerance=sys.float_info.epsilon)
        assert is_almost_equal(value, value, tolerance=0.5)

    @pytest.mark.parametrize("a, b", [
        (1.0, 1.0 + 1e-9),
        (1.0, 1.1),
        (1e10, 1e10 + 1),
        (-3.0, 3.0),
        (0.0, 1e-320),
    ])
    def test_symmetric(self, a, b):
        assert is_almost_equal(a, b) == is_almost_equal(b, a)

    def test_scale_relative(self):
        # A difference of 1 is negligible next to 1e10 ...
        assert is_almost_equal(1e10, 1e10 + 1)
        # ... but not next to 1e-10
        assert not is_almost_equal(1e-10, 1e-10 + 1)

    def test_small_values_compare_relative_to_each_other(self):
        assert is_almost_equal(1e-20, 1e-20 * (1 + 1e-12))
        assert not is_almost_equal(1e-20, 2e-20)

    def test_custom_tolerance(self):
        assert is_almost_equal(100.0, 101.0, tolerance=0.1)
        assert not is_almost_equal(100.0, 101.0, tolerance=0.001)

    def test_default_tolerance_is_sqrt_epsilon(self):
        assert DEFAULT_TOLERANCE == pytest.approx(math.sqrt(sys.float_info.epsilon))

    def test_nan_never_equal(self):
        nan = float("nan")
        assert not is_almost_equal(nan, nan)
        assert not is_almost_equal(nan, 1.0)
        assert not is_almost_equal(1.0, nan)
        assert not is_almost_equal(nan, math.inf)

    def test_infinities(self):
        assert is_almost_equal(math.inf, math.inf)
        assert is_almost_equal(-math.inf, -math.inf)
        assert not is_almost_equal(math.inf, -math.inf)
        assert not is_almost_equal(-math.inf, math.inf)

    def test_infinity_against_finite(self):
        assert not is_almost_equal(math.inf, 1.0)
        assert not is_almost_equal(1.0, math.inf)
        assert not is_almost_equal(-math.inf, sys.float_info.max)
        # The largest finite value is rescaled next to infinity instead of
        # being rejected outright.
        assert is_almost_equal(math.inf, sys.float_info.max, tolerance=0.5)
        assert is_almost_equal(sys.float_info.max, math.inf, tolerance=0.5)

    @pytest.mark.parametrize("tolerance", [0.0, -0.1, 1.0, 2.0, sys.float_info.epsilon / 2])
    def test_invalid_tolerance_fails_fast(self, tolerance):
        with pytest.raises(AssertionError):
            is_almost_equal(1.0, 1.0, tolerance=tolerance)


class TestOrdering:
    def test_smaller_or_almost_equal(self):
        assert is_smaller_or_almost_equal(1.0, 2.0)
        assert is_smaller_or_almost_equal(1.0, 1.0)
        assert is_smaller_or_almost_equal(1.0 + 1e-12, 1.0)
        assert not is_smaller_or_almost_equal(2.0, 1.0)

    def test_larger_or_almost_equal(self):
        assert is_larger_or_almost_equal(2.0, 1.0)
        assert is_larger_or_almost_equal(1.0, 1.0)
        assert is_larger_or_almost_equal(1.0 - 1e-12, 1.0)
        assert not is_larger_or_almost_equal(1.0, 2.0)


class TestIsAlmostZero:
    def test_absolute_comparison(self):
        assert is_almost_zero(0.0)
        assert is_almost_zero(-1e-9)
        assert not is_almost_zero(1e-3)
        assert is_almost_zero(1e-3, tolerance=1e-2)

    def test_invalid_tolerance_fails_fast(self):
        with pytest.raises(AssertionError):
            is_almost_zero(0.0, tolerance=0.0)
