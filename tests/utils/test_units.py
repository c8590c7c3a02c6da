import pytest
import math
import pint
from geometry_helpers.utils.units import degrees, to_radians, ureg


class TestToRadians:
    def test_numbers_are_radians(self):
        assert to_radians(1.5) == 1.5
        assert to_radians(2) == 2.0

    def test_degree_quantity(self):
        assert to_radians(degrees(180)) == pytest.approx(math.pi)
        assert to_radians(90 * ureg.degree) == pytest.approx(math.pi / 2)

    def test_radian_quantity(self):
        assert to_radians(0.25 * ureg.radian) == pytest.approx(0.25)

    def test_string(self):
        assert to_radians("45 degree") == pytest.approx(math.pi / 4)

    def test_non_angle_rejected(self):
        with pytest.raises(pint.DimensionalityError):
            to_radians(3 * ureg.meter)
