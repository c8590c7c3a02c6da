"""
Angle unit handling.

Angles are plain floats in radians throughout the package. Callers holding an
angle in other units may pass a pint quantity (or a string such as "90 degree")
and it is converted here at the boundary.
"""
from typing import Union
import pint

ureg = pint.UnitRegistry()

AngleLike = Union[float, int, str, pint.Quantity]


def to_radians(angle: AngleLike) -> float:
    """
    Convert an angle to a float in radians.

    Args:
        angle: A number (already in radians), a pint quantity with angular
               units, or a string pint can parse (e.g. "45 degree")

    Returns:
        The angle in radians

    Raises:
        pint.DimensionalityError: If the quantity does not have angular units
    """
    if isinstance(angle, (int, float)):
        return float(angle)
    return float(ureg.Quantity(angle).to(ureg.radian).magnitude)


def degrees(value: float) -> pint.Quantity:
    """Create an angle quantity in degrees."""
    return value * ureg.degree
