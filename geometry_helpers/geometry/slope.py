# geometry/slope.py
from typing import Optional
from pydantic import Field, field_validator
import math
from geometry_helpers.geometry.constants import DEFAULT_TOLERANCE
from geometry_helpers.geometry.point import Point
from geometry_helpers.geometry.tolerance import is_almost_equal
from geometry_helpers.utils.base_model import ImmutableModel


class Slope(ImmutableModel):
    """
    The slope of a line.

    The raw value is normalized on construction so that the two degenerate
    cases have exactly one representation each:
    - any zero (including -0.0) becomes 0.0, a horizontal line
    - any infinity becomes +inf, a vertical line

    Consumers should check is_horizontal / is_vertical before doing arithmetic
    with raw_value.
    """
    raw_value: float = Field(description="Rise over run; 0.0 for horizontal, +inf for vertical")

    @field_validator("raw_value")
    @classmethod
    def normalize_raw_value(cls, value: float) -> float:
        """Collapse signed zeros and infinities onto the two sentinels."""
        if math.isnan(value):
            raise ValueError("Slope cannot be NaN")
        if value == 0:
            return 0.0
        if math.isinf(value):
            return math.inf
        return value

    @classmethod
    def horizontal(cls) -> "Slope":
        """A slope that indicates a strictly horizontal line."""
        return cls(raw_value=0.0)

    @classmethod
    def vertical(cls) -> "Slope":
        """A slope that indicates a strictly vertical line."""
        return cls(raw_value=math.inf)

    @classmethod
    def from_points(cls, start: Point, end: Point) -> "Slope":
        """
        Get the slope of the line going through two points.

        Only an exactly equal coordinate produces a degenerate slope. Identical
        points yield a vertical slope.
        """
        horizontal_displacement = end.x - start.x
        vertical_displacement = end.y - start.y

        if horizontal_displacement == 0:
            return cls.vertical()
        if vertical_displacement == 0:
            return cls.horizontal()
        return cls(raw_value=vertical_displacement / horizontal_displacement)

    @property
    def is_horizontal(self) -> bool:
        return self.raw_value == 0

    @property
    def is_vertical(self) -> bool:
        return math.isinf(self.raw_value)

    @property
    def value_if_available(self) -> Optional[float]:
        """The slope as a number, or None for a vertical slope."""
        return None if self.is_vertical else self.raw_value

    @property
    def perpendicular(self) -> "Slope":
        """The slope perpendicular to this one."""
        if self.is_horizontal:
            return Slope.vertical()
        if self.is_vertical:
            return Slope.horizontal()
        return Slope(raw_value=-1.0 / self.raw_value)

    def is_almost_equal(self, other: "Slope", tolerance: Optional[float] = None) -> bool:
        """Check if this slope is almost equal to another; vertical only equals vertical."""
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE
        if self.is_vertical or other.is_vertical:
            return self.is_vertical and other.is_vertical
        return is_almost_equal(self.raw_value, other.raw_value, tolerance)

    def __str__(self) -> str:
        if self.is_vertical:
            return "vertical"
        if self.is_horizontal:
            return "horizontal"
        return str(self.raw_value)
