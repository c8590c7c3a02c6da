# geometry/point.py
from typing import Optional
from pydantic import Field, field_validator
import math
from geometry_helpers.geometry.constants import DEFAULT_TOLERANCE
from geometry_helpers.geometry.tolerance import is_almost_equal
from geometry_helpers.utils.base_model import ImmutableModel


class Point(ImmutableModel):
    """
    Represents a 2D point in Cartesian coordinates.

    Points are compared exactly with == and approximately with is_almost_equal(),
    which applies the scale-relative comparison to each coordinate.
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    @field_validator("x", "y")
    @classmethod
    def validate_coordinates(cls, value: float) -> float:
        """Validate that coordinates are finite numbers."""
        if not math.isfinite(value):
            raise ValueError(f"Coordinate must be a finite number, got {value}")
        return value

    def distance_to(self, other: "Point") -> float:
        """Calculate the Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_almost_equal(self, other: "Point", tolerance: Optional[float] = None) -> bool:
        """
        Check if both coordinates are almost equal to those of another point.

        Args:
            other: The point to compare with
            tolerance: Relative tolerance per coordinate.
                      If None, uses DEFAULT_TOLERANCE.

        Returns:
            True if x and y are each almost equal
        """
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE
        return (is_almost_equal(self.x, other.x, tolerance)
                and is_almost_equal(self.y, other.y, tolerance))

    def midpoint(self, other: "Point") -> "Point":
        """Calculate the midpoint between this point and another point."""
        return Point(x=(self.x + other.x) / 2, y=(self.y + other.y) / 2)

    def format_as_tuple(self) -> str:
        """Format the point as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        return self.format_as_tuple()
