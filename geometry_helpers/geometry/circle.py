from typing import Optional
from pydantic import Field
import logging
import math
from geometry_helpers.geometry.constants import DEFAULT_TOLERANCE
from geometry_helpers.geometry.line import Line
from geometry_helpers.geometry.point import Point
from geometry_helpers.geometry.tolerance import (
    is_almost_equal,
    is_almost_zero,
    is_smaller_or_almost_equal,
)
from geometry_helpers.utils.base_model import ImmutableModel
from geometry_helpers.utils.units import AngleLike, to_radians

logger = logging.getLogger(__name__)


class Circle(ImmutableModel):
    """
    Represents a circle by its center and radius.

    Angles are in radians, measured from the positive x-axis towards the
    positive y-axis. A circle with a (near) zero radius degenerates to its
    center point.
    """
    center: Point = Field(description="Center point of the circle")
    radius: float = Field(description="Radius of the circle")

    @classmethod
    def through(cls, center: Point, point: Point) -> "Circle":
        """Create the circle around center that passes through point."""
        return cls(center=center, radius=center.distance_to(point))

    def _squared_distance(self, point: Point) -> float:
        return (point.x - self.center.x) ** 2 + (point.y - self.center.y) ** 2

    def is_on_circle(self, point: Point, tolerance: Optional[float] = None) -> bool:
        """Check if a point lies on the circle."""
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE
        return is_almost_equal(self._squared_distance(point), self.radius ** 2, tolerance)

    def is_inside_circle(self, point: Point, tolerance: Optional[float] = None) -> bool:
        """Check if a point lies inside or on the circle."""
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE
        return is_smaller_or_almost_equal(self._squared_distance(point), self.radius ** 2, tolerance)

    def angle_for(self, point: Point, tolerance: Optional[float] = None) -> Optional[float]:
        """
        Get the angle of a point on the circle.

        Returns:
            The angle in radians in (-pi, pi], or None if the point is not on the circle
        """
        if not self.is_on_circle(point, tolerance):
            return None
        return math.atan2(point.y - self.center.y, point.x - self.center.x)

    def point_for(self, angle: AngleLike, tolerance: Optional[float] = None) -> Point:
        """
        Get the point on the circle at the given angle.

        This is the inverse of angle_for(). A circle whose radius is almost
        zero maps every angle to its center.

        Args:
            angle: Angle in radians, or a pint angle quantity
            tolerance: Absolute tolerance for the zero-radius check
        """
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE
        if is_almost_zero(self.radius, tolerance):
            return self.center

        radians = to_radians(angle)
        return Point(x=self.center.x + self.radius * math.cos(radians),
                     y=self.center.y + self.radius * math.sin(radians))

    def tangent_at(self, point: Point, tolerance: Optional[float] = None) -> Optional[Line]:
        """
        Get the tangent line at a point on the circle.

        Returns:
            The tangent line, or None if the point is not on the circle or the
            circle is degenerate
        """
        if not self.is_on_circle(point, tolerance):
            return None
        if point == self.center:
            logger.debug(f"No tangent for degenerate circle {self}")
            return None
        return Line.tangent_at(point, self.center)

    def tangent_for(self, angle: AngleLike, tolerance: Optional[float] = None) -> Optional[Line]:
        """Get the tangent line at the point on the circle with the given angle."""
        return self.tangent_at(self.point_for(angle, tolerance), tolerance)

    def is_almost_equal(self, other: "Circle", tolerance: Optional[float] = None) -> bool:
        """Check if center and radius are almost equal to those of another circle."""
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE
        return (self.center.is_almost_equal(other.center, tolerance)
                and is_almost_equal(self.radius, other.radius, tolerance))

    def __str__(self) -> str:
        return f"Circle(center={self.center}, radius={self.radius})"
