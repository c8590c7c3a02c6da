from typing import Optional
from pydantic import Field
import logging
import math
from geometry_helpers.geometry.circle import Circle
from geometry_helpers.geometry.constants import DEFAULT_TOLERANCE, TWO_PI
from geometry_helpers.geometry.point import Point
from geometry_helpers.geometry.tolerance import is_almost_equal
from geometry_helpers.utils.base_model import ImmutableModel
from geometry_helpers.utils.units import AngleLike, to_radians

logger = logging.getLogger(__name__)


def normalize_angle(angle: float) -> float:
    """Map an angle in radians into [0, 2*pi)."""
    normalized = angle % TWO_PI
    # a tiny negative angle rounds up to exactly 2*pi
    if normalized >= TWO_PI:
        return 0.0
    return normalized


def _reflect_angle(angle: float) -> float:
    return normalize_angle(TWO_PI - angle)


def _angles_almost_equal(a: float, b: float, tolerance: float) -> bool:
    """
    Compare two normalized angles.

    Angles just below 2*pi are close to 0. Angles near 0 are also compared one
    turn up, so both sides of 0 get the same slack.
    """
    return (is_almost_equal(a, b, tolerance)
            or is_almost_equal(a + TWO_PI, b, tolerance)
            or is_almost_equal(a, b + TWO_PI, tolerance)
            or is_almost_equal(a + TWO_PI, b + TWO_PI, tolerance))


def _within_sweep(angle: float, start: float, end: float, tolerance: float) -> bool:
    """Check if angle lies on the range running from start to end with increasing angle."""
    # ends are measured against the angles themselves, not against the sweep
    if _angles_almost_equal(angle, start, tolerance) or _angles_almost_equal(angle, end, tolerance):
        return True
    return normalize_angle(angle - start) <= normalize_angle(end - start)


class CirclePoint(ImmutableModel):
    """A point on a circle together with its angle, so neither has to be recalculated."""
    point: Point = Field(description="The point on the circle")
    angle: float = Field(description="Angle of the point in radians")

    def is_almost_equal(self, other: "CirclePoint", tolerance: Optional[float] = None) -> bool:
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE
        return (self.point.is_almost_equal(other.point, tolerance)
                and is_almost_equal(self.angle, other.angle, tolerance))


class CircleArc(ImmutableModel):
    """
    Represents the part of a circle between a start and an end angle.

    A clockwise arc runs from start.angle to end.angle with increasing angle,
    a counterclockwise arc with decreasing angle. Both angles are normalized
    into [0, 2*pi) and both points lie on the circle.

    Use the from_* constructors; they compute the angles and points and make
    sure both ends lie on the circle.
    """
    circle: Circle = Field(description="The circle the arc is part of")
    start: CirclePoint = Field(description="Start of the arc")
    end: CirclePoint = Field(description="End of the arc")
    is_clockwise: bool = Field(description="Winding direction from start to end")

    @classmethod
    def from_points(cls,
                    circle: Circle,
                    start_point: Point,
                    end_point: Point,
                    clockwise: bool,
                    tolerance: Optional[float] = None) -> Optional["CircleArc"]:
        """
        Create an arc between two points on a circle.

        Returns:
            The arc, or None if either point is not on the circle
        """
        start_angle = circle.angle_for(start_point, tolerance)
        end_angle = circle.angle_for(end_point, tolerance)
        if start_angle is None or end_angle is None:
            logger.debug(f"Cannot create arc on {circle}: {start_point} or {end_point} is not on the circle")
            return None

        return cls(circle=circle,
                   start=CirclePoint(point=start_point, angle=normalize_angle(start_angle)),
                   end=CirclePoint(point=end_point, angle=normalize_angle(end_angle)),
                   is_clockwise=clockwise)

    @classmethod
    def from_angles(cls,
                    circle: Circle,
                    start_angle: AngleLike,
                    end_angle: AngleLike,
                    clockwise: bool) -> "CircleArc":
        """Create an arc between two angles (radians or pint angle quantities)."""
        start_angle = normalize_angle(to_radians(start_angle))
        end_angle = normalize_angle(to_radians(end_angle))
        return cls(circle=circle,
                   start=CirclePoint(point=circle.point_for(start_angle), angle=start_angle),
                   end=CirclePoint(point=circle.point_for(end_angle), angle=end_angle),
                   is_clockwise=clockwise)

    @classmethod
    def from_center(cls,
                    center: Point,
                    start_point: Point,
                    end_point: Point,
                    clockwise: bool,
                    tolerance: Optional[float] = None) -> Optional["CircleArc"]:
        """
        Create an arc around center from start_point to end_point.

        The radius is the distance from center to start_point.

        Returns:
            The arc, or None if end_point is not on that circle
        """
        circle = Circle.through(center, start_point)
        return cls.from_points(circle, start_point, end_point, clockwise, tolerance)

    @classmethod
    def from_center_and_angle(cls,
                              center: Point,
                              start_point: Point,
                              end_angle: AngleLike,
                              clockwise: bool,
                              tolerance: Optional[float] = None) -> "CircleArc":
        """
        Create an arc around center from start_point to the given end angle.

        The radius is the distance from center to start_point.
        """
        circle = Circle.through(center, start_point)
        start_angle = math.atan2(start_point.y - center.y, start_point.x - center.x)
        end_angle = normalize_angle(to_radians(end_angle))
        return cls(circle=circle,
                   start=CirclePoint(point=start_point, angle=normalize_angle(start_angle)),
                   end=CirclePoint(point=circle.point_for(end_angle, tolerance), angle=end_angle),
                   is_clockwise=clockwise)

    @property
    def sweep(self) -> float:
        """The angle covered by the arc in its winding direction, in [0, 2*pi)."""
        if self.is_clockwise:
            return normalize_angle(self.end.angle - self.start.angle)
        return normalize_angle(self.start.angle - self.end.angle)

    def contains_angle(self, angle: AngleLike, tolerance: Optional[float] = None) -> bool:
        """
        Check if the given angle is on the arc.

        A counterclockwise arc is mirrored onto the equivalent clockwise arc
        by reflecting the query, start and end angles.

        Args:
            angle: Angle in radians, or a pint angle quantity
            tolerance: Relative tolerance at the ends of the arc
        """
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE

        angle = normalize_angle(to_radians(angle))
        if self.is_clockwise:
            return _within_sweep(angle, self.start.angle, self.end.angle, tolerance)
        return _within_sweep(_reflect_angle(angle),
                             _reflect_angle(self.start.angle),
                             _reflect_angle(self.end.angle),
                             tolerance)

    def contains_point(self, point: Point, tolerance: Optional[float] = None) -> bool:
        """Check if the given point is on the arc."""
        angle = self.circle.angle_for(point, tolerance)
        if angle is None:
            return False
        return self.contains_angle(angle, tolerance)

    def clockwise(self) -> "CircleArc":
        """A copy of this arc running clockwise; start and end are kept."""
        return self.with_changes(is_clockwise=True)

    def counter_clockwise(self) -> "CircleArc":
        """A copy of this arc running counterclockwise; start and end are kept."""
        return self.with_changes(is_clockwise=False)

    def is_almost_equal(self, other: "CircleArc", tolerance: Optional[float] = None) -> bool:
        """Check if the direction matches and circle and both ends are almost equal."""
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE
        return (self.is_clockwise == other.is_clockwise
                and self.circle.is_almost_equal(other.circle, tolerance)
                and self.start.is_almost_equal(other.start, tolerance)
                and self.end.is_almost_equal(other.end, tolerance))
