from enum import Enum, auto
from typing import Optional
from pydantic import Field, model_validator
import logging
import math
from geometry_helpers.geometry.constants import DEFAULT_TOLERANCE
from geometry_helpers.geometry.point import Point
from geometry_helpers.geometry.slope import Slope
from geometry_helpers.geometry.tolerance import is_almost_equal
from geometry_helpers.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class IntersectionKind(Enum):
    """The possible outcomes of intersecting two lines."""
    SAME_LINE = auto()  # infinitely many intersection points
    PARALLEL = auto()  # no intersection points
    INTERSECT = auto()  # exactly one intersection point


class LineIntersection(ImmutableModel):
    """
    Result of intersecting two lines.

    point is set if and only if kind is INTERSECT.
    """
    kind: IntersectionKind = Field(description="Classification of the intersection")
    point: Optional[Point] = Field(default=None, description="The unique intersection point")

    @model_validator(mode="after")
    def validate_point_matches_kind(self) -> "LineIntersection":
        """Ensure only a unique intersection carries a point."""
        if (self.kind is IntersectionKind.INTERSECT) != (self.point is not None):
            raise ValueError(f"An intersection of kind {self.kind.name} cannot have point {self.point}")
        return self

    @classmethod
    def same_line(cls) -> "LineIntersection":
        return cls(kind=IntersectionKind.SAME_LINE)

    @classmethod
    def parallel(cls) -> "LineIntersection":
        return cls(kind=IntersectionKind.PARALLEL)

    @classmethod
    def intersect_at(cls, point: Point) -> "LineIntersection":
        return cls(kind=IntersectionKind.INTERSECT, point=point)


class Line(ImmutableModel):
    """
    Represents an infinite line `(y - point.y) = (x - point.x) * slope`.

    The point is canonicalized on construction, so two lines describing the
    same set of points have the same point:
    - a horizontal line has x = 0
    - a vertical line has y = 0
    - any other line has x = 0 and y equal to its y-intercept

    The slope is a Slope rather than a float so callers have to deal with the
    horizontal and vertical cases explicitly.

    A steep line far from the y-axis can have a y-intercept beyond the float
    range. Such a line cannot be represented and construction raises a
    ValueError.
    """
    point: Point = Field(description="Canonical point on the line")
    slope: Slope = Field(description="Slope of the line")

    @model_validator(mode="after")
    def canonicalize_point(self) -> "Line":
        """Replace the given point with the canonical point of the line."""
        if self.slope.is_horizontal:
            canonical = Point(x=0.0, y=self.point.y)
        elif self.slope.is_vertical:
            canonical = Point(x=self.point.x, y=0.0)
        else:
            intercept = self.slope.raw_value * (0.0 - self.point.x) + self.point.y
            if not math.isfinite(intercept):
                raise ValueError(f"y-intercept of line through {self.point} with slope {self.slope} "
                                 f"is out of float range")
            canonical = Point(x=0.0, y=intercept)

        if canonical != self.point:
            object.__setattr__(self, "point", canonical)
        return self

    @classmethod
    def from_points(cls, start: Point, end: Point) -> "Line":
        """Create the line going through two points."""
        return cls(point=start, slope=Slope.from_points(start, end))

    @classmethod
    def vertical_at(cls, x: float) -> "Line":
        """Create a vertical line at the given x position."""
        return cls(point=Point(x=x, y=0.0), slope=Slope.vertical())

    @classmethod
    def horizontal_at(cls, y: float) -> "Line":
        """Create a horizontal line at the given y position."""
        return cls(point=Point(x=0.0, y=y), slope=Slope.horizontal())

    @classmethod
    def from_slope_intercept(cls, slope: Slope, b: float) -> "Line":
        """Create a line in the form `y = slope * x + b`."""
        return cls(point=Point(x=0.0, y=b), slope=slope)

    @classmethod
    def tangent_at(cls, point_on_circle: Point, center: Point) -> "Line":
        """
        Create the tangent to a circle at a point on that circle.

        The tangent is the line through point_on_circle perpendicular to the
        radius running from point_on_circle to center.

        Args:
            point_on_circle: The point on the circle to touch
            center: The center of the circle

        Raises:
            ValueError: If point_on_circle and center coincide
        """
        if point_on_circle == center:
            raise ValueError(f"Tangent is undefined: point {point_on_circle} is the circle center")
        radius_slope = Slope.from_points(point_on_circle, center)
        return cls(point=point_on_circle, slope=radius_slope.perpendicular)

    @property
    def is_horizontal(self) -> bool:
        return self.slope.is_horizontal

    @property
    def is_vertical(self) -> bool:
        return self.slope.is_vertical

    def y_value(self, x: float) -> Optional[float]:
        """
        Calculate the y value for a given x, if it uniquely exists.

        Vertical lines have infinitely many y values for their x, so None is
        returned for them.
        """
        if self.is_vertical:
            return None
        if self.is_horizontal:
            return self.point.y
        return self.slope.raw_value * (x - self.point.x) + self.point.y

    def x_value(self, y: float) -> Optional[float]:
        """
        Calculate the x value for a given y, if it uniquely exists.

        Horizontal lines have infinitely many x values for their y, so None is
        returned for them.
        """
        if self.is_horizontal:
            return None
        if self.is_vertical:
            return self.point.x
        return (y - self.point.y) / self.slope.raw_value + self.point.x

    def point_for_x(self, x: float) -> Optional[Point]:
        """The point on the line at x, or None for a vertical line."""
        y = self.y_value(x)
        if y is None:
            return None
        return Point(x=x, y=y)

    def point_for_y(self, y: float) -> Optional[Point]:
        """The point on the line at y, or None for a horizontal line."""
        x = self.x_value(y)
        if x is None:
            return None
        return Point(x=x, y=y)

    def contains(self, point: Point, tolerance: Optional[float] = None) -> bool:
        """
        Check if a point lies on the line.

        Args:
            point: The point to check
            tolerance: Relative tolerance for the coordinate comparison

        Returns:
            True if the point is on the line within the tolerance
        """
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE

        if self.is_horizontal:
            return is_almost_equal(self.point.y, point.y, tolerance)
        if self.is_vertical:
            return is_almost_equal(self.point.x, point.x, tolerance)
        return is_almost_equal(self.y_value(point.x), point.y, tolerance)

    def perpendicular_at(self, point: Point, tolerance: Optional[float] = None) -> Optional["Line"]:
        """
        Get the line perpendicular to this one going through point.

        Returns:
            The perpendicular line, or None if point is not on this line
        """
        if not self.contains(point, tolerance):
            return None
        return Line(point=point, slope=self.slope.perpendicular)

    def is_almost_equal(self, other: "Line", tolerance: Optional[float] = None) -> bool:
        """Check if both the canonical point and the slope are almost equal."""
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE
        return (self.point.is_almost_equal(other.point, tolerance)
                and self.slope.is_almost_equal(other.slope, tolerance))

    def intersect(self, other: "Line", tolerance: Optional[float] = None) -> LineIntersection:
        """
        Intersect this line with another line.

        Lines with exactly equal slopes are either the same line (when their
        canonical points are almost equal) or parallel. Any other pair meets
        in exactly one point. Nearly parallel lines whose meeting point lies
        beyond the float range are reported as parallel.

        Args:
            other: The line to intersect with
            tolerance: Tolerance used to decide whether equal-slope lines coincide

        Returns:
            A LineIntersection describing the outcome
        """
        if self.slope == other.slope:
            if self.is_almost_equal(other, tolerance):
                logger.debug(f"Lines {self} and {other} are the same line")
                return LineIntersection.same_line()
            logger.debug(f"Lines {self} and {other} are parallel")
            return LineIntersection.parallel()

        # The slopes differ, so at most one of the lines is vertical and at
        # most one is horizontal.
        if self.is_vertical:
            x = self.point.x
            return self._meeting_at(other, x, other.y_value(x))
        if other.is_vertical:
            x = other.point.x
            return self._meeting_at(other, x, self.y_value(x))
        if self.is_horizontal:
            y = self.point.y
            return self._meeting_at(other, other.x_value(y), y)
        if other.is_horizontal:
            y = other.point.y
            return self._meeting_at(other, self.x_value(y), y)

        s1, p1 = self.slope.raw_value, self.point
        s2, p2 = other.slope.raw_value, other.point
        x = ((s2 * p2.x - s1 * p1.x) - (p2.y - p1.y)) / (s2 - s1)
        return self._meeting_at(other, x, self.y_value(x))

    def _meeting_at(self, other: "Line", x: float, y: float) -> LineIntersection:
        if not (math.isfinite(x) and math.isfinite(y)):
            logger.debug(f"Lines {self} and {other} meet outside the float range, treating them as parallel")
            return LineIntersection.parallel()
        return LineIntersection.intersect_at(Point(x=x, y=y))

    def intersection_point(self, other: "Line", tolerance: Optional[float] = None) -> Optional[Point]:
        """
        Get the unique intersection point with another line.

        Returns:
            The intersection point, or None for the same or parallel lines
        """
        return self.intersect(other, tolerance).point

    def __str__(self) -> str:
        if self.is_horizontal:
            return f"y = {self.point.y}"
        if self.is_vertical:
            return f"x = {self.point.x}"
        return f"y = {self.slope.raw_value} * x + {self.point.y}"
