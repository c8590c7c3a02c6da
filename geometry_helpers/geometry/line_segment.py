from typing import Optional
from pydantic import Field
from geometry_helpers.geometry.constants import DEFAULT_TOLERANCE
from geometry_helpers.geometry.line import Line
from geometry_helpers.geometry.point import Point
from geometry_helpers.geometry.slope import Slope
from geometry_helpers.geometry.tolerance import is_smaller_or_almost_equal
from geometry_helpers.utils.base_model import ImmutableModel


class LineSegment(ImmutableModel):
    """
    Represents a line segment between two points.

    The segment is directed: start and end are kept in the order given, and
    equality compares them pairwise. Use `normalized` to compare segments
    regardless of direction.
    """
    start: Point = Field(description="Starting point of the line segment")
    end: Point = Field(description="Ending point of the line segment")

    @property
    def line(self) -> Line:
        """The infinite line this segment lies on."""
        return Line.from_points(self.start, self.end)

    @property
    def slope(self) -> Slope:
        """The slope of this segment."""
        return Slope.from_points(self.start, self.end)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def midpoint(self) -> Point:
        return self.start.midpoint(self.end)

    @property
    def reversed(self) -> "LineSegment":
        """The same segment running from end to start."""
        return self.with_changes(start=self.end, end=self.start)

    @property
    def normalized(self) -> "LineSegment":
        """
        The segment with its endpoints in canonical order.

        The endpoint with the lower y comes first; on equal y the lower x does.
        Two segments covering the same points have equal normalized forms.
        """
        start, end = self.start, self.end
        if start.y < end.y or (start.y == end.y and start.x <= end.x):
            return self
        return self.reversed

    def contains(self, point: Point, tolerance: Optional[float] = None) -> bool:
        """
        Check if a point lies on the line segment.

        The point has to be on the underlying line. It is then checked to fall
        between the endpoints along the axis with the larger displacement.

        Args:
            point: The point to check
            tolerance: Relative tolerance for the comparisons

        Returns:
            True if the point is on the segment within the tolerance
        """
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE

        if self.start == self.end:
            return self.start.is_almost_equal(point, tolerance)

        if not self.line.contains(point, tolerance):
            return False

        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        if abs(dx) >= abs(dy):
            displacement, low, high, value = dx, self.start.x, self.end.x, point.x
        else:
            displacement, low, high, value = dy, self.start.y, self.end.y, point.y

        if displacement < 0:
            low, high = high, low

        return (is_smaller_or_almost_equal(low, value, tolerance)
                and is_smaller_or_almost_equal(value, high, tolerance))

    def is_almost_equal(self, other: "LineSegment", tolerance: Optional[float] = None) -> bool:
        """Check if start and end are almost equal to those of another segment."""
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE
        return (self.start.is_almost_equal(other.start, tolerance)
                and self.end.is_almost_equal(other.end, tolerance))

    def __str__(self) -> str:
        return f"LineSegment({self.start} -> {self.end})"
