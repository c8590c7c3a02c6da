"""
Geometry Helpers - 2D analytic geometry primitives with tolerant float comparison
"""
import logging

# Applications decide where log records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0"

from geometry_helpers.geometry.point import Point
from geometry_helpers.geometry.slope import Slope
from geometry_helpers.geometry.line import Line, LineIntersection, IntersectionKind
from geometry_helpers.geometry.line_segment import LineSegment
from geometry_helpers.geometry.circle import Circle
from geometry_helpers.geometry.circle_arc import CircleArc, CirclePoint

__all__ = [
    'Point',
    'Slope',
    'Line',
    'LineIntersection',
    'IntersectionKind',
    'LineSegment',
    'Circle',
    'CircleArc',
    'CirclePoint',
]
