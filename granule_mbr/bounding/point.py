"""Mini README: Bounders for geometries whose box is known in closed form.

Structure:
    * bound_point - epsilon-buffered box for a bare point.
    * bound_rectangle - box taken verbatim from a supplied rectangle.
"""

from __future__ import annotations

from ..geometry.types import BoundingRectangle, Point
from .box import Box, LatitudeInterval, LongitudeInterval, buffer_point

POINT_EPSILON = 1e-8


def bound_point(point: Point, epsilon: float = POINT_EPSILON) -> Box:
    """Return a non-degenerate box around ``point`` usable by spatial indexes."""

    return buffer_point(point, epsilon)


def bound_rectangle(rectangle: BoundingRectangle) -> Box:
    """Rectangles already have extent, so no epsilon is applied."""

    return Box(
        LongitudeInterval(rectangle.west, rectangle.east),
        LatitudeInterval(rectangle.south, rectangle.north),
    )
