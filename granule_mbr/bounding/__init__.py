"""Mini README: Bounding subsystem package initialiser.

``box`` holds the interval algebra every bounder builds on, ``point`` the
closed-form point and rectangle bounders, ``edge`` the great-circle arc
bounder and ``ring`` the line and ring bounders with the pole test.
"""

from .box import (
    FULL_LONGITUDE,
    WHOLE_EARTH,
    Box,
    LatitudeInterval,
    LongitudeInterval,
    buffer_point,
    merge_latitude,
    merge_longitude,
    union_box,
)
from .edge import bound_edge, great_circle_vertex, longitude_delta
from .point import POINT_EPSILON, bound_point, bound_rectangle
from .ring import POLE_TOLERANCE, Pole, bound_line, bound_ring, enclosed_pole

__all__ = [
    "Box",
    "FULL_LONGITUDE",
    "LatitudeInterval",
    "LongitudeInterval",
    "POINT_EPSILON",
    "POLE_TOLERANCE",
    "Pole",
    "WHOLE_EARTH",
    "bound_edge",
    "bound_line",
    "bound_point",
    "bound_rectangle",
    "bound_ring",
    "buffer_point",
    "enclosed_pole",
    "great_circle_vertex",
    "longitude_delta",
    "merge_latitude",
    "merge_longitude",
    "union_box",
]
