"""Mini README: Bounding box of a single great-circle arc.

Structure:
    * great_circle_vertex - highest latitude of the circle through two points
      and the longitude where it is reached.
    * bound_edge - box of the minor arc between two points.

An arc between two points is not a straight segment in longitude/latitude
space. Away from the equator it bows poleward, so its extreme latitude can
exceed both endpoint latitudes. The circle's northern vertex lies at latitude
``atan2(|n_xy|, |n_z|)`` where ``n`` is the normal of the circle's plane; this is
Clairaut's relation written in vector form. The southern vertex mirrors it
through the Earth's centre. A vertex widens the arc's latitude range only when
its longitude falls inside the arc's longitude span, because a non-meridian
great circle crosses each meridian exactly once.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from ..errors import DegenerateArcError
from ..geometry.types import Point, normalise_longitude
from ..logging_utils import get_logger
from .box import FULL_LONGITUDE, Box, LatitudeInterval, LongitudeInterval, merge_longitude

LOGGER = get_logger(__name__)


def _unit_vector(point: Point) -> np.ndarray:
    latitude = math.radians(point.latitude)
    longitude = math.radians(point.longitude)
    return np.array(
        [
            math.cos(latitude) * math.cos(longitude),
            math.cos(latitude) * math.sin(longitude),
            math.sin(latitude),
        ]
    )


def longitude_delta(start: float, end: float) -> float:
    """Signed eastward change from ``start`` to ``end`` taken the short way, in (-180, 180]."""

    delta = (end - start) % 360.0
    if delta > 180.0:
        delta -= 360.0
    return delta


def great_circle_vertex(start: Point, end: Point) -> Tuple[float, float]:
    """Return ``(latitude, longitude)`` of the northern vertex of the circle through both points.

    The circle must not be a meridian, i.e. the endpoints must differ in
    longitude by neither 0 nor 180 degrees and neither may be a pole.
    """

    normal = np.cross(_unit_vector(start), _unit_vector(end))
    horizontal = float(np.hypot(normal[0], normal[1]))
    vertical = float(normal[2])
    latitude = math.degrees(math.atan2(horizontal, abs(vertical)))
    # The vertex points away from the normal's horizontal component when the
    # normal leans north and along it when it leans south.
    sign = 1.0 if vertical > 0.0 else -1.0
    longitude = math.degrees(math.atan2(-sign * float(normal[1]), -sign * float(normal[0])))
    return latitude, normalise_longitude(longitude)


def bound_edge(start: Point, end: Point) -> Box:
    """Return the box of the minor great-circle arc from ``start`` to ``end``."""

    if start.coincides(end):
        raise DegenerateArcError(f"Arc endpoints {start} and {end} are identical")
    if start.is_antipodal_to(end):
        raise DegenerateArcError(f"Arc endpoints {start} and {end} are antipodal")

    south = min(start.latitude, end.latitude)
    north = max(start.latitude, end.latitude)

    if start.is_polar or end.is_polar:
        # The arc runs along the meridian of the non-polar endpoint.
        anchor = end if start.is_polar else start
        return Box(LongitudeInterval.at(anchor.longitude), LatitudeInterval(south, north))

    delta = longitude_delta(start.longitude, end.longitude)
    if delta == 0.0:
        return Box(LongitudeInterval.at(start.longitude), LatitudeInterval(south, north))
    if delta == 180.0:
        # The arc passes over whichever pole is nearer to both endpoints.
        LOGGER.debug("Arc %s -> %s crosses a pole; widening to full longitude", start, end)
        if start.latitude + end.latitude > 0.0:
            return Box(FULL_LONGITUDE, LatitudeInterval(south, 90.0))
        return Box(FULL_LONGITUDE, LatitudeInterval(-90.0, north))

    longitude = merge_longitude(
        LongitudeInterval.at(start.longitude), LongitudeInterval.at(end.longitude)
    )
    vertex_latitude, vertex_longitude = great_circle_vertex(start, end)
    if longitude.contains(vertex_longitude):
        north = max(north, vertex_latitude)
    if longitude.contains(normalise_longitude(vertex_longitude + 180.0)):
        south = min(south, -vertex_latitude)
    return Box(longitude, LatitudeInterval(max(-90.0, south), min(90.0, north)))
