"""Mini README: Line and ring bounders.

Structure:
    * Pole - enum naming the enclosed pole.
    * bound_line - union of arc boxes along an open polyline.
    * enclosed_pole - winding test deciding whether a ring circles a pole.
    * bound_ring - union of arc boxes around a closed ring plus the pole test.

The pole test is a property of the whole ring rather than of any arc. It sums
the signed short-way longitude change along every edge; a ring that goes once
around a pole accumulates +/-360 degrees while any other ring returns to zero.
The pole is chosen by the sign of the mean vertex latitude, falling back to the
winding direction (counter-clockwise seen from above means north) when the
mean is exactly zero. Vertices sitting on a pole are skipped because their
longitude carries no information.
"""

from __future__ import annotations

from enum import Enum
from functools import reduce
from typing import Iterable, Optional, Tuple

import numpy as np

from ..geometry.types import Line, Point, Ring
from ..logging_utils import get_logger
from .box import FULL_LONGITUDE, Box, LatitudeInterval, union_box
from .edge import bound_edge

LOGGER = get_logger(__name__)

POLE_TOLERANCE = 1e-6


class Pole(str, Enum):
    NORTH = "north"
    SOUTH = "south"


def _union_edges(edges: Iterable[Tuple[Point, Point]]) -> Box:
    # Repeated consecutive points are zero-length edges and contribute nothing.
    boxes = [bound_edge(start, end) for start, end in edges if not start.coincides(end)]
    return reduce(union_box, boxes)


def bound_line(line: Line) -> Box:
    """Return the box of every arc along ``line``; no closing edge is added."""

    box = _union_edges(zip(line.points, line.points[1:]))
    LOGGER.debug("Line with %s points bounded by %s", len(line.points), box.to_list())
    return box


def enclosed_pole(ring: Ring, tolerance: float = POLE_TOLERANCE) -> Optional[Pole]:
    """Return the pole circled by ``ring`` or ``None``."""

    vertices = [point for point in ring.points if not point.is_polar]
    if len(vertices) < 2:
        return None
    longitudes = np.array([point.longitude for point in vertices])
    deltas = np.diff(np.append(longitudes, longitudes[0])) % 360.0
    deltas = np.where(deltas > 180.0, deltas - 360.0, deltas)
    winding = float(deltas.sum())
    if abs(abs(winding) - 360.0) > tolerance:
        return None

    mean_latitude = float(np.mean([point.latitude for point in ring.points]))
    if mean_latitude > 0.0:
        return Pole.NORTH
    if mean_latitude < 0.0:
        return Pole.SOUTH
    return Pole.NORTH if winding > 0.0 else Pole.SOUTH


def bound_ring(ring: Ring, pole_tolerance: float = POLE_TOLERANCE) -> Box:
    """Return the box of ``ring``, widened to the full circle when it encloses a pole."""

    box = _union_edges(ring.edges())
    pole = enclosed_pole(ring, pole_tolerance)
    if pole is Pole.NORTH:
        box = Box(FULL_LONGITUDE, LatitudeInterval(box.south, 90.0))
    elif pole is Pole.SOUTH:
        box = Box(FULL_LONGITUDE, LatitudeInterval(-90.0, box.north))
    if pole is not None:
        LOGGER.debug("Ring with %s vertices encloses the %s pole", len(ring.points), pole.value)
    LOGGER.debug("Ring with %s vertices bounded by %s", len(ring.points), box.to_list())
    return box
