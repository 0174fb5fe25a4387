"""Mini README: Geometry subsystem package initialiser.

Splits into ``types`` for the canonical immutable geometries, ``bundles`` for
the Pydantic input models and ``adapter`` for the conversion between them.
"""

from .adapter import adapt_spatial, adapt_umm_spatial, parse_coordinates, parse_line, parse_point, parse_ring
from .bundles import (
    BoundaryType,
    BoundingRectangleType,
    GPolygonType,
    LineType,
    PointType,
    Spatial,
    UmmSpatial,
)
from .types import BoundingRectangle, Geometry, Line, Point, Ring, normalise_longitude

__all__ = [
    "BoundaryType",
    "BoundingRectangle",
    "BoundingRectangleType",
    "GPolygonType",
    "Geometry",
    "Line",
    "LineType",
    "Point",
    "PointType",
    "Ring",
    "Spatial",
    "UmmSpatial",
    "adapt_spatial",
    "adapt_umm_spatial",
    "normalise_longitude",
    "parse_coordinates",
    "parse_line",
    "parse_point",
    "parse_ring",
]
