"""Mini README: Pydantic models describing the two accepted input bundles.

Structure:
    * Spatial - token-string bundle (``points``, ``lines``, ``polygons``).
    * PointType, LineType, BoundingRectangleType, BoundaryType, GPolygonType -
      structured metadata building blocks.
    * UmmSpatial - structured bundle mirroring a granule's horizontal geometry.

Models only check shape and types. Coordinate semantics (ranges, ring size,
token parsing) are enforced by the adapter and the canonical geometry types.
Unknown keys are ignored so whole metadata fragments can be passed through.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Spatial(BaseModel):
    """Raw ``"lat lon ..."`` token strings grouped by geometry kind.

    ``polygons`` holds one list per polygon; the first string of each list is
    the outer boundary and any further strings are interior rings.
    """

    model_config = ConfigDict(extra="ignore")

    points: Optional[List[str]] = None
    lines: Optional[List[str]] = None
    polygons: Optional[List[List[str]]] = None


class PointType(BaseModel):
    model_config = ConfigDict(extra="ignore")

    Longitude: float
    Latitude: float


class LineType(BaseModel):
    model_config = ConfigDict(extra="ignore")

    Points: List[PointType]


class BoundingRectangleType(BaseModel):
    model_config = ConfigDict(extra="ignore")

    WestBoundingCoordinate: float
    SouthBoundingCoordinate: float
    EastBoundingCoordinate: float
    NorthBoundingCoordinate: float


class BoundaryType(BaseModel):
    model_config = ConfigDict(extra="ignore")

    Points: List[PointType]


class GPolygonType(BaseModel):
    """Polygon with an outer boundary; exclusive zones do not widen the box."""

    model_config = ConfigDict(extra="ignore")

    Boundary: BoundaryType


class UmmSpatial(BaseModel):
    """Structured geometry bundle, e.g. ``HorizontalSpatialDomain.Geometry``."""

    model_config = ConfigDict(extra="ignore")

    Points: Optional[List[PointType]] = None
    Lines: Optional[List[LineType]] = None
    BoundingRectangles: Optional[List[BoundingRectangleType]] = None
    GPolygons: Optional[List[GPolygonType]] = None
