"""Mini README: Geometry adapter turning input bundles into canonical geometry.

Structure:
    * parse_coordinates - split a ``"lat lon lat lon ..."`` string into points.
    * parse_point / parse_line / parse_ring - single-geometry parsers.
    * adapt_spatial - token-string bundle to a list of canonical geometries.
    * adapt_umm_spatial - structured bundle to a list of canonical geometries.

Tokens may be separated by any mix of whitespace and commas, so ``"0, 180"``
and ``"0 180"`` are equivalent. Absent or empty fields are skipped; a bundle
that yields nothing at all raises ``EmptyGeometryError``.
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..errors import EmptyGeometryError, MalformedGeometryError
from ..logging_utils import get_logger
from .bundles import PointType, Spatial, UmmSpatial
from .types import BoundingRectangle, Geometry, Line, Point, Ring

LOGGER = get_logger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_coordinates(text: str) -> List[Point]:
    """Parse alternating latitude/longitude tokens into points."""

    if not isinstance(text, str):
        raise MalformedGeometryError(f"Expected a coordinate string, got {type(text).__name__}")
    tokens = [token for token in _SEPARATORS.split(text.strip()) if token]
    if not tokens:
        raise MalformedGeometryError("Coordinate string is empty")
    if len(tokens) % 2:
        raise MalformedGeometryError(
            f"Coordinate string '{text}' has an odd number of values ({len(tokens)})"
        )
    return [Point(latitude=tokens[i], longitude=tokens[i + 1]) for i in range(0, len(tokens), 2)]


def parse_point(text: str) -> Point:
    points = parse_coordinates(text)
    if len(points) != 1:
        raise MalformedGeometryError(f"Point '{text}' must contain exactly one latitude/longitude pair")
    return points[0]


def parse_line(text: str) -> Line:
    return Line(points=tuple(parse_coordinates(text)))


def parse_ring(text: str) -> Ring:
    return Ring(points=tuple(parse_coordinates(text)))


def _validate(model: Type[ModelT], bundle: Union[ModelT, Mapping[str, Any]]) -> ModelT:
    if isinstance(bundle, model):
        return bundle
    if not isinstance(bundle, Mapping):
        raise MalformedGeometryError(
            f"Expected a {model.__name__} or mapping, got {type(bundle).__name__}"
        )
    try:
        return model.model_validate(dict(bundle))
    except ValidationError as error:
        raise MalformedGeometryError(f"Invalid {model.__name__} bundle: {error}") from error


def _require_geometry(geometries: List[Geometry], label: str) -> List[Geometry]:
    if not geometries:
        LOGGER.warning("Rejected %s bundle without geometry", label)
        raise EmptyGeometryError(f"The {label} bundle contains no geometry")
    return geometries


def adapt_spatial(bundle: Union[Spatial, Mapping[str, Any]]) -> List[Geometry]:
    """Convert a token-string bundle into canonical geometries."""

    spatial = _validate(Spatial, bundle)
    geometries: List[Geometry] = []
    geometries.extend(parse_point(text) for text in spatial.points or [])
    geometries.extend(parse_line(text) for text in spatial.lines or [])
    for rings in spatial.polygons or []:
        if not rings:
            continue
        if len(rings) > 1:
            LOGGER.debug("Ignoring %s interior ring(s); they lie inside the outer boundary", len(rings) - 1)
        geometries.append(parse_ring(rings[0]))
    return _require_geometry(geometries, "token-string")


def _points(points: Sequence[PointType]) -> tuple:
    return tuple(Point(latitude=point.Latitude, longitude=point.Longitude) for point in points)


def adapt_umm_spatial(bundle: Union[UmmSpatial, Mapping[str, Any]]) -> List[Geometry]:
    """Convert a structured metadata bundle into canonical geometries."""

    spatial = _validate(UmmSpatial, bundle)
    geometries: List[Geometry] = []
    geometries.extend(_points(spatial.Points or []))
    geometries.extend(Line(points=_points(line.Points)) for line in spatial.Lines or [])
    geometries.extend(
        BoundingRectangle(
            west=rectangle.WestBoundingCoordinate,
            south=rectangle.SouthBoundingCoordinate,
            east=rectangle.EastBoundingCoordinate,
            north=rectangle.NorthBoundingCoordinate,
        )
        for rectangle in spatial.BoundingRectangles or []
    )
    geometries.extend(Ring(points=_points(polygon.Boundary.Points)) for polygon in spatial.GPolygons or [])
    return _require_geometry(geometries, "structured")
