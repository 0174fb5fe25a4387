"""Mini README: Public entry points computing one rectangle per bundle.

Structure:
    * bound_geometry - single-dispatch bounder keyed on the geometry kind.
    * bound_geometries - union of the boxes of many canonical geometries.
    * compute_mbr - token-string bundle to ``[west, south, east, north]``.
    * compute_umm_mbr - structured bundle to ``[west, south, east, north]``.
    * compute_granule_mbr - full granule metadata record to the same.

Usage:
    >>> compute_mbr({"points": ["10 35"]})
    [34.99999999, 9.99999999, 35.00000001, 10.00000001]

A result with ``west > east`` crosses the antimeridian and must not be
re-ordered by callers. Every call is a pure function of its input.
"""

from __future__ import annotations

from functools import reduce, singledispatch
from typing import Any, List, Mapping, Optional, Sequence, Union

from .bounding.box import Box, union_box
from .bounding.point import bound_point, bound_rectangle
from .bounding.ring import bound_line, bound_ring
from .configuration import MbrSettings, get_settings
from .errors import EmptyGeometryError, MalformedGeometryError
from .geometry.adapter import adapt_spatial, adapt_umm_spatial
from .geometry.bundles import Spatial, UmmSpatial
from .geometry.types import BoundingRectangle, Geometry, Line, Point, Ring
from .logging_utils import get_logger

LOGGER = get_logger(__name__)


@singledispatch
def bound_geometry(geometry: Geometry, settings: MbrSettings) -> Box:
    """Return the box of one canonical geometry."""

    raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")


@bound_geometry.register
def _(geometry: Point, settings: MbrSettings) -> Box:
    return bound_point(geometry, settings.point_epsilon)


@bound_geometry.register
def _(geometry: Line, settings: MbrSettings) -> Box:
    return bound_line(geometry)


@bound_geometry.register
def _(geometry: Ring, settings: MbrSettings) -> Box:
    return bound_ring(geometry, settings.pole_tolerance)


@bound_geometry.register
def _(geometry: BoundingRectangle, settings: MbrSettings) -> Box:
    return bound_rectangle(geometry)


def bound_geometries(geometries: Sequence[Geometry], settings: Optional[MbrSettings] = None) -> Box:
    """Union the boxes of every geometry in order."""

    if not geometries:
        raise EmptyGeometryError("No geometry to bound")
    settings = settings or get_settings()
    return reduce(union_box, (bound_geometry(geometry, settings) for geometry in geometries))


def _report(geometries: Sequence[Geometry], settings: Optional[MbrSettings]) -> List[float]:
    settings = settings or get_settings()
    box = bound_geometries(geometries, settings)
    result = box.to_list(settings.output_precision)
    LOGGER.debug("Bounded %s geometries to %s", len(geometries), result)
    return result


def compute_mbr(
    spatial: Union[Spatial, Mapping[str, Any]],
    *,
    settings: Optional[MbrSettings] = None,
) -> List[float]:
    """Bound a token-string bundle with ``points``, ``lines`` and ``polygons`` fields."""

    return _report(adapt_spatial(spatial), settings)


def compute_umm_mbr(
    spatial: Union[UmmSpatial, Mapping[str, Any]],
    *,
    settings: Optional[MbrSettings] = None,
) -> List[float]:
    """Bound a structured bundle with ``Points``, ``Lines``, ``BoundingRectangles`` and ``GPolygons``."""

    return _report(adapt_umm_spatial(spatial), settings)


def _section(parent: Mapping[str, Any], key: str, path: str) -> Mapping[str, Any]:
    value = parent.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        LOGGER.warning("Granule field %s is a %s, not an object", path, type(value).__name__)
        raise MalformedGeometryError(f"Granule field {path} must be an object, got {type(value).__name__}")
    return value


def compute_granule_mbr(
    granule: Mapping[str, Any],
    *,
    settings: Optional[MbrSettings] = None,
) -> List[float]:
    """Bound ``SpatialExtent.HorizontalSpatialDomain.Geometry`` of a granule record.

    The record may be the bare metadata document or a search result wrapping
    it under an ``umm`` key. Missing levels mean there is no geometry; levels
    that are present but not objects make the record malformed.
    """

    if not isinstance(granule, Mapping):
        raise MalformedGeometryError(f"Granule record must be an object, got {type(granule).__name__}")
    umm = _section(granule, "umm", "umm") if "umm" in granule else granule
    spatial_extent = _section(umm, "SpatialExtent", "SpatialExtent")
    horizontal = _section(spatial_extent, "HorizontalSpatialDomain", "SpatialExtent.HorizontalSpatialDomain")
    geometry = horizontal.get("Geometry")
    if not geometry:
        LOGGER.warning("Granule record has no horizontal geometry")
        raise EmptyGeometryError("Granule has no SpatialExtent.HorizontalSpatialDomain.Geometry")
    return compute_umm_mbr(geometry, settings=settings)
