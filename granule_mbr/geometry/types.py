"""Mini README: Canonical geometry value types.

Structure:
    * normalise_longitude - fold any longitude into (-180, 180].
    * Point - immutable latitude/longitude pair.
    * Line - ordered sequence of at least two distinct points.
    * Ring - implicitly closed polygon boundary of at least three distinct points.
    * BoundingRectangle - box supplied directly by structured metadata.
    * Geometry - union of the four kinds, consumed by the bounders.

Every type validates itself on construction and raises
``MalformedGeometryError`` so the bounders can assume well-formed input.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from ..errors import MalformedGeometryError


def normalise_longitude(longitude: float) -> float:
    """Return the equivalent longitude in (-180, 180]; in-range values pass through untouched."""

    if -180.0 < longitude <= 180.0:
        return longitude
    wrapped = math.fmod(longitude + 180.0, 360.0)
    if wrapped <= 0.0:
        wrapped += 360.0
    return wrapped - 180.0


def _require_finite(value: float, label: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as error:
        raise MalformedGeometryError(f"{label} '{value}' is not a number") from error
    if not math.isfinite(number):
        raise MalformedGeometryError(f"{label} must be finite, got {value}")
    return number


@dataclass(frozen=True, slots=True)
class Point:
    """Single position in degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        latitude = _require_finite(self.latitude, "Latitude")
        longitude = _require_finite(self.longitude, "Longitude")
        if not -90.0 <= latitude <= 90.0:
            raise MalformedGeometryError(f"Latitude {latitude} is outside [-90, 90]")
        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", normalise_longitude(longitude))

    @property
    def is_polar(self) -> bool:
        """True when the point sits exactly on either pole."""

        return abs(self.latitude) == 90.0

    def coincides(self, other: "Point") -> bool:
        """Positional equality; all longitudes at a pole name the same place."""

        if self.latitude != other.latitude:
            return False
        return self.is_polar or self.longitude == other.longitude

    def is_antipodal_to(self, other: "Point") -> bool:
        if self.latitude != -other.latitude:
            return False
        if self.is_polar:
            return True
        return abs(self.longitude - other.longitude) == 180.0


def _distinct_count(points: Iterable[Point]) -> int:
    distinct: list[Point] = []
    for point in points:
        if not any(point.coincides(seen) for seen in distinct):
            distinct.append(point)
    return len(distinct)


@dataclass(frozen=True, slots=True)
class Line:
    """Open polyline whose segments are great-circle arcs."""

    points: Tuple[Point, ...]

    def __post_init__(self) -> None:
        points = tuple(self.points)
        if _distinct_count(points) < 2:
            raise MalformedGeometryError("A line needs at least two distinct points")
        object.__setattr__(self, "points", points)


@dataclass(frozen=True, slots=True)
class Ring:
    """Closed polygon boundary; the last point connects back to the first.

    A trailing point that repeats the first one is dropped so explicitly and
    implicitly closed rings are the same value.
    """

    points: Tuple[Point, ...]

    def __post_init__(self) -> None:
        points = tuple(self.points)
        if len(points) > 1 and points[-1].coincides(points[0]):
            points = points[:-1]
        if _distinct_count(points) < 3:
            raise MalformedGeometryError("A ring needs at least three distinct points")
        object.__setattr__(self, "points", points)

    def edges(self) -> Iterable[Tuple[Point, Point]]:
        """Yield consecutive point pairs including the closing edge."""

        count = len(self.points)
        for index in range(count):
            yield self.points[index], self.points[(index + 1) % count]


@dataclass(frozen=True, slots=True)
class BoundingRectangle:
    """Explicit west/south/east/north box; ``west > east`` wraps the antimeridian."""

    west: float
    south: float
    east: float
    north: float

    def __post_init__(self) -> None:
        for name in ("west", "south", "east", "north"):
            object.__setattr__(self, name, _require_finite(getattr(self, name), name.capitalize()))
        if not (-180.0 <= self.west <= 180.0 and -180.0 <= self.east <= 180.0):
            raise MalformedGeometryError(
                f"Rectangle longitudes must lie in [-180, 180], got west={self.west} east={self.east}"
            )
        if not (-90.0 <= self.south <= self.north <= 90.0):
            raise MalformedGeometryError(
                f"Rectangle latitudes must satisfy -90 <= south <= north <= 90, "
                f"got south={self.south} north={self.north}"
            )


Geometry = Union[Point, Line, Ring, BoundingRectangle]
