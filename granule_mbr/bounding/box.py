"""Mini README: Box algebra shared by every bounder.

Structure:
    * LongitudeInterval - (west, east) pair; ``west > east`` wraps the antimeridian.
    * LatitudeInterval - ordinary (south, north) pair.
    * Box - the pair of intervals, reported as ``[west, south, east, north]``.
    * merge_longitude / merge_latitude / union_box - smallest enclosing merges.
    * buffer_point - epsilon box around a single point.

Longitude merging works on the circle: the result is the narrowest interval
covering both inputs. When two candidates are equally narrow the one with
``west <= east`` wins, so two bare longitudes exactly 180 degrees apart merge
to ``(min, max)``. If both still tie, the smaller ``west`` wins. The choice
never depends on argument order. A full circle is always ``(-180, 180)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..geometry.types import Point, normalise_longitude

# Absorbs rounding in interval arithmetic; far below the point epsilon.
_SLACK = 1e-10


@dataclass(frozen=True, slots=True)
class LongitudeInterval:
    west: float
    east: float

    @property
    def is_full(self) -> bool:
        return self.west == -180.0 and self.east == 180.0

    @property
    def crosses_antimeridian(self) -> bool:
        return self.west > self.east

    @property
    def width(self) -> float:
        """Angular extent in degrees, measured eastward from west to east."""

        if self.is_full:
            return 360.0
        if self.west <= self.east:
            return self.east - self.west
        return 360.0 - (self.west - self.east)

    def contains(self, longitude: float) -> bool:
        """True when the longitude lies on the eastward sweep from west to east."""

        if self.is_full:
            return True
        return (longitude - self.west) % 360.0 <= self.width + _SLACK

    def covers(self, other: "LongitudeInterval") -> bool:
        if self.is_full:
            return True
        if other.is_full:
            return False
        return (other.west - self.west) % 360.0 + other.width <= self.width + _SLACK

    @classmethod
    def at(cls, longitude: float) -> "LongitudeInterval":
        return cls(longitude, longitude)


FULL_LONGITUDE = LongitudeInterval(-180.0, 180.0)


@dataclass(frozen=True, slots=True)
class LatitudeInterval:
    south: float
    north: float

    def contains(self, latitude: float) -> bool:
        return self.south <= latitude <= self.north


@dataclass(frozen=True, slots=True)
class Box:
    """Axis-aligned rectangle in longitude/latitude space."""

    longitude: LongitudeInterval
    latitude: LatitudeInterval

    @property
    def west(self) -> float:
        return self.longitude.west

    @property
    def south(self) -> float:
        return self.latitude.south

    @property
    def east(self) -> float:
        return self.longitude.east

    @property
    def north(self) -> float:
        return self.latitude.north

    @property
    def crosses_antimeridian(self) -> bool:
        return self.longitude.crosses_antimeridian

    @property
    def width(self) -> float:
        return self.longitude.width

    def to_list(self, precision: Optional[int] = None) -> List[float]:
        """Return ``[west, south, east, north]``, optionally rounded."""

        values = [self.west, self.south, self.east, self.north]
        if precision is None:
            return values
        return [round(value, precision) for value in values]

    @classmethod
    def from_list(cls, values: Sequence[float]) -> "Box":
        if len(values) != 4:
            raise ValueError("Box values must be (west, south, east, north)")
        west, south, east, north = (float(value) for value in values)
        return cls(LongitudeInterval(west, east), LatitudeInterval(south, north))


WHOLE_EARTH = Box(FULL_LONGITUDE, LatitudeInterval(-90.0, 90.0))


def merge_longitude(a: LongitudeInterval, b: LongitudeInterval) -> LongitudeInterval:
    """Return the narrowest interval containing both ``a`` and ``b``."""

    if a.covers(b):
        return a
    if b.covers(a):
        return b
    candidates = [
        candidate
        for candidate in (LongitudeInterval(a.west, b.east), LongitudeInterval(b.west, a.east))
        if candidate.covers(a) and candidate.covers(b)
    ]
    if not candidates:
        # Together the two intervals wrap the whole circle.
        return FULL_LONGITUDE
    return min(
        candidates,
        key=lambda candidate: (candidate.width, candidate.crosses_antimeridian, candidate.west),
    )


def merge_latitude(a: LatitudeInterval, b: LatitudeInterval) -> LatitudeInterval:
    return LatitudeInterval(max(-90.0, min(a.south, b.south)), min(90.0, max(a.north, b.north)))


def union_box(a: Box, b: Box) -> Box:
    return Box(merge_longitude(a.longitude, b.longitude), merge_latitude(a.latitude, b.latitude))


def buffer_point(point: Point, epsilon: float) -> Box:
    """Widen a point by ``epsilon`` degrees in every direction.

    Longitudes wrap across the antimeridian. A latitude bound that would pass
    a pole is pulled back to ``90 - epsilon`` (or ``-90 + epsilon``), so a
    point exactly on a pole yields ``south == north``.
    """

    west = normalise_longitude(point.longitude - epsilon)
    east = normalise_longitude(point.longitude + epsilon)
    south = point.latitude - epsilon
    north = point.latitude + epsilon
    if north > 90.0:
        north = 90.0 - epsilon
    if south < -90.0:
        south = -90.0 + epsilon
    return Box(LongitudeInterval(west, east), LatitudeInterval(south, north))
