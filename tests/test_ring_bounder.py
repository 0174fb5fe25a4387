"""Mini README: Tests for the line and ring bounders.

Validates arc unions along lines and rings, implicit ring closure and the
winding test that detects rings circling a pole.
"""

from __future__ import annotations

import pytest

from granule_mbr.bounding import FULL_LONGITUDE, Pole, bound_line, bound_ring, enclosed_pole
from granule_mbr.geometry import Line, Point, Ring


def _points(*coordinates: float) -> tuple:
    return tuple(Point(coordinates[i], coordinates[i + 1]) for i in range(0, len(coordinates), 2))


def test_line_uses_endpoint_extremes_when_no_bulge_applies() -> None:
    box = bound_line(Line(_points(10, 35, 15, 45, 25, 45)))
    assert box.to_list() == pytest.approx([35.0, 10.0, 45.0, 25.0])


def test_line_across_antimeridian() -> None:
    box = bound_line(Line(_points(-10, 170, 10, -170)))
    assert box.to_list() == pytest.approx([170.0, -10.0, -170.0, 10.0])


def test_line_skips_repeated_points() -> None:
    box = bound_line(Line(_points(10, 35, 10, 35, 15, 45)))
    assert box == bound_line(Line(_points(10, 35, 15, 45)))


def test_ring_includes_closing_edge_bulge() -> None:
    box = bound_ring(Ring(_points(0, 35, 0, 40, 10, 40, 10, 35)))
    assert box.to_list() == pytest.approx([35.0, 0.0, 40.0, 10.00933429], abs=1e-6)


def test_explicit_and_implicit_closure_bound_identically() -> None:
    implicit = Ring(_points(-10, 175, -10, -175, 10, -175, 10, 175))
    explicit = Ring(_points(-10, 175, -10, -175, 10, -175, 10, 175, -10, 175))
    assert implicit == explicit
    assert bound_ring(explicit).to_list() == pytest.approx(
        [175.0, -10.03742305, -175.0, 10.03742305], abs=1e-6
    )


def test_ring_around_north_pole() -> None:
    ring = Ring(_points(80, 0, 80, 100, 80, -170, 80, -20))
    assert enclosed_pole(ring) is Pole.NORTH
    box = bound_ring(ring)
    assert box.longitude == FULL_LONGITUDE
    assert box.to_list() == pytest.approx([-180.0, 80.0, 180.0, 90.0])


def test_ring_around_south_pole() -> None:
    ring = Ring(_points(-80, 0, -80, -100, -80, 170, -80, 20))
    assert enclosed_pole(ring) is Pole.SOUTH
    assert bound_ring(ring).to_list() == pytest.approx([-180.0, -90.0, 180.0, -80.0])


def test_ordinary_ring_encloses_no_pole() -> None:
    assert enclosed_pole(Ring(_points(0, 35, 0, 40, 10, 40, 10, 35))) is None
    assert enclosed_pole(Ring(_points(-10, 175, -10, -175, 10, -175, 10, 175))) is None


def test_ring_with_polar_vertex_touches_pole_without_enclosing_it() -> None:
    ring = Ring(_points(80, 0, 90, 0, 80, 90))
    assert enclosed_pole(ring) is None
    assert bound_ring(ring).to_list() == pytest.approx([0.0, 80.0, 90.0, 90.0])


def test_equatorial_ring_around_pole_uses_winding_direction() -> None:
    """A ring whose mean latitude is zero picks the pole from its orientation."""

    eastward = Ring(_points(10, 0, -10, 90, 10, 180, -10, -90))
    assert enclosed_pole(eastward) is Pole.NORTH
    westward = Ring(tuple(reversed(eastward.points)))
    assert enclosed_pole(westward) is Pole.SOUTH
