"""Mini README: Tests for token parsing and bundle adaptation.

Structure:
    * token parsing - separators, normalisation and malformed strings.
    * canonical types - ring closure and minimum point counts.
    * bundles - empty bundles, validation failures and kind dispatch.
"""

from __future__ import annotations

import pytest

from granule_mbr import EmptyGeometryError, MalformedGeometryError
from granule_mbr.geometry import (
    BoundingRectangle,
    Line,
    Point,
    Ring,
    adapt_spatial,
    adapt_umm_spatial,
    normalise_longitude,
    parse_coordinates,
    parse_line,
    parse_point,
    parse_ring,
)


def test_parse_accepts_commas_and_whitespace() -> None:
    assert parse_coordinates("0, 180") == [Point(0.0, 180.0)]
    assert parse_coordinates(" 10,35\t15 ,45\n") == [Point(10.0, 35.0), Point(15.0, 45.0)]


@pytest.mark.parametrize("text", ["", "   ", "10", "10 35 15", "abc 10", "nan 10", "10 inf", "95 10"])
def test_parse_rejects_malformed_strings(text: str) -> None:
    with pytest.raises(MalformedGeometryError):
        parse_coordinates(text)


def test_longitudes_are_normalised() -> None:
    assert normalise_longitude(180.0) == 180.0
    assert normalise_longitude(-180.0) == 180.0
    assert normalise_longitude(540.0) == 180.0
    assert normalise_longitude(-190.0) == pytest.approx(170.0)
    assert normalise_longitude(10.1) == 10.1
    assert parse_point("0 -180") == Point(0.0, 180.0)


def test_point_requires_single_pair() -> None:
    with pytest.raises(MalformedGeometryError):
        parse_point("10 35 15 45")


def test_line_requires_two_distinct_points() -> None:
    assert parse_line("10 35 15 45") == Line((Point(10, 35), Point(15, 45)))
    with pytest.raises(MalformedGeometryError):
        parse_line("10 35")
    with pytest.raises(MalformedGeometryError):
        parse_line("10 35 10 35")


def test_ring_requires_three_distinct_points() -> None:
    ring = parse_ring("0 35 0 40 10 40 0 35")
    assert len(ring.points) == 3
    with pytest.raises(MalformedGeometryError):
        parse_ring("0 0 0 1 0 0")
    with pytest.raises(MalformedGeometryError):
        parse_ring("90 0 90 100 0 10")


def test_rectangle_validation() -> None:
    assert BoundingRectangle(175, -10, -175, 10).west == 175.0
    with pytest.raises(MalformedGeometryError):
        BoundingRectangle(0, 10, 5, -10)
    with pytest.raises(MalformedGeometryError):
        BoundingRectangle(-200, 0, 5, 10)


@pytest.mark.parametrize("bundle", [{}, {"points": [], "lines": None, "polygons": [[]]}])
def test_empty_token_bundle_is_rejected(bundle: dict) -> None:
    with pytest.raises(EmptyGeometryError):
        adapt_spatial(bundle)


def test_empty_bundle_is_also_a_malformed_geometry_error() -> None:
    with pytest.raises(MalformedGeometryError):
        adapt_umm_spatial({"Points": []})


def test_invalid_bundle_shapes_are_reported_as_malformed() -> None:
    with pytest.raises(MalformedGeometryError):
        adapt_spatial({"points": [10]})
    with pytest.raises(MalformedGeometryError):
        adapt_spatial("10 35")
    with pytest.raises(MalformedGeometryError):
        adapt_umm_spatial({"Points": [{"Latitude": 10}]})


def test_token_bundle_produces_each_kind() -> None:
    geometries = adapt_spatial(
        {
            "points": ["10 35"],
            "lines": ["10 35 15 45"],
            "polygons": [["0 35 0 40 10 40 10 35 0 35", "2 36 2 37 3 37 2 36"]],
        }
    )
    assert [type(geometry) for geometry in geometries] == [Point, Line, Ring]


def test_structured_bundle_produces_each_kind() -> None:
    geometries = adapt_umm_spatial(
        {
            "Points": [{"Latitude": 10, "Longitude": 35}],
            "Lines": [{"Points": [{"Latitude": 10, "Longitude": 35}, {"Latitude": 15, "Longitude": 45}]}],
            "BoundingRectangles": [
                {
                    "WestBoundingCoordinate": 35,
                    "SouthBoundingCoordinate": 0,
                    "EastBoundingCoordinate": 40,
                    "NorthBoundingCoordinate": 10,
                }
            ],
            "GPolygons": [
                {
                    "Boundary": {
                        "Points": [
                            {"Latitude": 0, "Longitude": 35},
                            {"Latitude": 0, "Longitude": 40},
                            {"Latitude": 10, "Longitude": 40},
                        ]
                    }
                }
            ],
            "VerticalSpatialDomains": [],
        }
    )
    assert [type(geometry) for geometry in geometries] == [Point, Line, BoundingRectangle, Ring]
