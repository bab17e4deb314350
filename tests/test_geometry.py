import math

import pytest

from vendnav.api.errors import InvalidCoordinateError
from vendnav.api.geometry import haversine_km, route_length_km, validate_coordinate
from vendnav.api.models import Coordinate

POINTS = [
    Coordinate(0.0, 0.0),
    Coordinate(33.7684, -117.8677),
    Coordinate(-33.8688, 151.2093),
    Coordinate(89.9, 179.9),
    Coordinate(-90.0, -180.0),
]


@pytest.mark.parametrize("point", POINTS)
def test_distance_to_self_is_zero(point):
    assert haversine_km(point, point) == pytest.approx(0.0, abs=1e-9)


def test_distance_is_symmetric():
    for a in POINTS:
        for b in POINTS:
            assert haversine_km(a, b) == haversine_km(b, a)


def test_one_degree_along_equator():
    # R * pi / 180
    assert haversine_km(Coordinate(0, 0), Coordinate(0, 1)) == pytest.approx(111.19493, abs=1e-4)


def test_antipodes_are_half_the_circumference():
    assert haversine_km(Coordinate(0, 0), Coordinate(0, 180)) == pytest.approx(math.pi * 6371.0)


def test_near_antipodal_points_do_not_overflow():
    # h rounds to just above 1 for this pair
    distance = haversine_km(Coordinate(0.08, 0.0), Coordinate(-0.08, 180.0))
    assert distance == pytest.approx(math.pi * 6371.0)


def test_nan_propagates():
    assert math.isnan(haversine_km(Coordinate(float("nan"), 0), Coordinate(0, 0)))


def test_route_length_sums_legs(stop_factory):
    route = [stop_factory(0, 1), stop_factory(0, 3)]
    assert route_length_km(Coordinate(0, 0), route) == pytest.approx(
        haversine_km(Coordinate(0, 0), Coordinate(0, 3))
    )
    assert route_length_km(Coordinate(0, 0), []) == 0.0


def test_validate_coordinate_accepts_strings():
    assert validate_coordinate("33.5", "-117.25") == Coordinate(33.5, -117.25)


@pytest.mark.parametrize("lat,lng", [
    (91, 0),
    (0, -180.5),
    ("abc", 0),
    (None, 0),
    ("nan", 0),
])
def test_validate_coordinate_rejects(lat, lng):
    with pytest.raises(InvalidCoordinateError):
        validate_coordinate(lat, lng)
