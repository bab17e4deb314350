# vendnav/api/geometry.py
"""Great-circle maths over Coordinates."""

from __future__ import annotations

import math
from typing import Sequence

from vendnav.api.errors import InvalidCoordinateError
from vendnav.api.models import Coordinate, Stop

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates in kilometres.

    NaN in either input comes back out as NaN.
    """
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.latitude))
        * math.cos(math.radians(b.latitude))
        * math.sin(d_lon / 2) ** 2
    )
    # rounding can push h just past 1 for near-antipodal points;
    # plain comparisons leave NaN untouched
    if h > 1.0:
        h = 1.0
    elif h < 0.0:
        h = 0.0
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def route_length_km(start: Coordinate, route: Sequence[Stop]) -> float:
    """Sum of leg distances when walking ``route`` in order from ``start``."""
    total = 0.0
    current = start
    for stop in route:
        total += haversine_km(current, stop.coordinate)
        current = stop.coordinate
    return total


def validate_coordinate(latitude, longitude) -> Coordinate:
    """Turn raw latitude/longitude values into a checked Coordinate.

    Callers run this before handing positions to the planner, which
    never validates ranges itself.
    """
    try:
        coord = Coordinate(float(latitude), float(longitude))
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinateError(
            f"Coordinates must be numeric, got lat={latitude!r} lng={longitude!r}"
        ) from exc

    if math.isnan(coord.latitude) or math.isnan(coord.longitude) or not coord.is_valid():
        raise InvalidCoordinateError(
            f"Coordinates out of range: lat={coord.latitude} lng={coord.longitude}"
        )
    return coord


__all__ = ["EARTH_RADIUS_KM", "haversine_km", "route_length_km", "validate_coordinate"]
