# vendnav/api/services/route_service.py
"""Service layer tying the catalog, planner and deep links together."""

import logging
from typing import Dict, Any, List, Optional

from vendnav.api.config import get_maps_provider, get_max_stops
from vendnav.api.deeplink import navigation_url
from vendnav.api.geometry import haversine_km, route_length_km, validate_coordinate
from vendnav.api.machines import load_machines
from vendnav.api.models import Coordinate, Stop
from vendnav.api.planner import nearest, plan_route

logger = logging.getLogger(__name__)


class RouteService:
    """Handles nearest-machine lookups and multi-stop routes."""

    @staticmethod
    def parse_coordinate(lat: Any, lng: Any) -> Coordinate:
        """Build a validated origin from raw request values.

        Raises:
            InvalidCoordinateError: If either value is missing or out of range
        """
        return validate_coordinate(lat, lng)

    @staticmethod
    def find_nearest(origin: Coordinate, provider: Optional[str] = None) -> Dict[str, Any]:
        """Find the closest machine and a link to navigate there.

        Args:
            origin: User position
            provider: Maps app for the link; defaults to configuration

        Returns:
            Dictionary with the machine, its distance and navigation URL

        Raises:
            EmptyCandidateSetError: If the catalog is empty
        """
        provider = provider or get_maps_provider()
        machine = nearest(origin, load_machines())
        distance = haversine_km(origin, machine.coordinate)

        logger.info(f"Nearest machine to {origin.as_pair()} is {machine.id} ({distance:.2f} km)")
        return {
            "origin": {"lat": origin.latitude, "lng": origin.longitude},
            "machine": {**machine.to_dict(), "distance_km": round(distance, 3)},
            "navigation_url": navigation_url(origin, [machine], provider),
        }

    @staticmethod
    def plan(origin: Coordinate, max_stops: Optional[int] = None,
             provider: Optional[str] = None) -> Dict[str, Any]:
        """Plan a greedy multi-stop route through the closest machines.

        Args:
            origin: User position
            max_stops: Route length cap; defaults to configuration
            provider: Maps app for the link; defaults to configuration

        Returns:
            Dictionary with ordered stops, per-leg distances, total distance
            and navigation URL (None when there is nothing to visit)
        """
        provider = provider or get_maps_provider()
        if max_stops is None:
            max_stops = get_max_stops()

        route = plan_route(origin, load_machines(), max_stops)

        stops = []
        current = origin
        for order, stop in enumerate(route, 1):
            leg = haversine_km(current, stop.coordinate)
            stops.append({**stop.to_dict(), "order": order, "leg_km": round(leg, 3)})
            current = stop.coordinate

        total = route_length_km(origin, route)
        logger.info(f"Planned route with {len(route)} stops, {total:.2f} km total")
        return {
            "origin": {"lat": origin.latitude, "lng": origin.longitude},
            "stops": stops,
            "total_km": round(total, 3),
            "navigation_url": navigation_url(origin, route, provider),
        }

    @staticmethod
    def calculate_bounds(stops: List[Stop]) -> Dict[str, Any]:
        """Calculate bounding box for a list of machines.

        Args:
            stops: Machines to enclose

        Returns:
            Dictionary with north, south, east, west bounds
        """
        if not stops:
            return {}

        lats = [stop.latitude for stop in stops]
        lngs = [stop.longitude for stop in stops]

        return {
            'north': max(lats),
            'south': min(lats),
            'east': max(lngs),
            'west': min(lngs)
        }


# Export for use in other modules
__all__ = ['RouteService']
