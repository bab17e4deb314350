"""Greedy nearest-neighbour route ordering.

The planner repeatedly walks to the closest machine it has not visited
yet. There is no look-ahead, so the result is a short tour rather than
the shortest one; stop counts are small enough that a linear scan per
step is all that is needed.

Ties are broken by candidate order so the same inputs always give the
same route.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from vendnav.api.errors import EmptyCandidateSetError
from vendnav.api.geometry import haversine_km
from vendnav.api.models import Coordinate, Stop

logger = logging.getLogger(__name__)


def _closest_index(current: Coordinate, pool: Sequence[Stop]) -> int:
    best_index = 0
    best_distance = haversine_km(current, pool[0].coordinate)
    for index in range(1, len(pool)):
        distance = haversine_km(current, pool[index].coordinate)
        # strict comparison keeps the earlier stop on ties
        if distance < best_distance:
            best_index, best_distance = index, distance
    return best_index


def plan_route(start: Coordinate, candidates: Sequence[Stop], max_stops: int) -> List[Stop]:
    """Order up to ``max_stops`` candidates by greedy nearest neighbour.

    Args:
        start: Where the user is now
        candidates: Machines to choose from; never modified
        max_stops: Maximum route length, must not be negative

    Returns:
        A new list of ``min(max_stops, len(candidates))`` stops
    """
    if max_stops < 0:
        raise ValueError(f"max_stops must be >= 0, got {max_stops}")
    if not candidates or max_stops == 0:
        return []

    pool = list(candidates)
    route: List[Stop] = []
    current = start

    while pool and len(route) < max_stops:
        stop = pool.pop(_closest_index(current, pool))
        route.append(stop)
        current = stop.coordinate

    logger.debug("Planned %d-stop route from %s", len(route), start.as_pair())
    return route


def nearest(start: Coordinate, candidates: Sequence[Stop]) -> Stop:
    """Return the single closest machine to ``start``.

    Raises:
        EmptyCandidateSetError: If there are no candidates at all
    """
    route = plan_route(start, candidates, 1)
    if not route:
        raise EmptyCandidateSetError("No vending machines found.")
    return route[0]


__all__ = ["plan_route", "nearest"]
