# vendnav/api/geocoding.py
from __future__ import annotations

import logging
from functools import lru_cache

import googlemaps
from vendnav.api.config import get_google_maps_api_key
from vendnav.api.models import Coordinate

logger = logging.getLogger(__name__)

_gmaps: googlemaps.Client | None = None


def _get_client() -> googlemaps.Client | None:
    """Return a cached googlemaps.Client instance, or None without a key."""
    global _gmaps
    if _gmaps is None:
        api_key = get_google_maps_api_key()
        if not api_key:
            logger.warning("No Google Maps API key configured, geocoding disabled")
            return None
        try:
            logger.info(f"Initializing Google Maps client with key: {api_key[:10]}...")
            _gmaps = googlemaps.Client(key=api_key)
        except ValueError as e:
            logger.error(f"Failed to initialize Google Maps client: {e}")
            return None
    return _gmaps


@lru_cache(maxsize=1000)
def get_coordinates_for_address(query: str) -> Coordinate | None:
    """Resolve a free-text address to a Coordinate or None if not found."""
    client = _get_client()
    if client is None:
        return None

    try:
        logger.debug(f"Geocoding address: {query}")
        results = client.geocode(query, language="en")
    except googlemaps.exceptions.ApiError as e:
        logger.error(f"Geocoding error for '{query}': {e}")
        return None
    except (googlemaps.exceptions.TransportError, googlemaps.exceptions.Timeout) as e:
        logger.error(f"Geocoding request failed for '{query}': {e}")
        return None

    if not results:
        logger.warning(f"No results found for address: {query}")
        return None

    loc = results[0]["geometry"]["location"]
    logger.debug(f"Geocoded {query} to {loc['lat']}, {loc['lng']}")
    return Coordinate(loc["lat"], loc["lng"])


__all__ = ["get_coordinates_for_address"]
