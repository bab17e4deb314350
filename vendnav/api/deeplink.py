# vendnav/api/deeplink.py
"""Navigation-app URLs for an origin and an ordered route.

Only this module knows URL syntax; the planner hands over plain stops.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence
from urllib.parse import quote, quote_plus

from vendnav.api.models import Coordinate, Stop

logger = logging.getLogger(__name__)

APPLE_MAPS_BASE = "maps://"
GOOGLE_MAPS_BASE = "https://www.google.com/maps/dir/"


def _apple_destination(stop: Stop) -> str:
    fields = stop.address_fields() or [stop.coordinate.as_pair()]
    return ",".join(quote(field, safe="") for field in fields)


def apple_maps_url(origin: Coordinate, route: Sequence[Stop]) -> Optional[str]:
    """Apple Maps directions from ``origin`` through every stop in order.

    The first stop is the destination; later ones are chained with ``+to:``.
    """
    if not route:
        return None
    daddr = "+to:".join(_apple_destination(stop) for stop in route)
    return f"{APPLE_MAPS_BASE}?saddr={origin.as_pair()}&daddr={daddr}"


def google_maps_url(origin: Coordinate, route: Sequence[Stop]) -> Optional[str]:
    """Google Maps directions URL in the ``/maps/dir/a/b/c`` path form."""
    if not route:
        return None
    parts = [quote_plus(origin.as_pair())]
    for stop in route:
        label = ", ".join(stop.address_fields()) or stop.coordinate.as_pair()
        parts.append(quote_plus(label))
    return GOOGLE_MAPS_BASE + "/".join(parts)


_FORMATTERS = {
    "apple": apple_maps_url,
    "google": google_maps_url,
}


def navigation_url(origin: Coordinate, route: Sequence[Stop], provider: str = "apple") -> Optional[str]:
    """Dispatch to the formatter for ``provider``; None for an empty route."""
    try:
        formatter = _FORMATTERS[provider.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown maps provider '{provider}'. Must be one of: {', '.join(_FORMATTERS)}"
        ) from None

    url = formatter(origin, route)
    logger.debug(f"Built {provider} navigation URL for {len(route)} stops")
    return url


__all__ = ["apple_maps_url", "google_maps_url", "navigation_url"]
