# vendnav/api/machines.py
"""Vending machine catalog loaded from the static JSON data file."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional

from vendnav.api.config import get_data_file
from vendnav.api.errors import CatalogError
from vendnav.api.geocoding import get_coordinates_for_address
from vendnav.api.models import Coordinate, Stop

logger = logging.getLogger(__name__)


def _has_coordinates(record: Dict[str, Any]) -> bool:
    lat = record.get("latitude")
    lng = record.get("longitude")
    return lat is not None and lng is not None and lat != "null" and lng != "null"


def _record_to_stop(record: Dict[str, Any]) -> Optional[Stop]:
    """Convert one catalog record, geocoding it when coordinates are missing."""
    label = record.get("id") or record.get("retailer") or "<unnamed>"

    if _has_coordinates(record):
        try:
            stop = Stop.from_dict(record)
        except (TypeError, ValueError) as e:
            logger.warning(f"Skipping machine '{label}': bad coordinates ({e})")
            return None
    else:
        query = ", ".join(
            part for part in (record.get("address"), record.get("city")) if part
        )
        if not query:
            logger.warning(f"Skipping machine '{label}': no coordinates and no address")
            return None
        coord: Coordinate | None = get_coordinates_for_address(query)
        if coord is None:
            logger.warning(f"Skipping machine '{label}': could not geocode '{query}'")
            return None
        stop = Stop.from_dict(record, coordinate=coord)

    if not stop.coordinate.is_valid():
        logger.warning(f"Skipping machine '{label}': coordinates out of range")
        return None
    return stop


@lru_cache(maxsize=8)
def _load(path: str) -> tuple[Stop, ...]:
    try:
        with open(path, encoding="utf-8") as fh:
            payload = json.load(fh)
    except FileNotFoundError as exc:
        raise CatalogError(f"Vending machine data file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Vending machine data file is not valid JSON: {path}") from exc

    if not isinstance(payload, list):
        raise CatalogError(f"Vending machine data file must hold a JSON array: {path}")

    stops = []
    for record in payload:
        if not isinstance(record, dict):
            logger.warning(f"Skipping non-object catalog entry: {record!r}")
            continue
        stop = _record_to_stop(record)
        if stop is not None:
            stops.append(stop)

    logger.info(f"Loaded {len(stops)}/{len(payload)} vending machines from {path}")
    return tuple(stops)


def load_machines(path: str | None = None) -> List[Stop]:
    """Return the catalog as a fresh list of stops.

    Parsed catalogs are cached per path; call ``clear_cache()`` after the
    file changes.

    Raises:
        CatalogError: If the file is missing or not a JSON array
    """
    return list(_load(path or get_data_file()))


def clear_cache() -> None:
    _load.cache_clear()


__all__ = ["load_machines", "clear_cache"]
