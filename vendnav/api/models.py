"""Shared data structures for the vending machine planner.

Coordinates and stops live here so that the geometry, planner, catalog
and deep-link modules can all share one definition without importing
each other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


def _text(value: Any) -> str:
    """Display fields are always strings; JSON null becomes empty."""
    return str(value) if value is not None else ""


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe in decimal degrees."""

    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180

    def as_pair(self) -> str:
        return f"{self.latitude},{self.longitude}"


@dataclass
class Stop:
    """A single vending machine the user can be routed to.

    Only ``coordinate`` is read by the planner; the rest is display
    metadata carried through unchanged.
    """

    coordinate: Coordinate
    id: str = ""
    retailer: str = ""
    machine_id: str = ""
    address: str = ""
    city: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude

    def address_fields(self) -> list[str]:
        """Non-empty display fields in the order navigation apps expect."""
        return [part for part in (self.retailer, self.address, self.city) if part]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "retailer": self.retailer,
            "machineID": self.machine_id,
            "address": self.address,
            "city": self.city,
            "latitude": self.latitude,
            "longitude": self.longitude,
            **self.extra,
        }

    @classmethod
    def from_dict(cls, record: Dict[str, Any], coordinate: Optional[Coordinate] = None) -> "Stop":
        """Build a stop from a catalog record.

        ``coordinate`` overrides whatever the record carries; the catalog
        loader uses it for records that had to be geocoded.
        """
        known = {"id", "retailer", "machineID", "address", "city", "latitude", "longitude"}
        if coordinate is None:
            coordinate = Coordinate(float(record["latitude"]), float(record["longitude"]))
        return cls(
            coordinate=coordinate,
            id=_text(record.get("id")),
            retailer=_text(record.get("retailer")),
            machine_id=_text(record.get("machineID")),
            address=_text(record.get("address")),
            city=_text(record.get("city")),
            extra={k: v for k, v in record.items() if k not in known},
        )


# An ordered route is just a list of stops, nearest-first.
Route = list[Stop]
