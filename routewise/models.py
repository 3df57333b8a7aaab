"""
Data types shared by the RouteWise modules.

A ``Stop`` is a caller-identified store location; a route is simply a
list of stops in visiting order. Routes are handed to a persistence layer
as plain records of the form::

    [{"id": "store-1", "coordinates": {"lat": 40.75, "lng": -73.98}}, ...]

``route_to_records`` and ``route_from_records`` convert between the two.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence


@dataclass(frozen=True)
class Point:
    """A latitude/longitude pair in WGS84 decimal degrees."""

    lat: float
    lng: float


@dataclass
class Stop:
    id: str
    location: Point
    metadata: Dict[str, Any] = field(default_factory=dict)


def route_to_records(route: Sequence[Stop]) -> List[Dict[str, Any]]:
    """Serialise a route into an ordered list of JSON-compatible records."""
    records = []
    for stop in route:
        record: Dict[str, Any] = {
            "id": stop.id,
            "coordinates": {"lat": stop.location.lat, "lng": stop.location.lng},
        }
        if stop.metadata:
            record["metadata"] = dict(stop.metadata)
        records.append(record)
    return records


def route_from_records(records: Iterable[Dict[str, Any]]) -> List[Stop]:
    """Rebuild a route from records produced by ``route_to_records``.

    Raises:
        KeyError: if a record has no ``id`` or ``coordinates``.
    """
    route = []
    for record in records:
        coords = record["coordinates"]
        route.append(
            Stop(
                id=record["id"],
                location=Point(lat=float(coords["lat"]), lng=float(coords["lng"])),
                metadata=dict(record.get("metadata") or {}),
            )
        )
    return route
