"""
Route statistics for RouteWise.

This module turns an ordered route into the totals shown in the trip
summary: distance, travel time and fare cost. Time and cost depend on the
transport mode:

    - walking: everything is walked at a constant speed, free of charge.
    - subway:  a flat allowance per stop plus a buffer, one fare per leg.
    - mixed:   short legs are walked, longer legs take the subway.

Values are accumulated in full precision and rounded only when the
``RouteStats`` record is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from .config import DEFAULT_CONFIG, TransportConfig
from .geo import distance_miles
from .models import Point, Stop
from .optimisation import path_length


class TransportMode(str, Enum):
    WALKING = "walking"
    SUBWAY = "subway"
    MIXED = "mixed"


@dataclass(frozen=True)
class RouteStats:
    total_distance_miles: float
    total_time_minutes: float
    total_cost_usd: float
    stop_count: int


def _mixed_time_and_cost(start: Point, route: Sequence[Stop], transport: TransportConfig):
    total_time = 0.0
    total_cost = 0.0
    current = start
    for stop in route:
        segment = distance_miles(current, stop.location)
        if segment < transport.walk_threshold_miles:
            total_time += segment / transport.walking_speed_mph * 60
        else:
            total_time += transport.mixed_subway_segment_minutes
            total_cost += transport.subway_fare_usd
        current = stop.location
    return total_time, total_cost


def compute_route_stats(
    start: Point,
    route: Sequence[Stop],
    mode: Union[TransportMode, str] = TransportMode.MIXED,
    transport: Optional[TransportConfig] = None,
) -> RouteStats:
    """Compute distance, time and cost for a route.

    Args:
        start: Departure point.
        route: Stops in visiting order.
        mode: A ``TransportMode`` or its string value.
        transport: Speeds and fares; defaults to ``DEFAULT_CONFIG.transport``.

    Returns:
        A ``RouteStats`` with distance and cost rounded to cents/hundredths
        and time rounded to whole minutes.

    Raises:
        ValueError: if ``mode`` is not a known transport mode.
    """
    mode = TransportMode(mode)
    transport = transport or DEFAULT_CONFIG.transport
    if not route:
        return RouteStats(0.0, 0.0, 0.0, 0)

    stop_count = len(route)
    total_distance = path_length(start, route)
    if mode is TransportMode.WALKING:
        total_time = total_distance / transport.walking_speed_mph * 60
        total_cost = 0.0
    elif mode is TransportMode.SUBWAY:
        total_time = stop_count * transport.subway_minutes_per_stop + transport.subway_buffer_minutes
        total_cost = (stop_count + 1) * transport.subway_fare_usd
    else:
        total_time, total_cost = _mixed_time_and_cost(start, route, transport)

    return RouteStats(
        total_distance_miles=round(total_distance, 2),
        total_time_minutes=round(total_time, 0),
        total_cost_usd=round(total_cost, 2),
        stop_count=stop_count,
    )
