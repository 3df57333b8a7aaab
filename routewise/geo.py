"""
Straight-line distance for RouteWise.

All route calculations use the Haversine great-circle distance in miles.
Over a single metropolitan area this is well within 0.1% of the true
geodesic distance, which is plenty for ordering store visits. Real street
or transit distances are not modelled.
"""

from __future__ import annotations

import math

from .models import Point

EARTH_RADIUS_MILES = 3958.8


def distance_miles(a: Point, b: Point) -> float:
    """Compute the great‑circle distance between two points in miles.

    Coordinates must be finite; they are not validated here.
    """
    phi1, phi2 = math.radians(a.lat), math.radians(b.lat)
    d_phi = math.radians(b.lat - a.lat)
    d_lambda = math.radians(b.lng - a.lng)
    h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_MILES * c
