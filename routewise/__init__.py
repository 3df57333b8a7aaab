"""
RouteWise package initialization.

This package provides the route optimisation engine behind the store
visit planner of a map-based site-selection tool. Given a starting point
and a set of stores to visit, it orders the visits, refines the order,
and reports distance, time and cost for the trip.

Modules:
    models       – Point and Stop types plus route record conversion.
    geo          – Straight-line (Haversine) distance in miles.
    optimisation – Nearest neighbour, 2‑opt and cheapest insertion heuristics.
    stats        – Route statistics under walking, subway or mixed transport.
    config       – Default speeds, fares and optimisation limits.
    planner      – Validation and stop limits for callers of the engine.

Distances are straight-line estimates and routes are approximate; the
engine does not model road or transit networks.
"""

__all__ = [
    "config",
    "geo",
    "models",
    "optimisation",
    "planner",
    "stats",
]
