"""
Entry points for callers of the RouteWise engine.

The optimisation functions trust their inputs. This module is the
boundary in front of them: it checks that stop ids are unique and
coordinates finite, enforces the configured stop limit, and picks the
optimisation algorithm. Typical use::

    from routewise.planner import plan_route
    plan = plan_route(current_location, stores, mode="mixed")
    plan.route, plan.stats
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from .config import DEFAULT_CONFIG, AppConfig
from .models import Point, Stop
from .optimisation import insert_stop, nearest_neighbor, two_opt
from .stats import RouteStats, TransportMode, compute_route_stats

logger = logging.getLogger(__name__)

ALGORITHMS = ("greedy", "2-opt")


class RoutingError(ValueError):
    """Base class for errors raised when a route request is rejected."""


class TooManyStopsError(RoutingError):
    def __init__(self, count: int, limit: int):
        super().__init__(f"Route has {count} stops; at most {limit} are supported")
        self.count = count
        self.limit = limit


class InvalidStopError(RoutingError):
    pass


@dataclass
class RoutePlan:
    route: List[Stop]
    stats: RouteStats
    algorithm: str


def validate_stops(stops: Sequence[Stop]) -> None:
    """Reject duplicate stop ids and non-finite coordinates.

    Raises:
        InvalidStopError: on the first offending stop.
    """
    seen = set()
    for stop in stops:
        if stop.id in seen:
            logger.warning("Duplicate stop id %r in route request", stop.id)
            raise InvalidStopError(f"Duplicate stop id: {stop.id!r}")
        seen.add(stop.id)
        if not (math.isfinite(stop.location.lat) and math.isfinite(stop.location.lng)):
            logger.warning("Stop %r has non-finite coordinates", stop.id)
            raise InvalidStopError(f"Stop {stop.id!r} has invalid coordinates")


def _check_point(point: Point) -> None:
    if not (math.isfinite(point.lat) and math.isfinite(point.lng)):
        raise InvalidStopError("Start location has invalid coordinates")


def _check_limit(count: int, config: AppConfig) -> None:
    limit = config.optimisation.max_stops
    if count > limit:
        logger.warning("Rejecting route with %d stops (limit %d)", count, limit)
        raise TooManyStopsError(count, limit)


def optimise_route(
    start: Point,
    stops: Sequence[Stop],
    algorithm: Optional[str] = None,
    config: Optional[AppConfig] = None,
) -> List[Stop]:
    """Order ``stops`` for a trip departing from ``start``.

    ``"greedy"`` returns the nearest neighbour route; ``"2-opt"`` refines it
    further. The default comes from the configuration.

    Raises:
        TooManyStopsError: if there are more stops than the configured limit.
        InvalidStopError: on duplicate ids or non-finite coordinates.
        ValueError: for an unknown algorithm name.
    """
    config = config or DEFAULT_CONFIG
    algorithm = algorithm or config.optimisation.algorithm
    if algorithm not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm {algorithm!r}; expected one of {ALGORITHMS}")
    _check_limit(len(stops), config)
    _check_point(start)
    validate_stops(stops)

    route = nearest_neighbor(start, stops)
    if algorithm == "2-opt":
        route = two_opt(route, max_iterations=config.optimisation.max_iterations, start=start)
    logger.info("Optimised route of %d stops with %s", len(route), algorithm)
    return route


def plan_route(
    start: Point,
    stops: Sequence[Stop],
    mode: Union[TransportMode, str] = TransportMode.MIXED,
    algorithm: Optional[str] = None,
    config: Optional[AppConfig] = None,
) -> RoutePlan:
    """Optimise a route and compute its statistics in one call."""
    config = config or DEFAULT_CONFIG
    # fail on a bad mode before doing any work
    mode = TransportMode(mode)
    route = optimise_route(start, stops, algorithm=algorithm, config=config)
    stats = compute_route_stats(start, route, mode, transport=config.transport)
    return RoutePlan(
        route=route,
        stats=stats,
        algorithm=algorithm or config.optimisation.algorithm,
    )


def add_stop(
    start: Point,
    route: Sequence[Stop],
    new_stop: Stop,
    config: Optional[AppConfig] = None,
) -> List[Stop]:
    """Add one stop to an existing route without re-optimising it.

    Raises:
        TooManyStopsError: if the grown route would exceed the stop limit.
        InvalidStopError: if the new stop duplicates an id or is invalid.
    """
    config = config or DEFAULT_CONFIG
    _check_limit(len(route) + 1, config)
    _check_point(start)
    validate_stops(list(route) + [new_stop])
    new_route = insert_stop(start, route, new_stop)
    logger.info("Added stop %s to route (%d stops)", new_stop.id, len(new_route))
    return new_route
