"""
Route optimisation heuristics for RouteWise.

This module implements simple travelling salesman heuristics for ordering
store visits from a starting point. The route is an open path: it starts
at the given point, visits every stop once and does not return.

    - ``nearest_neighbor``: build an initial route by repeatedly
      visiting the nearest unvisited stop.
    - ``two_opt``: improve a route by reversing sub-paths that shorten it.
    - ``find_insertion_index``: cheapest position for one new stop, so a
      stop can be added without rebuilding the whole route.

All functions are O(n²) or worse in the number of stops and are meant for
routes of a few dozen stops. Inputs are never mutated.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .geo import distance_miles
from .models import Point, Stop

logger = logging.getLogger(__name__)

# moves must beat the current edges by more than this (miles)
_IMPROVEMENT_TOLERANCE = 1e-9


def path_length(start: Optional[Point], route: Sequence[Stop]) -> float:
    """Total distance in miles along ``start -> route[0] -> ... -> route[-1]``.

    When ``start`` is ``None`` the path begins at the first stop.
    """
    if not route:
        return 0.0
    total = 0.0
    current = start if start is not None else route[0].location
    for stop in route:
        total += distance_miles(current, stop.location)
        current = stop.location
    return total


def nearest_neighbor(start: Point, stops: Sequence[Stop]) -> List[Stop]:
    """Construct an initial route using the nearest neighbor heuristic.

    Args:
        start: Position the route departs from.
        stops: Stops to visit. Ids are expected to be unique.

    Returns:
        A new list containing every stop exactly once in visiting order.
        When two stops are equally close, the one listed first in
        ``stops`` is visited first.
    """
    n = len(stops)
    if n == 0:
        return []
    if n == 1:
        return [stops[0]]
    visited = [False] * n
    route: List[Stop] = []
    current = start
    for _ in range(n):
        # min() keeps the earliest index among equal distances
        next_index = min(
            (i for i in range(n) if not visited[i]),
            key=lambda i: distance_miles(current, stops[i].location),
        )
        visited[next_index] = True
        route.append(stops[next_index])
        current = stops[next_index].location
    return route


def two_opt(
    route: Sequence[Stop],
    max_iterations: int = 100,
    start: Optional[Point] = None,
) -> List[Stop]:
    """Perform 2‑opt optimisation on an open route.

    Each pass scans pairs of edges ``(i, i+1)`` and ``(j, j+1)`` and
    applies the first swap that strictly shortens the path by reversing
    the stops between ``i+1`` and ``j``, then starts a new pass. The last
    stop has no outgoing edge, so a move ending there only exchanges one
    edge. Positions never wrap around to the front of the route.

    Args:
        route: Route to improve. Routes of fewer than four stops are
            returned unchanged.
        max_iterations: Maximum number of passes. A pass ends at the first
            applied move, so this also caps the number of moves.
        start: Optional departure point. When given it is the fixed first
            node of the path and the first stop may be moved; otherwise
            the first stop stays in place.

    Returns:
        A new list with the same stops whose path length is never longer
        than the input's.
    """
    best = list(route)
    if len(best) < 4 or max_iterations <= 0:
        return best

    nodes = [stop.location for stop in best]
    stops: List[Optional[Stop]] = list(best)
    if start is not None:
        nodes.insert(0, start)
        stops.insert(0, None)
    n = len(nodes)

    def dist(i: int, j: int) -> float:
        return distance_miles(nodes[i], nodes[j])

    iterations = 0
    moves = 0
    improved = True
    while improved and iterations < max_iterations:
        improved = False
        iterations += 1
        for i in range(n - 2):
            for j in range(i + 2, n):
                current = dist(i, i + 1)
                swapped = dist(i, j)
                if j + 1 < n:
                    current += dist(j, j + 1)
                    swapped += dist(i + 1, j + 1)
                if swapped < current - _IMPROVEMENT_TOLERANCE:
                    nodes[i + 1 : j + 1] = nodes[i + 1 : j + 1][::-1]
                    stops[i + 1 : j + 1] = stops[i + 1 : j + 1][::-1]
                    improved = True
                    moves += 1
                    break
            if improved:
                break
    logger.debug("2-opt finished after %d passes with %d moves", iterations, moves)
    return [stop for stop in stops if stop is not None]


def find_insertion_index(start: Point, route: Sequence[Stop], new_stop: Stop) -> int:
    """Find the position where ``new_stop`` adds the least distance.

    Every index from 0 to ``len(route)`` is tried by recomputing the full
    path length, so this is O(n²). Ties go to the earliest index. For many
    insertions into a long route, rebuilding with ``nearest_neighbor`` and
    ``two_opt`` is usually the better choice.

    Returns:
        An index in ``[0, len(route)]``.
    """
    if not route:
        return 0
    baseline = path_length(start, route)
    best_index = 0
    best_length = float("inf")
    for i in range(len(route) + 1):
        candidate = list(route[:i]) + [new_stop] + list(route[i:])
        length = path_length(start, candidate)
        if length < best_length:
            best_length = length
            best_index = i
    logger.debug(
        "Cheapest insertion for %s is index %d (+%.3f mi)",
        new_stop.id,
        best_index,
        best_length - baseline,
    )
    return best_index


def insert_stop(start: Point, route: Sequence[Stop], new_stop: Stop) -> List[Stop]:
    """Return a new route with ``new_stop`` placed at its cheapest position."""
    index = find_insertion_index(start, route, new_stop)
    return list(route[:index]) + [new_stop] + list(route[index:])
