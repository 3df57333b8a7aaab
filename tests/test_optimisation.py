import random
import unittest

from routewise.models import Point, Stop
from routewise.optimisation import (
    find_insertion_index,
    insert_stop,
    nearest_neighbor,
    path_length,
    two_opt,
)


def ids(route):
    return [stop.id for stop in route]


def random_stops(rng, n):
    # scattered around midtown Manhattan
    return [
        Stop(f"s{i}", Point(40.70 + rng.random() * 0.1, -74.02 + rng.random() * 0.1))
        for i in range(n)
    ]


class TestNearestNeighbor(unittest.TestCase):
    def test_nearest_neighbor(self):
        start = Point(0, 0)
        stops = [Stop("c", Point(0.3, 0)), Stop("a", Point(0.1, 0)), Stop("b", Point(0.2, 0))]
        self.assertEqual(ids(nearest_neighbor(start, stops)), ["a", "b", "c"])

    def test_empty_and_single(self):
        self.assertEqual(nearest_neighbor(Point(0, 0), []), [])
        only = Stop("x", Point(5, 5))
        self.assertEqual(nearest_neighbor(Point(0, 0), [only]), [only])

    def test_ties_go_to_earliest_stop(self):
        start = Point(0, 0)
        east = Stop("east", Point(0, 1))
        west = Stop("west", Point(0, -1))
        self.assertEqual(ids(nearest_neighbor(start, [east, west])), ["east", "west"])
        self.assertEqual(ids(nearest_neighbor(start, [west, east])), ["west", "east"])

    def test_visits_every_stop_once(self):
        stops = random_stops(random.Random(7), 30)
        route = nearest_neighbor(Point(40.75, -73.98), stops)
        self.assertEqual(sorted(ids(route)), sorted(ids(stops)))

    def test_does_not_mutate_input(self):
        stops = random_stops(random.Random(3), 5)
        before = list(stops)
        nearest_neighbor(Point(40.75, -73.98), stops)
        self.assertEqual(stops, before)


class TestTwoOpt(unittest.TestCase):
    def test_short_routes_unchanged(self):
        route = [Stop("a", Point(0, 1)), Stop("b", Point(1, 0)), Stop("c", Point(1, 1))]
        self.assertEqual(two_opt(route, start=Point(0, 0)), route)
        self.assertEqual(two_opt(route[:1]), route[:1])
        self.assertEqual(two_opt([]), [])

    def test_removes_crossing(self):
        start = Point(0, 0)
        route = [
            Stop("a", Point(0, 1)),
            Stop("b", Point(1, 0)),
            Stop("c", Point(1, 1)),
            Stop("d", Point(0, 0.5)),
        ]
        optimized = two_opt(route, start=start)
        # start -> (0,0.5) -> (0,1) -> (1,1) -> (1,0) walks the square's edge
        self.assertEqual(ids(optimized), ["d", "a", "c", "b"])
        self.assertLess(path_length(start, optimized), path_length(start, route))

    def test_zero_iterations_returns_input_order(self):
        route = random_stops(random.Random(1), 8)
        self.assertEqual(two_opt(route, max_iterations=0, start=Point(40.75, -73.98)), route)

    def test_never_longer(self):
        rng = random.Random(42)
        start = Point(40.75, -73.98)
        for _ in range(10):
            route = random_stops(rng, rng.randint(4, 15))
            for max_iterations in (1, 3, 100):
                optimized = two_opt(route, max_iterations=max_iterations, start=start)
                self.assertLessEqual(path_length(start, optimized), path_length(start, route))
                self.assertEqual(sorted(ids(optimized)), sorted(ids(route)))

    def test_first_stop_fixed_without_start(self):
        route = random_stops(random.Random(5), 10)
        optimized = two_opt(route)
        self.assertIs(optimized[0], route[0])
        self.assertLessEqual(path_length(None, optimized), path_length(None, route))

    def test_deterministic(self):
        start = Point(40.75, -73.98)
        stops = random_stops(random.Random(11), 20)
        first = two_opt(nearest_neighbor(start, stops), start=start)
        second = two_opt(nearest_neighbor(start, stops), start=start)
        self.assertEqual(first, second)


class TestInsertion(unittest.TestCase):
    def setUp(self):
        self.start = Point(0, 0)
        self.a = Stop("a", Point(0.01, 0))
        self.b = Stop("b", Point(0.02, 0))

    def test_empty_route(self):
        self.assertEqual(find_insertion_index(self.start, [], self.a), 0)

    def test_stop_at_start_goes_first(self):
        new_stop = Stop("n", Point(0, 0))
        self.assertEqual(find_insertion_index(self.start, [self.a, self.b], new_stop), 0)

    def test_stop_past_end_goes_last(self):
        new_stop = Stop("n", Point(0.03, 0))
        self.assertEqual(find_insertion_index(self.start, [self.a, self.b], new_stop), 2)

    def test_stop_between(self):
        new_stop = Stop("n", Point(0.015, 0))
        self.assertEqual(find_insertion_index(self.start, [self.a, self.b], new_stop), 1)

    def test_equal_cost_positions_pick_earliest(self):
        # a copy of "a" costs the same before or after it
        new_stop = Stop("n", Point(0.01, 0))
        self.assertEqual(find_insertion_index(self.start, [self.a, self.b], new_stop), 0)

    def test_insert_stop_keeps_all_stops(self):
        route = [self.a, self.b]
        new_stop = Stop("n", Point(0.015, 0.001))
        self.assertEqual(ids(insert_stop(self.start, route, new_stop)), ["a", "n", "b"])
        self.assertEqual(ids(route), ["a", "b"])


class TestPathLength(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(path_length(Point(0, 0), []), 0.0)

    def test_includes_leg_from_start(self):
        a = Stop("a", Point(1, 0))
        self.assertGreater(path_length(Point(0, 0), [a]), 0.0)
        self.assertEqual(path_length(None, [a]), 0.0)


if __name__ == "__main__":
    unittest.main()
