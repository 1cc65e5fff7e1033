import itertools
import math
import unittest

from tsp_visualizer.models.point import Point
from tsp_visualizer.models.search_state import SearchStatus
from tsp_visualizer.algorithms.lexicographic import (
    LexicographicSearch,
    next_permutation,
)
from tsp_visualizer.algorithms.tour_metrics import order_points, total_distance


def make_points(n):
    return [Point(i * 10, (i * i) % 7) for i in range(n)]


class TestNextPermutation(unittest.TestCase):
    def test_advances_to_next(self):
        order = [0, 2, 1]
        self.assertTrue(next_permutation(order))
        self.assertEqual(order, [1, 0, 2])

    def test_last_permutation_is_untouched(self):
        order = [3, 2, 1, 0]
        self.assertFalse(next_permutation(order))
        self.assertEqual(order, [3, 2, 1, 0])

    def test_matches_itertools_order(self):
        order = [0, 1, 2, 3, 4]
        seen = [tuple(order)]
        while next_permutation(order):
            seen.append(tuple(order))
        self.assertEqual(seen, list(itertools.permutations(range(5))))


class TestLexicographicSearch(unittest.TestCase):
    def test_three_point_sequence(self):
        search = LexicographicSearch(make_points(3))
        visited = []
        while search.is_running:
            visited.append(search.step().order)
        self.assertEqual(
            visited,
            [[0, 1, 2], [0, 2, 1], [1, 0, 2], [1, 2, 0], [2, 0, 1], [2, 1, 0]],
        )
        self.assertEqual(search.status, SearchStatus.EXHAUSTED)

    def test_reaches_last_permutation_after_n_factorial_minus_one_steps(self):
        n = 4
        search = LexicographicSearch(make_points(n))
        for _ in range(math.factorial(n) - 1):
            search.step()
        self.assertEqual(search.state.current_order, [3, 2, 1, 0])
        self.assertTrue(search.is_running)

        result = search.step()
        self.assertEqual(result.order, [3, 2, 1, 0])
        self.assertEqual(result.status, SearchStatus.EXHAUSTED)
        with self.assertRaises(RuntimeError):
            search.step()

    def test_visits_every_order_once(self):
        n = 5
        search = LexicographicSearch(make_points(n))
        visited = []
        while search.is_running:
            visited.append(tuple(search.step().order))
        self.assertEqual(len(visited), math.factorial(n))
        self.assertEqual(len(set(visited)), len(visited))
        self.assertEqual(visited, sorted(visited))

    def test_reversal_symmetry_across_all_orders(self):
        points = make_points(4)
        search = LexicographicSearch(points)
        while search.is_running:
            order = search.step().order
            forward = total_distance(order_points(order, points))
            backward = total_distance(order_points(order[::-1], points))
            self.assertAlmostEqual(forward, backward)

    def test_square_layout(self):
        points = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        search = LexicographicSearch(points)
        first = search.step()
        self.assertAlmostEqual(first.distance, 30)
        while search.is_running:
            search.step()
        self.assertEqual(search.state.step_count, 24)
        self.assertLessEqual(search.state.best_distance, 40)
        # Identity is already optimal, and ties never replace it
        self.assertEqual(search.state.best_order, [0, 1, 2, 3])

    def test_degenerate_point_counts(self):
        for points in ([], [Point(5, 5)]):
            search = LexicographicSearch(points)
            result = search.step()
            self.assertEqual(result.distance, 0)
            self.assertEqual(result.best_order, list(range(len(points))))
            self.assertEqual(result.status, SearchStatus.EXHAUSTED)

    def test_best_matches_exhaustive_minimum(self):
        points = [Point(5, 80), Point(60, 10), Point(33, 33), Point(90, 70), Point(20, 5)]
        search = LexicographicSearch(points)
        while search.is_running:
            search.step()
        best_order, best_distance = search.state.best_order, search.state.best_distance
        expected = min(
            total_distance(order_points(p, points))
            for p in itertools.permutations(range(len(points)))
        )
        self.assertAlmostEqual(best_distance, expected)
        self.assertAlmostEqual(total_distance(order_points(best_order, points)), expected)

    def test_stats(self):
        search = LexicographicSearch(make_points(3))
        while search.is_running:
            search.step()
        stats = search.get_stats()
        self.assertEqual(stats["permutations_visited"], 6)
        self.assertEqual(stats["status"], "exhausted")


if __name__ == "__main__":
    unittest.main()
