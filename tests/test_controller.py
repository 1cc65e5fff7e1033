import unittest

from main import TSPVisualizerApp
from tsp_visualizer.models.point import Point
from tsp_visualizer.models.settings import VisualizerSettings
from tsp_visualizer.models.search_state import SearchMode, SearchStatus


class TestTSPVisualizerApp(unittest.TestCase):
    def setUp(self):
        self.app = TSPVisualizerApp(VisualizerSettings(sample_size=4, seed=42))

    def test_initial_points_and_estimates(self):
        self.assertEqual(len(self.app.get_points()), 4)
        self.assertEqual(self.app.possibilities, 24)
        self.assertEqual(self.app.time_estimate, "0:0:1.200")
        self.assertIsNone(self.app.tick())

    def test_tick_notifies_listeners(self):
        calls = []
        self.app.on_step(lambda *args: calls.append(args))
        self.app.start(SearchMode.LEXICOGRAPHIC)
        self.app.tick()
        self.app.tick()

        self.assertEqual(len(calls), 2)
        order, best_order, distance, best_distance, step_count = calls[1]
        self.assertEqual(order, [0, 1, 3, 2])
        self.assertEqual(step_count, 2)
        self.assertLessEqual(best_distance, distance)

    def test_lexicographic_run_stops_when_exhausted(self):
        self.app.start("lexicographic")
        ticks = 0
        while self.app.tick() is not None:
            ticks += 1
        self.assertEqual(ticks, 24)
        self.assertFalse(self.app.is_running)
        self.assertEqual(self.app.search.status, SearchStatus.EXHAUSTED)

    def test_start_replaces_and_stops_previous_search(self):
        first = self.app.start(SearchMode.RANDOM)
        self.app.tick()
        second = self.app.start(SearchMode.LEXICOGRAPHIC)
        self.assertEqual(first.status, SearchStatus.STOPPED)
        self.assertIs(self.app.search, second)
        self.assertEqual(self.app.tick().step_count, 1)

    def test_new_points_stops_search(self):
        search = self.app.start(SearchMode.RANDOM)
        self.app.set_sample_size(6)
        points = self.app.new_points()
        self.assertEqual(len(points), 6)
        self.assertEqual(search.status, SearchStatus.STOPPED)
        self.assertIsNone(self.app.search)
        self.assertIsNone(self.app.tick())

    def test_step_total_follows_points_on_screen(self):
        self.app.start(SearchMode.LEXICOGRAPHIC)
        self.app.set_sample_size(6)
        # The running search still has 4 points until new_points()
        self.assertEqual(self.app.possibilities, 720)
        self.assertEqual(self.app.point_possibilities, 24)
        self.app.new_points()
        self.assertEqual(self.app.point_possibilities, 720)

    def test_restart_begins_with_clean_stats(self):
        self.app.start(SearchMode.RANDOM)
        for _ in range(10):
            self.app.tick()
        self.app.start(SearchMode.RANDOM)
        stats = self.app.get_stats()
        self.assertEqual(stats["steps"], 0)
        self.assertEqual(stats["distance_evaluations"], 0)
        self.assertEqual(stats["swaps_performed"], 0)
        self.assertEqual(stats["best_distance"], float("inf"))

    def test_start_with_explicit_points(self):
        square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        self.app.start(SearchMode.LEXICOGRAPHIC, square)
        self.assertAlmostEqual(self.app.tick().distance, 30)

    def test_stop_halts_ticking(self):
        self.app.start(SearchMode.RANDOM)
        self.app.tick()
        self.app.stop()
        self.assertIsNone(self.app.tick())
        self.assertEqual(self.app.get_stats()["status"], "stopped")

    def test_run_to_completion(self):
        result = self.app.run_to_completion(SearchMode.LEXICOGRAPHIC)
        self.assertIsNone(result["error"])
        self.assertEqual(result["steps"], 24)
        self.assertEqual(sorted(result["best_order"]), [0, 1, 2, 3])

        random_result = self.app.run_to_completion("random", max_steps=50)
        self.assertEqual(random_result["steps"], 50)
        self.assertGreaterEqual(random_result["best_distance"], result["best_distance"])

    def test_run_to_completion_reports_errors(self):
        self.assertIsNotNone(self.app.run_to_completion("random")["error"])
        self.assertIsNotNone(self.app.run_to_completion("annealing")["error"])

    def test_invalid_settings(self):
        with self.assertRaises(ValueError):
            self.app.set_sample_size(0)
        with self.assertRaises(ValueError):
            self.app.set_interval_ms(0)
        with self.assertRaises(ValueError):
            TSPVisualizerApp(VisualizerSettings(sample_size=11))


if __name__ == "__main__":
    unittest.main()
