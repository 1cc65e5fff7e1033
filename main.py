# Application controller for the TSP Search Visualizer.
#
# All behaviour lives inside the TSPVisualizerApp class (except the tiny
# entrypoint). It is the "driver" the searches know nothing about.
#
# Classes: TSPVisualizerApp: holds the point set and the active search, and advances it once per tick.
# GUI (window.py) receives a TSPVisualizerApp instance and calls tick() from a QTimer.


import random
from typing import Callable, List, Optional, Sequence, Union

from tsp_visualizer.models.point import Point
from tsp_visualizer.models.settings import VisualizerSettings
from tsp_visualizer.models.search_state import SearchMode, SearchStatus, StepResult
from tsp_visualizer.algorithms.base import TourSearch
from tsp_visualizer.algorithms.random_swap import RandomSwapSearch
from tsp_visualizer.algorithms.lexicographic import LexicographicSearch
from tsp_visualizer.utils.estimates import possibilities, time_estimate
from tsp_visualizer.utils.point_generator import generate_points

StepCallback = Callable[[List[int], List[int], float, float, int], None]


class TSPVisualizerApp:
    # High-level controller for the visualizer.
    #
    # Responsibilities:
    # - Maintain the current point set, sample size and tick interval.
    # - Own at most one active search, and make sure it is stopped before
    #   anything replaces it.
    # - Provide tick() for whatever scheduler drives the animation and
    #   forward every step to the registered listeners.

    def __init__(self, settings: Optional[VisualizerSettings] = None, verbose: bool = False) -> None:
        self.settings = settings or VisualizerSettings()
        self.settings.validate()
        self.verbose = verbose

        self.rng = random.Random(self.settings.seed)
        self.search: Optional[TourSearch] = None
        self.mode: Optional[SearchMode] = None
        self.last_result: Optional[StepResult] = None
        self._listeners: List[StepCallback] = []

        self.points: tuple = ()
        self.new_points()

    # ------------------------------------------------------------------
    # 1. Settings and derived values
    # ------------------------------------------------------------------
    @property
    def sample_size(self) -> int:
        return self.settings.sample_size

    @property
    def interval_ms(self) -> int:
        return self.settings.interval_ms

    @property
    def possibilities(self) -> int:
        # Number of tours the lexicographic search visits for the sample size.
        return possibilities(self.settings.sample_size)

    @property
    def point_possibilities(self) -> int:
        # Same count for the point set on screen, which keeps its size until new_points().
        return possibilities(len(self.points))

    @property
    def time_estimate(self) -> str:
        # How long a full lexicographic run takes at the current interval.
        return time_estimate(self.settings.interval_ms, self.settings.sample_size)

    def set_sample_size(self, sample_size: int) -> None:
        # Takes effect on the next new_points(); the current points are kept.
        s = self.settings
        if not s.min_sample_size <= sample_size <= s.max_sample_size:
            raise ValueError(
                f"Sample size must be between {s.min_sample_size} and {s.max_sample_size}."
            )
        s.sample_size = sample_size

    def set_interval_ms(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError("Interval must be a positive number of milliseconds.")
        self.settings.interval_ms = interval_ms

    # ------------------------------------------------------------------
    # 2. Point management
    # ------------------------------------------------------------------
    def get_points(self) -> tuple:
        return self.points

    def new_points(self) -> tuple:
        # Stop whatever runs, forget its results and place a fresh point set.
        self.stop()
        self._clear()
        s = self.settings
        self.points = generate_points(s.sample_size, s.width, s.height, self.rng)
        self._log(f"Generated {len(self.points)} new points")
        return self.points

    # ------------------------------------------------------------------
    # 3. Search lifecycle (what the GUI calls)
    # ------------------------------------------------------------------
    def start(self,
              mode: Union[SearchMode, str],
              points: Optional[Sequence[Point]] = None) -> TourSearch:
        # Replace the active search with a new one over `points`
        # (default: the current point set).
        mode = SearchMode(mode)
        self.stop()
        self._clear()

        if points is not None:
            self.points = tuple(points)

        if mode is SearchMode.RANDOM:
            search = RandomSwapSearch(self.points, rng=self.rng)
        else:
            search = LexicographicSearch(self.points)

        self.search = search
        self.mode = mode
        self._log(f"Started {search.name} search on {len(self.points)} points")
        return search

    def stop(self) -> None:
        if self.search is not None and self.search.is_running:
            self.search.stop()
            self._log(f"Stopped {self.search.name} search after {self.search.state.step_count} steps")

    @property
    def is_running(self) -> bool:
        return self.search is not None and self.search.is_running

    def on_step(self, callback: StepCallback) -> None:
        # Listener receives (order, best_order, distance, best_distance, step_count).
        self._listeners.append(callback)

    def tick(self) -> Optional[StepResult]:
        # One step of the active search. Returns None when nothing is running.
        if not self.is_running:
            return None

        result = self.search.step()
        self.last_result = result

        for callback in self._listeners:
            callback(*result.as_callback_args())

        if result.status is SearchStatus.EXHAUSTED:
            self._log(f"All {result.step_count} permutations visited, best distance {result.best_distance:.2f}")

        return result

    # ------------------------------------------------------------------
    # 4. Run without a timer
    # ------------------------------------------------------------------
    def run_to_completion(self, mode: Union[SearchMode, str], max_steps: Optional[int] = None) -> dict:
        # Start a search and tick it until it finishes or hits max_steps.
        # The random search never finishes by itself, so it needs max_steps.
        result = {
            "mode": None,
            "best_order": None,
            "best_distance": None,
            "steps": 0,
            "error": None,
            "stats": {},
        }

        try:
            mode = SearchMode(mode)
            result["mode"] = mode.value
            if mode is SearchMode.RANDOM and max_steps is None:
                raise ValueError("The random swap search needs a step limit.")

            search = self.start(mode)
            while self.is_running and (max_steps is None or search.state.step_count < max_steps):
                self.tick()
            self.stop()

            result["best_order"] = search.state.best_order
            result["best_distance"] = search.state.best_distance
            result["steps"] = search.state.step_count
            result["stats"] = search.get_stats()

        except Exception as e:
            result["error"] = str(e)

        return result

    def get_stats(self) -> dict:
        if self.search is None:
            return {}
        return self.search.get_stats()

    # ------------------------------------------------------------------
    def _clear(self) -> None:
        self.search = None
        self.mode = None
        self.last_result = None

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)


# ----------------------------------------------------------------------
# 5. Entry point
# ----------------------------------------------------------------------
if __name__ == "__main__":
    from gui.window import start_gui

    app_controller = TSPVisualizerApp(verbose=True)
    start_gui(app_controller)
