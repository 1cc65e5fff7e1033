# Shared behaviour of the step-by-step tour searches.
#
# ORGANIZED AS A BASE CLASS:
# - TourSearch: owns the point set reference, the SearchState and the
#   lifecycle status, and knows how to measure the current order.
# - RandomSwapSearch / LexicographicSearch only add "what happens to the
#   order after it has been measured".

from typing import Optional, Sequence

from tsp_visualizer.models.point import Point
from tsp_visualizer.models.search_state import SearchState, SearchStatus, StepResult
from tsp_visualizer.algorithms.tour_metrics import (
    order_points,
    total_distance,
    update_best,
    validate_order,
)


class TourSearch:
    # Base class for a search that is advanced one step at a time by an
    # external driver (timer tick, test loop, benchmark).

    name = "search"

    def __init__(self, points: Sequence[Point], initial_order: Optional[Sequence[int]] = None):
        # The point set is only read, never reordered.
        self.points = tuple(points)

        if initial_order is None:
            order = list(range(len(self.points)))
        else:
            order = list(initial_order)
            validate_order(order, len(self.points))

        self.state = SearchState(current_order=order)
        self.status = SearchStatus.RUNNING

        # Stats for analysis / GUI metrics
        self.distance_evaluations = 0
        self.improvements = 0

    @property
    def is_running(self) -> bool:
        return self.status is SearchStatus.RUNNING

    def stop(self) -> None:
        # Halt the search. Has no effect once it is already finished.
        if self.status is SearchStatus.RUNNING:
            self.status = SearchStatus.STOPPED

    def step(self) -> StepResult:
        # Measure the current order, then let the subclass move on.
        if not self.is_running:
            raise RuntimeError(f"Cannot step a {self.name} search that is {self.status.value}.")

        measured, distance = self._measure()
        self._advance()

        return StepResult(
            order=measured,
            best_order=list(self.state.best_order),
            distance=distance,
            best_distance=self.state.best_distance,
            step_count=self.state.step_count,
            status=self.status,
        )

    def _measure(self):
        # Steps common to every search: distance, best update, counter.
        state = self.state
        validate_order(state.current_order, len(self.points))

        measured = list(state.current_order)
        distance = total_distance(order_points(measured, self.points))
        self.distance_evaluations += 1

        previous_best = state.best_distance
        update_best(measured, distance, state)
        if state.best_distance < previous_best:
            self.improvements += 1

        state.step_count += 1
        return measured, distance

    def _advance(self) -> None:
        raise NotImplementedError

    def get_stats(self) -> dict:
        """Return a dictionary of current statistics."""
        return {
            "steps": self.state.step_count,
            "distance_evaluations": self.distance_evaluations,
            "improvements": self.improvements,
            "best_distance": self.state.best_distance,
            "status": self.status.value,
        }
