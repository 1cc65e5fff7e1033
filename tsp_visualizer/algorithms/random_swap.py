# Random swap heuristic for the visualizer.
#
# Every step measures the working order, keeps it if it beats the best so
# far, and then swaps two randomly chosen positions to get the order for
# the next step. There is no stopping condition: the driver decides when
# to stop.

import random
from typing import Optional, Sequence

from tsp_visualizer.models.point import Point
from tsp_visualizer.algorithms.base import TourSearch


class RandomSwapSearch(TourSearch):
    # Random swap heuristic.
    #
    # Both positions are drawn independently, so the same position can be
    # picked twice. That step is a no-op swap and is deliberately kept, as
    # filtering it out would change the random distribution.

    name = "random swap"

    def __init__(self,
                 points: Sequence[Point],
                 initial_order: Optional[Sequence[int]] = None,
                 rng: Optional[random.Random] = None):
        super().__init__(points, initial_order)
        self.rng = rng or random.Random()

        self.swaps_performed = 0
        self.self_swaps = 0

    def _advance(self) -> None:
        order = self.state.current_order
        n = len(order)
        if n == 0:
            # Nothing to swap
            return

        i = self.rng.randrange(n)
        j = self.rng.randrange(n)
        order[i], order[j] = order[j], order[i]

        self.swaps_performed += 1
        if i == j:
            self.self_swaps += 1

    def get_stats(self) -> dict:
        stats = super().get_stats()
        stats["swaps_performed"] = self.swaps_performed
        stats["self_swaps"] = self.self_swaps
        return stats
