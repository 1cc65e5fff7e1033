"""
Exhaustive search that walks every permutation in lexicographic order.

Starting from the identity order [0, 1, ..., N-1] (the smallest
permutation), each step measures the current order and then advances it
to the next permutation. The step that measures the last permutation
(strictly descending) finishes the search, so a full run takes exactly
N! steps and visits every order once.

Only practical for small N: the number of steps grows factorially.
"""

from typing import List, Sequence

from tsp_visualizer.models.point import Point
from tsp_visualizer.models.search_state import SearchStatus
from tsp_visualizer.algorithms.base import TourSearch


def next_permutation(order: List[int]) -> bool:
    """
    Advance ``order`` in place to its next lexicographic permutation.

    Parameters
    ----------
    order : list[int]
        The permutation to advance. Modified in place.

    Returns
    -------
    bool
        True if the order was advanced, False if it was already the last
        permutation (in which case it is left untouched).

    Example
    -------
        [0, 2, 1]  ->  pivot 0, successor 1, swap -> [1, 2, 0],
                       reverse suffix          -> [1, 0, 2]
    """
    # Rightmost ascent: the pivot
    pivot = -1
    for x in range(len(order) - 1):
        if order[x] < order[x + 1]:
            pivot = x

    if pivot == -1:
        return False

    # Rightmost element after the pivot that is larger than it
    successor = pivot + 1
    for y in range(pivot + 1, len(order)):
        if order[y] > order[pivot]:
            successor = y

    order[pivot], order[successor] = order[successor], order[pivot]

    # Smallest arrangement of the suffix
    order[pivot + 1:] = reversed(order[pivot + 1:])
    return True


class LexicographicSearch(TourSearch):
    """
    Brute force search driven one permutation per step.

    Unlike the random swap search this one has a terminal state:
    ``status`` becomes ``SearchStatus.EXHAUSTED`` on the step that
    measures the final permutation.
    """

    name = "lexicographic"

    def __init__(self, points: Sequence[Point]):
        # Always starts from the identity order so that no permutation is skipped.
        super().__init__(points)
        self.permutations_visited = 0

    def _advance(self) -> None:
        self.permutations_visited += 1
        if not next_permutation(self.state.current_order):
            self.status = SearchStatus.EXHAUSTED

    def get_stats(self) -> dict:
        stats = super().get_stats()
        stats["permutations_visited"] = self.permutations_visited
        return stats

