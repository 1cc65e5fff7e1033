"""
Tour measurement helpers shared by both searches.

Kept separate from the search classes so that:
- the distance formula lives in exactly one place, and
- tests and the benchmark can measure arbitrary orders directly.

A tour here is an OPEN path: it starts at the first point and ends at
the last one, with no edge back to the start.
"""

import math
from typing import List, Sequence

from tsp_visualizer.models.point import Point
from tsp_visualizer.models.search_state import SearchState


def distance_between(a: Point, b: Point) -> float:
    """Straight-line (Euclidean) distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def total_distance(points: Sequence[Point]) -> float:
    """
    Total length of the path visiting ``points`` in the given order.

    Parameters
    ----------
    points : sequence of Point
        Points in visiting order (already mapped through an order).

    Returns
    -------
    float
        Sum of the distances between consecutive points.
        0 for an empty sequence or a single point.
    """
    total = 0.0
    for idx in range(1, len(points)):
        total += distance_between(points[idx - 1], points[idx])
    return total


def order_points(order: Sequence[int], points: Sequence[Point]) -> List[Point]:
    """Map an order of indices onto the point set it refers to."""
    return [points[i] for i in order]


def validate_order(order: Sequence[int], point_count: int) -> None:
    """
    Fail fast if ``order`` is not a permutation of range(point_count).

    Raises
    ------
    ValueError
        If the length differs from the point count, or an index is
        missing, repeated or out of range.
    """
    if len(order) != point_count:
        raise ValueError(
            f"Order has {len(order)} indices but the point set has {point_count} points."
        )
    if sorted(order) != list(range(point_count)):
        raise ValueError(f"Order {list(order)} is not a permutation of 0..{point_count - 1}.")


def update_best(candidate_order: Sequence[int],
                candidate_distance: float,
                state: SearchState) -> SearchState:
    """
    Record ``candidate_order`` as the best tour if it is strictly shorter.

    Equal distances do not replace the best, so the earliest tour found
    with a given length is the one that is kept. The order is copied, so
    later in-place changes to the working order never leak into the best.

    Returns the same ``state`` object, for chaining.
    """
    if candidate_distance < state.best_distance:
        state.best_distance = candidate_distance
        state.best_order = list(candidate_order)
    return state
