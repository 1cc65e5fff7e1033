"""
search_state.py
---------------

Plain data shared by both searches and the driver loop.

- SearchState: the mutable working order plus the best tour seen so far.
  One search owns one state and mutates it once per step.
- StepResult: the five values a single step hands back to the driver.
- SearchStatus / SearchMode: small enums for the search lifecycle and for
  choosing which search the driver starts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class SearchStatus(Enum):
    RUNNING = "running"
    STOPPED = "stopped"
    EXHAUSTED = "exhausted"


class SearchMode(Enum):
    RANDOM = "random"
    LEXICOGRAPHIC = "lexicographic"


@dataclass
class SearchState:
    """
    Working state of one search run.

    Attributes
    ----------
    current_order : list[int]
        Permutation of point indices that the next step will measure.
    best_order : list[int] or None
        Indices of the shortest tour seen so far. None until the first
        step has measured something.
    best_distance : float
        Length of ``best_order``; infinity until the first measurement.
    step_count : int
        Number of steps taken in this run.
    """

    current_order: List[int]
    best_order: Optional[List[int]] = None
    best_distance: float = float("inf")
    step_count: int = 0


@dataclass
class StepResult:
    # What one step reports back.
    # order is the tour that was just measured, not the next one.

    order: List[int]
    best_order: List[int]
    distance: float
    best_distance: float
    step_count: int
    status: SearchStatus = field(default=SearchStatus.RUNNING)

    def as_callback_args(self) -> tuple:
        return (
            self.order,
            self.best_order,
            self.distance,
            self.best_distance,
            self.step_count,
        )
