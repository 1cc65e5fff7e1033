from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class Point:
    # A fixed position on the drawing canvas.
    #
    # Points are never mutated: a new point set replaces the old one
    # wholesale, and the searches only ever reorder indices into it.

    x: float
    y: float

    @property
    def as_tuple(self) -> Tuple[float, float]:
        # Returns an (x, y) tuple, which is what matplotlib plotting expects.
        return self.x, self.y
