# Random point placement for the visualizer canvas.
#
# The searches never create points themselves; the controller calls this
# whenever the user asks for a new point set.

import random
from typing import Optional, Tuple

from tsp_visualizer.models.point import Point


def generate_points(count: int,
                    width: int,
                    height: int,
                    rng: Optional[random.Random] = None) -> Tuple[Point, ...]:
    # Returns `count` points with integer coordinates in [0, width) x [0, height).
    if count < 0:
        raise ValueError(f"Point count cannot be negative, got {count}.")
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}.")

    rng = rng or random.Random()
    return tuple(
        Point(rng.randrange(width), rng.randrange(height))
        for _ in range(count)
    )
