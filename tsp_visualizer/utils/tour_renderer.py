"""
tour_renderer.py
----------------

Responsible ONLY for drawing tours onto a matplotlib Axes.

- Takes the point set plus the order just measured and the best order.
- Draws the best tour as a thick blue line underneath.
- Draws the current attempt as a thin grey line on top.
- Marks every point; the first and last point of the current attempt
  are drawn bold.

IMPORTANT:
- This file does NOT run any search.
- It does NOT change any order.
- It only draws what it is given.
"""

from typing import Optional, Sequence

from matplotlib.axes import Axes

from tsp_visualizer.models.point import Point
from tsp_visualizer.algorithms.tour_metrics import order_points


class TourRenderer:
    """
    Draws the current and best tours on a matplotlib Axes using canvas
    coordinates (origin top-left, y growing downwards).
    """

    BEST_COLOR = "#0000bb"
    CURRENT_COLOR = "#999999"
    POINT_COLOR = "#cccccc"
    ENDPOINT_COLOR = "#ffffff"
    BACKGROUND = "#222222"

    def __init__(self, width: int, height: int):
        """
        Parameters
        ----------
        width, height : int
            Canvas size, used to fix the axis limits so the view does not
            jump around between ticks.
        """
        self.width = width
        self.height = height

    # ------------------------------------------------------------------
    def render(self,
               ax: Axes,
               points: Sequence[Point],
               order: Optional[Sequence[int]] = None,
               best_order: Optional[Sequence[int]] = None) -> None:
        """
        Clear ``ax`` and draw the points and both tours.

        Parameters
        ----------
        ax : matplotlib.axes.Axes
            Target axes. Cleared first.
        points : sequence of Point
            The point set.
        order : sequence of int or None
            The tour just measured. If None the points are drawn in their
            own order without a connecting line.
        best_order : sequence of int or None
            The best tour so far, or None if nothing was measured yet.
        """
        ax.clear()
        ax.set_facecolor(self.BACKGROUND)
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_xticks([])
        ax.set_yticks([])

        if best_order:
            self._draw_path(ax, order_points(best_order, points), self.BEST_COLOR, 10)

        current = order_points(order, points) if order is not None else list(points)
        if order is not None:
            self._draw_path(ax, current, self.CURRENT_COLOR, 2)

        for idx, point in enumerate(current):
            bold = idx == 0 or idx == len(current) - 1
            x, y = point.as_tuple
            ax.scatter(
                [x], [y],
                s=200,
                facecolors="none",
                edgecolors=self.ENDPOINT_COLOR if bold else self.POINT_COLOR,
                linewidths=2 if bold else 1,
                zorder=3,
            )

    def _draw_path(self, ax: Axes, path: Sequence[Point], color: str, width: float) -> None:
        if len(path) < 2:
            return
        xs, ys = zip(*(p.as_tuple for p in path))
        ax.plot(xs, ys, color=color, linewidth=width, solid_capstyle="round")
