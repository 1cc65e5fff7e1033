"""
benchmark.py
------------

Side-by-side comparison of the two searches on the same point set:

    - Random swap (RS)
    - Lexicographic enumeration (LEX)

Produces TWO graphs:
    1) best_distance_trace.png  (best distance vs step)
    2) search_comparison.png    (final best distance and run time per search)
"""

from typing import Dict, List, Optional, Sequence
import os
import random
import time

import matplotlib.pyplot as plt
import numpy as np

from tsp_visualizer.models.point import Point
from tsp_visualizer.algorithms.random_swap import RandomSwapSearch
from tsp_visualizer.algorithms.lexicographic import LexicographicSearch


class SearchBenchmark:
    """
    Runs both searches for a fixed number of steps and plots the results.

    Attributes
    ----------
    points : tuple[Point]
        The point set both searches work on.
    steps : int
        Maximum number of steps per search. The lexicographic search
        stops earlier if it runs out of permutations.
    """

    LABELS = {"random": "Random swap (RS)", "lexicographic": "Lexicographic (LEX)"}

    def __init__(self,
                 points: Sequence[Point],
                 steps: int,
                 seed: Optional[int] = None) -> None:
        if steps <= 0:
            raise ValueError("Benchmark needs at least one step.")
        if not points:
            raise ValueError("Need at least one point for benchmarking.")
        self.points = tuple(points)
        self.steps = steps
        self.seed = seed

    # ------------------------------------------------------------------
    def collect(self) -> Dict[str, dict]:
        """
        Run both searches and return their traces.

        Returns
        -------
        dict
            {
                "random": {"trace": [...], "best_distance": float,
                           "best_order": [...], "exec_time": float,
                           "stats": {...}},
                "lexicographic": {...}
            }
            ``trace[i]`` is the best distance after step i + 1.
        """
        searches = {
            "random": RandomSwapSearch(self.points, rng=random.Random(self.seed)),
            "lexicographic": LexicographicSearch(self.points),
        }

        results = {}
        for key, search in searches.items():
            trace: List[float] = []
            t0 = time.perf_counter()
            while search.is_running and len(trace) < self.steps:
                trace.append(search.step().best_distance)
            t1 = time.perf_counter()

            results[key] = {
                "trace": trace,
                "best_distance": search.state.best_distance,
                "best_order": search.state.best_order,
                "exec_time": t1 - t0,
                "stats": search.get_stats(),
            }

        return results

    # ------------------------------------------------------------------
    def run(self, output_dir: str) -> Dict[str, str]:
        """
        Collect the traces and save TWO PNG graphs into ``output_dir``.

        Returns
        -------
        dict
            {
                "trace": "<absolute path to best_distance_trace.png>",
                "comparison": "<absolute path to search_comparison.png>"
            }
        """
        results = self.collect()
        os.makedirs(output_dir, exist_ok=True)

        # === 1) BEST DISTANCE TRACE ===================================
        plt.figure(figsize=(8, 5))

        for key, res in results.items():
            steps = np.arange(1, len(res["trace"]) + 1)
            plt.plot(steps, res["trace"], label=self.LABELS[key])

        plt.xlabel("Step")
        plt.ylabel("Best distance so far")
        plt.title(f"Best Distance vs Step ({len(self.points)} points)")
        plt.grid(True)
        plt.legend()
        plt.tight_layout()

        trace_path = os.path.abspath(os.path.join(output_dir, "best_distance_trace.png"))
        plt.savefig(trace_path)
        plt.close()

        # === 2) FINAL COMPARISON ======================================
        keys = list(results.keys())
        labels = ["RS", "LEX"]
        x = np.arange(len(keys))

        plt.figure(figsize=(6, 4))

        plt.subplot(2, 1, 1)
        plt.bar(x, [results[k]["exec_time"] * 1000 for k in keys])
        plt.xticks(x, labels)
        plt.ylabel("Time (ms)")
        plt.title("Run Time by Search")

        plt.subplot(2, 1, 2)
        plt.bar(x, [results[k]["best_distance"] for k in keys])
        plt.xticks(x, labels)
        plt.ylabel("Best distance")
        plt.title("Best Distance by Search")

        plt.tight_layout()

        comparison_path = os.path.abspath(os.path.join(output_dir, "search_comparison.png"))
        plt.savefig(comparison_path)
        plt.close()

        print(f"Saved trace graph to {trace_path}")
        print(f"Saved comparison graph to {comparison_path}")

        return {"trace": trace_path, "comparison": comparison_path}


# ----------------------------------------------------------------------
# Helper function to preserve simple API for the GUI
# ----------------------------------------------------------------------
def benchmark_searches(points: Sequence[Point],
                       steps: int,
                       output_dir: str,
                       seed: Optional[int] = None) -> Dict[str, str]:
    """
    Called by the GUI.

    Returns a dict with absolute paths to both graphs:
        {"trace": "...best_distance_trace.png", "comparison": "...search_comparison.png"}
    """
    bench = SearchBenchmark(points, steps, seed=seed)
    return bench.run(output_dir)
