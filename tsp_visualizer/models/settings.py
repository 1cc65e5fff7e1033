from dataclasses import dataclass
from typing import Optional

@dataclass
class VisualizerSettings:
    # Default configuration for the visualizer.
    #
    # The controller (main.TSPVisualizerApp) is built from one of these and
    # the GUI spin boxes use the min / max bounds.

    sample_size: int = 5
    interval_ms: int = 50
    width: int = 800
    height: int = 600
    seed: Optional[int] = None

    min_sample_size: int = 1
    max_sample_size: int = 10

    def validate(self) -> None:
        # Raise ValueError if any value is outside what the searches accept.
        if not self.min_sample_size <= self.sample_size <= self.max_sample_size:
            raise ValueError(
                f"Sample size must be between {self.min_sample_size} "
                f"and {self.max_sample_size}, got {self.sample_size}."
            )
        if self.interval_ms <= 0:
            raise ValueError(f"Interval must be positive, got {self.interval_ms} ms.")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}.")
