"""
estimates.py
------------

Numbers shown next to the sample size and interval inputs:

- how many tours the lexicographic search will visit (N!), and
- how long that takes at the current tick interval, formatted as
  hours:minutes:seconds.milliseconds (no zero padding, e.g. "0:0:6.0").
"""

import math


def possibilities(sample_size: int) -> int:
    """Number of orders of ``sample_size`` points (1 for 0 or 1 points)."""
    if sample_size < 0:
        raise ValueError(f"Sample size cannot be negative, got {sample_size}.")
    return math.factorial(sample_size)


def format_duration(milliseconds: int) -> str:
    """Format a duration in milliseconds as ``h:m:s.ms``."""
    ms = milliseconds % 1000
    seconds = (milliseconds - ms) // 1000
    secs = seconds % 60
    minutes = (seconds - secs) // 60
    mins = minutes % 60
    hrs = (minutes - mins) // 60
    return f"{hrs}:{mins}:{secs}.{ms}"


def time_estimate(interval_ms: int, sample_size: int) -> str:
    """Time a full lexicographic run takes at one step per ``interval_ms``."""
    return format_duration(interval_ms * possibilities(sample_size))
