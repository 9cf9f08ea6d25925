"""
Timing utilities for Base1024.
"""

import time
from typing import Optional

from Base1024.utils.logging import get_logger


class Timer:
    """A simple timer class for measuring elapsed time."""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self.start_time: Optional[float] = None
        self.elapsed: float = 0.0

    def start(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def stop(self) -> float:
        if self.start_time is None:
            raise RuntimeError("Timer has not been started.")
        end_time = time.perf_counter()
        self.elapsed = end_time - self.start_time
        self.start_time = None
        return self.elapsed

    def rate(self, units: int) -> float:
        """Units per second over the last measured interval."""
        if self.elapsed <= 0.0:
            return 0.0
        return units / self.elapsed

    def __enter__(self) -> "Timer":
        return self.start()

    def __exit__(self, *args) -> None:
        self.stop()
        if self.name:
            get_logger().info(f"[Timer] {self.name}: {self.elapsed:.4f} seconds")
