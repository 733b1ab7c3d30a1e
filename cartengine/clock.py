"""Process-wide frame clock."""

from __future__ import annotations

import time
from typing import Callable, ClassVar, Optional


class Clock:
    """Tracks time since reset and time between ticks, in seconds."""

    _instance: ClassVar[Optional["Clock"]] = None

    def __init__(self, timer: Callable[[], float] = time.perf_counter) -> None:
        self._timer = timer
        now = timer()
        self._start = now
        self._previous = now
        self._elapsed = 0.0
        self._delta = 0.0
        self.time_scale = 1.0

    @classmethod
    def get(cls) -> "Clock":
        """Return the shared clock, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def release(cls) -> None:
        """Drop the shared clock."""
        cls._instance = None

    @property
    def elapsed_time(self) -> float:
        return self._elapsed

    @property
    def delta_time(self) -> float:
        return self._delta

    def reset(self) -> None:
        now = self._timer()
        self._previous = now
        self._start = now

    def tick(self) -> None:
        """Advance one frame, updating delta and elapsed time."""
        current = self._timer()
        self._delta = current - self._previous
        self._previous = self._timer()
        self._elapsed = self._previous - self._start