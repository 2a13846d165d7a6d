"""Countdown clock for a round."""

from __future__ import annotations

import time
from typing import Callable


class Countdown:
    """Whole seconds left out of a fixed limit, measured on a clock."""

    def __init__(self, limit: int, clock: Callable[[], float] | None = None):
        self.limit = limit
        self._clock = clock if clock is not None else time.monotonic
        self._started = self._clock()

    def start(self) -> None:
        self._started = self._clock()

    def reset(self) -> None:
        self._started = self._clock()

    def time_left(self) -> int:
        passed = int(self._clock() - self._started)
        return max(0, self.limit - passed)

    def label(self) -> str:
        return f"TIME: {self.time_left()}S"