"""
Minesweeper Core - Game Timer
Whole-second elapsed counter started on the first reveal
"""

import time
from typing import Callable, Optional


class GameTimer:
    """Counts whole seconds between start() and stop(); starts at most once"""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._started_at: Optional[float] = None
        self._frozen: Optional[int] = None

    @property
    def started(self) -> bool:
        return self._started_at is not None

    @property
    def running(self) -> bool:
        return self.started and self._frozen is None

    def start(self):
        """Start counting; ignored if this timer has already been started"""
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self):
        """Freeze the elapsed value"""
        if self.running:
            self._frozen = self._measure()

    @property
    def elapsed(self) -> int:
        if self._frozen is not None:
            return self._frozen
        if self._started_at is None:
            return 0
        return self._measure()

    def _measure(self) -> int:
        return max(0, int(self._clock() - self._started_at))
