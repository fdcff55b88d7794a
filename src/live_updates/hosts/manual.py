"""Deterministic timer host driven by a virtual clock.

Useful for replaying a flight without waiting on real time: nothing runs
until ``advance()`` or ``run_until_idle()`` moves the clock forward.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field

from live_updates.hosts.base import TimerCallback


@dataclass(order=True)
class ManualTimer:
    """A pending callback. Ordered by due time, then registration order."""

    due_ms: int
    seq: int
    callback: TimerCallback = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class ManualTimerHost:
    """Timer host and clock whose time only moves when told to."""

    def __init__(self, start_ms: int = 0) -> None:
        self._now_ms = start_ms
        self._queue: list[ManualTimer] = []
        self._seq = itertools.count()

    def now_ms(self) -> int:
        return self._now_ms

    @property
    def pending(self) -> int:
        """Number of callbacks still waiting to run."""
        return sum(1 for timer in self._queue if not timer.cancelled)

    def schedule(self, delay_ms: int, callback: TimerCallback) -> ManualTimer:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must not be negative, got {delay_ms}")
        timer = ManualTimer(self._now_ms + delay_ms, next(self._seq), callback)
        heapq.heappush(self._queue, timer)
        return timer

    def cancel(self, handle: ManualTimer) -> None:
        handle.cancelled = True

    def advance(self, delta_ms: int) -> int:
        """Move the clock forward, running every callback that falls due.

        Returns:
            Number of callbacks executed.
        """
        if delta_ms < 0:
            raise ValueError(f"delta_ms must not be negative, got {delta_ms}")
        target = self._now_ms + delta_ms
        executed = 0
        while self._queue and self._queue[0].due_ms <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now_ms = timer.due_ms
            timer.callback()
            executed += 1
        self._now_ms = target
        return executed

    def run_until_idle(self) -> int:
        """Advance to the last pending due time and run everything."""
        executed = 0
        while self._queue:
            last_due = max(timer.due_ms for timer in self._queue)
            executed += self.advance(max(0, last_due - self._now_ms))
        return executed
