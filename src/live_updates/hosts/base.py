"""Contracts between the scheduler and the environment that hosts it."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any, Protocol, TypeAlias, runtime_checkable

from live_updates.models import FlightProgressSnapshot

CancelHandle: TypeAlias = Any
TimerCallback: TypeAlias = Callable[[], None]


class TimerHost(Protocol):
    """Delayed-callback facility running callbacks on one execution context."""

    def schedule(self, delay_ms: int, callback: TimerCallback) -> CancelHandle: ...

    def cancel(self, handle: CancelHandle) -> None: ...


@runtime_checkable
class Clock(Protocol):
    """Source of wall-clock time in epoch milliseconds."""

    def now_ms(self) -> int: ...


class Presenter(Protocol):
    """Receives every snapshot the scheduler emits."""

    def present(
        self,
        snapshot: FlightProgressSnapshot,
        title: str,
        body: str,
    ) -> None: ...


class SystemClock:
    """Clock backed by the system time."""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000
