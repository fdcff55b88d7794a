"""Timer host backed by a Textual message pump (app, screen or widget)."""

from __future__ import annotations

from typing import Protocol

from textual.timer import Timer

from live_updates.hosts.base import TimerCallback


class TimerOwner(Protocol):
    """The part of Textual's MessagePump used to start one-shot timers."""

    def set_timer(
        self,
        delay: float,
        callback: TimerCallback | None = None,
        *,
        name: str | None = None,
        pause: bool = False,
    ) -> Timer: ...


class TextualTimerHost:
    """Runs scheduler callbacks on a Textual app's event loop."""

    def __init__(self, owner: TimerOwner, *, name_prefix: str = "flight") -> None:
        self._owner = owner
        self._name_prefix = name_prefix
        self._count = 0

    def schedule(self, delay_ms: int, callback: TimerCallback) -> Timer:
        self._count += 1
        return self._owner.set_timer(
            delay_ms / 1000,
            callback,
            name=f"{self._name_prefix}-{self._count}",
        )

    def cancel(self, handle: Timer) -> None:
        handle.stop()
