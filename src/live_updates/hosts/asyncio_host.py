"""Timer host running callbacks on an asyncio event loop."""

from __future__ import annotations

import asyncio

from live_updates.hosts.base import TimerCallback


class AsyncioTimerHost:
    """Schedules callbacks with ``loop.call_later``.

    Without an explicit loop the running loop is looked up on each call, so
    the host must be used from inside a coroutine or loop callback.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def schedule(
        self, delay_ms: int, callback: TimerCallback
    ) -> asyncio.TimerHandle:
        return self.loop.call_later(delay_ms / 1000, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()
