"""Host environment adapters: timers, clocks and presenters."""

from live_updates.hosts.asyncio_host import AsyncioTimerHost
from live_updates.hosts.base import (
    CancelHandle,
    Clock,
    Presenter,
    SystemClock,
    TimerHost,
)
from live_updates.hosts.manual import ManualTimerHost
from live_updates.hosts.presenters import LoggingPresenter
from live_updates.hosts.textual_host import TextualTimerHost

__all__ = [
    "AsyncioTimerHost",
    "CancelHandle",
    "Clock",
    "LoggingPresenter",
    "ManualTimerHost",
    "Presenter",
    "SystemClock",
    "TextualTimerHost",
    "TimerHost",
]
