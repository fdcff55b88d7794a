"""Flight progress scheduling."""

from live_updates.scheduler.scheduler import FlightProgressScheduler, ScheduleState
from live_updates.scheduler.timeline import (
    TimelineAction,
    TimelineEntry,
    build_timeline,
    group_by_offset,
)

__all__ = [
    "FlightProgressScheduler",
    "ScheduleState",
    "TimelineAction",
    "TimelineEntry",
    "build_timeline",
    "group_by_offset",
]
