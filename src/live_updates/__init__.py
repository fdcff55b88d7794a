"""Simulated flight progress scheduler for live-update notifications."""

from live_updates.errors import AlreadyRunningError, InvalidPlanError, SchedulerError
from live_updates.models import FlightPhase, FlightPlan, FlightProgressSnapshot
from live_updates.render import (
    format_clock_time,
    format_remaining_time,
    render_body,
    render_title,
)
from live_updates.scheduler import FlightProgressScheduler

__all__ = [
    "AlreadyRunningError",
    "FlightPhase",
    "FlightPlan",
    "FlightProgressScheduler",
    "FlightProgressSnapshot",
    "InvalidPlanError",
    "SchedulerError",
    "format_clock_time",
    "format_remaining_time",
    "render_body",
    "render_title",
]
