"""Errors raised by the flight progress scheduler."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from live_updates.models.phase import FlightPhase


class SchedulerError(Exception):
    """Base class for scheduler failures."""


class AlreadyRunningError(SchedulerError):
    """Raised when start() is called while a run is still active."""

    def __init__(self, current: FlightPhase) -> None:
        self.current = current
        super().__init__(f"A flight is already running (phase: {current.value})")


class InvalidPlanError(SchedulerError):
    """Raised when a flight plan cannot be scheduled."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid flight plan: {field}={value!r} {reason}")
