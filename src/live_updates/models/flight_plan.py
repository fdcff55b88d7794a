"""Immutable configuration for one simulated flight."""

from __future__ import annotations

from dataclasses import dataclass

from live_updates.errors import InvalidPlanError

SIMULATED_FLIGHT_DURATION_MS = 60_000
DISPLAYED_FLIGHT_DURATION_MINUTES = 60
DEFAULT_STEPS = 60
INITIALIZING_DELAY_MS = 2000
ROUTE_DELAY_MS = 4000


@dataclass(frozen=True, slots=True)
class FlightPlan:
    """Route, pacing and display settings for a simulated flight.

    ``total_duration_ms`` is the real wall-clock window the flight is
    compressed into. ``displayed_duration_minutes`` only feeds the display
    math (remaining time, landing ETA) and has no relation to real time.
    """

    origin: str = "MEX"
    destination: str = "SFO"
    subject: str = "Yovany"
    total_duration_ms: int = SIMULATED_FLIGHT_DURATION_MS
    displayed_duration_minutes: int = DISPLAYED_FLIGHT_DURATION_MINUTES
    steps: int = DEFAULT_STEPS
    initializing_delay_ms: int = INITIALIZING_DELAY_MS
    route_delay_ms: int = ROUTE_DELAY_MS

    @property
    def step_interval_ms(self) -> int:
        """Wall-clock gap between consecutive progress steps."""
        return self.total_duration_ms // self.steps

    @property
    def takeoff_offset_ms(self) -> int:
        """Offset from start() at which the in-progress window opens."""
        return self.initializing_delay_ms + self.route_delay_ms

    def validate(self) -> None:
        """Raise InvalidPlanError if the plan cannot be scheduled."""
        for name in ("total_duration_ms", "displayed_duration_minutes", "steps"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidPlanError(name, value, "must be positive")
        for name in ("initializing_delay_ms", "route_delay_ms"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidPlanError(name, value, "must not be negative")
