"""Domain models for simulated flights."""

from live_updates.models.flight_plan import FlightPlan
from live_updates.models.phase import (
    VALID_TRANSITIONS,
    FlightPhase,
    InvalidPhaseTransitionError,
    advance_phase,
)
from live_updates.models.snapshot import FlightProgressSnapshot

__all__ = [
    "VALID_TRANSITIONS",
    "FlightPhase",
    "FlightPlan",
    "FlightProgressSnapshot",
    "InvalidPhaseTransitionError",
    "advance_phase",
]
