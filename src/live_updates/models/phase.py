"""Lifecycle phases of one scheduled flight run.

Phases only ever move forward. A cancelled run is discarded rather than
rewound, so the table below has no backward edges.
"""

from enum import Enum


class FlightPhase(Enum):
    """Coarse lifecycle stage of a run."""

    NOT_STARTED = "not_started"
    INITIALIZING = "initializing"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class InvalidPhaseTransitionError(Exception):
    """Raised when a phase transition would move backwards or skip ahead."""

    def __init__(self, current: FlightPhase, target: FlightPhase) -> None:
        self.current = current
        self.target = target
        super().__init__(
            f"Invalid transition from {current.value} to {target.value}"
        )


VALID_TRANSITIONS: dict[FlightPhase, set[FlightPhase]] = {
    FlightPhase.NOT_STARTED: {FlightPhase.INITIALIZING},
    FlightPhase.INITIALIZING: {FlightPhase.IN_PROGRESS},
    FlightPhase.IN_PROGRESS: {FlightPhase.COMPLETE},
    FlightPhase.COMPLETE: set(),
}


def advance_phase(current: FlightPhase, target: FlightPhase) -> FlightPhase:
    """Return target if it directly follows current, else raise."""
    if target not in VALID_TRANSITIONS[current]:
        raise InvalidPhaseTransitionError(current, target)
    return target
