"""Progress snapshots handed to the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass

from live_updates.models.flight_plan import FlightPlan
from live_updates.models.phase import FlightPhase


@dataclass(frozen=True, slots=True)
class FlightProgressSnapshot:
    """Notification content at one point in simulated time.

    ``progress`` is ``None`` while the flight has not taken off yet
    (indeterminate progress).
    """

    progress: int | None
    phase: FlightPhase
    elapsed_minutes: int = 0
    step: int | None = None
    started_at_ms: int | None = None

    @property
    def is_indeterminate(self) -> bool:
        return self.progress is None

    @property
    def is_complete(self) -> bool:
        return self.progress == 100

    @classmethod
    def indeterminate(cls, phase: FlightPhase) -> FlightProgressSnapshot:
        """Snapshot shown while the flight is about to start."""
        return cls(progress=None, phase=phase)

    @classmethod
    def for_step(
        cls,
        plan: FlightPlan,
        step: int,
        *,
        phase: FlightPhase,
        started_at_ms: int | None,
    ) -> FlightProgressSnapshot:
        """Build the snapshot for step index ``step`` of ``plan``."""
        progress = min(100, step * 100 // plan.steps)
        return cls(
            progress=progress,
            phase=phase,
            elapsed_minutes=progress * plan.displayed_duration_minutes // 100,
            step=step,
            started_at_ms=started_at_ms,
        )
