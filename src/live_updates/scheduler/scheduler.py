"""Scheduler that plays a simulated flight as a series of progress snapshots."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from datetime import UTC, tzinfo
from functools import partial

from live_updates.errors import AlreadyRunningError
from live_updates.hosts.base import (
    CancelHandle,
    Clock,
    Presenter,
    SystemClock,
    TimerHost,
)
from live_updates.models import (
    FlightPhase,
    FlightPlan,
    FlightProgressSnapshot,
    advance_phase,
)
from live_updates.render import format_clock_time, render_body, render_title
from live_updates.scheduler.timeline import (
    TimelineAction,
    TimelineEntry,
    build_timeline,
    group_by_offset,
)

logger = logging.getLogger(__name__)

_run_ids = itertools.count(1)


@dataclass
class ScheduleState:
    """Mutable state of one run. Only the owning scheduler touches it."""

    plan: FlightPlan
    run_id: int
    phase: FlightPhase = FlightPhase.NOT_STARTED
    started_at_ms: int | None = None
    next_step: int = 0
    last_progress: int | None = None
    handles: list[CancelHandle] = field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.phase is not FlightPhase.COMPLETE


class FlightProgressScheduler:
    """Emits progress snapshots for a simulated flight through a presenter.

    Each run is laid out up front (see ``build_timeline``) and handed to the
    timer host. Callbacks from a cancelled or finished run are ignored even if
    the host fires them late.
    """

    def __init__(
        self,
        plan: FlightPlan | None = None,
        *,
        timers: TimerHost,
        presenter: Presenter,
        clock: Clock | None = None,
        tz: tzinfo = UTC,
    ) -> None:
        self._plan = plan or FlightPlan()
        self._timers = timers
        self._presenter = presenter
        if clock is None:
            clock = timers if isinstance(timers, Clock) else SystemClock()
        self._clock = clock
        self._tz = tz
        self._state: ScheduleState | None = None
        self._last_snapshot: FlightProgressSnapshot | None = None

    @property
    def plan(self) -> FlightPlan:
        """Plan of the current (or most recent) run."""
        if self._state is not None:
            return self._state.plan
        return self._plan

    @property
    def state(self) -> ScheduleState | None:
        return self._state

    @property
    def phase(self) -> FlightPhase:
        if self._state is None:
            return FlightPhase.NOT_STARTED
        return self._state.phase

    @property
    def is_running(self) -> bool:
        return self._state is not None and self._state.is_active

    @property
    def last_snapshot(self) -> FlightProgressSnapshot | None:
        return self._last_snapshot

    def start(self, plan: FlightPlan | None = None) -> None:
        """Schedule a full run.

        Raises:
            AlreadyRunningError: A run is active; it is left untouched.
            InvalidPlanError: The plan cannot be scheduled. Nothing is scheduled.
        """
        if self._state is not None and self._state.is_active:
            raise AlreadyRunningError(self._state.phase)

        plan = plan or self._plan
        plan.validate()

        state = ScheduleState(plan=plan, run_id=next(_run_ids))
        self._state = state
        self._last_snapshot = None

        timeline = build_timeline(plan)
        for offset_ms, entries in group_by_offset(timeline):
            callback = partial(self._fire, state.run_id, entries)
            state.handles.append(self._timers.schedule(offset_ms, callback))

        logger.info(
            "Scheduled flight %s -> %s: %d steps over %d ms (%d timer(s))",
            plan.origin,
            plan.destination,
            plan.steps,
            plan.total_duration_ms,
            len(state.handles),
        )

    def cancel(self) -> None:
        """Revoke every pending callback and return to NOT_STARTED."""
        state = self._state
        if state is None:
            return

        self._revoke(state)
        self._state = None
        if state.is_active:
            logger.info(
                "Cancelled flight %s -> %s in phase %s",
                state.plan.origin,
                state.plan.destination,
                state.phase.value,
            )

    def _revoke(self, state: ScheduleState) -> None:
        for handle in state.handles:
            self._timers.cancel(handle)
        state.handles.clear()

    def _fire(self, run_id: int, entries: tuple[TimelineEntry, ...]) -> None:
        state = self._state
        if state is None or state.run_id != run_id or not state.is_active:
            logger.debug("Ignoring stale timer callback for run %d", run_id)
            return

        for entry in entries:
            # A presenter may cancel or restart the run from inside present().
            if self._state is not state or not state.is_active:
                return
            if entry.action is TimelineAction.ANNOUNCE:
                self._announce(state)
            elif entry.action is TimelineAction.TAKEOFF:
                self._take_off(state)
            elif entry.action is TimelineAction.STEP and entry.step is not None:
                self._step(state, entry.step)

    def _announce(self, state: ScheduleState) -> None:
        state.phase = advance_phase(state.phase, FlightPhase.INITIALIZING)
        self._emit(state, FlightProgressSnapshot.indeterminate(state.phase))

    def _take_off(self, state: ScheduleState) -> None:
        if state.started_at_ms is not None:
            raise RuntimeError("Flight start time is already set")
        phase = advance_phase(state.phase, FlightPhase.IN_PROGRESS)
        state.started_at_ms = self._clock.now_ms()
        state.phase = phase
        logger.info(
            "Flight %s -> %s in progress, takeoff at %s",
            state.plan.origin,
            state.plan.destination,
            format_clock_time(state.started_at_ms, self._tz),
        )

    def _step(self, state: ScheduleState, step: int) -> None:
        plan = state.plan
        if step != state.next_step or step > plan.steps:
            raise RuntimeError(
                f"Out of order step {step}, expected {state.next_step}"
            )

        if step == plan.steps:
            state.phase = advance_phase(state.phase, FlightPhase.COMPLETE)
        snapshot = FlightProgressSnapshot.for_step(
            plan,
            step,
            phase=state.phase,
            started_at_ms=state.started_at_ms,
        )
        state.next_step = step + 1
        state.last_progress = snapshot.progress
        logger.debug("Flight step %d/%d: %s%%", step, plan.steps, snapshot.progress)
        self._emit(state, snapshot)

        if snapshot.is_complete and state.phase is FlightPhase.COMPLETE:
            state.handles.clear()
            logger.info("Flight %s -> %s arrived", plan.origin, plan.destination)

    def _emit(self, state: ScheduleState, snapshot: FlightProgressSnapshot) -> None:
        self._last_snapshot = snapshot
        title = render_title(snapshot, state.plan)
        body = render_body(snapshot, state.plan, self._tz)
        self._presenter.present(snapshot, title, body)
