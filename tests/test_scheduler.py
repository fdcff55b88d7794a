"""Tests for the flight progress scheduler on a virtual clock."""

from __future__ import annotations

import pytest
from conftest import RecordingPresenter

from live_updates.errors import AlreadyRunningError, InvalidPlanError
from live_updates.hosts import ManualTimerHost
from live_updates.hosts.manual import ManualTimer
from live_updates.models import FlightPhase, FlightPlan, FlightProgressSnapshot
from live_updates.scheduler import FlightProgressScheduler

TAKEOFF_AT_NOON_MS = 1_735_732_800_000  # 2025-01-01 12:00:00 UTC
START_MS = TAKEOFF_AT_NOON_MS - 6000


def _scheduler(
    presenter: RecordingPresenter,
    plan: FlightPlan | None = None,
    host: ManualTimerHost | None = None,
) -> tuple[FlightProgressScheduler, ManualTimerHost]:
    host = host or ManualTimerHost(start_ms=START_MS)
    return FlightProgressScheduler(plan, timers=host, presenter=presenter), host


def test_full_run_emits_62_snapshots_ending_complete(
    presenter: RecordingPresenter,
) -> None:
    scheduler, host = _scheduler(presenter)

    scheduler.start()
    host.run_until_idle()

    snapshots = presenter.snapshots
    assert len(snapshots) == 62
    assert snapshots[0].is_indeterminate
    assert snapshots[-1].progress == 100
    assert snapshots[-1].phase is FlightPhase.COMPLETE
    assert scheduler.phase is FlightPhase.COMPLETE
    assert not scheduler.is_running
    assert scheduler.last_snapshot == snapshots[-1]
    assert host.pending == 0


def test_progress_is_monotonic_and_steps_are_bounded(
    presenter: RecordingPresenter,
) -> None:
    plan = FlightPlan(total_duration_ms=1000, steps=7)
    scheduler, host = _scheduler(presenter, plan)

    scheduler.start()
    host.run_until_idle()

    progress = [s.progress for s in presenter.snapshots if s.progress is not None]
    assert progress == sorted(progress)
    assert progress[-1] == 100
    assert progress.count(100) == 1
    steps = [s.step for s in presenter.snapshots if s.step is not None]
    assert steps == list(range(plan.steps + 1))


def test_phases_follow_the_timeline(presenter: RecordingPresenter) -> None:
    scheduler, host = _scheduler(presenter)
    scheduler.start()

    assert scheduler.is_running
    assert scheduler.phase is FlightPhase.NOT_STARTED

    host.advance(1999)
    assert presenter.calls == []

    host.advance(1)
    assert len(presenter.calls) == 1
    assert scheduler.phase is FlightPhase.INITIALIZING
    assert presenter.titles[0] == "Yovany's flight is about to start"
    assert presenter.calls[0][2] == "Get ready..."

    host.advance(3999)
    assert len(presenter.calls) == 1

    host.advance(1)
    assert scheduler.phase is FlightPhase.IN_PROGRESS
    assert len(presenter.calls) == 2
    first_step = presenter.snapshots[1]
    assert first_step.progress == 0
    assert first_step.phase is FlightPhase.IN_PROGRESS
    assert presenter.titles[1] == "Flying - 1h 00m remaining"


def test_start_timestamp_is_set_once_at_takeoff(
    presenter: RecordingPresenter,
) -> None:
    scheduler, host = _scheduler(presenter)
    scheduler.start()

    host.advance(2000)
    assert scheduler.state is not None
    assert scheduler.state.started_at_ms is None

    host.advance(4000)
    assert scheduler.state.started_at_ms == TAKEOFF_AT_NOON_MS

    host.run_until_idle()
    started = {s.started_at_ms for s in presenter.snapshots[1:]}
    assert started == {TAKEOFF_AT_NOON_MS}
    assert presenter.calls[-1][2] == (
        "Yovany landed at SFO\nTakeoff: 12:00 PM  •  Landing ETA: 1:00 PM"
    )


def test_halfway_snapshot_text(presenter: RecordingPresenter) -> None:
    scheduler, host = _scheduler(presenter)
    scheduler.start()

    host.advance(6000 + 30 * 1000)

    snapshot, title, body = presenter.calls[-1]
    assert snapshot.progress == 50
    assert snapshot.elapsed_minutes == 30
    assert title == "Flying - 30 min remaining"
    assert body == (
        "Yovany is flying from MEX to SFO\n"
        "Takeoff: 12:00 PM  •  Landing ETA: 1:00 PM"
    )


def test_cancel_mid_run_stops_all_updates(presenter: RecordingPresenter) -> None:
    scheduler, host = _scheduler(presenter)
    scheduler.start()
    host.advance(10_000)
    emitted = len(presenter.calls)
    assert emitted > 2

    scheduler.cancel()
    host.advance(10 * 60_000)

    assert len(presenter.calls) == emitted
    assert host.pending == 0
    assert scheduler.phase is FlightPhase.NOT_STARTED
    assert not scheduler.is_running


def test_cancel_before_first_update(presenter: RecordingPresenter) -> None:
    scheduler, host = _scheduler(presenter)
    scheduler.start()

    scheduler.cancel()
    host.run_until_idle()

    assert presenter.calls == []


def test_cancel_when_idle_is_noop(presenter: RecordingPresenter) -> None:
    scheduler, _ = _scheduler(presenter)

    scheduler.cancel()
    scheduler.cancel()

    assert scheduler.phase is FlightPhase.NOT_STARTED


def test_second_start_fails_and_keeps_first_run(
    presenter: RecordingPresenter,
) -> None:
    scheduler, host = _scheduler(presenter)
    scheduler.start()
    host.advance(3000)
    pending = host.pending

    with pytest.raises(AlreadyRunningError) as exc_info:
        scheduler.start(FlightPlan(steps=5))

    assert exc_info.value.current is FlightPhase.INITIALIZING
    assert host.pending == pending
    assert scheduler.plan.steps == 60
    host.run_until_idle()
    assert len(presenter.calls) == 62


def test_restart_after_completion(presenter: RecordingPresenter) -> None:
    plan = FlightPlan(total_duration_ms=100, steps=2)
    scheduler, host = _scheduler(presenter, plan)

    scheduler.start()
    host.run_until_idle()
    scheduler.start()
    host.run_until_idle()

    assert len(presenter.calls) == 2 * (1 + plan.steps + 1)
    assert scheduler.phase is FlightPhase.COMPLETE


def test_restart_after_cancel_uses_fresh_state(
    presenter: RecordingPresenter,
) -> None:
    scheduler, host = _scheduler(presenter)
    scheduler.start()
    host.advance(20_000)
    scheduler.cancel()
    presenter.calls.clear()

    scheduler.start(FlightPlan(total_duration_ms=100, steps=4))
    host.run_until_idle()

    assert len(presenter.calls) == 1 + 5
    assert [s.progress for s in presenter.snapshots[1:]] == [0, 25, 50, 75, 100]


def test_invalid_plan_schedules_nothing(presenter: RecordingPresenter) -> None:
    scheduler, host = _scheduler(presenter)

    with pytest.raises(InvalidPlanError):
        scheduler.start(FlightPlan(steps=0))

    assert host.pending == 0
    assert not scheduler.is_running
    assert scheduler.phase is FlightPhase.NOT_STARTED


def test_uneven_interval_still_finishes_at_100(
    presenter: RecordingPresenter,
) -> None:
    plan = FlightPlan(total_duration_ms=1000, steps=3)
    scheduler, host = _scheduler(presenter, plan)

    scheduler.start()
    host.run_until_idle()

    assert [s.progress for s in presenter.snapshots[1:]] == [0, 33, 66, 100]


def test_presenter_cancelling_inside_a_group_stops_the_rest() -> None:
    host = ManualTimerHost()
    plan = FlightPlan(initializing_delay_ms=0, route_delay_ms=0, steps=2)
    received: list[FlightProgressSnapshot] = []

    class CancellingPresenter:
        def present(
            self, snapshot: FlightProgressSnapshot, title: str, body: str
        ) -> None:
            received.append(snapshot)
            scheduler.cancel()

    scheduler = FlightProgressScheduler(
        plan, timers=host, presenter=CancellingPresenter()
    )
    scheduler.start()
    host.run_until_idle()

    assert len(received) == 1
    assert received[0].is_indeterminate


class _LeakyHost(ManualTimerHost):
    """Host whose cancel() does nothing, so revoked callbacks still fire."""

    def cancel(self, handle: ManualTimer) -> None:
        del handle


def test_stale_callbacks_from_cancelled_run_are_ignored(
    presenter: RecordingPresenter,
) -> None:
    host = _LeakyHost()
    scheduler, _ = _scheduler(presenter, host=host)
    scheduler.start()
    host.advance(2000)
    scheduler.cancel()

    host.run_until_idle()

    assert len(presenter.calls) == 1


def test_two_schedulers_run_independently() -> None:
    host = ManualTimerHost()
    first = RecordingPresenter()
    second = RecordingPresenter()
    a = FlightProgressScheduler(
        FlightPlan(total_duration_ms=100, steps=2), timers=host, presenter=first
    )
    b = FlightProgressScheduler(
        FlightPlan(origin="LAX", total_duration_ms=100, steps=4),
        timers=host,
        presenter=second,
    )

    a.start()
    b.start()
    host.advance(2500)
    b.cancel()
    host.run_until_idle()

    assert len(first.calls) == 4
    assert len(second.calls) == 1
    assert a.phase is FlightPhase.COMPLETE
    assert b.phase is FlightPhase.NOT_STARTED
