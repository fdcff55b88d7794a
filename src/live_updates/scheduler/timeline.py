"""Precomputed timeline for one flight run.

The whole run is laid out as ``(offset, action)`` entries when it starts, so
cancelling is a bulk revoke of the handles registered for those offsets.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import groupby

from live_updates.models import FlightPlan


class TimelineAction(Enum):
    """What a timeline entry does when it fires."""

    ANNOUNCE = "announce"  # flight about to start, indeterminate progress
    TAKEOFF = "takeoff"  # start timestamp set, progress window opens
    STEP = "step"


@dataclass(frozen=True, slots=True)
class TimelineEntry:
    """One action at a fixed offset from start()."""

    offset_ms: int
    action: TimelineAction
    step: int | None = None


def build_timeline(plan: FlightPlan) -> tuple[TimelineEntry, ...]:
    """Lay out every action of a run, ordered by offset then registration.

    A plan with ``steps`` steps yields ``steps + 3`` entries: the announce,
    the takeoff and one entry per step index in ``0..steps``.
    """
    takeoff = plan.takeoff_offset_ms
    interval = plan.step_interval_ms
    entries = [
        TimelineEntry(plan.initializing_delay_ms, TimelineAction.ANNOUNCE),
        TimelineEntry(takeoff, TimelineAction.TAKEOFF),
    ]
    entries.extend(
        TimelineEntry(takeoff + i * interval, TimelineAction.STEP, step=i)
        for i in range(plan.steps + 1)
    )
    # sorted() is stable, so same-offset entries keep the order above.
    return tuple(sorted(entries, key=lambda entry: entry.offset_ms))


def group_by_offset(
    timeline: tuple[TimelineEntry, ...],
) -> list[tuple[int, tuple[TimelineEntry, ...]]]:
    """Bundle entries sharing an offset so they fire as a single callback."""
    return [
        (offset, tuple(entries))
        for offset, entries in groupby(timeline, key=lambda entry: entry.offset_ms)
    ]
