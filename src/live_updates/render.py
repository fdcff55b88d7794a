"""Display strings for flight progress notifications.

All functions here are pure. Clock times use a fixed ``h:mm a`` pattern
instead of the host locale so output is stable across machines.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo

from live_updates.models import FlightPlan, FlightProgressSnapshot

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MS_PER_MINUTE = 60_000


def format_remaining_time(progress: int, displayed_duration_minutes: int) -> str:
    """Format the displayed time left for a flight at ``progress`` percent.

    Args:
        progress: Completion percentage, 0 to 100.
        displayed_duration_minutes: Full displayed flight length.

    Returns:
        ``"1h 05m remaining"`` for an hour or more, else ``"42 min remaining"``.
    """
    if not 0 <= progress <= 100:
        raise ValueError(f"progress must be within 0..100, got {progress}")

    remaining_minutes = (100 - progress) * displayed_duration_minutes // 100
    hours, minutes = divmod(remaining_minutes, 60)
    if hours > 0:
        return f"{hours}h {minutes:02d}m remaining"
    return f"{minutes} min remaining"


def format_clock_time(epoch_ms: int, tz: tzinfo = UTC) -> str:
    """Format an epoch timestamp as 12-hour clock time, e.g. ``"9:05 PM"``."""
    moment = (_EPOCH + timedelta(milliseconds=epoch_ms)).astimezone(tz)
    hour = moment.hour % 12 or 12
    marker = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {marker}"


def format_time_details(
    started_at_ms: int,
    displayed_duration_minutes: int,
    tz: tzinfo = UTC,
) -> str:
    """Takeoff and landing estimate line appended to the notification body."""
    takeoff = format_clock_time(started_at_ms, tz)
    landing = format_clock_time(
        started_at_ms + displayed_duration_minutes * _MS_PER_MINUTE, tz
    )
    return f"Takeoff: {takeoff}  •  Landing ETA: {landing}"


def render_title(snapshot: FlightProgressSnapshot, plan: FlightPlan) -> str:
    """Notification title for a snapshot."""
    if snapshot.progress is None:
        return f"{plan.subject}'s flight is about to start"
    # Arrival wins over the remaining-time countdown.
    if snapshot.is_complete:
        return f"{plan.subject}'s flight has arrived to {plan.destination}"
    remaining = format_remaining_time(
        snapshot.progress, plan.displayed_duration_minutes
    )
    return f"Flying - {remaining}"


def render_body(
    snapshot: FlightProgressSnapshot,
    plan: FlightPlan,
    tz: tzinfo = UTC,
) -> str:
    """Notification body for a snapshot, with takeoff/landing once airborne."""
    if snapshot.is_indeterminate:
        return "Get ready..."

    if snapshot.is_complete:
        text = f"{plan.subject} landed at {plan.destination}"
    else:
        text = f"{plan.subject} is flying from {plan.origin} to {plan.destination}"

    if snapshot.started_at_ms is not None:
        details = format_time_details(
            snapshot.started_at_ms, plan.displayed_duration_minutes, tz
        )
        text = f"{text}\n{details}"
    return text
