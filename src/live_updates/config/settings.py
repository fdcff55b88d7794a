"""Configuration and settings persistence."""

import json
import logging
from datetime import UTC, tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from live_updates.config.paths import get_paths
from live_updates.models.flight_plan import (
    DEFAULT_STEPS,
    DISPLAYED_FLIGHT_DURATION_MINUTES,
    INITIALIZING_DELAY_MS,
    ROUTE_DELAY_MS,
    SIMULATED_FLIGHT_DURATION_MS,
    FlightPlan,
)

logger = logging.getLogger(__name__)


def get_settings_path() -> Path:
    """Get the path to the settings file."""
    return get_paths().global_settings


class Settings:
    """Persistent settings for live-updates."""

    _flight_defaults: dict[str, Any] = {
        "origin": "MEX",
        "destination": "SFO",
        "subject": "Yovany",
        "simulated_duration_ms": SIMULATED_FLIGHT_DURATION_MS,
        "displayed_duration_minutes": DISPLAYED_FLIGHT_DURATION_MINUTES,
        "steps": DEFAULT_STEPS,
        "initializing_delay_ms": INITIALIZING_DELAY_MS,
        "route_delay_ms": ROUTE_DELAY_MS,
        "timezone": "UTC",
    }

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load settings from disk."""
        path = get_settings_path()
        if path.exists():
            try:
                self._data = json.loads(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError):
                self._data = {}
        else:
            self._data = {}

    def _save(self) -> None:
        """Save settings to disk."""
        path = get_settings_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
            logger.info("Saved settings to %s: %s", path, self._data)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)

    def get(self, key: str) -> Any:
        """Get a top-level setting value."""
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value and persist to disk."""
        self._data[key] = value
        self._save()

    # --- Flight Settings ---

    def _get_flight_settings(self) -> dict[str, Any]:
        raw = self._data.get("flight", {})
        if isinstance(raw, dict):
            return raw
        return {}

    def _set_flight_value(self, key: str, value: Any) -> None:
        flight = self._get_flight_settings()
        flight[key] = value
        self.set("flight", flight)

    def _flight_str(self, key: str) -> str:
        value = self._get_flight_settings().get(key)
        if value in (None, ""):
            return str(self._flight_defaults[key])
        return str(value)

    def _flight_int(self, key: str) -> int:
        default = int(self._flight_defaults[key])
        raw = self._get_flight_settings().get(key, default)
        try:
            return int(raw)
        except (TypeError, ValueError):
            return default

    @property
    def origin(self) -> str:
        """Origin airport code."""
        return self._flight_str("origin")

    @origin.setter
    def origin(self, value: str) -> None:
        self._set_flight_value("origin", value.strip().upper())

    @property
    def destination(self) -> str:
        """Destination airport code."""
        return self._flight_str("destination")

    @destination.setter
    def destination(self, value: str) -> None:
        self._set_flight_value("destination", value.strip().upper())

    @property
    def subject(self) -> str:
        """Name of the traveller shown in notifications."""
        return self._flight_str("subject")

    @subject.setter
    def subject(self, value: str) -> None:
        self._set_flight_value("subject", value)

    @property
    def simulated_duration_ms(self) -> int:
        """Real wall-clock window a flight is compressed into."""
        return self._flight_int("simulated_duration_ms")

    @simulated_duration_ms.setter
    def simulated_duration_ms(self, value: int) -> None:
        self._set_flight_value("simulated_duration_ms", int(value))

    @property
    def displayed_duration_minutes(self) -> int:
        """Flight length shown to the user, independent of real time."""
        return self._flight_int("displayed_duration_minutes")

    @displayed_duration_minutes.setter
    def displayed_duration_minutes(self, value: int) -> None:
        self._set_flight_value("displayed_duration_minutes", int(value))

    @property
    def steps(self) -> int:
        """Number of progress updates per flight."""
        return self._flight_int("steps")

    @steps.setter
    def steps(self, value: int) -> None:
        self._set_flight_value("steps", int(value))

    @property
    def initializing_delay_ms(self) -> int:
        return self._flight_int("initializing_delay_ms")

    @initializing_delay_ms.setter
    def initializing_delay_ms(self, value: int) -> None:
        self._set_flight_value("initializing_delay_ms", int(value))

    @property
    def route_delay_ms(self) -> int:
        return self._flight_int("route_delay_ms")

    @route_delay_ms.setter
    def route_delay_ms(self, value: int) -> None:
        self._set_flight_value("route_delay_ms", int(value))

    @property
    def timezone(self) -> tzinfo:
        """Timezone for takeoff/landing clock times.

        Unknown zone names fall back to UTC.
        """
        name = self._flight_str("timezone")
        if name.upper() == "UTC":
            return UTC
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r in settings, using UTC", name)
            return UTC

    @timezone.setter
    def timezone(self, value: str) -> None:
        self._set_flight_value("timezone", value)

    def flight_plan(self) -> FlightPlan:
        """Build a flight plan from the configured flight settings."""
        return FlightPlan(
            origin=self.origin,
            destination=self.destination,
            subject=self.subject,
            total_duration_ms=self.simulated_duration_ms,
            displayed_duration_minutes=self.displayed_duration_minutes,
            steps=self.steps,
            initializing_delay_ms=self.initializing_delay_ms,
            route_delay_ms=self.route_delay_ms,
        )


# Global settings instance
settings = Settings()
