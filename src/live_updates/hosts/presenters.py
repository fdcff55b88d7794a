"""Presenters that need no UI."""

from __future__ import annotations

import logging

from live_updates.models import FlightProgressSnapshot

logger = logging.getLogger(__name__)


class LoggingPresenter:
    """Writes each notification update to the log."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def present(
        self,
        snapshot: FlightProgressSnapshot,
        title: str,
        body: str,
    ) -> None:
        if snapshot.progress is None:
            progress = "indeterminate"
        else:
            progress = f"{snapshot.progress}%"
        logger.log(
            self.level,
            "[%s] %s: %s | %s",
            snapshot.phase.value,
            progress,
            title,
            body.replace("\n", " / "),
        )
