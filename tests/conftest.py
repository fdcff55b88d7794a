from __future__ import annotations

import copy
from collections.abc import Iterator

import pytest

from live_updates.config.settings import settings
from live_updates.models import FlightProgressSnapshot


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Prevent tests from persisting settings to disk."""
    original_data = copy.deepcopy(settings._data)

    def _noop_save() -> None:
        return None

    monkeypatch.setattr(settings, "_save", _noop_save)
    settings._data = {}
    try:
        yield
    finally:
        settings._data = original_data


class RecordingPresenter:
    """Presenter that keeps every update it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[FlightProgressSnapshot, str, str]] = []

    def present(
        self, snapshot: FlightProgressSnapshot, title: str, body: str
    ) -> None:
        self.calls.append((snapshot, title, body))

    @property
    def snapshots(self) -> list[FlightProgressSnapshot]:
        return [snapshot for snapshot, _, _ in self.calls]

    @property
    def titles(self) -> list[str]:
        return [title for _, title, _ in self.calls]


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()
