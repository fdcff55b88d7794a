"""Configuration management for live-updates."""
from __future__ import annotations

from live_updates.config.paths import LiveUpdatesPaths, get_paths, reset_paths
from live_updates.config.settings import Settings, get_settings_path, settings

__all__ = [
    "LiveUpdatesPaths",
    "Settings",
    "get_paths",
    "get_settings_path",
    "reset_paths",
    "settings",
]
