"""Centralized path management for live-updates.

Follows XDG Base Directory Specification:
- Config: $XDG_CONFIG_HOME/live-updates (default: ~/.config/live-updates)
- State: $XDG_STATE_HOME/live-updates (default: ~/.local/state/live-updates)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

APP_DIR_NAME = "live-updates"


def _xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def _xdg_state_home() -> Path:
    """Get XDG_STATE_HOME, defaulting to ~/.local/state."""
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


@dataclass
class LiveUpdatesPaths:
    """Centralized path management following XDG spec."""

    _config_home: Path = field(default_factory=_xdg_config_home)
    _state_home: Path = field(default_factory=_xdg_state_home)

    @property
    def global_config_dir(self) -> Path:
        """Global config: ~/.config/live-updates/"""
        return self._config_home / APP_DIR_NAME

    @property
    def global_settings(self) -> Path:
        """Global settings file: ~/.config/live-updates/settings.json"""
        return self.global_config_dir / "settings.json"

    @property
    def global_state_dir(self) -> Path:
        """Global state: ~/.local/state/live-updates/"""
        return self._state_home / APP_DIR_NAME

    @property
    def debug_log(self) -> Path:
        """Debug log: ~/.local/state/live-updates/debug.log"""
        return self.global_state_dir / "debug.log"

    def ensure_global_dirs(self) -> None:
        """Create global XDG directories."""
        self.global_config_dir.mkdir(parents=True, exist_ok=True)
        self.global_state_dir.mkdir(parents=True, exist_ok=True)


# Singleton instance
_paths: LiveUpdatesPaths | None = None


def get_paths() -> LiveUpdatesPaths:
    """Get the paths singleton, resolving XDG directories on first call."""
    global _paths
    if _paths is None:
        _paths = LiveUpdatesPaths()
    return _paths


def reset_paths() -> None:
    """Reset paths singleton (for testing)."""
    global _paths
    _paths = None
