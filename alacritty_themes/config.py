"""
Persistent settings for alacritty-themes.
Stored in ~/.alacritty-themes/settings.json
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

SETTINGS_DIR_NAME = ".alacritty-themes"
SETTINGS_FILE_NAME = "settings.json"


def default_settings_path() -> Path:
    return Path.home() / SETTINGS_DIR_NAME / SETTINGS_FILE_NAME


@dataclass
class AppSettings:
    """
    Settings that persist across invocations.
    """
    # Extra directory searched for theme files
    themes_dir: Optional[str] = None

    # Copy the config aside before every apply
    backup_before_apply: bool = True

    # Most recently applied themes, newest first
    recent_themes: list[str] = field(default_factory=list)
    max_recent: int = 10

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> AppSettings:
        """Deserialize from dict, ignoring unknown keys."""
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)

    def add_recent_theme(self, theme_name: str) -> None:
        """Add a theme to the recent list (moves to front if present)."""
        if theme_name in self.recent_themes:
            self.recent_themes.remove(theme_name)
        self.recent_themes.insert(0, theme_name)
        self.recent_themes = self.recent_themes[:self.max_recent]


class SettingsManager:
    """
    Loads and saves AppSettings.

    Usage:
        manager = SettingsManager()
        manager.settings.themes_dir = "~/alacritty-themes"
        manager.save()
    """

    def __init__(self, config_path: Path = None):
        self._config_path = config_path or default_settings_path()
        self._settings: Optional[AppSettings] = None

    @property
    def settings(self) -> AppSettings:
        """Get current settings, loading from disk if needed."""
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    @property
    def config_path(self) -> Path:
        return self._config_path

    def load(self) -> AppSettings:
        """Load settings from disk, or return defaults."""
        if not self._config_path.exists():
            logger.debug("No settings file found, using defaults")
            return AppSettings()

        try:
            data = json.loads(self._config_path.read_text(encoding="utf-8"))
            logger.debug(f"Loaded settings from {self._config_path}")
            return AppSettings.from_dict(data)
        except (OSError, json.JSONDecodeError, TypeError, AttributeError) as e:
            logger.warning(f"Failed to load settings: {e}, using defaults")
            return AppSettings()

    def save(self) -> None:
        """Save current settings to disk."""
        if self._settings is None:
            return

        try:
            self._config_path.parent.mkdir(parents=True, exist_ok=True)
            self._config_path.write_text(
                json.dumps(self._settings.to_dict(), indent=2), encoding="utf-8"
            )
            logger.debug(f"Saved settings to {self._config_path}")
        except OSError as e:
            logger.error(f"Failed to save settings: {e}")


# Global instance for convenience
_manager: Optional[SettingsManager] = None


def get_settings_manager() -> SettingsManager:
    """Get the global settings manager instance."""
    global _manager
    if _manager is None:
        _manager = SettingsManager()
    return _manager
