"""Shared fixtures: isolated environment and platform detection."""

import pytest

from alacritty_themes import config as settings_module
from alacritty_themes.platform_utils import Environment, PlatformDetector


@pytest.fixture
def make_detector(tmp_path):
    """
    Build a PlatformDetector over a fake environment.

    The kernel release file and `uname` command point at paths that do
    not exist unless the test supplies them, so the real host never
    leaks into detection.
    """
    def _make(variables=None, osrelease=None, uname_command=None):
        if osrelease is None:
            osrelease = tmp_path / "no-osrelease"
        if uname_command is None:
            uname_command = [str(tmp_path / "no-uname")]
        return PlatformDetector(
            env=Environment(variables or {}),
            osrelease_path=osrelease,
            uname_command=uname_command,
        )

    return _make


@pytest.fixture
def home(tmp_path, monkeypatch):
    """A fresh HOME with no Alacritty config, also used for settings."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setattr(settings_module, "_manager", None)
    return home_dir
