"""
Candidate locations for the Alacritty config file.

Order follows Alacritty's own lookup and is what the locator's
"first match wins" depends on:

    1. $HOME/.config/alacritty/alacritty.toml
    2. $HOME/.alacritty.toml
    3. %APPDATA%/alacritty/alacritty.toml   (Windows and WSL only)
    4. $XDG_CONFIG_HOME/alacritty/alacritty.toml
    5. $XDG_CONFIG_HOME/alacritty.toml
"""

from __future__ import annotations
import re
import ntpath
import posixpath
import logging
from typing import Optional

from .errors import ConfigLocationError
from .platform_utils import PlatformDetector

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "alacritty.toml"

_WINDOWS_ROOT = re.compile(r"^[A-Za-z]:")


def join_path(base: str, *parts: str) -> str:
    """
    Join path segments in the separator style of `base`.

    APPDATA holds a Windows path even when we run under WSL or in
    tests on Linux, so the style follows the value, not the host.
    """
    if _WINDOWS_ROOT.match(base) or "\\" in base:
        return ntpath.join(base, *parts)
    return posixpath.join(base, *parts)


def possible_locations(detector: Optional[PlatformDetector] = None) -> list[str]:
    """Ordered candidate config paths for the current environment."""
    detector = detector or PlatformDetector()
    locations: list[str] = []

    linux_home = detector.linux_home()
    if linux_home:
        locations.append(join_path(linux_home, ".config", "alacritty", CONFIG_FILE_NAME))
        locations.append(join_path(linux_home, ".alacritty.toml"))

    if detector.is_native_windows() or detector.is_wsl():
        windows_home = detector.windows_home()
        if windows_home:
            locations.append(join_path(windows_home, "alacritty", CONFIG_FILE_NAME))
        else:
            logger.warning("Windows host detected but APPDATA is not set; skipping its config location")

    xdg_home = detector.xdg_config_home()
    if xdg_home:
        locations.append(join_path(xdg_home, "alacritty", CONFIG_FILE_NAME))
        locations.append(join_path(xdg_home, CONFIG_FILE_NAME))

    return locations


def default_config_path(detector: Optional[PlatformDetector] = None) -> str:
    """
    Where a freshly created config goes.

    Raises:
        ConfigLocationError: No usable home directory is set
    """
    detector = detector or PlatformDetector()

    if detector.is_native_windows():
        windows_home = detector.windows_home()
        if not windows_home:
            raise ConfigLocationError("APPDATA is not set; cannot choose a config location")
        return join_path(windows_home, "alacritty", CONFIG_FILE_NAME)

    xdg_home = detector.xdg_config_home()
    if xdg_home:
        return join_path(xdg_home, "alacritty", CONFIG_FILE_NAME)

    linux_home = detector.linux_home()
    if linux_home:
        return join_path(linux_home, ".config", "alacritty", CONFIG_FILE_NAME)

    raise ConfigLocationError("Neither HOME nor XDG_CONFIG_HOME is set; cannot choose a config location")
