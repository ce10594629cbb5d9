"""
alacritty-themes - theme manager for the Alacritty terminal emulator.

Core pieces:
- PlatformDetector: native Windows / WSL / Unix detection, home roots
- possible_locations: ordered candidate config paths
- ConfigLocator: first existing config, or NoConfigFileFoundError
- create_backup: timestamped copy before the config is rewritten
"""

__version__ = "0.1.0"

from .errors import (
    AlacrittyThemesError,
    NoConfigFileFoundError,
    ConfigLocationError,
    ConfigExistsError,
    ThemeError,
    BackupError,
)
from .platform_utils import Environment, HostPlatform, PlatformDetector
from .locations import possible_locations, default_config_path
from .locator import ConfigLocator
from .backup import create_backup, install_crash_handler
from .theme import Theme, ThemeEngine, AlacrittyConfig, create_config

__all__ = [
    # Errors
    "AlacrittyThemesError",
    "NoConfigFileFoundError",
    "ConfigLocationError",
    "ConfigExistsError",
    "ThemeError",
    "BackupError",
    # Platform
    "Environment",
    "HostPlatform",
    "PlatformDetector",
    # Config discovery
    "possible_locations",
    "default_config_path",
    "ConfigLocator",
    # Backup
    "create_backup",
    "install_crash_handler",
    # Themes
    "Theme",
    "ThemeEngine",
    "AlacrittyConfig",
    "create_config",
]
