"""
Theme catalogue and Alacritty config editing.
"""

from .engine import Theme, ThemeEngine
from .config_file import AlacrittyConfig, create_config

__all__ = [
    "Theme",
    "ThemeEngine",
    "AlacrittyConfig",
    "create_config",
]
