"""
Finds the Alacritty config file among the candidate locations.
"""

from __future__ import annotations
import os
import logging
from typing import Optional

from .errors import NoConfigFileFoundError
from .locations import possible_locations
from .platform_utils import PlatformDetector

logger = logging.getLogger(__name__)


class ConfigLocator:
    """
    Scans candidate locations in priority order.

    Nothing is cached: every call re-reads the environment and
    re-checks the filesystem.

    Usage:
        locator = ConfigLocator()
        if locator.config_exists():
            path = locator.config_path()

        # Or fail with the user-facing message
        path = locator.require_config_path()
    """

    def __init__(self, detector: Optional[PlatformDetector] = None):
        self.detector = detector or PlatformDetector()

    def possible_locations(self) -> list[str]:
        return possible_locations(self.detector)

    def config_exists(self) -> bool:
        """True if any candidate exists on disk."""
        return any(os.path.exists(location) for location in self.possible_locations())

    def config_path(self) -> Optional[str]:
        """First existing candidate, or None."""
        for location in self.possible_locations():
            if os.path.exists(location):
                logger.debug(f"Found Alacritty config at {location}")
                return location
        return None

    def require_config_path(self) -> str:
        """
        First existing candidate.

        Raises:
            NoConfigFileFoundError: No candidate exists; the message lists
                every location that was checked
        """
        locations = self.possible_locations()
        for location in locations:
            if os.path.exists(location):
                return location
        raise NoConfigFileFoundError(locations)
