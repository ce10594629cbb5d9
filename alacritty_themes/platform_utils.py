"""
alacritty_themes/platform_utils.py

Host platform detection and home directory resolution.
"""

from __future__ import annotations
import os
import subprocess
import logging
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

# Kernel release marker exposed by both WSL1 and WSL2
OSRELEASE_PATH = Path("/proc/sys/kernel/osrelease")
UNAME_COMMAND = ("uname", "-r")
UNAME_TIMEOUT = 5

WSL_MARKER = "microsoft"


class HostPlatform(Enum):
    """Tri-state host classification."""
    WINDOWS = "windows"
    WSL = "wsl"
    UNIX = "unix"


class Environment:
    """
    Read-only view of environment variables.

    Passed into the detector so tests can supply a plain dict
    instead of mutating os.environ.

    Usage:
        env = Environment({"HOME": "/home/u"})
        env.get("HOME")      # "/home/u"
        env.get("APPDATA")   # None
    """

    def __init__(self, variables: Optional[Mapping[str, str]] = None):
        self._variables = os.environ if variables is None else variables

    def get(self, name: str) -> Optional[str]:
        """Value of a variable, or None when unset or empty."""
        return self._variables.get(name) or None

    def has(self, name: str) -> bool:
        """True if the variable is set at all, even to an empty string."""
        return name in self._variables


class PlatformDetector:
    """
    Classifies the host and resolves the home roots Alacritty reads from.

    Detection never raises. A missing pseudo-file or a failed subprocess
    just counts as "not WSL".
    """

    def __init__(
        self,
        env: Optional[Environment] = None,
        osrelease_path: Path = OSRELEASE_PATH,
        uname_command: Sequence[str] = UNAME_COMMAND,
    ):
        self.env = env or Environment()
        self.osrelease_path = Path(osrelease_path)
        self.uname_command = list(uname_command)

    # -------------------------------------------------------------------------
    # Platform predicates
    # -------------------------------------------------------------------------

    def is_native_windows(self) -> bool:
        return self.env.get("OS") == "Windows_NT"

    def is_wsl(self) -> bool:
        """
        True if any WSL signal is present.

        Checks run in order and stop at the first positive one:
        kernel release file, WSLENV, then `uname -r`.
        """
        checks = (self._osrelease_says_wsl, self._wslenv_present, self._uname_says_wsl)
        return any(check() for check in checks)

    def platform(self) -> HostPlatform:
        if self.is_native_windows():
            return HostPlatform.WINDOWS
        if self.is_wsl():
            return HostPlatform.WSL
        return HostPlatform.UNIX

    def _osrelease_says_wsl(self) -> bool:
        try:
            if not self.osrelease_path.exists():
                return False
            release = self.osrelease_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read {self.osrelease_path}: {e}")
            return False
        return WSL_MARKER in release.lower()

    def _wslenv_present(self) -> bool:
        return self.env.has("WSLENV")

    def _uname_says_wsl(self) -> bool:
        try:
            result = subprocess.run(
                self.uname_command,
                capture_output=True,
                text=True,
                check=True,
                timeout=UNAME_TIMEOUT,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"Kernel release query failed: {e}")
            return False
        return WSL_MARKER in result.stdout.lower()

    # -------------------------------------------------------------------------
    # Home roots
    # -------------------------------------------------------------------------

    def windows_home(self) -> Optional[str]:
        """Windows roaming app-data root (APPDATA)."""
        return self.env.get("APPDATA")

    def linux_home(self) -> Optional[str]:
        """User home (HOME)."""
        return self.env.get("HOME")

    def xdg_config_home(self) -> Optional[str]:
        """XDG config root override (XDG_CONFIG_HOME)."""
        return self.env.get("XDG_CONFIG_HOME")
