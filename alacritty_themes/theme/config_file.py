"""
Reading and rewriting the user's alacritty.toml.

Edits go through tomlkit so comments and layout outside the
`[colors]` table survive a theme switch.
"""

from __future__ import annotations
import os
import shutil
import logging
import tempfile
from pathlib import Path
from typing import Optional

import tomlkit
from tomlkit.exceptions import TOMLKitError
from tomlkit.toml_document import TOMLDocument

from alacritty_themes.errors import AlacrittyThemesError, ConfigExistsError
from alacritty_themes.resources import resources
from .engine import Theme, ThemeEngine

logger = logging.getLogger(__name__)


class AlacrittyConfig:
    """
    An Alacritty config file loaded for editing.

    Usage:
        config = AlacrittyConfig.load(path)
        config.apply_theme(engine.get_theme("dracula"))
        config.save()
    """

    def __init__(self, path: Path, document: TOMLDocument):
        self.path = Path(path)
        self.document = document

    @classmethod
    def load(cls, path: Path) -> AlacrittyConfig:
        path = Path(path)
        try:
            document = tomlkit.parse(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise AlacrittyThemesError(f"Cannot read {path}: {e}") from e
        except TOMLKitError as e:
            raise AlacrittyThemesError(f"{path} is not valid TOML: {e}") from e
        return cls(path, document)

    @property
    def colors(self) -> dict:
        """Plain-dict copy of the `[colors]` table (empty if absent)."""
        colors = self.document.unwrap().get("colors")
        return colors if isinstance(colors, dict) else {}

    def apply_theme(self, theme: Theme) -> None:
        """Replace the whole `[colors]` table with the theme's."""
        self.document["colors"] = theme.colors
        logger.debug(f"Applied theme {theme.name} to {self.path}")

    def current_theme(self, engine: ThemeEngine) -> Optional[str]:
        """Name of the applied theme, or None if the colors match none."""
        colors = self.colors
        if not colors:
            return None
        theme = engine.find_matching(colors)
        return theme.name if theme else None

    def save(self) -> None:
        """
        Write the document back.

        Goes through a temp file in the same directory and os.replace,
        so readers never see a half-written config.
        """
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(tomlkit.dumps(self.document))
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Saved {self.path}")


def create_config(path: Path, template: Optional[Path] = None, force: bool = False) -> Path:
    """
    Write a starter config from the bundled template.

    Raises:
        ConfigExistsError: `path` exists and force is not set
    """
    path = Path(path)
    template = template or resources.config_template

    if path.exists() and not force:
        raise ConfigExistsError(f"{path} already exists (use --force to overwrite)")

    path.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(template, path)
    logger.info(f"Created Alacritty config at {path}")
    return path
