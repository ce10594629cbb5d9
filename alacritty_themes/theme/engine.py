"""
Theme system.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional
import logging

import tomlkit
import yaml
from tomlkit.exceptions import TOMLKitError

from alacritty_themes.errors import ThemeError
from alacritty_themes.resources import resources

logger = logging.getLogger(__name__)

THEME_SUFFIXES = (".toml", ".yml", ".yaml")

ANSI_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


def normalize_colors(value):
    """
    Canonical form of a colors table for comparison.

    Alacritty accepts both `#rrggbb` and `0xrrggbb`, in either case.
    """
    if isinstance(value, dict):
        return {key: normalize_colors(item) for key, item in value.items()}
    if isinstance(value, list):
        return [normalize_colors(item) for item in value]
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered.startswith("0x"):
            return "#" + lowered[2:]
        return lowered
    return value


def _hex_ints_to_strings(value):
    """
    Undo YAML reading unquoted `0x272822` as an integer.

    Booleans such as `draw_bold_text_with_bright_colors` and the
    `index` of `indexed_colors` entries stay as they are.
    """
    if isinstance(value, dict):
        return {
            key: item if key == "index" else _hex_ints_to_strings(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_hex_ints_to_strings(item) for item in value]
    if isinstance(value, int) and not isinstance(value, bool):
        return f"0x{value:06x}"
    return value


def _palette(
    background: str,
    foreground: str,
    cursor: str,
    selection: str,
    normal: Iterable[str],
    bright: Iterable[str],
) -> dict:
    """Build an Alacritty colors table from a flat palette."""
    return {
        "primary": {"background": background, "foreground": foreground},
        "cursor": {"text": background, "cursor": cursor},
        "selection": {"text": foreground, "background": selection},
        "normal": dict(zip(ANSI_NAMES, normal)),
        "bright": dict(zip(ANSI_NAMES, bright)),
    }


@dataclass
class Theme:
    """Alacritty color theme: the contents of a `[colors]` table."""
    name: str
    colors: dict = field(default_factory=dict)

    # File the theme came from, None for built-ins
    source: Optional[Path] = None

    @classmethod
    def load(cls, path: Path) -> Theme:
        """
        Load theme from a TOML file, or a legacy YAML one.

        The theme is named after the file stem.

        Raises:
            ThemeError: Unreadable, unparsable, or has no colors table
        """
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in THEME_SUFFIXES:
            raise ThemeError(f"Unsupported theme file type: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ThemeError(f"Cannot read theme {path}: {e}") from e

        try:
            if suffix == ".toml":
                data = tomlkit.parse(text).unwrap()
            else:
                data = yaml.safe_load(text)
        except (TOMLKitError, yaml.YAMLError) as e:
            raise ThemeError(f"Cannot parse theme {path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("colors"), dict):
            raise ThemeError(f"Theme {path} has no colors table")

        colors = data["colors"]
        if suffix != ".toml":
            colors = _hex_ints_to_strings(colors)

        return cls(name=path.stem, colors=colors, source=path)

    def save(self, path: Path) -> None:
        """Save theme as a TOML file."""
        document = tomlkit.document()
        document["colors"] = self.colors
        Path(path).write_text(tomlkit.dumps(document), encoding="utf-8")

    def matches(self, colors: dict) -> bool:
        """True if `colors` is this theme's table, ignoring hex notation."""
        return normalize_colors(self.colors) == normalize_colors(colors)

    @classmethod
    def default(cls) -> Theme:
        """Default dark theme (Catppuccin Mocha)."""
        return cls(
            name="default",
            colors=_palette(
                background="#1e1e2e",
                foreground="#cdd6f4",
                cursor="#f5e0dc",
                selection="#585b70",
                normal=("#45475a", "#f38ba8", "#a6e3a1", "#f9e2af",
                        "#89b4fa", "#f5c2e7", "#94e2d5", "#bac2de"),
                bright=("#585b70", "#f38ba8", "#a6e3a1", "#f9e2af",
                        "#89b4fa", "#f5c2e7", "#94e2d5", "#a6adc8"),
            ),
        )

    @classmethod
    def dracula(cls) -> Theme:
        """Dracula theme."""
        return cls(
            name="dracula",
            colors=_palette(
                background="#282a36",
                foreground="#f8f8f2",
                cursor="#f8f8f2",
                selection="#44475a",
                normal=("#21222c", "#ff5555", "#50fa7b", "#f1fa8c",
                        "#bd93f9", "#ff79c6", "#8be9fd", "#f8f8f2"),
                bright=("#6272a4", "#ff6e6e", "#69ff94", "#ffffa5",
                        "#d6acff", "#ff92df", "#a4ffff", "#ffffff"),
            ),
        )

    @classmethod
    def nord(cls) -> Theme:
        """Nord theme."""
        return cls(
            name="nord",
            colors=_palette(
                background="#2e3440",
                foreground="#d8dee9",
                cursor="#d8dee9",
                selection="#434c5e",
                normal=("#3b4252", "#bf616a", "#a3be8c", "#ebcb8b",
                        "#81a1c1", "#b48ead", "#88c0d0", "#e5e9f0"),
                bright=("#4c566a", "#bf616a", "#a3be8c", "#ebcb8b",
                        "#81a1c1", "#b48ead", "#8fbcbb", "#eceff4"),
            ),
        )

    @classmethod
    def solarized_dark(cls) -> Theme:
        """Solarized Dark theme."""
        return cls(
            name="solarized_dark",
            colors=_palette(
                background="#002b36",
                foreground="#839496",
                cursor="#839496",
                selection="#073642",
                normal=("#073642", "#dc322f", "#859900", "#b58900",
                        "#268bd2", "#d33682", "#2aa198", "#eee8d5"),
                bright=("#002b36", "#cb4b16", "#586e75", "#657b83",
                        "#839496", "#6c71c4", "#93a1a1", "#fdf6e3"),
            ),
        )

    @classmethod
    def gruvbox_dark(cls) -> Theme:
        """Gruvbox Dark theme."""
        return cls(
            name="gruvbox_dark",
            colors=_palette(
                background="#282828",
                foreground="#ebdbb2",
                cursor="#ebdbb2",
                selection="#504945",
                normal=("#282828", "#cc241d", "#98971a", "#d79921",
                        "#458588", "#b16286", "#689d6a", "#a89984"),
                bright=("#928374", "#fb4934", "#b8bb26", "#fabd2f",
                        "#83a598", "#d3869b", "#8ec07c", "#ebdbb2"),
            ),
        )

    @classmethod
    def gruvbox_light(cls) -> Theme:
        """Gruvbox Light theme."""
        return cls(
            name="gruvbox_light",
            colors=_palette(
                background="#fbf1c7",
                foreground="#3c3836",
                cursor="#3c3836",
                selection="#d5c4a1",
                normal=("#fbf1c7", "#cc241d", "#98971a", "#d79921",
                        "#458588", "#b16286", "#689d6a", "#7c6f64"),
                bright=("#928374", "#9d0006", "#79740e", "#b57614",
                        "#076678", "#8f3f71", "#427b58", "#3c3836"),
            ),
        )


class ThemeEngine:
    """Catalogue of built-in themes plus themes found on disk."""

    def __init__(self, theme_dirs: Optional[list[Path]] = None):
        """
        Initialize theme engine.

        Args:
            theme_dirs: Directories to load themes from, in order. A theme
                in a later directory replaces one of the same name.
                Defaults to the bundled themes directory.
        """
        if theme_dirs is None:
            theme_dirs = [resources.themes_dir]
        self.theme_dirs = [Path(d) for d in theme_dirs]

        self._themes: dict[str, Theme] = {}

        # Register built-in themes
        for builtin in (
            Theme.default(),
            Theme.dracula(),
            Theme.nord(),
            Theme.solarized_dark(),
            Theme.gruvbox_dark(),
            Theme.gruvbox_light(),
        ):
            self._themes[builtin.name] = builtin

    def load_themes(self) -> None:
        """Load all themes from the theme directories."""
        for theme_dir in self.theme_dirs:
            if not theme_dir.is_dir():
                logger.debug(f"Theme directory not found: {theme_dir}")
                continue

            for path in sorted(theme_dir.iterdir()):
                if path.suffix.lower() not in THEME_SUFFIXES:
                    continue
                try:
                    theme = Theme.load(path)
                except ThemeError as e:
                    logger.warning(f"Failed to load theme {path}: {e}")
                    continue
                self._themes[theme.name] = theme
                logger.debug(f"Loaded theme: {theme.name}")

    def get_theme(self, name: str) -> Optional[Theme]:
        """
        Get theme by name.

        Args:
            name: Theme name

        Returns:
            Theme if found, None otherwise
        """
        return self._themes.get(name)

    def list_themes(self) -> list[str]:
        """Sorted theme names."""
        return sorted(self._themes.keys())

    def register_theme(self, theme: Theme) -> None:
        self._themes[theme.name] = theme

    def find_matching(self, colors: dict) -> Optional[Theme]:
        """First theme, by name, whose colors equal `colors`."""
        for name in self.list_themes():
            theme = self._themes[name]
            if theme.matches(colors):
                return theme
        return None
