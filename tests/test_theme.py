"""Tests for the theme catalogue."""

import logging

import pytest

from alacritty_themes.errors import ThemeError
from alacritty_themes.theme import Theme, ThemeEngine
from alacritty_themes.theme.engine import normalize_colors

TOML_THEME = """\
[colors.primary]
background = "#101010"
foreground = "#eeeeee"

[colors.normal]
black = "#000000"
red = "#ff0000"
"""

YAML_THEME = """\
colors:
  primary:
    background: '0x101010'
    foreground: '0xEEEEEE'
"""


def test_load_toml(tmp_path):
    path = tmp_path / "midnight.toml"
    path.write_text(TOML_THEME)

    theme = Theme.load(path)
    assert theme.name == "midnight"
    assert theme.source == path
    assert theme.colors["primary"]["background"] == "#101010"
    assert theme.colors["normal"]["red"] == "#ff0000"


def test_load_legacy_yaml(tmp_path):
    path = tmp_path / "midnight.yml"
    path.write_text(YAML_THEME)

    theme = Theme.load(path)
    assert theme.name == "midnight"
    assert theme.colors["primary"]["foreground"] == "0xEEEEEE"


@pytest.mark.parametrize("filename, content", [
    ("empty.toml", ""),
    ("nocolors.toml", "[font]\nsize = 10\n"),
    ("broken.toml", "[colors\n"),
    ("broken.yaml", "colors: [unclosed\n"),
    ("scalar.yaml", "just a string\n"),
    ("theme.json", "{}"),
])
def test_invalid_themes_rejected(tmp_path, filename, content):
    path = tmp_path / filename
    path.write_text(content)

    with pytest.raises(ThemeError):
        Theme.load(path)


def test_missing_file_rejected(tmp_path):
    with pytest.raises(ThemeError):
        Theme.load(tmp_path / "gone.toml")


def test_save_round_trips(tmp_path):
    path = tmp_path / "dracula.toml"
    Theme.dracula().save(path)

    loaded = Theme.load(path)
    assert loaded.name == "dracula"
    assert loaded.colors == Theme.dracula().colors


def test_normalize_colors():
    assert normalize_colors({"a": {"b": "0xABCDEF"}}) == {"a": {"b": "#abcdef"}}
    assert normalize_colors({"a": " #ABC "}) == {"a": "#abc"}
    assert normalize_colors({"n": 3, "l": ["0xFF"]}) == {"n": 3, "l": ["#ff"]}


def test_matches_ignores_hex_notation():
    theme = Theme.nord()
    shouted = {
        table: {key: value.replace("#", "0x").upper() for key, value in entries.items()}
        for table, entries in theme.colors.items()
    }
    assert theme.matches(shouted)
    assert not theme.matches(Theme.dracula().colors)


def test_builtin_themes_registered():
    engine = ThemeEngine(theme_dirs=[])
    assert engine.list_themes() == [
        "default", "dracula", "gruvbox_dark", "gruvbox_light", "nord", "solarized_dark",
    ]
    assert engine.get_theme("missing") is None


def test_bundled_themes_load():
    engine = ThemeEngine()
    engine.load_themes()

    names = engine.list_themes()
    assert "tokyo_night" in names
    assert "one_dark" in names
    assert "monokai" in names


def test_directory_theme_overrides_builtin(tmp_path):
    (tmp_path / "dracula.toml").write_text(TOML_THEME)

    engine = ThemeEngine(theme_dirs=[tmp_path])
    engine.load_themes()

    assert engine.get_theme("dracula").colors["primary"]["background"] == "#101010"


def test_broken_theme_skipped(tmp_path, caplog):
    (tmp_path / "good.toml").write_text(TOML_THEME)
    (tmp_path / "bad.toml").write_text("[colors\n")
    (tmp_path / "notes.txt").write_text("ignored")

    engine = ThemeEngine(theme_dirs=[tmp_path, tmp_path / "missing"])
    with caplog.at_level(logging.WARNING):
        engine.load_themes()

    assert engine.get_theme("good") is not None
    assert engine.get_theme("bad") is None
    assert "Failed to load theme" in caplog.text


def test_find_matching():
    engine = ThemeEngine(theme_dirs=[])
    assert engine.find_matching(Theme.gruvbox_light().colors).name == "gruvbox_light"
    assert engine.find_matching({"primary": {"background": "#123456"}}) is None

    engine.register_theme(Theme(name="custom", colors={"primary": {"background": "#123456"}}))
    assert engine.find_matching({"primary": {"background": "0x123456"}}).name == "custom"


def test_legacy_yaml_unquoted_hex_stays_a_color(tmp_path):
    path = tmp_path / "legacy.yaml"
    path.write_text(
        "colors:\n"
        "  primary:\n"
        "    background: 0x272822\n"
        "    foreground: 0xF8F8F2\n"
        "  normal:\n"
        "    black: 0x000000\n"
        "  draw_bold_text_with_bright_colors: true\n"
        "  indexed_colors:\n"
        "    - index: 16\n"
        "      color: 0xff9e64\n"
    )

    theme = Theme.load(path)
    assert theme.colors["primary"] == {"background": "0x272822", "foreground": "0xf8f8f2"}
    assert theme.colors["normal"]["black"] == "0x000000"
    assert theme.colors["draw_bold_text_with_bright_colors"] is True
    assert theme.colors["indexed_colors"] == [{"index": 16, "color": "0xff9e64"}]

    saved = tmp_path / "legacy.toml"
    theme.save(saved)
    assert 'background = "0x272822"' in saved.read_text()
