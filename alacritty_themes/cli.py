"""
alacritty_themes/cli.py

Command-line interface.

Usage:
    alacritty-themes list
    alacritty-themes apply dracula
    alacritty-themes current
    alacritty-themes create
    alacritty-themes -d ~/my-themes list
"""

import sys
import json
import logging
from pathlib import Path
from typing import NoReturn

import click

from . import __version__
from .backup import create_backup, install_crash_handler
from .config import get_settings_manager
from .errors import AlacrittyThemesError, BackupError
from .locations import default_config_path
from .locator import ConfigLocator
from .platform_utils import PlatformDetector
from .resources import resources
from .theme import AlacrittyConfig, ThemeEngine, create_config

logger = logging.getLogger(__name__)


def _fail(message: str) -> NoReturn:
    click.echo(message, err=True)
    sys.exit(1)


def get_locator(ctx) -> ConfigLocator:
    return ConfigLocator(ctx.obj["detector"])


def get_engine(ctx) -> ThemeEngine:
    """Theme engine over bundled, settings and command-line theme dirs."""
    theme_dirs = [resources.themes_dir]

    settings = get_settings_manager().settings
    if settings.themes_dir:
        theme_dirs.append(Path(settings.themes_dir).expanduser())
    if ctx.obj["themes_dir"]:
        theme_dirs.append(ctx.obj["themes_dir"])

    engine = ThemeEngine(theme_dirs)
    engine.load_themes()
    return engine


def _current_theme_name(locator: ConfigLocator, engine: ThemeEngine):
    config_path = locator.config_path()
    if config_path is None:
        return None
    try:
        return AlacrittyConfig.load(config_path).current_theme(engine)
    except AlacrittyThemesError as e:
        logger.warning(f"Could not read current theme: {e}")
        return None


@click.group()
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option(
    "-d", "--directory", "themes_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Extra directory to load themes from",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="alacritty-themes")
@click.pass_context
def cli(ctx, output_json, themes_dir, verbose):
    """Theme manager for the Alacritty terminal emulator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    install_crash_handler()

    ctx.ensure_object(dict)
    ctx.obj["json"] = output_json
    ctx.obj["themes_dir"] = themes_dir
    ctx.obj.setdefault("detector", PlatformDetector())


@cli.command("list")
@click.pass_context
def list_themes(ctx):
    """List available themes (* marks the applied one)."""
    engine = get_engine(ctx)
    current = _current_theme_name(get_locator(ctx), engine)
    names = engine.list_themes()

    if ctx.obj["json"]:
        themes = []
        for name in names:
            theme = engine.get_theme(name)
            themes.append({
                "name": name,
                "current": name == current,
                "source": str(theme.source) if theme.source else None,
            })
        click.echo(json.dumps(themes, indent=2))
    else:
        for name in names:
            marker = "*" if name == current else " "
            click.echo(f"{marker} {name}")
        click.echo(f"\n{len(names)} theme(s)")


@cli.command("apply")
@click.argument("name")
@click.option("--no-backup", is_flag=True, help="Skip the automatic backup")
@click.pass_context
def apply_theme(ctx, name, no_backup):
    """Apply a theme to the Alacritty config."""
    engine = get_engine(ctx)
    theme = engine.get_theme(name)
    if theme is None:
        _fail(f"Theme '{name}' not found. Run `alacritty-themes list` to see available themes.")

    locator = get_locator(ctx)
    manager = get_settings_manager()

    try:
        config_path = locator.require_config_path()
        config = AlacrittyConfig.load(config_path)

        if manager.settings.backup_before_apply and not no_backup:
            create_backup(locator)

        config.apply_theme(theme)
        config.save()
    except BackupError:
        raise
    except AlacrittyThemesError as e:
        _fail(str(e))

    manager.settings.add_recent_theme(theme.name)
    manager.save()

    click.echo(f"Theme {theme.name} applied to {config_path}")


@cli.command("current")
@click.pass_context
def show_current(ctx):
    """Show the theme applied in the Alacritty config."""
    locator = get_locator(ctx)
    engine = get_engine(ctx)

    try:
        config_path = locator.require_config_path()
        name = AlacrittyConfig.load(config_path).current_theme(engine)
    except AlacrittyThemesError as e:
        _fail(str(e))

    if ctx.obj["json"]:
        recent = get_settings_manager().settings.recent_themes
        click.echo(json.dumps({"theme": name, "config": config_path, "recent": recent}))
    elif name:
        click.echo(name)
    else:
        click.echo("No theme applied (colors match no known theme)")


@cli.command("create")
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing config")
@click.pass_context
def create(ctx, force):
    """Create a new Alacritty config from the bundled template."""
    locator = get_locator(ctx)

    existing = locator.config_path()
    if existing and not force:
        _fail(f"An Alacritty config already exists at {existing} (use --force to overwrite)")

    try:
        path = create_config(Path(default_config_path(ctx.obj["detector"])), force=force)
    except AlacrittyThemesError as e:
        _fail(str(e))

    click.echo(f"Created Alacritty config at {path}")


@cli.command("locations")
@click.pass_context
def show_locations(ctx):
    """List every location searched for the config, in priority order."""
    locator = get_locator(ctx)
    found = locator.config_path()
    locations = locator.possible_locations()

    if ctx.obj["json"]:
        click.echo(json.dumps(
            [{"path": location, "selected": location == found} for location in locations],
            indent=2,
        ))
        return

    if not locations:
        click.echo("No candidate locations (HOME, APPDATA and XDG_CONFIG_HOME are unset).")
        return

    for location in locations:
        marker = "*" if location == found else " "
        click.echo(f"{marker} {location}")


@cli.command("backup")
@click.pass_context
def backup(ctx):
    """Back up the Alacritty config now."""
    locator = get_locator(ctx)
    try:
        locator.require_config_path()
    except AlacrittyThemesError as e:
        _fail(str(e))

    create_backup(locator)


@cli.command("platform")
@click.pass_context
def show_platform(ctx):
    """Show the detected platform and home directories."""
    detector = ctx.obj["detector"]
    info = {
        "platform": detector.platform().value,
        "home": detector.linux_home(),
        "appdata": detector.windows_home(),
        "xdg_config_home": detector.xdg_config_home(),
    }

    if ctx.obj["json"]:
        click.echo(json.dumps(info, indent=2))
    else:
        click.echo(f"Platform:        {info['platform']}")
        click.echo(f"HOME:            {info['home'] or '(unset)'}")
        click.echo(f"APPDATA:         {info['appdata'] or '(unset)'}")
        click.echo(f"XDG_CONFIG_HOME: {info['xdg_config_home'] or '(unset)'}")


def main():
    """Entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
