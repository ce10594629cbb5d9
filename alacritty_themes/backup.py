"""
Automatic backups of the Alacritty config before it gets rewritten.

The copy runs on a background thread so the caller carries on
immediately. A failed copy is not swallowed: it raises on that thread
and, once install_crash_handler() is in place, takes the process down.
"""

from __future__ import annotations
import os
import time
import shutil
import logging
import threading
from pathlib import Path
from typing import BinaryIO, Callable, Optional

import click

from .errors import BackupError
from .locator import ConfigLocator

logger = logging.getLogger(__name__)

EXIT_BACKUP_FAILED = 3


def backup_path_for(config_path: str, timestamp: float) -> str:
    """`<config_path>.<epoch millis>.bak`"""
    return f"{config_path}.{int(timestamp * 1000)}.bak"


def create_backup(
    locator: Optional[ConfigLocator] = None,
    clock: Callable[[], float] = time.time,
) -> Optional[threading.Thread]:
    """
    Copy the current config to a timestamped backup file.

    Does nothing when there is no config. Otherwise the source is opened
    here and copied on a non-daemon thread, so a config save that
    replaces the file afterwards cannot leak into the backup, and the
    interpreter still waits for the copy before it exits.

    Args:
        locator: Config locator (defaults to the real environment)
        clock: Seconds since the epoch, injectable for tests

    Returns:
        The copy thread, or None if there was nothing to back up

    Raises:
        BackupError: The config could not be opened for reading
    """
    locator = locator or ConfigLocator()

    if not locator.config_exists():
        logger.debug("No Alacritty config present, skipping backup")
        return None

    config_path = locator.config_path()
    if config_path is None:
        logger.debug("Alacritty config disappeared before backup, skipping")
        return None

    backup_path = backup_path_for(config_path, clock())

    try:
        source = open(config_path, "rb")
    except OSError as e:
        raise BackupError(f"Could not open {config_path} for backup: {e}") from e

    logger.debug(f"Copying {config_path} -> {backup_path}")
    thread = threading.Thread(
        target=_copy_to_backup,
        args=(source, config_path, backup_path),
        name="alacritty-config-backup",
    )
    thread.start()
    return thread


def _copy_to_backup(source: BinaryIO, config_path: str, backup_path: str) -> None:
    try:
        with source, open(backup_path, "wb") as target:
            shutil.copyfileobj(source, target)
    except OSError as e:
        # A partial copy must not pass for a backup
        Path(backup_path).unlink(missing_ok=True)
        raise BackupError(f"Failed to back up {config_path} to {backup_path}: {e}") from e

    logger.info(f"Backup written: {backup_path}")
    click.echo(f"Automatic backup file was created: {backup_path}")


def install_crash_handler() -> None:
    """
    Route unhandled BackupError from worker threads to a hard exit.

    Other thread exceptions go to whatever hook was installed before.
    Safe to call more than once.
    """
    previous = threading.excepthook
    if getattr(previous, "_alacritty_themes_crash_handler", False):
        return

    def handler(args: threading.ExceptHookArgs) -> None:
        previous(args)
        if args.exc_type is not None and issubclass(args.exc_type, BackupError):
            logger.critical(f"Backup failed, aborting: {args.exc_value}")
            os._exit(EXIT_BACKUP_FAILED)

    handler._alacritty_themes_crash_handler = True
    threading.excepthook = handler
