"""
Exceptions raised by alacritty-themes.
"""


class AlacrittyThemesError(Exception):
    """Base class for all tool errors."""
    pass


class NoConfigFileFoundError(AlacrittyThemesError):
    """None of the candidate Alacritty config files exist."""

    def __init__(self, locations: list[str]):
        self.locations = list(locations)
        message = (
            "No Alacritty configuration file found.\n"
            "Expected one of the following files to exist:\n"
            + "".join(f"{location}\n" for location in self.locations)
            + "Or you can create a new one using `alacritty-themes create`"
        )
        super().__init__(message)


class ConfigLocationError(AlacrittyThemesError):
    """No home directory is resolvable to place a new config in."""
    pass


class ConfigExistsError(AlacrittyThemesError):
    """Refusing to overwrite an existing config file."""
    pass


class ThemeError(AlacrittyThemesError):
    """Theme missing or malformed."""
    pass


class BackupError(AlacrittyThemesError):
    """Copying the config to its backup file failed."""
    pass
