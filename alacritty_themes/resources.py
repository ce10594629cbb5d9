"""Locates files bundled with the package (themes, config template)."""
from pathlib import Path


class ResourceManager:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._package_root = Path(__file__).parent
        return cls._instance

    def get_path(self, *parts: str) -> Path:
        """Get absolute path to a package resource."""
        path = self._package_root.joinpath(*parts)
        if not path.exists():
            raise FileNotFoundError(f"Resource not found: {path}")
        return path

    # Convenience shortcuts
    @property
    def themes_dir(self) -> Path:
        return self.get_path("theme", "themes")

    @property
    def config_template(self) -> Path:
        return self.get_path("templates", "alacritty.toml")


# Singleton instance
resources = ResourceManager()
