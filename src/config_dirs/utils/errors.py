"""Custom exception classes for config-dirs."""

from pathlib import Path
from typing import List, Optional


class ConfigDirsError(Exception):
    """Base exception for all config-dirs errors."""
    pass


class ConfigReadError(ConfigDirsError):
    """Raised when a config file exists (or may exist) but cannot be read."""

    def __init__(self, path: Path, error: Exception):
        self.path = Path(path)
        self.error = error
        super().__init__(f"Failed to read config file {self.path}: {error}")

    @property
    def is_not_found(self) -> bool:
        """True when the underlying failure is a missing file."""
        return isinstance(self.error, FileNotFoundError)


class ConfigParseError(ConfigDirsError):
    """Raised when the caller's parser rejects a config file's contents."""

    def __init__(self, path: Path, error: Exception):
        self.path = Path(path)
        self.error = error
        super().__init__(f"Failed to parse config {self.path}: {error}")


class NoConfigPathError(ConfigDirsError):
    """Raised when no candidate path held a config file."""

    def __init__(self, name: str, tried: Optional[List[Path]] = None):
        self.name = name
        self.tried = list(tried or [])
        super().__init__(f"Failed to load config for '{name}' from paths")
