"""Error types raised across the discovery pipeline."""

from pathlib import Path


class TaskExplorerError(Exception):
    """Base class for all task explorer errors."""


class EnumerationFailure(TaskExplorerError):
    """Searching a workspace root for build files failed."""

    def __init__(self, root: Path, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"Could not search {root}: {reason}")


class ReadFailure(TaskExplorerError):
    """A candidate build file could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class ConfigError(TaskExplorerError):
    """Settings file is unreadable or invalid."""
