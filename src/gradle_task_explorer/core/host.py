"""Host services the discovery pipeline calls into."""

import asyncio
import fnmatch
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from .config import ExplorerSettings
from .errors import EnumerationFailure, ReadFailure
from .models import WorkspaceRoot

logger = logging.getLogger(__name__)


class Host(ABC):
    """
    Abstract base class for the environment hosting task discovery.

    An editor integration implements these services on top of its own file
    search, file system and configuration APIs. The discovery pipeline only
    ever talks to the host through this interface.
    """

    @property
    @abstractmethod
    def workspace_roots(self) -> list[WorkspaceRoot]:
        """Workspace roots to search, in order."""
        ...

    @abstractmethod
    async def search_files(
        self, root: WorkspaceRoot, pattern: str, exclude: list[str]
    ) -> list[Path]:
        """
        Find files under a root matching a recursive glob pattern.

        Args:
            root: Workspace root to search
            pattern: Glob relative to the root (e.g. "**/*.gradle")
            exclude: Glob patterns of paths to leave out

        Returns:
            Absolute paths in a stable order

        Raises:
            EnumerationFailure: If the root cannot be searched
        """
        ...

    @abstractmethod
    def is_excluded(self, path: Path, exclude: list[str]) -> bool:
        """Return True if the path matches any exclusion pattern."""
        ...

    @abstractmethod
    async def read_file_text(self, path: Path) -> str:
        """
        Read a whole file as text.

        Raises:
            ReadFailure: If the file cannot be read
        """
        ...

    @abstractmethod
    def get_config_value(self, key: str) -> Optional[str]:
        """Look up a configuration value, None when unset."""
        ...

    @abstractmethod
    def resolve_workspace_root_for(self, path: Path) -> Optional[WorkspaceRoot]:
        """Return the innermost workspace root containing a path, None if outside all roots."""
        ...


class LocalHost(Host):
    """Host backed by the local file system and an ExplorerSettings object."""

    def __init__(
        self,
        roots: list[WorkspaceRoot],
        settings: Optional[ExplorerSettings] = None,
    ):
        self._roots = [
            root.model_copy(update={"path": root.path.resolve()}) for root in roots
        ]
        self.settings = settings or ExplorerSettings()

    @classmethod
    def from_paths(
        cls, paths: list[Path], settings: Optional[ExplorerSettings] = None
    ) -> "LocalHost":
        """Create a host with one workspace root per directory path."""
        roots = []
        for path in paths:
            resolved = Path(path).resolve()
            roots.append(WorkspaceRoot(name=resolved.name or str(resolved), path=resolved))
        return cls(roots, settings)

    @property
    def workspace_roots(self) -> list[WorkspaceRoot]:
        return list(self._roots)

    async def search_files(
        self, root: WorkspaceRoot, pattern: str, exclude: list[str]
    ) -> list[Path]:
        return await asyncio.to_thread(self._search, root, pattern, exclude)

    def _search(self, root: WorkspaceRoot, pattern: str, exclude: list[str]) -> list[Path]:
        if not root.path.is_dir():
            raise EnumerationFailure(root.path, "not a directory")

        try:
            matches = sorted(p for p in root.path.glob(pattern) if p.is_file())
        except OSError as e:
            raise EnumerationFailure(root.path, str(e)) from e

        return [p.absolute() for p in matches if not self._matches_any(p, root, exclude)]

    def is_excluded(self, path: Path, exclude: list[str]) -> bool:
        root = self.resolve_workspace_root_for(path)
        return self._matches_any(path, root, exclude)

    @staticmethod
    def _matches_any(path: Path, root: Optional[WorkspaceRoot], exclude: list[str]) -> bool:
        candidates = [path.as_posix()]
        if root is not None:
            try:
                candidates.append(path.relative_to(root.path).as_posix())
            except ValueError:
                pass

        for pattern in exclude:
            for candidate in candidates:
                # "**/x/**" must also match "x/..." at the root
                if fnmatch.fnmatch(candidate, pattern) or fnmatch.fnmatch(
                    "/" + candidate, pattern
                ):
                    return True
        return False

    async def read_file_text(self, path: Path) -> str:
        """Read a file as UTF-8; undecodable bytes become U+FFFD and are logged."""
        try:
            data = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise ReadFailure(path, str(e)) from e

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.debug(f"Replacing undecodable bytes in {path}: {e}")
            return data.decode("utf-8", errors="replace")

    def get_config_value(self, key: str) -> Optional[str]:
        return self.settings.get(key)

    def resolve_workspace_root_for(self, path: Path) -> Optional[WorkspaceRoot]:
        """Return the innermost root containing the path."""
        matches = [
            root for root in self._roots if path == root.path or root.path in path.parents
        ]
        if not matches:
            return None
        return max(matches, key=lambda root: len(root.path.parts))
