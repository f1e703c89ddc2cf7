"""Task provider for Gradle build files."""

import logging
import sys
from pathlib import Path
from typing import Optional

from ...core.cache import DiscoveryCache
from ...core.config import ExplorerSettings
from ...core.host import Host
from ...core.line_scanner import extract_targets
from ...core.models import VERSION, Diagnostic, TaskDescriptor, WorkspaceRoot
from ...core.provider import TaskProvider
from ...core.resolver import BUILD_FILE_PATTERN, iter_build_files
from ...core.synthesizer import resolve_command, synthesize_task

logger = logging.getLogger(__name__)

GRADLE_PATH_KEY = "pathToGradle"


class GradleTaskProvider(TaskProvider):
    """Discovers `task <name>(` declarations in *.gradle files."""

    def __init__(
        self,
        host: Host,
        settings: Optional[ExplorerSettings] = None,
        platform: str = sys.platform,
        cache: Optional[DiscoveryCache] = None,
    ):
        """
        Initialize the provider.

        Args:
            host: Host providing file search, reads and configuration
            settings: Discovery settings (exclusion globs)
            platform: Platform identifier used for the default command
            cache: Cache to use; a fresh one is created when omitted
        """
        self.host = host
        self.settings = settings or ExplorerSettings()
        self.platform = platform
        self.cache = cache or DiscoveryCache()
        self.diagnostics: dict[Path, list[Diagnostic]] = {}

    async def list_tasks(self) -> tuple[TaskDescriptor, ...]:
        """
        Return cached tasks, or discover and cache them.

        Returns:
            The same tuple object on every call until invalidated
        """
        cached = self.cache.get()
        if cached is not None:
            return cached

        tasks = await self._detect_tasks()
        return self.cache.store(tasks)

    def invalidate(self) -> None:
        """Clear the cached tasks."""
        self.cache.invalidate()

    async def _detect_tasks(self) -> list[TaskDescriptor]:
        """Run one full discovery pass over all workspace roots."""
        logger.info("Find gradlefiles")

        roots = self.host.workspace_roots
        if not roots:
            return []

        command = resolve_command(self.platform, self.host.get_config_value(GRADLE_PATH_KEY))
        diagnostics: dict[Path, list[Diagnostic]] = {}
        all_tasks: list[TaskDescriptor] = []

        async for _, path in iter_build_files(self.host, roots, self.settings.exclude):
            owner = self.host.resolve_workspace_root_for(path)
            if owner is None:
                logger.debug(f"Skipping {path}: outside all workspace roots")
                continue

            file_diagnostics: list[Diagnostic] = []
            all_tasks.extend(await self._read_build_file(path, owner, command, file_diagnostics))
            if file_diagnostics:
                diagnostics[path] = file_diagnostics

        self.diagnostics = diagnostics
        logger.info(f"   done, {len(all_tasks)} task(s)")
        return all_tasks

    async def _read_build_file(
        self,
        path: Path,
        root: WorkspaceRoot,
        command: str,
        diagnostics: list[Diagnostic],
    ) -> list[TaskDescriptor]:
        """
        Build descriptors for every target declared in one build file.

        Args:
            path: Build file to read
            root: Workspace root owning the file
            command: Resolved Gradle executable
            diagnostics: Collects skipped declarations

        Returns:
            One TaskDescriptor per distinct target, in declaration order
        """
        logger.info("   Find gradlefile targets")
        contents = await self.host.read_file_text(path)
        targets = extract_targets(contents, diagnostics)
        return [synthesize_task(target, path, root, command) for target in targets]

    def get_metadata(self) -> dict:
        """Return provider metadata."""
        return {
            "name": "gradle",
            "version": VERSION,
            "description": "Discovers tasks declared in Gradle build files",
        }

    def get_supported_files(self) -> list[str]:
        """Return supported file patterns."""
        return [BUILD_FILE_PATTERN]
