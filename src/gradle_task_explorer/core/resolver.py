"""Enumerates candidate build files across workspace roots."""

import logging
from pathlib import Path
from typing import AsyncIterator, Optional

from .host import Host
from .models import WorkspaceRoot

logger = logging.getLogger(__name__)

BUILD_FILE_PATTERN = "**/*.gradle"


async def iter_build_files(
    host: Host,
    roots: list[WorkspaceRoot],
    exclude: list[str],
    pattern: str = BUILD_FILE_PATTERN,
    visited: Optional[set[Path]] = None,
) -> AsyncIterator[tuple[WorkspaceRoot, Path]]:
    """
    Yield build files root by root, each absolute path at most once.

    Roots are searched in order, and files are yielded in the order the host
    returns them. A path already yielded for an earlier root (overlapping
    roots) is skipped. Search failures propagate.

    Args:
        host: Host providing file search
        roots: Workspace roots to search
        exclude: Glob patterns of build files to leave out
        pattern: Glob for build files relative to each root
        visited: Paths already processed in this pass; updated in place

    Yields:
        (root, path) for every candidate build file
    """
    if visited is None:
        visited = set()

    for root in roots:
        paths = await host.search_files(root, pattern, exclude)
        for path in paths:
            if host.is_excluded(path, exclude) or path in visited:
                continue
            visited.add(path)
            logger.info(f"   found {path}")
            yield root, path


async def resolve_build_files(
    host: Host,
    roots: list[WorkspaceRoot],
    exclude: list[str],
    pattern: str = BUILD_FILE_PATTERN,
) -> list[tuple[WorkspaceRoot, Path]]:
    """Collect all candidate build files (see iter_build_files)."""
    return [item async for item in iter_build_files(host, roots, exclude, pattern)]
