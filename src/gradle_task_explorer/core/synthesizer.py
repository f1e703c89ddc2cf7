"""Builds task descriptors from extracted target names."""

from pathlib import Path
from typing import Optional

from .models import BUILD_GROUP, TaskDescriptor, WorkspaceRoot

WINDOWS_COMMAND = "gradle.bat"
DEFAULT_COMMAND = "gradle"


def default_command(platform: str) -> str:
    """
    Return the default Gradle executable for a platform.

    Args:
        platform: Platform identifier such as `sys.platform` ("win32", "linux")

    Returns:
        "gradle.bat" on Windows-family platforms, "gradle" elsewhere
    """
    if platform.lower().startswith("win"):
        return WINDOWS_COMMAND
    return DEFAULT_COMMAND


def resolve_command(platform: str, override: Optional[str] = None) -> str:
    """Return the configured override if set, else the platform default."""
    if override:
        return override
    return default_command(platform)


def relative_path_for(source_path: Path, root: WorkspaceRoot) -> str:
    """
    Compute the containing directory of a build file relative to its root.

    The root's path plus one separator is stripped from the front of the
    directory path. Nested directories keep a trailing "/"; files directly
    at the root give "".
    """
    file_path = source_path.as_posix()
    directory = file_path[: file_path.rfind("/") + 1]
    return directory[len(root.path.as_posix()) + 1 :]


def synthesize_task(
    target: str, source_path: Path, root: WorkspaceRoot, command: str
) -> TaskDescriptor:
    """
    Build the descriptor for one target.

    Args:
        target: Target name extracted from the build file
        source_path: Absolute path of the build file
        root: Workspace root owning the build file
        command: Resolved Gradle executable

    Returns:
        TaskDescriptor running `command target` in the build file's directory
    """
    return TaskDescriptor(
        target=target,
        source_path=source_path,
        relative_path=relative_path_for(source_path, root),
        command=command,
        args=(target,),
        working_directory=source_path.parent,
        group=BUILD_GROUP,
        root=root.name,
    )
