"""Core data models for Gradle Task Explorer."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

VERSION = "0.1.0"
TASK_TYPE = "gradle"
BUILD_GROUP = "build"


@dataclass
class TargetDeclaration:
    """
    A task declaration recognized in build file text.

    Attributes:
        name: Target name, trimmed
        line_number: 1-based line number of the declaration
        line: The trimmed source line
    """

    name: str
    line_number: int
    line: str


@dataclass
class Diagnostic:
    """A line that looked like a task declaration but was skipped."""

    line_number: int
    line: str
    reason: str


class WorkspaceRoot(BaseModel):
    """A workspace folder under which build files are discovered."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name of the workspace folder")
    path: Path = Field(..., description="Base path of the workspace folder")

    @field_serializer("path")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string for JSON output."""
        return str(path)

    @field_validator("path", mode="before")
    @classmethod
    def validate_path(cls, v):
        """Convert string to Path if needed."""
        if isinstance(v, str):
            return Path(v)
        return v


class TaskDefinition(BaseModel):
    """Identity of a task as the host sees it."""

    model_config = ConfigDict(frozen=True)

    type: str = TASK_TYPE
    script: str
    path: Optional[str] = None


class TaskDescriptor(BaseModel):
    """
    An executable task synthesized from one build target.

    Descriptors are immutable so a cached listing can be handed to any
    number of readers.
    """

    model_config = ConfigDict(frozen=True)

    target: str = Field(..., description="Gradle target name")
    source_path: Path = Field(..., description="Build file declaring the target")
    relative_path: str = Field(
        "", description="Containing directory relative to the root, empty at root"
    )
    command: str = Field(..., description="Executable used to run the target")
    args: tuple[str, ...] = Field(..., description="Arguments passed to the command")
    working_directory: Path = Field(..., description="Directory the command runs in")
    group: str = Field(BUILD_GROUP, description="Task group tag")
    source: str = Field(TASK_TYPE, description="Provider that produced the task")
    root: str = Field(..., description="Name of the owning workspace root")

    @field_serializer("source_path", "working_directory")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string for JSON output."""
        return str(path)

    @field_validator("source_path", "working_directory", mode="before")
    @classmethod
    def validate_path(cls, v):
        """Convert string to Path if needed."""
        if isinstance(v, str):
            return Path(v)
        return v

    @property
    def definition(self) -> TaskDefinition:
        """Task definition, with the path omitted for files at the root."""
        return TaskDefinition(script=self.target, path=self.relative_path or None)

    @property
    def command_line(self) -> list[str]:
        """Full command line as a list."""
        return [self.command, *self.args]


class TaskListing(BaseModel):
    """
    Aggregated tasks from all providers that ran.

    Contains the tasks in discovery order plus execution metadata.
    """

    roots: list[WorkspaceRoot] = Field(
        default_factory=list, description="Workspace roots that were searched"
    )
    tasks: list[TaskDescriptor] = Field(
        default_factory=list, description="All tasks from all providers"
    )
    providers_run: list[str] = Field(
        default_factory=list, description="Names of providers that executed"
    )
    scan_duration_seconds: float = Field(..., description="Total discovery time")

    def summary(self) -> dict[str, int]:
        """
        Count tasks per provider.

        Returns:
            Dictionary with a count per provider plus total
        """
        summary = {name: 0 for name in self.providers_run}
        for task in self.tasks:
            summary[task.source] = summary.get(task.source, 0) + 1
        summary["total"] = len(self.tasks)
        return summary
