"""Base provider interface for task providers."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import TaskDescriptor


class TaskProvider(ABC):
    """
    Abstract base class for all task providers.

    A provider discovers one kind of build task (Gradle, npm, make, ...) in
    the host's workspace roots and caches what it found until invalidated.
    """

    @abstractmethod
    async def list_tasks(self) -> tuple[TaskDescriptor, ...]:
        """
        Return all tasks this provider knows about.

        This method should:
        1. Return the cached listing if one exists
        2. Otherwise find relevant files in the workspace roots
        3. Extract targets and build one descriptor per target
        4. Cache and return the complete listing

        Important: errors are not swallowed. If any file cannot be searched
        or read, the call fails and the cache keeps its previous state.

        Returns:
            Tuple of TaskDescriptor objects in discovery order

        Example:
            ```python
            async def list_tasks(self) -> tuple[TaskDescriptor, ...]:
                if not self.cache.is_populated:
                    self.cache.store(await self._detect())
                return self.cache.get()
            ```
        """
        ...

    @abstractmethod
    def invalidate(self) -> None:
        """Drop the cached listing so the next call rescans."""
        ...

    def resolve_task(self, task: TaskDescriptor) -> Optional[TaskDescriptor]:
        """Resolve a task the provider did not list itself. Unsupported by default."""
        return None

    @abstractmethod
    def get_metadata(self) -> dict:
        """
        Return provider metadata.

        Returns:
            Dictionary with keys:
            - name (str): Provider name (e.g., "gradle")
            - version (str): Provider version (e.g., "0.1.0")
            - description (str): Brief description of what the provider discovers
        """
        ...

    @abstractmethod
    def get_supported_files(self) -> list[str]:
        """
        Return glob patterns for files this provider reads.

        Returns:
            List of glob patterns (e.g., ['**/*.gradle'])
        """
        ...
