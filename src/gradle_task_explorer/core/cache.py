"""Discovery cache holding the last complete task listing."""

from typing import Optional

from .models import TaskDescriptor


class DiscoveryCache:
    """
    Memoizes one complete discovery result until invalidated.

    The cache is either empty or holds a full listing; it never expires on
    its own and is only ever replaced as a whole.
    """

    def __init__(self):
        self._tasks: Optional[tuple[TaskDescriptor, ...]] = None

    @property
    def is_populated(self) -> bool:
        return self._tasks is not None

    def get(self) -> Optional[tuple[TaskDescriptor, ...]]:
        return self._tasks

    def store(self, tasks) -> tuple[TaskDescriptor, ...]:
        """Replace the cached listing and return the stored tuple."""
        self._tasks = tuple(tasks)
        return self._tasks

    def invalidate(self) -> None:
        self._tasks = None
