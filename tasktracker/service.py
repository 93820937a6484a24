"""Task operations exposed to the transport layer.

Each operation validates its input before touching the repository, makes
at most a few repository calls, and reports failures with the exceptions in
``tasktracker.errors``. Repository failures are never retried.
"""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from tasktracker.errors import StorageUnavailableError, TaskNotFoundError
from tasktracker.models import Task, TaskStats
from tasktracker.query import compose_query
from tasktracker.repository import TaskRepository
from tasktracker.stats import summarize
from tasktracker.status import status_change
from tasktracker.validation import validate_create, validate_update

T = TypeVar("T")


class TaskService:
    """Orchestrates validation, querying and statistics over a repository."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    @staticmethod
    async def _storage(action: str, method: Callable[..., Awaitable[T]], *args: Any) -> T:
        try:
            return await method(*args)
        except StorageUnavailableError:
            raise
        except Exception as exc:
            raise StorageUnavailableError(f"Error {action}", cause=exc) from exc

    async def list_tasks(
        self,
        *,
        status: str | None = None,
        priority: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> list[Task]:
        """List tasks, optionally filtered and sorted. An empty list is not an error."""
        query = compose_query(status, priority, sort_by, sort_order)
        return await self._storage("fetching tasks", self._repository.find, query)

    async def get_task(self, task_id: str) -> Task:
        task = await self._storage("fetching task", self._repository.find_by_id, task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def create_task(self, payload: Any) -> Task:
        fragment = validate_create(payload)
        return await self._storage("creating task", self._repository.insert, fragment)

    async def update_task(self, task_id: str, payload: Any) -> Task:
        """Apply the fields present in ``payload``; absent fields are kept."""
        changes = validate_update(payload)
        return await self._apply(task_id, changes, "updating task")

    async def set_status(self, task_id: str, status: Any) -> Task:
        """Change only the status of a task."""
        changes = status_change(status)
        return await self._apply(task_id, changes, "updating task status")

    async def _apply(self, task_id: str, changes: dict[str, Any], action: str) -> Task:
        task = await self._storage(action, self._repository.update_by_id, task_id, changes)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def delete_task(self, task_id: str) -> None:
        deleted = await self._storage("deleting task", self._repository.delete_by_id, task_id)
        if not deleted:
            raise TaskNotFoundError(task_id)

    async def stats(self) -> TaskStats:
        """Summarize the collection. An empty collection yields all zeros."""
        action = "fetching task statistics"
        total = await self._storage(action, self._repository.count_all)
        by_status = await self._storage(action, self._repository.group_count_by, "status")
        by_priority = await self._storage(action, self._repository.group_count_by, "priority")
        return summarize(total, by_status, by_priority)
