"""Port interface for task persistence (repository boundary)."""

from typing import Any, Literal, Protocol, runtime_checkable

from tasktracker.models import Task, TaskCreate, TaskQuery

GroupField = Literal["status", "priority"]


@runtime_checkable
class TaskRepository(Protocol):
    """Task repository abstraction consumed by ``TaskService``.

    Implementations may raise any exception on failure; the service reports
    it as ``StorageUnavailableError``.
    """

    async def find(self, query: TaskQuery) -> list[Task]:
        """Return tasks matching the query's filters in its sort order."""

    async def find_by_id(self, task_id: str) -> Task | None:
        """Return a task by id or None when missing."""

    async def insert(self, fragment: TaskCreate) -> Task:
        """Store a new task, assigning its id and timestamps."""

    async def update_by_id(self, task_id: str, changes: dict[str, Any]) -> Task | None:
        """Apply changes to a stored task. Returns None if not found."""

    async def delete_by_id(self, task_id: str) -> bool:
        """Delete a task. Returns True if it existed."""

    async def count_all(self) -> int:
        """Return the number of stored tasks."""

    async def group_count_by(self, field: GroupField) -> dict[str, int]:
        """Return task counts keyed by each value of ``field`` present."""
