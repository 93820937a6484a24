"""In-memory task storage.

Implements ``TaskRepository`` without external dependencies. Ordering
follows a document store: tasks without a due date sort first ascending
and last descending.
"""

import logging
from collections import Counter
from datetime import UTC, datetime
from itertools import count
from typing import Any
from uuid import uuid4

from tasktracker.models import SortDirection, Task, TaskCreate, TaskQuery
from tasktracker.repository import GroupField

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """Simple in-memory task storage."""

    def __init__(self) -> None:
        """Initialize an empty task store."""
        self._tasks: dict[str, Task] = {}
        # insertion order breaks ties between equal sort keys
        self._sequence: dict[str, int] = {}
        self._counter = count()

    def _sort_key(self, task: Task, attribute: str) -> tuple[Any, ...]:
        value = getattr(task, attribute)
        return (value is not None, value, self._sequence[task.id])

    async def find(self, query: TaskQuery) -> list[Task]:
        """Return matching tasks in the query's sort order."""
        tasks = [
            task
            for task in self._tasks.values()
            if (query.status is None or task.status == query.status)
            and (query.priority is None or task.priority == query.priority)
        ]
        attribute = query.sort_field.attribute
        return sorted(
            tasks,
            key=lambda t: self._sort_key(t, attribute),
            reverse=query.sort_direction is SortDirection.DESC,
        )

    async def find_by_id(self, task_id: str) -> Task | None:
        """Get a task by its ID, or None if not found."""
        return self._tasks.get(task_id)

    async def insert(self, fragment: TaskCreate) -> Task:
        """Create a new task and return it."""
        now = datetime.now(UTC)
        task = Task(
            id=uuid4().hex,
            created_at=now,
            updated_at=now,
            **fragment.model_dump(),
        )
        self._tasks[task.id] = task
        self._sequence[task.id] = next(self._counter)
        logger.debug("task inserted id=%s", task.id)
        return task

    async def update_by_id(self, task_id: str, changes: dict[str, Any]) -> Task | None:
        """Update an existing task. Returns None if not found."""
        task = self._tasks.get(task_id)
        if task is None:
            return None

        if changes:
            changes = {**changes, "updated_at": datetime.now(UTC)}
            updated_task = task.model_copy(update=changes)
            self._tasks[task_id] = updated_task
            return updated_task
        return task

    async def delete_by_id(self, task_id: str) -> bool:
        """Delete a task. Returns True if deleted, False if not found."""
        if task_id in self._tasks:
            del self._tasks[task_id]
            del self._sequence[task_id]
            return True
        return False

    async def count_all(self) -> int:
        return len(self._tasks)

    async def group_count_by(self, field: GroupField) -> dict[str, int]:
        counts = Counter(getattr(task, field).value for task in self._tasks.values())
        return dict(counts)

    def clear(self) -> None:
        """Clear all tasks. Useful for testing."""
        self._tasks.clear()
        self._sequence.clear()


# Global store instance
store = InMemoryTaskStore()
