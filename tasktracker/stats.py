"""Statistics over the task collection."""

import math
from collections.abc import Mapping

from tasktracker.models import TaskPriority, TaskStats, TaskStatus


def completion_rate(completed: int, total: int) -> int:
    """Percentage of completed tasks, rounded half up. Zero when empty."""
    if total <= 0:
        return 0
    return math.floor(completed * 100 / total + 0.5)


def summarize(
    total: int,
    status_counts: Mapping[str, int],
    priority_counts: Mapping[str, int],
) -> TaskStats:
    """Merge grouped counts into a snapshot keyed by every known value.

    Groups missing from the counts are reported as zero; keys outside the
    known vocabulary are dropped.
    """
    by_status = {status.value: int(status_counts.get(status.value, 0)) for status in TaskStatus}
    by_priority = {
        priority.value: int(priority_counts.get(priority.value, 0)) for priority in TaskPriority
    }
    return TaskStats(
        total=total,
        by_status=by_status,
        by_priority=by_priority,
        completion_rate=completion_rate(by_status[TaskStatus.COMPLETED.value], total),
    )
