"""Status transition policy.

Transitions are unrestricted: any state may move to any other, and
``completed`` is not terminal, so a finished task can be reopened.
"""

from typing import Any

from tasktracker.errors import InvalidStatusError
from tasktracker.models import TaskStatus

INITIAL_STATUS = TaskStatus.PENDING


def parse_status(value: Any) -> TaskStatus:
    """Return the state named by ``value`` or raise ``InvalidStatusError``."""
    if isinstance(value, TaskStatus):
        return value
    if not isinstance(value, str):
        raise InvalidStatusError(value)
    try:
        return TaskStatus(value)
    except ValueError:
        raise InvalidStatusError(value) from None


def status_change(value: Any) -> dict[str, TaskStatus]:
    """Build the status-only change applied by the status shortcut.

    The fragment matches what a full update carrying only ``status`` yields,
    so both paths persist the same state.
    """
    return {"status": parse_status(value)}
