"""Turns loose list parameters into a ``TaskQuery``."""

from enum import Enum

from tasktracker.models import (
    SortDirection,
    SortField,
    TaskPriority,
    TaskQuery,
    TaskStatus,
)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _filter_value(enum: type[Enum], value: str | None) -> Enum | str | None:
    # Unknown values are passed through and match nothing.
    value = _clean(value)
    if value is None:
        return None
    try:
        return enum(value)
    except ValueError:
        return value


def compose_query(
    status: str | None = None,
    priority: str | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
) -> TaskQuery:
    """Build the descriptor used for ``TaskRepository.find``.

    ``sort_by`` outside the sortable fields falls back to ``createdAt``.
    ``sort_order`` of ``desc`` (the default) sorts descending, anything else
    ascending.
    """
    try:
        sort_field = SortField(_clean(sort_by) or SortField.CREATED_AT.value)
    except ValueError:
        sort_field = SortField.CREATED_AT

    order = _clean(sort_order) or SortDirection.DESC.value
    sort_direction = SortDirection.DESC if order == "desc" else SortDirection.ASC

    return TaskQuery(
        status=_filter_value(TaskStatus, status),
        priority=_filter_value(TaskPriority, priority),
        sort_field=sort_field,
        sort_direction=sort_direction,
    )
