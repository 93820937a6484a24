"""Tests for building list queries."""

import pytest

from tasktracker.models import SortDirection, SortField, TaskPriority, TaskStatus
from tasktracker.query import compose_query


def test_defaults() -> None:
    query = compose_query()
    assert query.status is None
    assert query.priority is None
    assert query.sort_field is SortField.CREATED_AT
    assert query.sort_direction is SortDirection.DESC


def test_empty_filters_mean_no_filter() -> None:
    query = compose_query(status="", priority="  ")
    assert query.status is None
    assert query.priority is None


def test_known_filters_are_normalized() -> None:
    query = compose_query(status="in-progress", priority="high")
    assert query.status == TaskStatus.IN_PROGRESS
    assert query.priority == TaskPriority.HIGH


def test_unknown_filters_pass_through() -> None:
    query = compose_query(status="archived", priority="urgent")
    assert query.status == "archived"
    assert query.priority == "urgent"


@pytest.mark.parametrize("sort_by", ["title", "dueDate", "createdAt"])
def test_recognized_sort_fields(sort_by: str) -> None:
    assert compose_query(sort_by=sort_by).sort_field.value == sort_by


@pytest.mark.parametrize("sort_by", ["description", "__class__", "created_at", "priority"])
def test_unrecognized_sort_field_falls_back(sort_by: str) -> None:
    assert compose_query(sort_by=sort_by).sort_field is SortField.CREATED_AT


@pytest.mark.parametrize(
    ("sort_order", "expected"),
    [
        (None, SortDirection.DESC),
        ("desc", SortDirection.DESC),
        ("asc", SortDirection.ASC),
        ("DESC", SortDirection.ASC),
        ("sideways", SortDirection.ASC),
    ],
)
def test_sort_direction(sort_order, expected: SortDirection) -> None:
    assert compose_query(sort_order=sort_order).sort_direction is expected


def test_sort_field_maps_to_attribute() -> None:
    assert SortField.DUE_DATE.attribute == "due_date"
    assert SortField.CREATED_AT.attribute == "created_at"
