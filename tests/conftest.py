"""Pytest fixtures for the Task Tracker tests."""

import pytest
from fastapi.testclient import TestClient

from tasktracker.main import app
from tasktracker.service import TaskService
from tasktracker.store import InMemoryTaskStore, store


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    store.clear()
    return TestClient(app)


@pytest.fixture
def service() -> TaskService:
    """A task service over a fresh in-memory store."""
    return TaskService(InMemoryTaskStore())
