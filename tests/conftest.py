"""
Pytest configuration and fixtures for test suite.
"""

import os
import pytest

# Set test environment variables before importing the app
os.environ["APP_ENV"] = "development"
os.environ["LOG_FORMAT"] = "console"
os.environ["LOG_LEVEL"] = "warning"

from fastapi.testclient import TestClient
from src.main import create_app
from src.repositories.reminder_repository import ReminderRepository


@pytest.fixture
def repository():
    """Empty reminder store, owned by the app under test."""
    return ReminderRepository()


@pytest.fixture
def client(repository):
    """FastAPI test client backed by a fresh store."""
    return TestClient(create_app(repository=repository))


@pytest.fixture
def sample_reminder():
    """Create payload for a single reminder."""
    return {
        "id": "r1",
        "title": "Pay rent",
        "description": "Monthly rent",
        "dueDate": "2024-01-01T00:00:00Z",
        "isCompleted": False
    }


@pytest.fixture
def create_reminder(client, sample_reminder):
    """Factory that POSTs a reminder built from the sample, with overrides."""
    def _create(**overrides):
        payload = {**sample_reminder, **overrides}
        response = client.post("/reminders", json=payload)
        assert response.status_code == 201, response.text
        return payload
    return _create
