"""
Pytest configuration for Showroom tests.

Django settings come from pyproject.toml (showroom.settings_test, sqlite in
memory). Shared factories for Project rows and ProjectDTOs live here.
"""

import logging
from datetime import timedelta
from uuid import uuid4

import pytest
from django.test import Client
from django.utils import timezone

from showroom.core.enums import ProjectCategory, ProjectStatus
from showroom.core.models import Project
from showroom.projects.dto import ProjectDTO


@pytest.fixture
def client():
    """Django test client fixture."""
    return Client()


@pytest.fixture
def make_project(db):
    """
    Factory for Project rows.

    Each call is created one minute newer than the previous one, so
    newest-first ordering is deterministic within a test.
    """
    created = []

    def _make(**fields) -> Project:
        defaults = {
            "name": f"Project {len(created) + 1}",
            "description": "A test project",
            "category": ProjectCategory.FEATURED,
            "status": ProjectStatus.LIVE,
        }
        defaults.update(fields)
        project = Project.objects.create(**defaults)
        created_at = timezone.now() + timedelta(minutes=len(created))
        Project.objects.filter(id=project.id).update(created_at=created_at)
        project.refresh_from_db()
        created.append(project)
        return project

    return _make


@pytest.fixture
def make_dto():
    """Factory for in-memory ProjectDTOs (no database)."""

    def _make(**fields) -> ProjectDTO:
        defaults = {
            "id": uuid4(),
            "name": "Test Project",
            "description": "A test project",
            "category": ProjectCategory.FEATURED,
            "status": ProjectStatus.LIVE,
        }
        defaults.update(fields)
        return ProjectDTO.model_validate(defaults)

    return _make


class MockLogHandler(logging.Handler):
    """A custom handler to capture log records for testing."""

    def __init__(self):
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)

    def clear(self):
        self.records.clear()

    def page_events(self, operation: str | None = None) -> list[logging.LogRecord]:
        return [
            r for r in self.records
            if r.getMessage() == "page_event"
            and (operation is None or r.operation == operation)
        ]


@pytest.fixture
def page_log_handler():
    """
    Fixture that captures logs from the showroom.pages logger.

    The showroom logger does not propagate, so the handler is attached
    directly instead of relying on caplog.
    """
    handler = MockLogHandler()
    handler.setLevel(logging.INFO)

    pages_logger = logging.getLogger("showroom.pages")
    previous_level = pages_logger.level
    pages_logger.addHandler(handler)
    pages_logger.setLevel(logging.INFO)

    yield handler

    pages_logger.removeHandler(handler)
    pages_logger.setLevel(previous_level)
    handler.clear()
