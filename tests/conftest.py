"""Pytest fixtures and configuration for tasktrack tests."""

import pytest
from datetime import date, datetime, timedelta, timezone
import uuid

from tasktrack.models.task import Task, TaskStatus
from tasktrack.storage.backends import MemoryKeyValueStore
from tasktrack.storage.task_store import TaskStore

from fakes import FailingKeyValueStore


@pytest.fixture
def memory_storage():
    """Empty in-memory key-value store."""
    return MemoryKeyValueStore()


@pytest.fixture
def failing_storage():
    """Key-value store that rejects every write."""
    return FailingKeyValueStore()


@pytest.fixture
def task_store(memory_storage):
    """TaskStore on an empty in-memory store."""
    return TaskStore(memory_storage)


@pytest.fixture
def today():
    return date(2024, 3, 15)


@pytest.fixture
def sample_task_base():
    """Keyword arguments for a pending, untagged task; override per test."""
    return {
        "id": str(uuid.uuid4()),
        "text": "Test Task",
        "status": TaskStatus.PENDING,
        "created_at": datetime(2024, 3, 1, 9, 30, 0, 123000, tzinfo=timezone.utc),
        "tags": [],
        "start_date": None,
        "deadline": None,
        "assignee": None,
    }


@pytest.fixture
def sample_task(sample_task_base):
    """Pending task built from `sample_task_base`."""
    return Task(**sample_task_base)


@pytest.fixture
def full_task(sample_task_base):
    """Task with every optional field set."""
    return Task(**{
        **sample_task_base,
        "text": "File taxes",
        "status": TaskStatus.IN_PROGRESS,
        "tags": ["finance", "urgent"],
        "start_date": date(2024, 3, 10),
        "deadline": date(2024, 4, 15),
        "assignee": "Sam",
    })


@pytest.fixture
def mixed_tasks(sample_task_base):
    """Collection with one task per status plus a tagged pending task (newest first)."""
    def make(text, status, tags):
        return Task(**{**sample_task_base, "id": str(uuid.uuid4()), "text": text, "status": status, "tags": tags})

    return [
        make("Buy milk", TaskStatus.PENDING, ["shopping"]),
        make("Write report", TaskStatus.IN_PROGRESS, ["work"]),
        make("Pay rent", TaskStatus.DONE, ["finance"]),
        make("Call mom", TaskStatus.PENDING, ["personal", "urgent"]),
    ]


@pytest.fixture
def yesterday():
    return date.today() - timedelta(days=1)
