"""tasktrack: local task tracking with status lifecycle, tags and deadlines."""

from tasktrack.board import TaskBoard, BoardStats
from tasktrack.errors import TaskTrackError, PersistenceError
from tasktrack.models import Task, TaskStatus, TagInfo, TAG_CATALOG, resolve_tag
from tasktrack.storage import TaskStore, MemoryKeyValueStore, JsonFileKeyValueStore, SqlKeyValueStore

__version__ = "0.1.0"

__all__ = [
    "TaskBoard",
    "BoardStats",
    "TaskTrackError",
    "PersistenceError",
    "Task",
    "TaskStatus",
    "TagInfo",
    "TAG_CATALOG",
    "resolve_tag",
    "TaskStore",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "SqlKeyValueStore",
]
