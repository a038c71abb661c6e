"""Persistence layer for tasktrack."""

from tasktrack.storage.backends import KeyValueStore, MemoryKeyValueStore, JsonFileKeyValueStore
from tasktrack.storage.codec import decode_task, decode_task_list, decode_tasks, encode_task, encode_tasks
from tasktrack.storage.database import SqlKeyValueStore
from tasktrack.storage.task_store import TaskStore

__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "SqlKeyValueStore",
    "decode_task",
    "decode_task_list",
    "decode_tasks",
    "encode_task",
    "encode_tasks",
    "TaskStore",
]
