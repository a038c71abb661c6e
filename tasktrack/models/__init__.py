"""Data models for tasktrack."""

from tasktrack.models.task import Task, TaskStatus, STATUS_VALUES
from tasktrack.models.tags import TagInfo, TAG_CATALOG, resolve_tag, resolve_tags
from tasktrack.models.task_factory import create_task, new_task_id

__all__ = [
    "Task",
    "TaskStatus",
    "STATUS_VALUES",
    "TagInfo",
    "TAG_CATALOG",
    "resolve_tag",
    "resolve_tags",
    "create_task",
    "new_task_id",
]
