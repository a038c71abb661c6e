"""Filtering logic for tasktrack.

Filters combine with AND: a task is shown only if it passes both the status
filter and the tag filter. "all" disables a filter.
"""

from typing import Iterable, List, Sequence

from tasktrack.models.constants import FILTER_ALL
from tasktrack.models.task import STATUS_VALUES, Task, TaskStatus


def _matches_status(task: Task, status_filter: str) -> bool:
    return status_filter == FILTER_ALL or task.status == status_filter


def _matches_tag(task: Task, tag_filter: str) -> bool:
    return tag_filter == FILTER_ALL or tag_filter in task.tags


def filter_tasks(tasks: Iterable[Task], status_filter: str = FILTER_ALL, tag_filter: str = FILTER_ALL) -> List[Task]:
    """Select tasks matching both filters, in collection order.

    Args:
        tasks: Task collection
        status_filter: "all" or a TaskStatus value
        tag_filter: "all" or a tag id (need not be in the catalog)

    Returns:
        Matching tasks, order preserved

    Raises:
        ValueError: if status_filter is not "all" or a known status
    """
    if isinstance(status_filter, TaskStatus):
        status_filter = status_filter.value
    if status_filter != FILTER_ALL and status_filter not in STATUS_VALUES:
        raise ValueError(f"Unknown status filter: {status_filter!r}")

    return [
        task for task in tasks
        if _matches_status(task, status_filter) and _matches_tag(task, tag_filter)
    ]


def all_used_tags(tasks: Sequence[Task]) -> List[str]:
    """Union of tags across tasks, in first-seen order.

    Only tags actually in use are offered as tag-filter choices.
    """
    seen = set()
    used: List[str] = []
    for task in tasks:
        for tag in task.tags:
            if tag not in seen:
                seen.add(tag)
                used.append(tag)
    return used
