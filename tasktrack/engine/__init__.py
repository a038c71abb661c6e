"""Derived views for tasktrack."""

from tasktrack.engine.filtering import filter_tasks, all_used_tags
from tasktrack.engine.stats import StatusCounts, count_by_status, completion_percentage
from tasktrack.engine.deadlines import is_overdue, days_until

__all__ = [
    "filter_tasks",
    "all_used_tags",
    "StatusCounts",
    "count_by_status",
    "completion_percentage",
    "is_overdue",
    "days_until",
]
