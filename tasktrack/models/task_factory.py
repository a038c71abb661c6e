"""Builds new tasks for the store.

Fresh tasks always start pending, get a uuid4 id and are stamped with the
current UTC time unless the caller supplies one.
"""

import uuid
from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional, Union

from tasktrack.models.task import Task, TaskStatus
from tasktrack.models.dates import utc_now


def new_task_id() -> str:
    """Generate a new task id (UUID v4)."""
    return str(uuid.uuid4())


def create_task_defaults() -> Dict[str, Any]:
    """Field values a task takes when the caller leaves them out."""
    return {
        "status": TaskStatus.PENDING,
        "tags": (),
        "start_date": None,
        "deadline": None,
        "assignee": None,
    }


def create_task(
    text: str,
    tags: Union[Iterable[str], str, None] = None,
    start_date: Optional[date] = None,
    deadline: Optional[date] = None,
    assignee: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Task:
    """Create a new pending task with a fresh id.

    Args:
        text: Task text (required, trimmed by the model)
        tags: Tag ids (a single string is one id); blanks and duplicates are dropped
        start_date: Optional start date
        deadline: Optional deadline
        assignee: Optional assignee (blank means unassigned)
        now: Creation time (defaults to the current UTC time)

    Returns:
        Task object with defaults applied

    Raises:
        pydantic.ValidationError: if text is empty after trimming
    """
    defaults = create_task_defaults()

    return Task(
        id=new_task_id(),
        text=text,
        status=defaults["status"],
        created_at=now or utc_now(),
        tags=tags if tags is not None else defaults["tags"],
        start_date=start_date if start_date is not None else defaults["start_date"],
        deadline=deadline if deadline is not None else defaults["deadline"],
        assignee=assignee if assignee is not None else defaults["assignee"],
    )
