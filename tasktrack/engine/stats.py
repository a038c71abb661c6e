"""Status counts and completion percentage."""

from typing import Optional, Sequence

from pydantic import BaseModel

from tasktrack.models.task import Task, TaskStatus


class StatusCounts(BaseModel):
    """Tasks per status."""
    pending: int = 0
    in_progress: int = 0
    done: int = 0
    total: int = 0


def count_by_status(tasks: Sequence[Task]) -> StatusCounts:
    """Partition counts for the collection."""
    counts = StatusCounts(total=len(tasks))
    for task in tasks:
        if task.status == TaskStatus.PENDING:
            counts.pending += 1
        elif task.status == TaskStatus.IN_PROGRESS:
            counts.in_progress += 1
        elif task.status == TaskStatus.DONE:
            counts.done += 1
    return counts


def completion_percentage(tasks: Sequence[Task]) -> Optional[int]:
    """Share of done tasks as a whole percentage.

    Rounds halves up (12.5 -> 13). Returns None for an empty collection,
    where the progress view is not shown at all.
    """
    counts = count_by_status(tasks)
    if counts.total == 0:
        return None
    return (counts.done * 200 + counts.total) // (2 * counts.total)
