"""Task store: owns the live task collection."""

import logging
from datetime import date
from typing import Iterable, List, Optional, Tuple, Union

from tasktrack.errors import PersistenceError
from tasktrack.models.constants import TODOS_KEY
from tasktrack.models.dates import parse_date
from tasktrack.models.task import Task, TaskStatus
from tasktrack.models.task_factory import create_task
from tasktrack.storage.backends import KeyValueStore
from tasktrack.storage.codec import decode_task_list, encode_tasks

logger = logging.getLogger(__name__)

DateInput = Union[date, str, None]


class TaskStore:
    """Ordered task collection (newest first) mirrored to key-value storage.

    Every mutation rewrites the whole collection under one key. A failed
    write raises PersistenceError but keeps the mutation in memory, which
    stays the source of truth for the running session.
    """

    def __init__(self, storage: KeyValueStore, key: str = TODOS_KEY):
        self._storage = storage
        self._key = key
        self._tasks: List[Task] = []

    @property
    def key(self) -> str:
        return self._key

    @property
    def tasks(self) -> Tuple[Task, ...]:
        """Snapshot of the collection, newest first."""
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def load(self) -> None:
        """Replace the collection with what storage holds.

        Ids assigned while decoding (missing or duplicate in storage) are
        written back once, so they stay the same on the next load.

        Raises:
            PersistenceError: if the read fails, or the write-back of
                assigned ids fails (the decoded collection is kept)
        """
        try:
            payload = self._storage.load(self._key)
        except Exception as e:
            logger.error(f"Failed to load key {self._key}: {type(e).__name__}: {str(e)}")
            raise PersistenceError(f"could not load {self._key}", self._key) from e

        self._tasks, reassigned = decode_task_list(payload)
        logger.info(f"Loaded {len(self._tasks)} tasks from key {self._key}")
        if reassigned:
            logger.info(f"Assigned {reassigned} new task ids; saving them back")
            self._persist()

    def add(
        self,
        text: str,
        tags: Union[Iterable[str], str] = (),
        start_date: DateInput = None,
        deadline: DateInput = None,
        assignee: Optional[str] = None,
    ) -> Optional[Task]:
        """Create a pending task at the front of the collection.

        Blank text is ignored and returns None. Blank or unreadable dates and
        a blank assignee are stored as absent.
        """
        if not text or not text.strip():
            logger.debug("Ignoring add with empty text")
            return None

        task = create_task(
            text=text,
            tags=tags,
            start_date=parse_date(start_date),
            deadline=parse_date(deadline),
            assignee=assignee,
        )
        self._tasks.insert(0, task)
        logger.debug(f"Created task {task.id}: {task.text[:50]}")
        self._persist()
        return task

    def set_status(self, task_id: str, status: Union[TaskStatus, str]) -> bool:
        """Replace the status of a task; False when the id is unknown.

        Raises:
            ValueError: if status is not a known TaskStatus value
        """
        new_status = TaskStatus(status)
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                self._tasks[index] = task.model_copy(update={"status": new_status.value})
                logger.debug(f"Task {task_id} status {task.status} -> {new_status.value}")
                self._persist()
                return True
        logger.debug(f"set_status: task {task_id} not found")
        return False

    def remove(self, task_id: str) -> bool:
        """Delete a task; False when the id is unknown."""
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[index]
                logger.debug(f"Removed task {task_id}")
                self._persist()
                return True
        logger.debug(f"remove: task {task_id} not found")
        return False

    def clear_done(self) -> int:
        """Delete every done task, keeping the rest in order.

        Returns:
            Number of tasks removed
        """
        remaining = [task for task in self._tasks if task.status != TaskStatus.DONE]
        removed = len(self._tasks) - len(remaining)
        if removed == 0:
            return 0
        self._tasks = remaining
        logger.debug(f"Cleared {removed} done tasks")
        self._persist()
        return removed

    def _persist(self) -> None:
        payload = encode_tasks(self._tasks)
        try:
            self._storage.save(self._key, payload)
        except Exception as e:
            logger.error(f"Failed to save {len(self._tasks)} tasks: {type(e).__name__}: {str(e)}")
            raise PersistenceError(f"could not save {self._key}", self._key) from e
