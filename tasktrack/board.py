"""Task board: the interface a renderer talks to.

Wraps a TaskStore and the derived views. Views are recomputed from the
store on every call, so counts always match the list they describe.
Storage failures never escape a board call; they are logged and exposed
as `save_error` so the renderer can show a "could not save" notice.
"""

import json
import logging
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel

from tasktrack.engine.filtering import all_used_tags, filter_tasks
from tasktrack.engine.stats import completion_percentage, count_by_status
from tasktrack.errors import PersistenceError
from tasktrack.models.constants import DARK_MODE_KEY, FILTER_ALL, SAVE_ERROR_MESSAGE
from tasktrack.models.tags import TagInfo, resolve_tag
from tasktrack.models.task import Task, TaskStatus
from tasktrack.storage.backends import KeyValueStore
from tasktrack.storage.task_store import DateInput, TaskStore

logger = logging.getLogger(__name__)


class BoardStats(BaseModel):
    """Counts plus completion percentage (None when there are no tasks)."""
    pending: int
    in_progress: int
    done: int
    total: int
    completion_percentage: Optional[int]


class TaskBoard:
    def __init__(self, store: TaskStore, storage: Optional[KeyValueStore] = None):
        self.store = store
        self._storage = storage
        self._dark_mode = False
        self.save_error: Optional[str] = None

    @classmethod
    def open(cls, storage: KeyValueStore) -> "TaskBoard":
        """Create a board on `storage` and load saved tasks and preferences.

        A storage read failure starts the session empty with `save_error` set;
        a failed write-back of ids assigned at load keeps the loaded tasks
        and also sets `save_error`.
        """
        board = cls(TaskStore(storage), storage=storage)
        try:
            board.store.load()
        except PersistenceError:
            board.save_error = SAVE_ERROR_MESSAGE
        board._dark_mode = board._load_dark_mode()
        return board

    # ---- intents ----

    def add_task(
        self,
        text: str,
        tags: Union[Iterable[str], str] = (),
        start_date: DateInput = None,
        deadline: DateInput = None,
        assignee: Optional[str] = None,
    ) -> Optional[Task]:
        """Add a task; None when text is blank."""
        task = None
        try:
            task = self.store.add(text, tags=tags, start_date=start_date, deadline=deadline, assignee=assignee)
        except PersistenceError:
            # Task is in memory even though the write failed
            task = self.store.tasks[0]
            self._save_failed()
        else:
            if task is not None:
                self.save_error = None
        return task

    def set_task_status(self, task_id: str, status: Union[TaskStatus, str]) -> None:
        self._run(self.store.set_status, task_id, status)

    def delete_task(self, task_id: str) -> None:
        self._run(self.store.remove, task_id)

    def clear_done(self) -> int:
        """Remove all done tasks; returns how many were removed."""
        before = len(self.store)
        self._run(self.store.clear_done)
        return before - len(self.store)

    # ---- views ----

    @property
    def tasks(self) -> List[Task]:
        return list(self.store.tasks)

    def get_filtered_view(self, status_filter: str = FILTER_ALL, tag_filter: str = FILTER_ALL) -> List[Task]:
        return filter_tasks(self.store.tasks, status_filter, tag_filter)

    def get_stats(self) -> BoardStats:
        tasks = self.store.tasks
        counts = count_by_status(tasks)
        return BoardStats(
            pending=counts.pending,
            in_progress=counts.in_progress,
            done=counts.done,
            total=counts.total,
            completion_percentage=completion_percentage(tasks),
        )

    def get_used_tags(self) -> List[str]:
        return all_used_tags(self.store.tasks)

    @staticmethod
    def resolve_tag(tag_id: str) -> Optional[TagInfo]:
        return resolve_tag(tag_id)

    # ---- presentation preference ----

    @property
    def dark_mode(self) -> bool:
        return self._dark_mode

    def set_dark_mode(self, enabled: bool) -> None:
        self._dark_mode = bool(enabled)
        if self._storage is None:
            return
        try:
            self._storage.save(DARK_MODE_KEY, json.dumps(self._dark_mode))
        except Exception as e:
            logger.error(f"Failed to save {DARK_MODE_KEY}: {type(e).__name__}: {str(e)}")
            self._save_failed()

    def _load_dark_mode(self) -> bool:
        if self._storage is None:
            return False
        try:
            raw = self._storage.load(DARK_MODE_KEY)
        except Exception as e:
            logger.error(f"Failed to load {DARK_MODE_KEY}: {type(e).__name__}: {str(e)}")
            return False
        if raw is None:
            return False
        try:
            value = json.loads(raw)
        except ValueError:
            logger.debug(f"Unreadable {DARK_MODE_KEY} value {raw!r}; using light mode")
            return False
        return value is True

    # ---- helpers ----

    def _run(self, operation, *args) -> None:
        try:
            changed = operation(*args)
        except PersistenceError:
            self._save_failed()
            return
        if changed:
            self.save_error = None

    def _save_failed(self) -> None:
        self.save_error = SAVE_ERROR_MESSAGE
