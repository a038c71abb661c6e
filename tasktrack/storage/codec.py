"""JSON codec for the persisted task list.

Stored records may come from any earlier version of the app: tasks saved
before statuses existed only carry a `completed` flag, optional fields may be
missing or stored as empty strings, and unknown keys may be present. Every
record is normalized into a valid Task; nothing here raises on bad input.
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from tasktrack.models.constants import UNTITLED_TASK_TEXT
from tasktrack.models.dates import format_timestamp, parse_date, parse_timestamp, utc_now
from tasktrack.models.task import STATUS_VALUES, Task, TaskStatus
from tasktrack.models.task_factory import new_task_id

logger = logging.getLogger(__name__)


def _decode_status(raw: Mapping[str, Any]) -> TaskStatus:
    """Resolve status, migrating the legacy `completed` flag."""
    status = raw.get("status")
    if isinstance(status, str) and status in STATUS_VALUES:
        return TaskStatus(status)
    if raw.get("completed"):
        return TaskStatus.DONE
    return TaskStatus.PENDING


def _stored_id(value: Any) -> Optional[str]:
    """Id carried by a stored record, or None when it has no usable one."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    # Older versions used millisecond timestamps as ids
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


def _decode_text(value: Any) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return UNTITLED_TASK_TEXT


def _decode_tags(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [tag for tag in value if isinstance(tag, str) and tag.strip()]


def _optional_text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _optional_date(value: Any):
    if not isinstance(value, str):
        return None
    return parse_date(value)


def decode_task(raw: Any, now: Optional[datetime] = None) -> Task:
    """Normalize one stored record into a Task.

    Args:
        raw: Parsed JSON value for a single task (any shape)
        now: Fallback creation time when `createdAt` is missing or unreadable

    Returns:
        A valid Task; missing or malformed fields fall back to defaults
    """
    if not isinstance(raw, Mapping):
        logger.debug(f"Stored task is a {type(raw).__name__}, not an object; using defaults")
        raw = {}

    created_at = parse_timestamp(raw.get("createdAt"))
    if created_at is None:
        logger.debug(f"Unreadable createdAt {raw.get('createdAt')!r}; using current time")
        created_at = now or utc_now()

    return Task(
        id=_stored_id(raw.get("id")) or new_task_id(),
        text=_decode_text(raw.get("text")),
        status=_decode_status(raw),
        created_at=created_at,
        tags=_decode_tags(raw.get("tags")),
        start_date=_optional_date(raw.get("startDate")),
        deadline=_optional_date(raw.get("deadline")),
        assignee=_optional_text(raw.get("assignee")),
    )


def decode_task_list(payload: Optional[str], now: Optional[datetime] = None) -> Tuple[List[Task], int]:
    """Decode the stored task list and count ids assigned while decoding.

    A missing value, invalid JSON or a non-array value gives an empty list.
    Records sharing an id keep the first one as-is; later ones get fresh ids,
    as do records without a usable id.

    Returns:
        (tasks, reassigned) where reassigned is the number of tasks whose id
        differs from what storage holds
    """
    if payload is None:
        return [], 0
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        logger.warning(f"Stored task list is not valid JSON ({type(e).__name__}); starting empty")
        return [], 0
    if not isinstance(data, list):
        logger.warning(f"Stored task list is a {type(data).__name__}, not an array; starting empty")
        return [], 0

    tasks: List[Task] = []
    seen = set()
    reassigned = 0
    for raw in data:
        task = decode_task(raw, now=now)
        if not isinstance(raw, Mapping) or _stored_id(raw.get("id")) is None:
            reassigned += 1
        elif task.id in seen:
            fresh_id = new_task_id()
            logger.warning(f"Duplicate task id {task.id} in storage; re-keyed as {fresh_id}")
            task = task.model_copy(update={"id": fresh_id})
            reassigned += 1
        seen.add(task.id)
        tasks.append(task)
    return tasks, reassigned


def decode_tasks(payload: Optional[str], now: Optional[datetime] = None) -> List[Task]:
    """Decode the stored task list (see `decode_task_list`)."""
    tasks, _ = decode_task_list(payload, now=now)
    return tasks


def encode_task(task: Task) -> Dict[str, Any]:
    """Canonical stored form of a task (optional fields only when set)."""
    data: Dict[str, Any] = {
        "id": task.id,
        "text": task.text,
        "status": TaskStatus(task.status).value,
        "createdAt": format_timestamp(task.created_at),
        "tags": list(task.tags),
    }
    if task.start_date is not None:
        data["startDate"] = task.start_date.isoformat()
    if task.deadline is not None:
        data["deadline"] = task.deadline.isoformat()
    if task.assignee is not None:
        data["assignee"] = task.assignee
    return data


def encode_tasks(tasks: Sequence[Task]) -> str:
    """Serialize the whole collection as one JSON array."""
    return json.dumps([encode_task(task) for task in tasks], ensure_ascii=False)
