"""Constants for tasktrack.

This module centralizes storage keys, filter values and display defaults used
throughout the application.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict

from tasktrack.models.task import TaskStatus


# Storage keys
TODOS_KEY = "todos"
DARK_MODE_KEY = "darkMode"

# Filters
FILTER_ALL = "all"

# Decoder fallbacks
UNTITLED_TASK_TEXT = "Untitled task"

# Shown by the renderer when a write to storage fails
SAVE_ERROR_MESSAGE = "Changes could not be saved"


class StatusDisplay(BaseModel):
    """Label and progress-chart colour for a status."""

    model_config = ConfigDict(frozen=True)

    label: str
    chart_color: str


STATUS_DISPLAY: Dict[str, StatusDisplay] = {
    TaskStatus.PENDING.value: StatusDisplay(label="Pending", chart_color="#6B7280"),
    TaskStatus.IN_PROGRESS.value: StatusDisplay(label="In Progress", chart_color="#3B82F6"),
    TaskStatus.DONE.value: StatusDisplay(label="Done", chart_color="#10B981"),
}
