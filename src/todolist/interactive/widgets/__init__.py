"""Interactive mode widgets."""

from .task_form import TaskForm
from .task_list import TaskListWidget, TaskRow
from .output_panel import OutputPanel

__all__ = [
    "TaskForm",
    "TaskListWidget",
    "TaskRow",
    "OutputPanel",
]
