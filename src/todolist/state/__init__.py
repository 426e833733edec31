"""State management modules."""

from .tasks import Task, TodoState
from .store import TaskStore

__all__ = ["Task", "TodoState", "TaskStore"]
