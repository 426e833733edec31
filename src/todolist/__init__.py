"""todolist - terminal client for a REST to-do list service."""

__version__ = "0.1.0"
__author__ = "todolist Contributors"

from .state import Task, TaskStore, TodoState
from .api import HttpTaskAPI, NetworkError, NotFoundError, TaskAPI, TodoError, ValidationError
from .config import Config

__all__ = [
    "Config",
    "Task",
    "TaskStore",
    "TodoState",
    "TaskAPI",
    "HttpTaskAPI",
    "TodoError",
    "NetworkError",
    "NotFoundError",
    "ValidationError",
]
