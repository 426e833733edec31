"""Remote task API adapters."""

from .base import NetworkError, NotFoundError, TaskAPI, TodoError, ValidationError
from .http import HttpTaskAPI

__all__ = ["TaskAPI", "HttpTaskAPI", "TodoError", "NetworkError", "NotFoundError", "ValidationError"]
