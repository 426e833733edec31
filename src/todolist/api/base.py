"""Base abstractions for the remote task API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Mapping

from ..state.tasks import Task


class TodoError(Exception):
    """Base exception for to-do client errors."""


class NetworkError(TodoError):
    """Raised when a remote call could not complete."""


class NotFoundError(TodoError):
    """Raised when a task id is unknown locally or to the remote store."""

    def __init__(self, task_id: str, message: str | None = None) -> None:
        super().__init__(message or f"Task {task_id} not found")
        self.task_id = task_id


class ValidationError(TodoError):
    """Raised when an intent is rejected before reaching the remote store."""


class TaskAPI(ABC):
    """Capability consumed by the task store: list, create, update, delete."""

    @abstractmethod
    async def list(self) -> List[Task]:
        """Return every task in server order."""

    @abstractmethod
    async def create(self, text: str) -> Task:
        """Create a task and return the stored record."""

    @abstractmethod
    async def update(self, task_id: str, fields: Mapping[str, Any]) -> Task:
        """Apply ``fields`` to a task and return the server's version of it."""

    @abstractmethod
    async def delete(self, task_id: str) -> None:
        """Delete a task."""


def task_from_record(record: Any) -> Task:
    """Decode one wire record, raising NetworkError on malformed payloads."""
    if not isinstance(record, dict):
        raise NetworkError(f"Unexpected task record: {record!r}")
    try:
        return Task.from_dict(record)
    except (KeyError, TypeError, ValueError) as exc:
        raise NetworkError(f"Malformed task record: {exc}") from exc


def tasks_from_payload(payload: Any) -> List[Task]:
    """Decode a list payload; some servers wrap it as ``{"tasks": [...]}``."""
    if isinstance(payload, dict):
        payload = payload.get("tasks")
    if not isinstance(payload, list):
        raise NetworkError("Expected a list of tasks from the server")
    return [task_from_record(entry) for entry in payload]


__all__: List[str] = [
    "TodoError",
    "NetworkError",
    "NotFoundError",
    "ValidationError",
    "TaskAPI",
    "task_from_record",
    "tasks_from_payload",
]
