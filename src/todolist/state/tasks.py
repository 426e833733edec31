"""Task records and the immutable to-do list state."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class Task:
    """Represents a single to-do item as stored by the remote API."""

    id: str
    text: str
    completed: bool = False
    created_at: Optional[str] = None

    def to_dict(self) -> Dict:
        """Convert to the wire representation."""
        data: Dict = {"_id": self.id, "task": self.text, "completed": self.completed}
        if self.created_at:
            data["createdAt"] = self.created_at
        return data

    @staticmethod
    def from_dict(data: Dict) -> "Task":
        """Create from a wire record (``_id``/``task``/``createdAt``)."""
        task_id = data.get("_id", data.get("id"))
        if task_id is None or task_id == "":
            raise KeyError("_id")
        completed = data.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"completed must be a boolean, got {completed!r}")
        created_at = data.get("createdAt")
        return Task(
            id=str(task_id),
            text=str(data.get("task", "")),
            completed=completed,
            created_at=str(created_at) if created_at else None,
        )


def _unique(tasks: Iterable[Task]) -> Tuple[Task, ...]:
    # dict keeps the first position of a key and the last value assigned to it
    by_id: Dict[str, Task] = {}
    for task in tasks:
        by_id[task.id] = task
    return tuple(by_id.values())


@dataclass(frozen=True)
class TodoState:
    """Snapshot of the task list and the not-yet-submitted input.

    Every method returns a new state; instances are never mutated.
    """

    tasks: Tuple[Task, ...] = field(default_factory=tuple)
    pending_input: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "tasks", _unique(self.tasks))

    def __contains__(self, task_id: object) -> bool:
        return any(task.id == task_id for task in self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    def get(self, task_id: str) -> Optional[Task]:
        """Get task by id."""
        return next((task for task in self.tasks if task.id == task_id), None)

    def with_tasks(self, tasks: Iterable[Task]) -> "TodoState":
        return replace(self, tasks=tuple(tasks))

    def append_task(self, task: Task) -> "TodoState":
        """Append a task, or overwrite it in place if the id is already listed."""
        if task.id in self:
            return self.replace_task(task)
        return replace(self, tasks=self.tasks + (task,))

    def replace_task(self, task: Task) -> "TodoState":
        """Swap in a new version of a listed task; unknown ids are ignored."""
        return replace(self, tasks=tuple(task if t.id == task.id else t for t in self.tasks))

    def remove_task(self, task_id: str) -> "TodoState":
        return replace(self, tasks=tuple(t for t in self.tasks if t.id != task_id))

    def with_pending_input(self, text: str) -> "TodoState":
        return replace(self, pending_input=text)
