"""Task store: owns the to-do state and mediates every change through the API."""

from __future__ import annotations

from typing import Callable, List, Optional

from ..api.base import NotFoundError, TaskAPI, TodoError, ValidationError
from ..utils.logger import EventLog
from .tasks import Task, TodoState

Listener = Callable[[TodoState], None]


class TaskStore:
    """Single controller for the task list and pending input.

    State only changes after the remote call it depends on has succeeded.
    Results are applied to whatever state is current when they arrive, so
    overlapping intents resolve as last writer wins per task id.
    """

    def __init__(self, api: TaskAPI, logger: Optional[EventLog] = None) -> None:
        self.api = api
        self.logger = logger
        self._state = TodoState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> TodoState:
        return self._state

    @property
    def tasks(self) -> List[Task]:
        return list(self._state.tasks)

    @property
    def pending_input(self) -> str:
        return self._state.pending_input

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with each new state; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: TodoState) -> None:
        if state == self._state:
            return
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def _fail(self, operation: str, exc: TodoError, task_id: str | None = None) -> None:
        if self.logger:
            self.logger.log_failed(operation, str(exc), task_id=task_id)

    # ------------------------------------------------------------------ #
    # Intent handlers
    # ------------------------------------------------------------------ #
    async def initialize(self) -> List[Task]:
        """Load the task list from the remote store."""
        try:
            tasks = await self.api.list()
        except TodoError as exc:
            self._fail("list", exc)
            raise
        self._set_state(self._state.with_tasks(tasks))
        if self.logger:
            self.logger.log_loaded(tasks)
        return self.tasks

    def update_pending_input(self, text: str) -> None:
        self._set_state(self._state.with_pending_input(text))

    async def submit(self) -> Task:
        """Create a task from the pending input."""
        text = self._state.pending_input
        if not text:
            exc = ValidationError("Task text is required")
            self._fail("create", exc)
            raise exc

        try:
            task = await self.api.create(text)
        except TodoError as exc:
            self._fail("create", exc)
            raise

        state = self._state.append_task(task)
        # Input typed while the request was in flight is kept.
        if state.pending_input == text:
            state = state.with_pending_input("")
        self._set_state(state)
        if self.logger:
            self.logger.log_created(task)
        return task

    async def toggle_completion(self, task_id: str) -> Task:
        """Flip a task's completed flag; the server's reply is authoritative."""
        current = self._state.get(task_id)
        if current is None:
            exc = NotFoundError(task_id)
            self._fail("update", exc, task_id)
            raise exc

        try:
            updated = await self.api.update(task_id, {"completed": not current.completed})
        except TodoError as exc:
            self._fail("update", exc, task_id)
            raise

        self._set_state(self._state.replace_task(updated))
        if self.logger:
            self.logger.log_toggled(updated)
        return updated

    async def remove_task(self, task_id: str) -> None:
        """Delete a task remotely, then drop it from the list."""
        if task_id not in self._state:
            exc = NotFoundError(task_id)
            self._fail("delete", exc, task_id)
            raise exc

        try:
            await self.api.delete(task_id)
        except TodoError as exc:
            self._fail("delete", exc, task_id)
            raise

        self._set_state(self._state.remove_task(task_id))
        if self.logger:
            self.logger.log_deleted(task_id)
