"""Textual application for the to-do list."""

from __future__ import annotations

from typing import Callable, Optional

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Static

from .render import render_rows
from .widgets import OutputPanel, TaskForm, TaskListWidget
from ..api.base import NotFoundError, TodoError
from ..config import DEFAULT_VERSION_LABEL
from ..state.store import TaskStore
from ..state.tasks import TodoState


class TodoApp(App):
    """Single-screen to-do list backed by a TaskStore."""

    TITLE = "My To-Do List"

    CSS = """
    Screen {
        layout: vertical;
        overflow: hidden;
    }

    #app-header {
        height: 3;
        content-align: center middle;
        text-style: bold;
        background: $primary;
        color: $text;
    }

    #todo-container {
        height: 1fr;
        padding: 1 2;
        border: tall $primary;
    }

    #version-footer {
        height: 1;
        content-align: right middle;
        color: $text-muted;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "focus_input", "New Task"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, store: TaskStore, version_label: Optional[str] = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.store = store
        self.version_label = version_label or DEFAULT_VERSION_LABEL
        self._unsubscribe: Optional[Callable[[], None]] = None

    def compose(self) -> ComposeResult:
        yield Static("My To-Do List", id="app-header")

        self.task_form = TaskForm(id="task-form")
        self.task_list = TaskListWidget(id="task-list-widget")
        self.output_panel = OutputPanel(id="output-panel")

        with Vertical(id="todo-container"):
            yield self.task_form
            yield self.task_list
        yield self.output_panel
        yield Static(self.version_label, id="version-footer")
        yield Footer()

    async def on_mount(self) -> None:
        self._unsubscribe = self.store.subscribe(self.render_state)
        self.render_state(self.store.state)
        self.task_form.focus_input()
        self.run_worker(self._load_tasks(), exclusive=False)

    def on_unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    def render_state(self, state: TodoState) -> None:
        """Re-render from a state snapshot; called on every store change."""
        self.task_list.update_rows(render_rows(state))
        self.task_form.sync(state.pending_input)

    async def _load_tasks(self) -> None:
        try:
            tasks = await self.store.initialize()
        except TodoError as exc:
            self.output_panel.write_error(f"Could not load tasks: {escape(str(exc))}")
            return
        self.output_panel.write_line(f"[dim]Loaded {len(tasks)} task(s)[/dim]")

    # ------------------------------------------------------------------ #
    # Intents from widgets
    # ------------------------------------------------------------------ #
    def on_task_form_pending_input_changed(self, event: TaskForm.PendingInputChanged) -> None:
        self.store.update_pending_input(event.value)

    def on_task_form_submit_requested(self, event: TaskForm.SubmitRequested) -> None:
        self.run_worker(self._submit())

    def on_task_list_widget_toggle_requested(self, event: TaskListWidget.ToggleRequested) -> None:
        self.run_worker(self._toggle(event.task_id))

    def on_task_list_widget_delete_requested(self, event: TaskListWidget.DeleteRequested) -> None:
        self.run_worker(self._delete(event.task_id))

    async def _submit(self) -> None:
        try:
            task = await self.store.submit()
        except TodoError as exc:
            self.output_panel.write_error(f"Could not add task: {escape(str(exc))}")
            return
        self.output_panel.write_success(f"Added: {escape(task.text)}")

    async def _toggle(self, task_id: str) -> None:
        try:
            task = await self.store.toggle_completion(task_id)
        except NotFoundError as exc:
            self.output_panel.write_warning(f"Could not update task: {escape(str(exc))}")
            return
        except TodoError as exc:
            self.output_panel.write_error(f"Could not update task: {escape(str(exc))}")
            return
        state = "done" if task.completed else "not done"
        self.output_panel.write_success(f"Marked {escape(task.text)} as {state}")

    async def _delete(self, task_id: str) -> None:
        try:
            await self.store.remove_task(task_id)
        except NotFoundError as exc:
            self.output_panel.write_warning(f"Could not delete task: {escape(str(exc))}")
            return
        except TodoError as exc:
            self.output_panel.write_error(f"Could not delete task: {escape(str(exc))}")
            return
        self.output_panel.write_success("Task deleted")

    def action_focus_input(self) -> None:
        self.task_form.focus_input()
