"""Task list widget for interactive mode."""

from __future__ import annotations

from typing import List

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Button, Checkbox, Static

from ..render import TaskRowView


class TaskRow(Horizontal):
    """One task: checkbox, text with timestamp, delete button."""

    DEFAULT_CSS = """
    TaskRow {
        height: auto;
        margin: 0 0 1 0;
        background: $panel;
    }

    TaskRow Checkbox {
        width: auto;
    }

    TaskRow .task-body {
        width: 1fr;
        height: auto;
        padding: 0 1;
    }

    TaskRow .completed {
        text-style: strike;
        color: $text-muted;
    }

    TaskRow .timestamp {
        color: $text-muted;
    }

    TaskRow Button {
        width: auto;
        min-width: 10;
    }
    """

    def __init__(self, row: TaskRowView, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.row_view = row

    @property
    def task_id(self) -> str:
        return self.row_view.task_id

    def compose(self) -> ComposeResult:
        yield Checkbox(value=self.row_view.checked, classes="task-checkbox")
        with Vertical(classes="task-body"):
            yield Static(self.row_view.text, classes=self.row_view.css_class, markup=False)
            yield Static(self.row_view.timestamp, classes="timestamp")
        yield Button("Delete", variant="error", classes="delete-task-btn")

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        """Undo the local flip and ask the store; the row is rebuilt on success."""
        event.stop()
        with event.checkbox.prevent(Checkbox.Changed):
            event.checkbox.value = self.row_view.checked
        self.post_message(TaskListWidget.ToggleRequested(self.task_id))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(TaskListWidget.DeleteRequested(self.task_id))


class TaskListWidget(Widget):
    """Widget displaying one row per task, in list order."""

    DEFAULT_CSS = """
    TaskListWidget {
        height: 1fr;
    }

    TaskListWidget VerticalScroll {
        height: 100%;
    }
    """

    rows: List[TaskRowView] = reactive([], layout=True)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.border_title = "Tasks"

    def compose(self) -> ComposeResult:
        yield VerticalScroll(id="tasks-list")

    def watch_rows(self, rows: List[TaskRowView]) -> None:
        container = self.query_one("#tasks-list", VerticalScroll)
        container.remove_children()
        if rows:
            container.mount_all([TaskRow(row) for row in rows])

    def update_rows(self, rows: List[TaskRowView]) -> None:
        self.rows = list(rows)

    class ToggleRequested(Message):
        """Message sent when a task's checkbox is clicked."""

        def __init__(self, task_id: str) -> None:
            super().__init__()
            self.task_id = task_id

    class DeleteRequested(Message):
        """Message sent when a task's delete button is pressed."""

        def __init__(self, task_id: str) -> None:
            super().__init__()
            self.task_id = task_id
