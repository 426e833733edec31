"""Form for entering a new task."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Input

from ..render import can_submit


class TaskForm(Widget):
    """Input bound to the pending task text plus the add button."""

    DEFAULT_CSS = """
    TaskForm {
        height: auto;
        margin: 0 0 1 0;
    }

    TaskForm Horizontal {
        height: auto;
    }

    TaskForm #task-input {
        width: 1fr;
    }

    TaskForm #add-task-button {
        width: auto;
        min-width: 12;
    }
    """

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Input(placeholder="Add New TO-DO", id="task-input")
            yield Button("ADD TASK", variant="primary", id="add-task-button", disabled=True)

    def sync(self, pending_input: str) -> None:
        """Reflect the store's pending input without re-announcing it."""
        input_widget = self.query_one("#task-input", Input)
        if input_widget.value != pending_input:
            with input_widget.prevent(Input.Changed):
                input_widget.value = pending_input
        self.query_one("#add-task-button", Button).disabled = not can_submit(pending_input)

    def focus_input(self) -> None:
        self.query_one("#task-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "task-input":
            return
        event.stop()
        self.query_one("#add-task-button", Button).disabled = not can_submit(event.value)
        self.post_message(self.PendingInputChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "task-input":
            return
        event.stop()
        # required field: Enter on an empty input is ignored
        if event.value:
            self.post_message(self.SubmitRequested())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-task-button":
            event.stop()
            self.post_message(self.SubmitRequested())

    class PendingInputChanged(Message):
        """Message sent when the new-task text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class SubmitRequested(Message):
        """Message sent when the user asks to add the pending task."""
