"""Status panel for confirmations and surfaced failures."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import RichLog


class OutputPanel(Widget):
    """Widget listing the outcome of each intent."""

    DEFAULT_CSS = """
    OutputPanel {
        height: 6;
        border: tall $primary;
    }
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.border_title = "Status"
        self.lines: list[str] = []

    def compose(self) -> ComposeResult:
        log = RichLog(id="output-log", highlight=False, markup=True, auto_scroll=True)
        yield log

    def write_line(self, text: str, style: str | None = None) -> None:
        self.lines.append(text)
        log = self.query_one("#output-log", RichLog)
        if style:
            log.write(f"[{style}]{text}[/{style}]")
        else:
            log.write(text)

    def write_error(self, error: str) -> None:
        self.write_line(f"ERROR: {error}", style="bold red")

    def write_success(self, message: str) -> None:
        self.write_line(f"✓ {message}", style="bold green")

    def write_warning(self, message: str) -> None:
        self.write_line(f"⚠ {message}", style="bold yellow")
