"""Pure rendering helpers that turn a TodoState into row view models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ..state.tasks import TodoState


@dataclass(frozen=True)
class TaskRowView:
    task_id: str
    text: str
    checked: bool
    timestamp: str
    css_class: str


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``."""
    if not value:
        return None
    raw = value.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


def format_timestamp(value: Optional[str]) -> str:
    """Locale date-time string in local time, or "" when absent or unparseable."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return ""
    # naive values are treated as local time by astimezone()
    return parsed.astimezone().strftime("%c")


def render_rows(state: TodoState) -> List[TaskRowView]:
    rows: List[TaskRowView] = []
    for task in state.tasks:
        rows.append(
            TaskRowView(
                task_id=task.id,
                text=task.text,
                checked=task.completed,
                timestamp=format_timestamp(task.created_at),
                css_class="task-text completed" if task.completed else "task-text",
            )
        )
    return rows


def can_submit(pending_input: str) -> bool:
    return bool(pending_input)
