from datetime import datetime, timezone

from todolist.interactive.render import can_submit, format_timestamp, render_rows
from todolist.state.tasks import Task, TodoState


def test_rows_follow_list_order_and_flags() -> None:
    state = TodoState().with_tasks(
        [
            Task(id="1", text="A", completed=False, created_at="2024-01-01T00:00:00Z"),
            Task(id="2", text="B", completed=True),
        ]
    )

    rows = render_rows(state)

    assert [r.task_id for r in rows] == ["1", "2"]
    assert rows[0].checked is False
    assert rows[0].css_class == "task-text"
    assert rows[1].checked is True
    assert rows[1].css_class == "task-text completed"
    assert rows[1].timestamp == ""


def test_timestamp_uses_local_locale_format() -> None:
    expected = datetime(2024, 1, 1, tzinfo=timezone.utc).astimezone().strftime("%c")

    assert format_timestamp("2024-01-01T00:00:00Z") == expected
    assert format_timestamp("2024-01-01T00:00:00.000Z") == expected


def test_missing_or_bad_timestamp_renders_empty() -> None:
    assert format_timestamp(None) == ""
    assert format_timestamp("") == ""
    assert format_timestamp("not a date") == ""


def test_submit_enabled_only_with_text() -> None:
    assert can_submit("") is False
    assert can_submit("x") is True
