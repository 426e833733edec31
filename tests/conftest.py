from __future__ import annotations

from pathlib import Path

import pytest

from todolist.state.store import TaskStore
from todolist.state.tasks import Task
from todolist.utils.logger import EventLog

from .fakes import FakeTaskAPI


@pytest.fixture
def seeded_api() -> FakeTaskAPI:
    return FakeTaskAPI(
        [
            Task(id="1", text="A", completed=False, created_at="2024-01-01T00:00:00Z"),
            Task(id="2", text="B", completed=True, created_at="2024-01-01T01:00:00Z"),
            Task(id="3", text="C", completed=False),
        ]
    )


@pytest.fixture
def event_log(tmp_path: Path) -> EventLog:
    return EventLog(tmp_path / "logs" / "events.log")


@pytest.fixture
def store(seeded_api: FakeTaskAPI, event_log: EventLog) -> TaskStore:
    return TaskStore(seeded_api, logger=event_log)
