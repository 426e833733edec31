import asyncio

import pytest

from todolist.api.base import NetworkError, NotFoundError, ValidationError
from todolist.state.store import TaskStore
from todolist.state.tasks import Task, TodoState

from .fakes import FakeTaskAPI, offline


def _ids(store: TaskStore) -> list:
    return [t.id for t in store.tasks]


def test_initialize_loads_server_order(store: TaskStore) -> None:
    tasks = asyncio.run(store.initialize())

    assert [t.text for t in tasks] == ["A", "B", "C"]
    assert _ids(store) == ["1", "2", "3"]


def test_initialize_failure_keeps_empty_list() -> None:
    api = FakeTaskAPI()
    api.fail_next = offline()
    store = TaskStore(api)

    with pytest.raises(NetworkError):
        asyncio.run(store.initialize())
    assert store.tasks == []


def test_submit_appends_created_task_and_clears_input(store: TaskStore, seeded_api: FakeTaskAPI) -> None:
    asyncio.run(store.initialize())
    before = len(store.tasks)

    store.update_pending_input("Buy milk")
    task = asyncio.run(store.submit())

    assert len(store.tasks) == before + 1
    assert store.tasks[-1] == task
    assert task.text == "Buy milk"
    assert task.completed is False
    assert task.created_at == "2024-01-02T10:00:00Z"
    assert store.pending_input == ""
    assert ("create", "Buy milk") in seeded_api.calls


def test_submit_with_empty_input_never_calls_create(store: TaskStore, seeded_api: FakeTaskAPI) -> None:
    asyncio.run(store.initialize())

    with pytest.raises(ValidationError):
        asyncio.run(store.submit())
    assert seeded_api.called("create") == 0
    assert len(store.tasks) == 3


def test_submit_failure_keeps_pending_input(store: TaskStore, seeded_api: FakeTaskAPI) -> None:
    asyncio.run(store.initialize())
    store.update_pending_input("Write report")
    seeded_api.fail_next = offline()

    with pytest.raises(NetworkError):
        asyncio.run(store.submit())
    assert store.pending_input == "Write report"
    assert len(store.tasks) == 3


def test_pending_input_is_stored_verbatim(store: TaskStore) -> None:
    store.update_pending_input("  spaced  ")
    assert store.pending_input == "  spaced  "


def test_toggle_marks_only_target_completed(store: TaskStore) -> None:
    asyncio.run(store.initialize())
    others_before = [t for t in store.tasks if t.id != "1"]

    updated = asyncio.run(store.toggle_completion("1"))

    assert updated.completed is True
    assert store.state.get("1").completed is True
    assert [t for t in store.tasks if t.id != "1"] == others_before


def test_toggle_sends_inverse_of_current_flag(store: TaskStore, seeded_api: FakeTaskAPI) -> None:
    asyncio.run(store.initialize())

    asyncio.run(store.toggle_completion("2"))

    assert ("update", "2", {"completed": False}) in seeded_api.calls
    assert store.state.get("2").completed is False


def test_toggle_uses_server_value(store: TaskStore, seeded_api: FakeTaskAPI) -> None:
    asyncio.run(store.initialize())
    # another client edited the text in the meantime
    seeded_api.records["1"] = Task(id="1", text="A (edited)", completed=False, created_at="2024-01-01T00:00:00Z")

    asyncio.run(store.toggle_completion("1"))

    assert store.state.get("1").text == "A (edited)"


def test_toggle_failure_leaves_state_unchanged(store: TaskStore, seeded_api: FakeTaskAPI) -> None:
    asyncio.run(store.initialize())
    before = store.state
    seeded_api.fail_next = offline()

    with pytest.raises(NetworkError):
        asyncio.run(store.toggle_completion("1"))
    assert store.state == before


def test_remove_drops_exactly_one(store: TaskStore) -> None:
    asyncio.run(store.initialize())

    asyncio.run(store.remove_task("2"))

    assert "2" not in _ids(store)
    assert len(store.tasks) == 2


def test_remove_failure_leaves_list_unchanged(store: TaskStore, seeded_api: FakeTaskAPI) -> None:
    asyncio.run(store.initialize())
    seeded_api.fail_next = offline()

    with pytest.raises(NetworkError):
        asyncio.run(store.remove_task("2"))
    assert _ids(store) == ["1", "2", "3"]


@pytest.mark.parametrize("operation", ["toggle_completion", "remove_task"])
def test_unknown_id_raises_not_found(store: TaskStore, seeded_api: FakeTaskAPI, operation: str) -> None:
    asyncio.run(store.initialize())
    calls_before = len(seeded_api.calls)

    with pytest.raises(NotFoundError) as excinfo:
        asyncio.run(getattr(store, operation)("missing"))

    assert excinfo.value.task_id == "missing"
    assert _ids(store) == ["1", "2", "3"]
    assert len(seeded_api.calls) == calls_before


def test_remote_not_found_propagates(store: TaskStore, seeded_api: FakeTaskAPI) -> None:
    asyncio.run(store.initialize())
    del seeded_api.records["3"]

    with pytest.raises(NotFoundError):
        asyncio.run(store.remove_task("3"))
    assert "3" in _ids(store)


def test_listeners_receive_each_new_state(store: TaskStore) -> None:
    seen: list = []
    unsubscribe = store.subscribe(seen.append)

    asyncio.run(store.initialize())
    store.update_pending_input("x")
    unsubscribe()
    store.update_pending_input("y")

    assert len(seen) == 2
    assert all(isinstance(s, TodoState) for s in seen)
    assert seen[-1].pending_input == "x"


def test_failed_intent_does_not_notify(store: TaskStore, seeded_api: FakeTaskAPI) -> None:
    asyncio.run(store.initialize())
    seen: list = []
    store.subscribe(seen.append)
    seeded_api.fail_next = offline()

    with pytest.raises(NetworkError):
        asyncio.run(store.remove_task("1"))
    assert seen == []


def test_overlapping_intents_apply_in_completion_order(store: TaskStore) -> None:
    async def scenario() -> None:
        await store.initialize()
        await asyncio.gather(store.toggle_completion("1"), store.remove_task("3"))

    asyncio.run(scenario())

    assert _ids(store) == ["1", "2"]
    assert store.state.get("1").completed is True


def test_store_writes_event_log(store: TaskStore, event_log, seeded_api: FakeTaskAPI) -> None:
    asyncio.run(store.initialize())
    store.update_pending_input("Buy milk")
    asyncio.run(store.submit())
    asyncio.run(store.toggle_completion("1"))
    asyncio.run(store.remove_task("2"))
    seeded_api.fail_next = offline()
    with pytest.raises(NetworkError):
        asyncio.run(store.remove_task("3"))

    events = [entry["event"] for entry in event_log.read_entries()]
    assert events == ["loaded", "created", "toggled", "deleted", "failed"]
    failed = event_log.read_entries()[-1]
    assert failed["operation"] == "delete"
    assert failed["task_id"] == "3"
    created = event_log.read_entries()[1]
    assert created["task"]["task"] == "Buy milk"
    assert created["task"]["_id"] == created["task_id"]
