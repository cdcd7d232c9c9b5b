import httpx
import pytest

from conftest import make_task
from services.task_state import TaskBoardState


async def _yes():
    return True


async def _no():
    return False


@pytest.mark.asyncio
async def test_load_all_replaces_tasks_and_clears_loading(fake_api):
    state = TaskBoardState(fake_api)
    seen = []
    state.subscribe(lambda s: seen.append(s.loading))

    assert state.loading is True
    await state.load_all()

    assert [t.id for t in state.tasks] == ["c", "b", "a"]
    assert state.loading is False
    assert seen == [True, False]


@pytest.mark.asyncio
async def test_load_all_failure_propagates_and_resets_loading(fake_api):
    state = TaskBoardState(fake_api)
    fake_api.fail_with = httpx.ConnectError("down")

    with pytest.raises(httpx.ConnectError):
        await state.load_all()
    assert state.loading is False
    assert state.tasks == []


@pytest.mark.asyncio
async def test_create_prepends_returned_task(fake_api):
    state = TaskBoardState(fake_api)
    await state.load_all()

    task = await state.create({"title": "Buy milk", "description": "", "priority": "medium", "dueDate": None})

    assert state.tasks[0] == task
    assert task.id and task.created_at
    assert len(state.tasks) == 4


@pytest.mark.asyncio
async def test_update_replaces_entry_and_clears_editing(fake_api):
    state = TaskBoardState(fake_api)
    await state.load_all()
    state.start_edit(state.tasks[1])

    updated = await state.update("b", {"title": "Second v2", "priority": "high", "completed": True})

    assert state.editing is None
    assert state.tasks[1] == updated
    assert updated.title == "Second v2"
    assert [t.id for t in state.tasks] == ["c", "b", "a"]


@pytest.mark.asyncio
async def test_toggle_flips_exactly_one_task(fake_api):
    state = TaskBoardState(fake_api)
    await state.load_all()
    before = {t.id: t.completed for t in state.tasks}

    await state.toggle_complete(state.tasks[2])

    after = {t.id: t.completed for t in state.tasks}
    assert after["a"] is (not before["a"])
    assert after["b"] == before["b"]
    assert after["c"] == before["c"]
    _, task_id, payload = fake_api.calls[-1]
    assert task_id == "a"
    assert payload["completed"] is True
    assert payload["title"] == "First"


@pytest.mark.asyncio
async def test_delete_confirmed_removes_one(fake_api):
    state = TaskBoardState(fake_api)
    await state.load_all()

    assert await state.delete("b", _yes) is True

    assert [t.id for t in state.tasks] == ["c", "a"]
    assert ("delete", "b") in fake_api.calls


@pytest.mark.asyncio
async def test_delete_declined_issues_no_call(fake_api):
    state = TaskBoardState(fake_api)
    await state.load_all()

    assert await state.delete("b", _no) is False

    assert len(state.tasks) == 3
    assert all(call[0] != "delete" for call in fake_api.calls)


@pytest.mark.asyncio
async def test_failed_mutation_leaves_state_unchanged(fake_api):
    state = TaskBoardState(fake_api)
    await state.load_all()
    state.start_edit(state.tasks[0])
    snapshot = list(state.tasks)
    fake_api.fail_with = httpx.ConnectError("down")

    with pytest.raises(httpx.ConnectError):
        await state.save({"title": "x", "description": "", "priority": "low", "dueDate": None})
    with pytest.raises(httpx.ConnectError):
        await state.delete("a", _yes)
    with pytest.raises(httpx.ConnectError):
        await state.toggle_complete(state.tasks[0])

    assert state.tasks == snapshot
    assert state.editing is snapshot[0]


@pytest.mark.asyncio
async def test_save_merges_form_payload_into_edit_target(fake_api):
    state = TaskBoardState(fake_api)
    await state.load_all()
    state.start_edit(state.tasks[1])

    await state.save({"title": "Renamed", "description": "d", "priority": "low", "dueDate": None})

    _, task_id, payload = fake_api.calls[-1]
    assert task_id == "b"
    assert payload["completed"] is True  # carried over from the edit target
    assert payload["title"] == "Renamed"
    assert state.editing is None


@pytest.mark.asyncio
async def test_save_without_edit_target_creates(fake_api):
    state = TaskBoardState(fake_api)
    await state.load_all()

    task = await state.save({"title": "New", "description": "", "priority": "medium", "dueDate": None})

    assert state.tasks[0] == task
    assert fake_api.calls[-1][0] == "create"


def test_cancel_edit_notifies_once(fake_api):
    state = TaskBoardState(fake_api)
    events = []
    state.subscribe(lambda s: events.append(s.editing))

    state.cancel_edit()
    state.start_edit(make_task("x"))
    state.cancel_edit()

    assert [e.id if e else None for e in events] == ["x", None]


@pytest.mark.asyncio
async def test_end_to_end_against_api(api_client):
    state = TaskBoardState(api_client)
    await state.load_all()
    assert state.tasks == []

    a = await state.create({"title": "A", "description": "", "priority": "medium", "dueDate": None})
    b = await state.create({"title": "B", "description": "", "priority": "high", "dueDate": "2025-02-03"})
    assert [t.id for t in state.tasks] == [b.id, a.id]

    assert await state.delete(a.id, _yes) is True
    assert [t.id for t in state.tasks] == [b.id]

    await state.load_all()
    assert [t.id for t in state.tasks] == [b.id]
    assert state.tasks[0].due_date.date().isoformat() == "2025-02-03"


@pytest.mark.asyncio
async def test_remote_404_propagates(api_client):
    state = TaskBoardState(api_client)
    await state.load_all()

    with pytest.raises(httpx.HTTPStatusError) as info:
        await state.update("missing", {"title": "x"})
    assert info.value.response.status_code == 404


@pytest.mark.asyncio
async def test_save_after_toggle_keeps_toggled_flag(fake_api):
    state = TaskBoardState(fake_api)
    await state.load_all()
    editing = state.tasks[2]
    state.start_edit(editing)

    await state.toggle_complete(editing)
    assert state.editing is editing
    updated = await state.save({"title": "First v2", "description": "", "priority": "medium", "dueDate": None})

    assert updated.completed is True
    assert fake_api.calls[-1][2]["completed"] is True
