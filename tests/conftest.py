from __future__ import annotations

from datetime import datetime, timedelta
from itertools import count
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from models.schemas import TaskCreate, TaskRead, TaskUpdate
from services.api_client import TaskApiClient
from storage.db import create_db_engine, init_db
from storage.task_store import TaskStore
from utils.datetime_utils import UTC

BASE = datetime(2025, 1, 1, 9, 0, tzinfo=UTC)


@pytest.fixture()
def store(tmp_path: Path) -> TaskStore:
    engine = create_db_engine(tmp_path / "tasks.db")
    init_db(engine)
    return TaskStore(engine)


@pytest.fixture()
def app(store: TaskStore):
    return create_app(store)


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def api_client(app) -> TaskApiClient:
    """Async API client talking to the real FastAPI app in-process."""
    http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver/api")
    return TaskApiClient(http)


class FakeTaskApi:
    """In-memory stand-in for :class:`TaskApiClient` that records calls."""

    def __init__(self, tasks: Optional[List[TaskRead]] = None):
        self.tasks: List[TaskRead] = list(tasks or [])
        self.calls: list[tuple] = []
        self.fail_with: Optional[Exception] = None
        self._ids = count(100)
        self.http = SimpleNamespace(base_url="http://fake/api")
        self.closed = False

    async def aclose(self) -> None:
        self.closed = True

    def _maybe_fail(self):
        if self.fail_with is not None:
            raise self.fail_with

    async def list_tasks(self) -> List[TaskRead]:
        self.calls.append(("list",))
        self._maybe_fail()
        return list(self.tasks)

    async def create_task(self, payload: Dict[str, Any]) -> TaskRead:
        self.calls.append(("create", payload))
        self._maybe_fail()
        body = TaskCreate.model_validate(payload)
        n = next(self._ids)
        task = TaskRead(
            id=f"t{n}",
            created_at=BASE + timedelta(minutes=n),
            **body.model_dump(),
        )
        self.tasks.insert(0, task)
        return task

    async def update_task(self, task_id: str, payload: Dict[str, Any]) -> TaskRead:
        self.calls.append(("update", task_id, payload))
        self._maybe_fail()
        body = TaskUpdate.model_validate(payload)
        old = next(t for t in self.tasks if t.id == task_id)
        task = TaskRead(id=old.id, created_at=old.created_at, **body.model_dump())
        self.tasks = [task if t.id == task_id else t for t in self.tasks]
        return task

    async def delete_task(self, task_id: str) -> None:
        self.calls.append(("delete", task_id))
        self._maybe_fail()
        self.tasks = [t for t in self.tasks if t.id != task_id]


def make_task(task_id: str, title: str = "Task", **fields) -> TaskRead:
    fields.setdefault("created_at", BASE)
    return TaskRead(id=task_id, title=title, **fields)


@pytest.fixture()
def fake_api() -> FakeTaskApi:
    return FakeTaskApi(
        [
            make_task("c", "Third", created_at=BASE + timedelta(hours=2)),
            make_task("b", "Second", created_at=BASE + timedelta(hours=1), completed=True),
            make_task("a", "First"),
        ]
    )
