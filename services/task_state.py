# taskboard/services/task_state.py
"""In-memory task state for the UI, kept in step with the Task API.

Local state changes only after the remote call succeeds; a failed call
propagates to the caller and leaves ``tasks``/``editing`` untouched.
"""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from models.schemas import TaskRead
from services.api_client import TaskApiClient

logger = logging.getLogger("taskboard.state")

Listener = Callable[["TaskBoardState"], None]
ConfirmFn = Callable[[], Awaitable[bool]]


class TaskBoardState:
    def __init__(self, api: TaskApiClient):
        self.api = api
        self.tasks: List[TaskRead] = []
        self.editing: Optional[TaskRead] = None
        self.loading: bool = True
        self._listeners: list[Listener] = []

    # ---------- listeners ----------
    def subscribe(self, callback: Listener) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _emit(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("State listener %r failed", listener)

    # ---------- remote operations ----------
    async def load_all(self) -> None:
        self.loading = True
        self._emit()
        try:
            self.tasks = await self.api.list_tasks()
            logger.info("Loaded %d tasks", len(self.tasks))
        finally:
            self.loading = False
            self._emit()

    async def create(self, payload: Dict[str, Any]) -> TaskRead:
        task = await self.api.create_task(payload)
        self.tasks = [task, *self.tasks]
        self._emit()
        return task

    async def update(self, task_id: str, payload: Dict[str, Any]) -> TaskRead:
        task = await self.api.update_task(task_id, payload)
        self.tasks = [task if t.id == task_id else t for t in self.tasks]
        self.editing = None
        self._emit()
        return task

    async def delete(self, task_id: str, confirm: ConfirmFn) -> bool:
        """Delete after ``confirm`` resolves to True; returns False if declined."""
        if not await confirm():
            logger.debug("Delete of %s declined", task_id)
            return False
        await self.api.delete_task(task_id)
        self.tasks = [t for t in self.tasks if t.id != task_id]
        if self.editing is not None and self.editing.id == task_id:
            self.editing = None
        self._emit()
        return True

    async def toggle_complete(self, task: TaskRead) -> None:
        payload = task.to_payload()
        payload["completed"] = not task.completed
        await self.api.update_task(task.id, payload)
        self.tasks = [
            t.model_copy(update={"completed": not t.completed}) if t.id == task.id else t
            for t in self.tasks
        ]
        self._emit()

    # ---------- form wiring ----------
    async def save(self, payload: Dict[str, Any]) -> TaskRead:
        """Save callback for the task form: update the edit target or create a new task."""
        if self.editing is not None:
            # merge onto the listed copy: a toggle since start_edit must not be undone
            current = next((t for t in self.tasks if t.id == self.editing.id), self.editing)
            merged = {**current.to_payload(), **payload}
            return await self.update(self.editing.id, merged)
        return await self.create(payload)

    def start_edit(self, task: TaskRead) -> None:
        self.editing = task
        self._emit()

    def cancel_edit(self) -> None:
        if self.editing is None:
            return
        self.editing = None
        self._emit()


__all__ = ["TaskBoardState"]
