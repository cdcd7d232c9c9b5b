# taskboard/storage/task_store.py
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlmodel import select

from core.priorities import normalize_priority
from models.schemas import TaskCreate, TaskUpdate
from models.task import Task
from storage.db import get_session

logger = logging.getLogger("taskboard.storage")


class TaskNotFoundError(LookupError):
    def __init__(self, task_id: str):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class TaskStore:
    """CRUD over the ``task`` table, keyed by the opaque string id."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def list_all(self) -> List[Task]:
        with get_session(self.engine) as session:
            stmt = select(Task).order_by(Task.created_at.desc())
            return list(session.exec(stmt))

    def get(self, task_id: str) -> Optional[Task]:
        with get_session(self.engine) as session:
            return session.get(Task, task_id)

    def add(self, data: TaskCreate) -> Task:
        with get_session(self.engine) as session:
            task = Task(
                title=data.title,
                description=data.description,
                priority=normalize_priority(data.priority).value,
                due_date=data.due_date,
            )
            session.add(task)
            session.commit()
            session.refresh(task)
            logger.info("Task created: %s", task.id)
            return task

    def replace(self, task_id: str, data: TaskUpdate) -> Task:
        """Overwrite every mutable field; ``id`` and ``created_at`` are kept."""
        with get_session(self.engine) as session:
            obj = session.get(Task, task_id)
            if not obj:
                raise TaskNotFoundError(task_id)
            obj.title = data.title
            obj.description = data.description
            obj.priority = normalize_priority(data.priority).value
            obj.due_date = data.due_date
            obj.completed = data.completed
            session.add(obj)
            session.commit()
            session.refresh(obj)
            logger.info("Task updated: %s", task_id)
            return obj

    def delete(self, task_id: str) -> None:
        with get_session(self.engine) as session:
            obj = session.get(Task, task_id)
            if not obj:
                raise TaskNotFoundError(task_id)
            session.delete(obj)
            session.commit()
            logger.info("Task deleted: %s", task_id)


__all__ = ["TaskNotFoundError", "TaskStore"]
