# taskboard/models/task.py
from typing import Optional
from datetime import datetime
import uuid

from sqlmodel import SQLModel, Field

from core.priorities import DEFAULT_PRIORITY
from utils.datetime_utils import utc_now


def _new_id() -> str:
    return uuid.uuid4().hex


class Task(SQLModel, table=True):
    id: str = Field(default_factory=_new_id, primary_key=True)
    title: str
    description: str = ""
    priority: str = DEFAULT_PRIORITY.value   # low / medium / high
    due_date: Optional[datetime] = None
    completed: bool = False
    created_at: datetime = Field(default_factory=utc_now, index=True)
