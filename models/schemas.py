# taskboard/models/schemas.py
"""JSON shapes exchanged between the Task API and its clients.

Field names are snake_case in Python and camelCase on the wire
(``due_date`` <-> ``dueDate``). Timestamps are emitted as RFC3339 UTC.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from core.priorities import DEFAULT_PRIORITY, Priority
from utils.datetime_utils import ensure_utc, midnight_utc, parse_date_input, to_rfc3339_utc

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskCreate(_CamelModel):
    title: Title
    description: str = ""
    priority: Priority = DEFAULT_PRIORITY
    due_date: Optional[datetime] = None

    @field_validator("description", mode="before")
    @classmethod
    def _strip_description(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("due_date", mode="before")
    @classmethod
    def _coerce_due_date(cls, value: Any) -> Any:
        # the form sends a bare date; the store keeps midnight UTC
        if value in (None, ""):
            return None
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return midnight_utc(value)
        if isinstance(value, str) and "T" not in value:
            parsed = parse_date_input(value)
            if parsed is not None:
                return midnight_utc(parsed)
        return value

    @field_validator("due_date")
    @classmethod
    def _due_date_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)


class TaskUpdate(TaskCreate):
    """Full replacement body for ``PUT``; ``id``/``createdAt`` in the body are ignored."""

    completed: bool = False


class TaskRead(_CamelModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    title: str
    description: str = ""
    priority: Priority = DEFAULT_PRIORITY
    due_date: Optional[datetime] = None
    completed: bool = False
    created_at: datetime

    @field_validator("due_date", "created_at")
    @classmethod
    def _as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)

    @field_serializer("due_date", "created_at", when_used="json")
    def _rfc3339(self, value: Optional[datetime]) -> Optional[str]:
        return to_rfc3339_utc(value)

    def to_payload(self) -> dict[str, Any]:
        """The full JSON representation, as sent back in a ``PUT``."""
        return self.model_dump(by_alias=True, mode="json")


__all__ = ["TaskCreate", "TaskRead", "TaskUpdate"]
