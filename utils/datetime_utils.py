# taskboard/utils/datetime_utils.py
"""Helpers for UTC timestamps and the date-only values shown in the UI."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Optional, Union

UTC = timezone.utc

DATE_INPUT_FORMATS = ("%Y-%m-%d", "%d.%m.%Y")


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def utc_now() -> datetime:
    return datetime.now(UTC)


def midnight_utc(d: date) -> datetime:
    return datetime.combine(d, time.min, tzinfo=UTC)


def to_rfc3339_utc(dt: Optional[datetime]) -> Optional[str]:
    """Render a datetime as RFC3339 in UTC with second precision (``...Z``)."""

    dt = ensure_utc(dt)
    if dt is None:
        return None
    return dt.replace(microsecond=0).isoformat().replace("+00:00", "Z")


def parse_date_input(value: str | None) -> Optional[date]:
    """Parse ISO ``YYYY-MM-DD`` or ``DD.MM.YYYY`` into a ``date``.

    A full timestamp is accepted too; only the part before ``T`` is used.
    """

    if not value:
        return None
    text = value.strip()
    if not text:
        return None
    if "T" in text:
        text = text.split("T", 1)[0]

    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def date_only(value: Union[date, datetime, str, None]) -> str:
    """Return ``YYYY-MM-DD`` for a date/datetime (or its string form), ``""`` if unset."""

    if value is None:
        return ""
    if isinstance(value, datetime):
        return ensure_utc(value).date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    parsed = parse_date_input(str(value))
    return parsed.isoformat() if parsed else ""


def local_display(dt: Optional[datetime]) -> str:
    """Format a UTC timestamp in the local timezone for list rows."""

    dt = ensure_utc(dt)
    if dt is None:
        return ""
    return dt.astimezone().strftime("%d.%m.%Y %H:%M")


__all__ = [
    "UTC",
    "date_only",
    "ensure_utc",
    "local_display",
    "midnight_utc",
    "parse_date_input",
    "to_rfc3339_utc",
    "utc_now",
]
