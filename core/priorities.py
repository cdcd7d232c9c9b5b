# taskboard/core/priorities.py
"""Utility helpers for task priorities."""
from __future__ import annotations

from enum import Enum
from typing import Dict


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


PRIORITY_META: Dict[Priority, Dict[str, str]] = {
    Priority.LOW: {
        "label": "Low",
        "color": "#0EA5E9",    # sky-500
        "bgcolor": "#E0F2FE",  # sky-100
    },
    Priority.MEDIUM: {
        "label": "Medium",
        "color": "#F59E0B",    # amber-500
        "bgcolor": "#FEF3C7",  # amber-100
    },
    Priority.HIGH: {
        "label": "High",
        "color": "#EF4444",    # red-500
        "bgcolor": "#FEE2E2",  # red-100
    },
}

DEFAULT_PRIORITY = Priority.MEDIUM


def normalize_priority(value: Priority | str | None) -> Priority:
    """Map external values onto a supported priority, falling back to the default."""
    if value is None:
        return DEFAULT_PRIORITY
    if isinstance(value, Priority):
        return value
    try:
        return Priority(str(value).strip().lower())
    except ValueError:
        return DEFAULT_PRIORITY


def priority_label(value: Priority | str) -> str:
    return PRIORITY_META[normalize_priority(value)]["label"]


def priority_color(value: Priority | str) -> str:
    return PRIORITY_META[normalize_priority(value)]["color"]


def priority_bgcolor(value: Priority | str) -> str:
    return PRIORITY_META[normalize_priority(value)]["bgcolor"]


def priority_options() -> Dict[str, str]:
    """Return mapping of dropdown values -> labels."""
    return {level.value: meta["label"] for level, meta in PRIORITY_META.items()}
