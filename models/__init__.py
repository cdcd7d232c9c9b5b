# taskboard/models/__init__.py
"""ORM and wire models exposed by the Taskboard application."""
from .task import Task
from .schemas import TaskCreate, TaskRead, TaskUpdate

__all__ = ["Task", "TaskCreate", "TaskRead", "TaskUpdate"]
