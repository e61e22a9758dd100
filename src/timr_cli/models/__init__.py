"""timr domain models.

This package contains the Pydantic models that represent tracked tasks.
They are used by the store for validation and (de)serialization and by the
service layer for lifecycle updates.
"""

from .task import Task, TaskIdentity

__all__ = [
    "Task",
    "TaskIdentity",
]
