"""Repository abstraction layer for timr.

This module defines the abstract base class (interface) for task storage,
following the hexagonal architecture (Ports & Adapters) pattern.

The store owns the on-disk representation of task records; the service layer
only holds transient copies for the duration of one operation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from timr_cli.models import Task, TaskIdentity

TaskPredicate = Callable[[Task], bool]


class TaskStore(ABC):
    """Abstract base class for task persistence operations.

    Records are kept newest first: ``prepend`` puts a new record in front of
    all existing ones and ``read_all`` returns them in that order.
    """

    @abstractmethod
    def read_all(self) -> list[Task]:
        """Load every stored task, newest first.

        Returns:
            List of Task objects in storage order

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            CorruptRecordError: If any stored record cannot be decoded
            StoreIOError: If the storage cannot be read
        """
        raise NotImplementedError("TaskStore.read_all() must be implemented by adapter")

    @abstractmethod
    def prepend(self, task: Task) -> Task:
        """Store a new task in front of all existing records.

        Args:
            task: Task to persist

        Returns:
            The stored task

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            StoreIOError: If the storage cannot be written
        """
        raise NotImplementedError("TaskStore.prepend() must be implemented by adapter")

    @abstractmethod
    def replace_by_identity(
        self, task: Task, identity: TaskIdentity | None = None
    ) -> Task:
        """Replace the first stored record matching an identity.

        Args:
            task: Replacement record
            identity: ``(task_name, date, time_start)`` of the record to
                replace; defaults to ``task.identity``

        Returns:
            The stored replacement

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            RecordMismatchError: If no stored record has that identity
        """
        raise NotImplementedError(
            "TaskStore.replace_by_identity() must be implemented by adapter"
        )

    def find(self, predicate: TaskPredicate) -> Task | None:
        """Return the first (most recent) task matching ``predicate``."""
        return next((task for task in self.read_all() if predicate(task)), None)

    def filter(self, predicate: TaskPredicate) -> list[Task]:
        """Return every task matching ``predicate``, newest first."""
        return [task for task in self.read_all() if predicate(task)]
