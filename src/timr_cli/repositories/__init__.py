"""Repository interfaces for timr.

This package contains the abstract base class that defines the contract
for task persistence. It is the "Port" in the Hexagonal Architecture.

Implementations (Adapters) are in:
- timr_cli.adapters.jsonl (line-oriented JSON file)
"""

from .repository import TaskPredicate, TaskStore

__all__ = [
    "TaskStore",
    "TaskPredicate",
]
