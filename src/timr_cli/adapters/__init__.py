"""Adapters module - TaskStore implementations for different storage backends.

This package contains concrete implementations (adapters) for the store port:
- jsonl: Local JSON-lines file, newest record first
"""

from .jsonl import JsonlTaskStore

__all__ = [
    "JsonlTaskStore",
]
