"""JSON-lines adapter - Local line-oriented file storage."""

from timr_cli.adapters.jsonl.codec import (
    FIELD_ORDER,
    LINE_TERMINATOR,
    decode_task,
    encode_line,
    encode_task,
)
from timr_cli.adapters.jsonl.task_store import JsonlTaskStore

__all__ = [
    "JsonlTaskStore",
    "FIELD_ORDER",
    "LINE_TERMINATOR",
    "decode_task",
    "encode_line",
    "encode_task",
]
