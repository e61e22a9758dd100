"""Line codec for task records.

One task is one JSON object on one line, keys in a fixed order::

    {"date": "2024-01-15", "task_name": "debugging", "time_start": "0930", "time_end": null, "time_total": 0}

Lines are written with ``LINE_TERMINATOR``; decoding strips any trailing
``\\n`` or ``\\r\\n`` so files written by older versions still load.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from timr_cli.exceptions import CorruptRecordError
from timr_cli.models import Task

FIELD_ORDER = ("date", "task_name", "time_start", "time_end", "time_total")
LINE_TERMINATOR = "\n"


def task_to_record(task: Task) -> dict[str, Any]:
    data = task.model_dump()
    return {field: data[field] for field in FIELD_ORDER}


def encode_task(task: Task) -> str:
    """Serialize a task to a single JSON line (without terminator)."""
    return json.dumps(task_to_record(task), ensure_ascii=False)


def encode_line(task: Task) -> str:
    """Serialize a task to a terminated line ready to be written."""
    return encode_task(task) + LINE_TERMINATOR


def decode_task(line: str, line_number: int | None = None) -> Task:
    """Deserialize one stored line into a Task.

    Args:
        line: Raw line, with or without its terminator
        line_number: 1-based position in the store, for error messages

    Returns:
        Decoded Task

    Raises:
        CorruptRecordError: If the line is not a complete, canonical record
    """
    text = line.rstrip("\r\n")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CorruptRecordError(f"invalid JSON: {e.msg}", line_number) from e

    if not isinstance(data, dict):
        raise CorruptRecordError("record is not a JSON object", line_number)

    missing = [field for field in FIELD_ORDER if field not in data]
    if missing:
        raise CorruptRecordError(
            f"missing field(s): {', '.join(missing)}", line_number
        )

    # Older files stored totals as text; refuse instead of guessing.
    total = data["time_total"]
    if not isinstance(total, int) or isinstance(total, bool):
        raise CorruptRecordError(
            f"time_total must be an integer, got {total!r}", line_number
        )

    try:
        return Task.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise CorruptRecordError(f"{field}: {first['msg']}", line_number) from e
