"""One-time normalization of legacy task stores.

Older versions of the tool wrote dates as ``YYYY-M-D``, start/end times as
``HH:MM`` or ``HH:MM:SS`` and totals as text (``"4 hours 53 minutes"``) or
``null``. The codec only accepts the canonical forms, so such a store has to
be rewritten once with ``timr normalize`` before it can be read.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from timr_cli.adapters.jsonl import JsonlTaskStore, decode_task, encode_task
from timr_cli.exceptions import (
    CorruptRecordError,
    InvalidDateFormatError,
    InvalidTimeFormatError,
)
from timr_cli.utils.date_math import format_date
from timr_cli.utils.time_math import duration_between

logger = logging.getLogger(__name__)

_LEGACY_DATE_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_LEGACY_TIME_RE = re.compile(r"^(\d{1,2}):?(\d{2})(?::\d{2}(?:\.\d+)?)?$")


@dataclass
class NormalizationReport:
    """Outcome of a normalization pass."""

    total: int = 0
    changed: int = 0
    changed_lines: list[int] = field(default_factory=list)
    dry_run: bool = False

    @property
    def unchanged(self) -> int:
        return self.total - self.changed


def normalize_date(value: Any) -> str:
    """Convert ``YYYY-M-D`` (or canonical) text to ``YYYY-MM-DD``."""
    match = _LEGACY_DATE_RE.match(value) if isinstance(value, str) else None
    if not match:
        raise InvalidDateFormatError(value)
    year, month, day = (int(part) for part in match.groups())
    try:
        return format_date(date(year, month, day))
    except ValueError as e:
        raise InvalidDateFormatError(value) from e


def normalize_time(value: Any) -> str:
    """Convert ``HH:MM``, ``HH:MM:SS``, ``HMM`` or ``HHMM`` to ``HHMM``."""
    match = _LEGACY_TIME_RE.match(value) if isinstance(value, str) else None
    if not match:
        raise InvalidTimeFormatError(value)
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeFormatError(value)
    return f"{hour:02d}{minute:02d}"


def normalize_record(data: dict[str, Any]) -> dict[str, Any]:
    """Return the canonical form of one decoded legacy record.

    ``time_total`` is always recomputed from the normalized times.
    """
    time_end = data.get("time_end")
    record = {
        "date": normalize_date(data.get("date")),
        "task_name": data.get("task_name"),
        "time_start": normalize_time(data.get("time_start")),
        "time_end": None if time_end in (None, "") else normalize_time(time_end),
    }
    record["time_total"] = (
        0
        if record["time_end"] is None
        else duration_between(record["time_start"], record["time_end"]).minutes
    )
    return record


class MigrationService:
    """Rewrites a task store into the canonical on-disk format."""

    def __init__(self, store: JsonlTaskStore):
        self.store = store

    def normalize_store(self, dry_run: bool = False) -> NormalizationReport:
        """Normalize every record of the store.

        Args:
            dry_run: Report what would change without writing

        Returns:
            NormalizationReport with per-line change information

        Raises:
            CorruptRecordError: If a line cannot be understood even in a
                legacy format; nothing is written in that case
        """
        report = NormalizationReport(dry_run=dry_run)
        output: list[str] = []

        for number, line in enumerate(self.store.read_lines(), start=1):
            if not line.strip():
                continue
            report.total += 1
            canonical = self._normalize_line(line, number)
            if canonical != line:
                report.changed += 1
                report.changed_lines.append(number)
            output.append(canonical)

        if report.changed and not dry_run:
            self.store.write_lines(output)
            logger.info(
                "normalized %d of %d record(s) in %s",
                report.changed,
                report.total,
                self.store.path,
            )
        return report

    @staticmethod
    def _normalize_line(line: str, number: int) -> str:
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise CorruptRecordError(f"invalid JSON: {e.msg}", number) from e
        if not isinstance(data, dict):
            raise CorruptRecordError("record is not a JSON object", number)

        try:
            record = normalize_record(data)
        except (InvalidDateFormatError, InvalidTimeFormatError) as e:
            raise CorruptRecordError(str(e), number) from e

        # Round-trip through the codec so the output is exactly what the
        # store would write.
        return encode_task(decode_task(json.dumps(record), line_number=number))
