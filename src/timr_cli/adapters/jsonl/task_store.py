"""JSON-lines implementation of TaskStore.

The store is a flat append log: newest record on the first line. Every
mutation rewrites the whole file through a temporary file in the same
directory followed by ``os.replace``, so an interrupted write leaves the
previous content in place.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from timr_cli.adapters.jsonl.codec import LINE_TERMINATOR, decode_task, encode_line
from timr_cli.exceptions import RecordMismatchError, StoreIOError
from timr_cli.models import Task, TaskIdentity
from timr_cli.repositories import TaskStore

logger = logging.getLogger(__name__)


class JsonlTaskStore(TaskStore):
    """Task store backed by a UTF-8 JSON-lines file."""

    def __init__(self, path: str | Path):
        """Initialize the store.

        Args:
            path: Store file location. The file does not need to exist yet;
                a missing file reads as an empty store.
        """
        self.path = Path(path).expanduser()

    def __repr__(self) -> str:
        return f"JsonlTaskStore({str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.exists()

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------

    def _read_text(self) -> str:
        try:
            with open(self.path, encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as e:
            raise StoreIOError(f"Cannot read task store {self.path}: {e}") from e

    def _write_text(self, content: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
        except OSError as e:
            raise StoreIOError(f"Cannot write task store {self.path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            raise StoreIOError(f"Cannot write task store {self.path}: {e}") from e
        finally:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)

    def read_lines(self) -> list[str]:
        """Return every stored line without its terminator.

        Only ``LINE_TERMINATOR`` ends a record. Names may hold U+2028, U+2029
        or U+0085 verbatim, which ``str.splitlines`` would treat as breaks.
        """
        lines = self._read_text().split(LINE_TERMINATOR)
        if lines[-1] == "":
            lines.pop()
        return [line.rstrip("\r") for line in lines]

    def write_lines(self, lines: Iterable[str]) -> None:
        """Replace the whole store with ``lines`` (terminators added)."""
        self._write_text("".join(line + LINE_TERMINATOR for line in lines))

    # ------------------------------------------------------------------
    # TaskStore
    # ------------------------------------------------------------------

    def read_all(self) -> list[Task]:
        tasks = []
        for number, line in enumerate(self.read_lines(), start=1):
            if not line.strip():
                continue
            tasks.append(decode_task(line, line_number=number))
        logger.debug("read %d task(s) from %s", len(tasks), self.path)
        return tasks

    def prepend(self, task: Task) -> Task:
        existing = self._read_text()
        self._write_text(encode_line(task) + existing)
        logger.info(
            "prepended task %r (%s %s) to %s",
            task.task_name,
            task.date,
            task.time_start,
            self.path,
        )
        return task

    def replace_by_identity(
        self, task: Task, identity: TaskIdentity | None = None
    ) -> Task:
        target = identity or task.identity
        tasks = self.read_all()

        index = next((i for i, t in enumerate(tasks) if t.matches(target)), None)
        if index is None:
            logger.warning("no record matches %s in %s", target, self.path)
            raise RecordMismatchError(target)

        tasks[index] = task
        self._write_text("".join(encode_line(t) for t in tasks))
        logger.info("replaced record %s at position %d in %s", target, index, self.path)
        return task
