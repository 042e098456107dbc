"""Flat-file storage adapter.

Tasks are kept one record per line in a UTF-8 text file. Writes go to a
temporary file in the same directory which then replaces the target, so a
crash mid-write never leaves a half-written task file behind.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from tasktrack_cli.models import Task
from tasktrack_cli.repositories import TaskStorage
from tasktrack_cli.utils.logger import get_logger


class FlatFileStorage(TaskStorage):
    """Stores the task snapshot as pipe-delimited lines in a single file."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def write(self, tasks: Sequence[Task]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = "".join(f"{task.serialize()}\n" for task in tasks)

        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        get_logger("storage").debug("wrote %d tasks to %s", len(tasks), self.path)

    def load(self) -> list[str]:
        if not self.path.exists():
            get_logger("storage").debug("no task file at %s, starting empty", self.path)
            return []

        with open(self.path, encoding="utf-8") as f:
            records = [line.rstrip("\r\n") for line in f]
        return [record for record in records if record.strip()]
