"""Wiring for the task list shared by all commands."""

from __future__ import annotations

from functools import lru_cache

from tasktrack_cli.adapters import FlatFileStorage
from tasktrack_cli.services.config_service import get_config_service
from tasktrack_cli.services.task_list import LoadReport, TaskList, load_task_list
from tasktrack_cli.utils.ui.formatters import format_warning


@lru_cache(maxsize=1)
def get_task_list() -> TaskList:
    """Load the configured task file once per process and return its TaskList."""
    config_svc = get_config_service()
    storage = FlatFileStorage(config_svc.task_file_path())
    task_list, report = load_task_list(
        storage, strict=config_svc.config.storage.strict_load
    )
    _warn_skipped(report)
    return task_list


def _warn_skipped(report: LoadReport) -> None:
    if report.skipped:
        numbers = ", ".join(str(n) for n in report.skipped)
        format_warning(
            f"Skipped {len(report.skipped)} corrupted record(s) in the task file "
            f"(record {numbers}). They will be dropped on the next change."
        )
