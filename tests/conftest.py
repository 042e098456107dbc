"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, data and log
directories.
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from tasktrack_cli.repositories import TaskStorage


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point every platformdirs lookup at *tmp_path* and reset cached singletons."""
    import tasktrack_cli.utils.logger as logger_mod
    from tasktrack_cli.services.config_service import get_config_service
    from tasktrack_cli.services.task_list_service import get_task_list

    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    log_dir = tmp_path / "logs"

    get_config_service.cache_clear()
    get_task_list.cache_clear()
    logger_mod._logger = None
    logging.getLogger("tasktrack_cli").handlers.clear()

    with (
        patch(
            "tasktrack_cli.services.config_service.user_config_dir",
            return_value=str(config_dir),
        ),
        patch(
            "tasktrack_cli.services.config_service.user_data_dir",
            return_value=str(data_dir),
        ),
        patch("tasktrack_cli.utils.logger.user_log_dir", return_value=str(log_dir)),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    get_task_list.cache_clear()
    for handler in logging.getLogger("tasktrack_cli").handlers:
        handler.close()
    logging.getLogger("tasktrack_cli").handlers.clear()
    logger_mod._logger = None


@pytest.fixture()
def task_file(isolated_dirs):
    """Default task file location used by the CLI under test."""
    return isolated_dirs / "data" / "tasks.txt"


# ---------------------------------------------------------------------------
# Storage doubles
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_storage():
    """A TaskStorage stand-in that records every snapshot it is given."""
    storage = MagicMock(spec=TaskStorage)
    storage.load.return_value = []
    return storage
