"""Logging for the task tracker.

Every run appends to ``tasktrack.log`` in the platform's user log directory, so
the console stays reserved for replies to the user. Modules log through a
child of the ``tasktrack_cli`` logger named after their component (``storage``,
``tasks``, ``chat``), which keeps the component visible in each line.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "tasktrack_cli"
_LOG_FILE = "tasktrack.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def _file_handler() -> logging.Handler:
    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the tracker's logger, or the child logger for ``component``.

    The file handler is attached once, on the first call. Child loggers have
    no handlers of their own and hand their records to the parent.
    """
    global _logger
    if _logger is None:
        logger = logging.getLogger(_APP_NAME)
        logger.setLevel(logging.DEBUG)
        if not logger.handlers:
            logger.addHandler(_file_handler())
        logger.propagate = False
        _logger = logger

    if component:
        return _logger.getChild(component)
    return _logger


def set_log_level(level: str) -> None:
    """Apply the ``logging.level`` setting, e.g. ``"DEBUG"``, to every component."""
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    get_logger().setLevel(resolved)
