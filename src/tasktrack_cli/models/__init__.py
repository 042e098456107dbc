"""TaskTrack CLI domain models.

Pydantic models for the task variants and the application configuration.
"""

from .config_models import AppConfig, LoggingConfig, OutputConfig, StorageConfig
from .task import (
    TASK_TYPES,
    Deadline,
    Event,
    Task,
    ToDo,
    build_task,
    task_from_record,
)

__all__ = [
    # Task models
    "Task",
    "ToDo",
    "Deadline",
    "Event",
    "TASK_TYPES",
    "task_from_record",
    "build_task",
    # Configuration models
    "AppConfig",
    "StorageConfig",
    "OutputConfig",
    "LoggingConfig",
]
