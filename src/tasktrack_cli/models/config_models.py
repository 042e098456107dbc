"""Configuration models for TaskTrack CLI."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Where and how the task file is kept."""

    path: str | None = Field(
        default=None, description="Task file path (defaults to the user data dir)"
    )
    strict_load: bool = Field(
        default=False, description="Refuse to start when the task file has bad lines"
    )


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "table", "json", "yaml", "quiet"] = Field(
        default="pretty"
    )
    color: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
