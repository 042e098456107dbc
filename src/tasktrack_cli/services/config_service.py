"""Configuration service for TaskTrack CLI.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json under the platform config directory
- Dot-separated key lookup and updates (``storage.path``, ``output.format``)
- Resolving the task file location
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from tasktrack_cli.models.config_models import AppConfig
from tasktrack_cli.utils.exceptions import ConfigError

_APP_NAME = "tasktrack_cli"
_TASK_FILE = "tasks.txt"


class ConfigService:
    """Service for loading, saving and editing the application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir(_APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(_APP_NAME))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from disk, writing defaults on first run."""
        if self._config is not None:
            return self._config  # Return cached config if already loaded

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            self._config = AppConfig()
            self.save_config()
        except (OSError, ValidationError) as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to disk."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key, or None if unknown."""
        return _lookup(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save."""
        if key not in _known_keys(AppConfig()):
            raise ConfigError(f"Unknown configuration key '{key}'")

        *parents, leaf = key.split(".")
        config_dict = self.config.model_dump()
        current = config_dict
        for k in parents:
            current = current[k]
        current[leaf] = value

        try:
            self._config = AppConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid value for '{key}': {value!r}") from e
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset one key, or the whole configuration, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return
        self.set(key, _lookup(AppConfig(), key))

    def task_file_path(self) -> Path:
        """Location of the task file, falling back to the user data dir."""
        configured = self.config.storage.path
        if configured:
            return Path(configured).expanduser()
        return self.data_dir / _TASK_FILE


def _lookup(config: BaseModel, key: str) -> Any:
    value: Any = config
    for k in key.split("."):
        if not isinstance(value, BaseModel) or k not in type(value).model_fields:
            return None
        value = getattr(value, k)
    return value


def _known_keys(config: BaseModel, prefix: str = "") -> set[str]:
    keys = set()
    for name in type(config).model_fields:
        value = getattr(config, name)
        if isinstance(value, BaseModel):
            keys |= _known_keys(value, f"{prefix}{name}.")
        else:
            keys.add(f"{prefix}{name}")
    return keys


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
