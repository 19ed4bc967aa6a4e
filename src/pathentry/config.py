"""User settings for the pathentry command line."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pathentry.entry import DEFAULT_PERMISSIONS

# Default settings location
CONFIG_DIR = Path.home() / ".pathentry"
CONFIG_FILE = CONFIG_DIR / "config.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Defaults applied by the command line."""

    model_config = ConfigDict(populate_by_name=True)

    directory_permissions: int = Field(
        default=DEFAULT_PERMISSIONS, ge=0, le=0o7777, alias="directoryPermissions"
    )
    show_hidden: bool = Field(default=False, alias="showHidden")
    log_level: str = Field(default="WARNING", alias="logLevel")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def logging_level(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_file(cls, path: Path) -> Settings:
        """Load settings from a JSON file.

        Args:
            path: Path to the settings file.

        Returns:
            Parsed Settings.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If the JSON or its content is invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        try:
            data = json.loads(path.read_text())
            return cls.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid settings in {path}: {e}") from e


def load_settings(path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults when no file exists.

    Args:
        path: Settings file. Defaults to ~/.pathentry/config.json.

    Returns:
        Loaded or default Settings.
    """
    path = path or CONFIG_FILE
    if not path.exists():
        return Settings()
    return Settings.from_file(path)
