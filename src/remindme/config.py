"""
Configuration management for remindme.

Uses XDG base directories:
- Config: ~/.config/remindme/config.toml (optional)
- Data: ~/.reminders (one reminder per line)
"""

from pathlib import Path
from typing import Literal
import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from remindme.errors import StorageError, UsageError

REMINDERS_FILE = ".reminders"


class RemindersSection(BaseModel):
    """[reminders] table."""

    path: str | None = Field(default=None, description="Override for the reminders file")


class LoggingSection(BaseModel):
    """[logging] table."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class Settings(BaseModel):
    """Schema for config.toml."""

    reminders: RemindersSection = Field(default_factory=RemindersSection)
    logging: LoggingSection = Field(default_factory=LoggingSection)


def get_home_dir() -> Path:
    """Get the user's home directory."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise StorageError("failed to get user home dir") from e


def get_config_dir() -> Path:
    """Get the config directory (XDG_CONFIG_HOME/remindme)."""
    if xdg := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg) / "remindme"
    return get_home_dir() / ".config" / "remindme"


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"


def load_config() -> Settings:
    """
    Load configuration from config.toml.

    Returns default settings if the file doesn't exist.
    """
    config_path = get_config_path()

    if not config_path.exists():
        return Settings()

    # Lazy import tomli only when needed
    import tomli

    try:
        with open(config_path, "rb") as f:
            raw = tomli.load(f)
    except OSError as e:
        raise StorageError(f"failed to read config {config_path}") from e
    except tomli.TOMLDecodeError as e:
        raise UsageError(f"invalid config {config_path}") from e

    try:
        return Settings.model_validate(raw)
    except ValidationError as e:
        raise UsageError(f"invalid config {config_path}") from e


def get_reminders_path() -> Path:
    """
    Get the path to the reminders file.

    REMINDME_FILE wins over [reminders] path, which wins over ~/.reminders.
    """
    if env_path := os.environ.get("REMINDME_FILE"):
        return Path(env_path).expanduser()

    settings = load_config()
    if settings.reminders.path:
        return Path(settings.reminders.path).expanduser()

    return get_home_dir() / REMINDERS_FILE


def get_log_level() -> str:
    """Get the log level name (REMINDME_LOG_LEVEL or [logging] level)."""
    if env_level := os.environ.get("REMINDME_LOG_LEVEL"):
        try:
            return LoggingSection(level=env_level).level
        except ValidationError as e:
            raise UsageError(f"invalid REMINDME_LOG_LEVEL {env_level!r}") from e
    return load_config().logging.level
