"""Configuration system for NVIDIA Container Toolkit hook discovery."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Hook Discovery Configuration."""

    # Executable resolution
    executable_name: str = Field(
        default="nvidia-ctk",
        min_length=1,
        description="Executable searched for when no explicit path is given",
    )
    default_path: str = Field(
        default="/usr/bin/nvidia-ctk",
        min_length=1,
        description="Fallback path used when the search finds no candidates",
    )
    driver_root: str = Field(
        default="",
        description="Root prefix applied to every searched directory",
    )
    search_paths: list[str] = Field(
        default_factory=list,
        description="Directories to search (empty = PATH plus system defaults)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: Literal["text", "json"] = Field(
        default="text",
        description="Console log format",
    )

    model_config = {
        "env_prefix": "NVIDIA_CTK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


# Settings singleton with dependency injection support
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the settings instance (lazy-loaded singleton).

    Returns:
        The Settings instance.

    Example:
        from ctk_discover.config import get_settings
        settings = get_settings()
        print(settings.default_path)
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override the settings instance (for testing).

    Args:
        new_settings: The new Settings instance to use.
    """
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to None (forces reload on next get_settings call)."""
    global _settings
    _settings = None
