"""Configuration loading for the Roster user registry.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SeedUser(BaseModel):
    """A user added to the registry at startup."""

    id: int
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Ensure username is non-empty."""
        if not v:
            raise ValueError("username must be a non-empty string")
        return v


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv. Complex fields (store_answers,
    seed_users) are read as JSON.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # User store configuration
    store_backend: Literal["null", "memory"] = Field(
        default="memory",
        description="User store backend type",
    )
    store_default_answer: bool = Field(
        default=False,
        description="Deletion result for IDs without a configured answer",
    )
    store_answers: dict[int, bool] = Field(
        default_factory=dict,
        description="Deletion result per user ID for the memory store",
    )

    # Registry seeding
    seed_users: list[SeedUser] = Field(
        default_factory=list,
        description="Users added to the registry at startup, in order",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["SeedUser", "Settings", "load_settings"]
