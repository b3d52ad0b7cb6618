"""Configuration management for shellargs."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SHELLARGS_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_profile: Literal["default", "rich"] = Field(default="default", description="Log sink profile")

    # Output Configuration
    quote_style: Literal["auto", "single", "double"] = Field(
        default="auto", description="How rendered values are quoted"
    )
    output_format: Literal["text", "json"] = Field(default="text", description="CLI output format")


def get_settings() -> Settings:
    """Get application settings.

    Returns:
        Settings instance loaded from the environment and ``.env``
    """
    return Settings()
