"""
Application Settings
===================

Library settings and environment configuration using Pydantic Settings.
Supplies logging configuration and the default render options applied by
``render_jsx`` when a caller does not override them.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main library settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="jsxrender", description="Library name")
    app_version: str = Field(default="1.0.0", description="Library version")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Logging level")

    # Rendering Defaults
    default_pretty: bool = Field(default=True, description="Pretty-print rendered markup")
    default_max_inline_content_width: int = Field(
        default=40, ge=0, description="Longest text content rendered on one line"
    )
    default_tab: str = Field(default="    ", description="Indent unit for block layout")
    default_newline: str = Field(default="\n", description="Line separator for block layout")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="JSX_RENDER_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
