"""
Configuration management for fn_selector.
Handles environment variables for logging and diagnostics of selector computation.
"""

import logging
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Application
    APP_NAME: str = "fn-selector"
    ENVIRONMENT: str = "development"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    # Emit a warning whenever a malformed signature is replaced by a sentinel
    LOG_SENTINELS: bool = True

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of {allowed_envs}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Accept any stdlib level name, case-insensitively."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        """Validate log renderer name."""
        allowed_formats = ["console", "json"]
        if v not in allowed_formats:
            raise ValueError(f"Log format must be one of {allowed_formats}")
        return v

    class Config:
        env_prefix = "FN_SELECTOR_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    def model_post_init(self, __context: Any) -> None:  # type: ignore[override]
        """Production always logs JSON."""
        if self.ENVIRONMENT == "production":
            self.LOG_FORMAT = "json"


# Create global settings instance
settings = Settings()
