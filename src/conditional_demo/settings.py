"""Application configuration using Pydantic Settings.

Values are provided via environment variables (preferred) or fall back to the
defaults below. Use ``get_settings`` to obtain the process-wide cached
instance.

Environment variable prefix: ``CONDITIONAL_DEMO_`` (e.g. ``CONDITIONAL_DEMO_PROFILE``).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime application settings.

    Attributes map directly to environment variables using the
    ``CONDITIONAL_DEMO_`` prefix (case-insensitive). For example,
    ``profile`` <- ``CONDITIONAL_DEMO_PROFILE``.
    """

    host: str = Field(
        default="0.0.0.0",
        description="Host interface to bind the server",
    )  # fmt: skip
    port: int = Field(
        default=8080,
        description="Server port",
    )  # fmt: skip
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Application log level",
    )
    reload: bool = Field(
        default=False,
        description="Enable auto-reload in development",
    )  # fmt: skip
    profile: str | None = Field(
        default=None,
        description="Active profile: typeone or typetwo. Anything else activates no route group.",
    )  # fmt: skip

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str:
        """Normalize and validate log level."""
        if v is None:
            return "INFO"

        v_upper = str(v).upper()

        allowed = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR"}
        if v_upper not in allowed:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(allowed))}")

        return v_upper

    model_config = SettingsConfigDict(
        env_prefix="CONDITIONAL_DEMO_",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,  # CLI overrides assign fields
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached ``Settings`` instance.

    The first invocation reads environment variables / .env file; subsequent
    calls reuse the same object.
    """

    return Settings()


__all__ = ["Settings", "get_settings"]
