"""
Application settings using pydantic-settings for type-safe configuration.

All environment variables are centralized here with proper typing, validation,
and sensible defaults. Settings are loaded once at startup and cached.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for local development.
    Production values should be set via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # === Service ===
    app_name: str = Field(
        default="paramguard-api",
        description="Service name reported by the health endpoint and log lines",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level: TRACE, DEBUG, INFO or WARNING",
    )

    # === Validation ===
    reject_status_code: int = Field(
        default=400,
        description="HTTP status returned when request parameters fail validation",
    )

    # === CORS Configuration ===
    # Note: Use str type for env var parsing, convert to list via property
    allowed_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="ALLOWED_ORIGINS",
        description="Allowed CORS origins (comma-separated)",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins string into list."""
        return [origin.strip() for origin in self.allowed_origins_str.split(",") if origin.strip()]

    @field_validator("reject_status_code", mode="after")
    @classmethod
    def validate_reject_status_code(cls, v: int) -> int:
        """Rejections are client errors; anything outside 4xx is a misconfiguration."""
        if not 400 <= v <= 499:
            raise ValueError(f"Invalid REJECT_STATUS_CODE: {v}. Must be a 4xx status")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log_level."""
        v = v.upper()
        if v not in ("TRACE", "DEBUG", "INFO", "WARNING"):
            raise ValueError(f"Invalid LOG_LEVEL: {v}. Must be TRACE, DEBUG, INFO or WARNING")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the application.
    """
    return Settings()
