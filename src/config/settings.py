"""
Application settings and configuration management.

Uses pydantic-settings for environment variable loading.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MOCKMATE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "MockMate"
    app_version: str = "0.1.0"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Interview pacing
    seconds_per_question: int = Field(
        default=120, gt=0,
        description="Time budget per question used for duration estimates"
    )
    checkpoint_interval: int = Field(
        default=5, ge=1,
        description="A checkpoint fires after every N answered questions"
    )
    session_expiry_hours: float = Field(
        default=24.0, gt=0,
        description="Heartbeat staleness after which a session can't be resumed"
    )

    # Answer processing
    estimated_processing_ms: int = 2500
    default_answer_duration_ms: int = 60_000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
