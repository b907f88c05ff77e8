"""Application configuration."""

from pathlib import Path

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Append-only activity log
    log_file: Path = Path("autofolder.log")
    activity_log_enabled: bool = True

    # Default console logging level when neither --verbose nor --quiet is given
    log_level: str = "INFO"

    model_config = ConfigDict(
        env_prefix="AUTOFOLDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from .env
    )


# Global settings instance
settings = Settings()
