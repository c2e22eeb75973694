"""Core application configuration and settings.

Handles environment variables and application settings for the console
demo and the HTTP API.
"""
import logging
from pathlib import Path
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings


# Load environment variables
ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=ROOT / ".env")
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Settings
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=False, alias="LOG_JSON")

    # API Settings
    api_prefix: str = Field(default="/api/v1", alias="API_PREFIX")

    class Config:
        case_sensitive = False
        env_file = ".env"
        populate_by_name = True
        extra = "ignore"

    def validate_required_settings(self):
        """Validate that settings hold usable values."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL '{self.log_level}' is not valid. "
                f"Use one of: {', '.join(LOG_LEVELS)}."
            )
        if not self.api_prefix.startswith("/"):
            raise ValueError(
                f"API_PREFIX '{self.api_prefix}' must start with '/'."
            )


# Global settings instance
settings = Settings()


if settings.environment != "test":
    try:
        settings.validate_required_settings()
    except ValueError as e:
        logging.getLogger(__name__).warning(f"Configuration Error: {e}")
        if settings.environment == "production":
            raise
