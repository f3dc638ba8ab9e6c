import logging

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from presidents.models.enums import RowPolicy

WIKIPEDIA_PRESIDENTS_URL = (
    "https://en.wikipedia.org/wiki/List_of_presidents_of_the_United_States"
)
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Data source
    source_url: str = Field(
        WIKIPEDIA_PRESIDENTS_URL,
        description="Human-readable origin of the table (provenance only, never fetched).",
    )

    # Extraction Settings
    default_amount: int = Field(
        15,
        ge=0,
        description="Number of most recent rows to render when no amount is given.",
    )
    row_policy: RowPolicy = Field(
        RowPolicy.PERMISSIVE,
        description="Handling of rows with too few link texts (permissive, skip, strict).",
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def normalize_log_level(level: str, origin: str = "LOG_LEVEL") -> str:
    """Upper-cases a loguru level name, falling back to INFO for unknown names."""
    level_upper = level.upper()
    if level_upper in LOG_LEVELS:
        return level_upper
    logging.warning(f"Invalid {origin} '{level}', using INFO.")
    return "INFO"


def load_settings() -> AppSettings:
    """Loads application settings, exiting when they fail validation."""
    try:
        settings = AppSettings()
    except ValidationError as e:
        logging.error(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")
    settings.log_level = normalize_log_level(settings.log_level)
    return settings


settings: AppSettings = load_settings()
