import logging
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Bind-all addresses cannot be dialled; the search endpoint is reached via localhost
WILDCARD_HOSTS = ("", "0.0.0.0", "::")


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Server Configuration
    host: str = Field("0.0.0.0", description="Interface the API server binds to.")
    port: int = Field(8080, ge=1, le=65535, description="Port the API server binds to.")

    # Logo search goes through this service's own /club/search endpoint
    search_api_url: Optional[str] = Field(
        None,
        description="URL of the club search endpoint used for logo lookups. "
        "Defaults to /club/search on the configured host and port.",
    )

    # Outbound HTTP Settings
    http_timeout: float = Field(
        10.0, gt=0, description="Timeout in seconds for every outbound request."
    )
    http_max_attempts: int = Field(
        3, ge=1, le=10, description="Total attempts per outbound request."
    )
    http_retry_backoff: float = Field(
        1.0, ge=0, description="Multiplier for the exponential retry backoff."
    )
    max_concurrent_competitions: int = Field(
        4, ge=1, description="How many competitions of one club are scraped at once."
    )

    # Debug Settings
    debug_save_html: bool = Field(
        False, description="Save fetched competition documents to disk."
    )
    debug_html_dir: str = Field(
        "debug_html", description="Directory for saved competition documents."
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

    @model_validator(mode="after")
    def _default_search_api_url(self) -> "AppSettings":
        if not self.search_api_url:
            host = "localhost" if self.host in WILDCARD_HOSTS else self.host
            self.search_api_url = f"http://{host}:{self.port}/club/search"
        return self


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
