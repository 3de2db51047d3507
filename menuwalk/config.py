"""Configuration management using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MenuSettings(BaseSettings):
    """Menu walker configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MENUWALK_",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    catalog_path: str = Field(
        default="./data/options.json",
        description="JSON file with the menu selection hierarchy",
    )

    link_base_url: str = Field(
        default="https://www.example.com/products",
        description="Base URL for the product summary page",
    )

    # Logging configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format string",
    )


def get_settings() -> MenuSettings:
    """Get the application settings instance."""
    return MenuSettings()
