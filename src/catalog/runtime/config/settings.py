from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Environment and deployment
    environment: Literal["development", "production", "test"] = Field(
        default="development", validation_alias="APP_ENVIRONMENT"
    )

    # Overrides logging.level from the config file when set
    log_level: str | None = Field(default=None, validation_alias="LOG_LEVEL")

    # Location of the YAML configuration file
    config_path: str = Field(default="config.yaml", validation_alias="CONFIG_PATH")
