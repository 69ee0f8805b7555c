"""This file contains global application settings."""

from os import path
from typing import Literal

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DOTENV_FILE = ".env" if path.isfile(".env") else None

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class SettingsLoadError(RuntimeError):
    """Raised when application settings cannot be loaded or validated."""


class Settings(BaseSettings):
    """Application settings.

    `environment` and `api_port` are read from `NODE_ENV` and `PORT`
    respectively, falling back to `ENVIRONMENT` and `API_PORT`.
    """

    # Application
    application_name: str = "cicd_pipeline_demo"
    version: str = Field(
        default="1.0.0",
        validation_alias="application_version",
    )
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("node_env", "environment"),
    )
    log_level: LogLevel = "INFO"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("port", "api_port"),
    )

    model_config = SettingsConfigDict(
        env_file=DOTENV_FILE,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return str(value).strip().upper()


def load_settings() -> Settings:
    """Load and validate settings from the environment and optional .env file.

    Raises:
        SettingsLoadError: Raised when a setting is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Check environment variables. Details: {error}"
        ) from error
