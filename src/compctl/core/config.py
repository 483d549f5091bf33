# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local defaults.
Regulatory thresholds are not settings; they live beside the rules that use them.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "compctl"
    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ...).",
    )

    # -- CLI defaults --
    DEFAULT_APPLICANT_NAME: str = "Applicant"
    DEFAULT_CREDITOR_NAME: str = "Lender"
    DEFAULT_CREDITOR_ADDRESS: str = "123 Main St"
    DEFAULT_FORMAT: str = Field(
        default="table",
        description="Output format when --format is not given (table or json).",
    )


settings = Settings()
