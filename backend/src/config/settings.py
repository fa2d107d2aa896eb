"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from typing import List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "gpt-3.5-turbo"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Instances are frozen: handlers receive the same value for the lifetime
    of the application and never mutate it.
    """

    model_config = SettingsConfigDict(
        extra="ignore",  # Ignore extra fields from .env files
        case_sensitive=False,
        env_file=[".env", ".env.local"],  # .env.local overrides .env
        frozen=True,
        populate_by_name=True,
    )

    # Application settings
    app_name: str = "Chat Relay API"
    environment: str = Field(
        default="local",
        validation_alias=AliasChoices("system_environment", "environment"),
    )
    debug: bool = False

    # OpenAI settings
    openai_api_key: str = ""
    openai_model: str = DEFAULT_MODEL
    openai_base_url: str = "https://api.openai.com/v1"
    openai_timeout_seconds: float = Field(default=30.0, gt=0)

    # CORS settings
    cors_allow_origin: str = "*"
    cors_allow_methods: str = "GET,POST,OPTIONS"
    cors_allow_headers: str = "Content-Type"

    # Logging settings
    log_level: str = "INFO"
    enable_request_logging: bool = True

    # GraphQL settings
    graphql_ide: bool = True

    @field_validator("openai_model")
    @classmethod
    def _default_blank_model(cls, value: str) -> str:
        return value.strip() or DEFAULT_MODEL

    @property
    def has_api_key(self) -> bool:
        """Check if an upstream credential is configured."""
        return bool(self.openai_api_key)

    @property
    def cors_headers(self) -> List[tuple]:
        """Headers attached to every response for cross-origin access."""
        return [
            ("Access-Control-Allow-Origin", self.cors_allow_origin),
            ("Access-Control-Allow-Methods", self.cors_allow_methods),
            ("Access-Control-Allow-Headers", self.cors_allow_headers),
        ]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_local(self) -> bool:
        """Check if running in local development environment."""
        return self.environment == "local"


def get_settings() -> Settings:
    """Load application settings from the environment."""
    return Settings()
