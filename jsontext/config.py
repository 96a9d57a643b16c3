"""Centralized configuration for JSONText using Pydantic Settings."""

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from jsontext.exceptions import ConfigurationError
from jsontext.models import OperatorVocabulary, ReturnType


class Settings(BaseSettings):
    """Engine settings loaded from environment variables.

    All settings can be overridden via environment variables with the
    JSONTEXT_ prefix. For example:
        JSONTEXT_BACKEND=postgres
        JSONTEXT_RETURN_TYPE=array
    """

    model_config = SettingsConfigDict(
        env_prefix="JSONTEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Operator vocabulary used by query()
    backend: OperatorVocabulary = OperatorVocabulary.POSTGRES

    # Default output shape for new fields
    return_type: ReturnType = ReturnType.JSON

    # Serialization
    ensure_ascii: bool = True

    # Logging (applied by the CLI)
    log_level: str = "WARNING"


def get_settings() -> Settings:
    """Get settings instance.

    Creates a new instance each time to pick up .env changes.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid JSONText configuration: {e}") from e
