"""
Language model configuration settings.

Holds the hosted model name and the provider API key.

Dependencies: pydantic, pydantic_settings, docqa.core.exceptions
System role: Chat model configuration for answer generation
"""

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings
from docqa.core.exceptions import ConfigurationError


class LLMSettings(BaseSettings):
    """Hosted model provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        populate_by_name=True,
        case_sensitive=False,
        extra="ignore",
    )

    chat_model: str = Field(default="gemini-2.5-flash", description="Google Gemini chat model ID")
    temperature: float = Field(default=0.0, ge=0.0, le=2.0, description="Sampling temperature")

    google_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "LLM_GOOGLE_API_KEY"),
        description="Google AI Studio API key",
    )

    def require_api_key(self) -> str:
        """
        Return the API key, failing when it is not configured.

        Raises:
            ConfigurationError: When GOOGLE_API_KEY is unset or blank
        """
        if self.google_api_key is None or not self.google_api_key.get_secret_value().strip():
            raise ConfigurationError(
                "GOOGLE_API_KEY is not set",
                setting="GOOGLE_API_KEY",
            )
        return self.google_api_key.get_secret_value()
