"""
Configuration Management

Pydantic-settings based configuration for the document text extraction Lambda.

Two groups of settings are loaded from the environment:
- Settings: runtime options prefixed with DOCAI_BRIDGE_
- ProcessorSettings: Document AI processor identity and credentials,
  read from the GOOGLE_* variables configured on the function
"""

import json
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from docai_bridge.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables are prefixed with DOCAI_BRIDGE_ and are case-insensitive.
    Example: DOCAI_BRIDGE_S3_ENDPOINT_URL=http://localhost:4566
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCAI_BRIDGE_",
        env_file=[".env.local", ".env"],  # Try .env.local first
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # AWS Configuration
    aws_region: str = Field(
        default="us-west-2",
        description="AWS region",
    )
    s3_endpoint_url: str | None = Field(
        default=None,
        description="S3 endpoint URL (for local development)",
    )

    # Document AI Configuration
    documentai_endpoint: str | None = Field(
        default=None,
        description="Document AI API endpoint override (defaults to the processor's regional endpoint)",
    )

    # Application Configuration
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    @property
    def s3_config(self) -> dict:
        """S3 client configuration."""
        config = {"region_name": self.aws_region}
        if self.s3_endpoint_url:
            config["endpoint_url"] = self.s3_endpoint_url
        return config


class ProcessorSettings(BaseSettings):
    """
    Raw Document AI settings as found in the environment.

    GOOGLE_PROJECT_ID, GOOGLE_LOCATION and GOOGLE_PROCESSOR_ID identify the
    processor; GOOGLE_CREDENTIALS holds a JSON-encoded service account object.
    Values are left unvalidated here; see load_processor_config().
    """

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_",
        env_file=[".env.local", ".env"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    project_id: str | None = Field(default=None, description="Google Cloud project ID")
    location: str | None = Field(default=None, description="Processor location, e.g. 'us' or 'eu'")
    processor_id: str | None = Field(default=None, description="Document AI processor ID")
    credentials: str | None = Field(
        default=None,
        description="JSON-encoded service account credentials",
    )


@dataclass(frozen=True)
class ProcessorConfig:
    """Processor identity plus parsed credentials, passed into the pipeline."""

    project_id: str | None
    location: str | None
    processor_id: str | None
    credentials: dict[str, Any] = field(default_factory=dict, repr=False)


def load_processor_config(settings: ProcessorSettings | None = None) -> ProcessorConfig:
    """
    Load processor configuration for a single invocation.

    Identity components are passed through as-is; their presence is checked
    when the extraction request is built.

    Args:
        settings: Pre-loaded settings (read from the environment if omitted)

    Returns:
        ProcessorConfig with credentials decoded into a dict

    Raises:
        ConfigurationError: If GOOGLE_CREDENTIALS is missing or not a JSON object
    """
    settings = settings or ProcessorSettings()

    if not settings.credentials:
        raise ConfigurationError(setting="GOOGLE_CREDENTIALS")

    try:
        credentials = json.loads(settings.credentials)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            setting="GOOGLE_CREDENTIALS",
            error_message=f"not valid JSON: {e.msg}",
        ) from e

    if not isinstance(credentials, dict):
        raise ConfigurationError(
            setting="GOOGLE_CREDENTIALS",
            error_message=f"expected a JSON object, got {type(credentials).__name__}",
        )

    return ProcessorConfig(
        project_id=settings.project_id,
        location=settings.location,
        processor_id=settings.processor_id,
        credentials=credentials,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses lru_cache to ensure settings are loaded only once.
    Call get_settings.cache_clear() in tests after changing the environment.
    """
    return Settings()
