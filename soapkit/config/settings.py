from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    soapkit configuration using Pydantic BaseSettings.
    Values are read from environment variables and an optional .env file.
    """

    # HTTP transport
    SOAPKIT_HTTP_TIMEOUT: float = Field(30.0, description="Timeout for SOAP HTTP requests in seconds")
    SOAPKIT_USER_AGENT: str = Field("soapkit/0.1.0", description="User-Agent header sent by the HTTP transport")

    # Envelope
    SOAPKIT_ENVELOPE_PREFIX: str = Field("SOAP-ENV", description="Prefix of the SOAP envelope namespace")
    SOAPKIT_ENVELOPE_NAMESPACE: str = Field(
        "http://schemas.xmlsoap.org/soap/envelope/", description="SOAP envelope namespace URI"
    )

    # Text serializer
    SOAPKIT_ESCAPE_TEXT: bool = Field(True, description="Escape &, < and > when rendering scalar text")

    # XML codec
    SOAPKIT_MAX_DEPTH: int = Field(100, description="Maximum element nesting accepted when parsing a response")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("SOAPKIT_HTTP_TIMEOUT")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("SOAPKIT_HTTP_TIMEOUT must be greater than 0")
        return v

    @field_validator("SOAPKIT_ENVELOPE_PREFIX")
    @classmethod
    def validate_prefix(cls, v):
        if not v or ":" in v:
            raise ValueError("SOAPKIT_ENVELOPE_PREFIX must be a non-empty name without ':'")
        return v

    @field_validator("SOAPKIT_MAX_DEPTH")
    @classmethod
    def validate_max_depth(cls, v):
        if v < 1:
            raise ValueError("SOAPKIT_MAX_DEPTH must be at least 1")
        if v > 300:
            raise ValueError("SOAPKIT_MAX_DEPTH should not exceed 300")
        return v


# Cached settings instance
_settings_instance = None


def get_settings() -> Settings:
    """
    Return a cached Settings instance.
    Avoids re-reading the environment on every call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached instance so the next get_settings() re-reads the environment."""
    global _settings_instance
    _settings_instance = None
