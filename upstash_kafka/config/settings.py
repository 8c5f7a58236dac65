"""
Configuration management for the Upstash Kafka client.

Credentials for the provisioning API and the Kafka REST proxy are read from
environment variables (and an optional ``.env`` file) once, when a client is
constructed. Missing credentials are a fatal startup error.
"""

from enum import Enum
from typing import Optional, Type, TypeVar

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError


DEFAULT_API_URL = "https://api.upstash.com/v2"


class LogLevel(str, Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class UpstashSettings(BaseSettings):
    """Credentials of the provisioning (control-plane) API."""

    email: str = Field(..., min_length=1, description="Account email (UPSTASH_EMAIL)")
    api_key: str = Field(..., min_length=1, description="Management API key (UPSTASH_API_KEY)")
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Provisioning API base URL"
    )

    model_config = SettingsConfigDict(
        env_prefix="UPSTASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class KafkaRestSettings(BaseSettings):
    """Credentials of the Kafka REST proxy (data plane)."""

    username: str = Field(..., min_length=1, description="REST username (KAFKA_USERNAME)")
    password: str = Field(..., min_length=1, description="REST password (KAFKA_PASSWORD)")
    rest_server: str = Field(..., min_length=1, description="REST proxy server (KAFKA_REST_SERVER)")

    model_config = SettingsConfigDict(
        env_prefix="KAFKA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator('rest_server')
    @classmethod
    def validate_rest_server(cls, v):
        """Default to https when the server is given as a bare host."""
        v = v.strip()
        if "://" not in v:
            v = f"https://{v}"
        return v


class ClientSettings(BaseSettings):
    """Ambient client behaviour: timeouts and logging."""

    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP request timeout in seconds"
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Client log level"
    )
    structured_logging: bool = Field(
        default=False,
        description="Emit JSON log lines instead of plain text"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format for plain text logging"
    )

    model_config = SettingsConfigDict(
        env_prefix="UPSTASH_KAFKA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


S = TypeVar("S", bound=BaseSettings)


def build_settings(settings_cls: Type[S], **values) -> S:
    """Instantiate a settings class, turning validation failures into ConfigurationError."""
    try:
        return settings_cls(**values)
    except ValidationError as e:
        prefix = settings_cls.model_config.get("env_prefix", "")
        first = e.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else ""
        variable = f"{prefix}{field}".upper()
        if first.get("type") == "missing":
            message = f"{variable} not set"
        else:
            message = f"{variable} is invalid: {first.get('msg')}"
        raise ConfigurationError(message, variable=variable, cause=e) from e


def load_upstash_settings(**values) -> UpstashSettings:
    """Load provisioning credentials, raising ConfigurationError if any is missing."""
    return build_settings(UpstashSettings, **values)


def load_kafka_rest_settings(**values) -> KafkaRestSettings:
    """Load REST proxy credentials, raising ConfigurationError if any is missing."""
    return build_settings(KafkaRestSettings, **values)


# Global settings instance
settings = ClientSettings()


def get_settings() -> ClientSettings:
    """Get the global settings instance."""
    return settings


def reload_settings(**values) -> ClientSettings:
    """Reload settings from environment variables and files."""
    global settings
    settings = build_settings(ClientSettings, **values)
    return settings
