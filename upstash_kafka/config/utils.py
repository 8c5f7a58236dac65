"""
Configuration file helpers.

Credentials and client options can be kept in a JSON or YAML file instead of
the environment::

    upstash:
      email: dev@example.com
      api_key: ...
    kafka_rest:
      username: ...
      password: ...
      rest_server: https://example-kafka.upstash.io
    client:
      request_timeout: 10
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel

from .settings import (
    ClientSettings,
    KafkaRestSettings,
    UpstashSettings,
    build_settings,
)


class FileSettings(BaseModel):
    """Settings assembled from a configuration mapping."""
    upstash: Optional[UpstashSettings] = None
    kafka_rest: Optional[KafkaRestSettings] = None
    client: ClientSettings


def load_config_from_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a file (JSON or YAML).

    Args:
        file_path: Path to the configuration file

    Returns:
        Dictionary containing configuration data

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file format is not supported or invalid
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix not in ('.json', '.yml', '.yaml'):
        raise ValueError(f"Unsupported file format: {file_path.suffix}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            if suffix == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid configuration file format: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {file_path}")
    return data


def create_settings_from_dict(config_dict: Dict[str, Any]) -> FileSettings:
    """
    Create settings from a configuration dictionary.

    Sections that are absent stay unset, so a file may configure only one of
    the two APIs.

    Raises:
        ConfigurationError: If a present section is incomplete
    """
    upstash = config_dict.get("upstash")
    kafka_rest = config_dict.get("kafka_rest")

    return FileSettings(
        upstash=build_settings(UpstashSettings, **upstash) if upstash is not None else None,
        kafka_rest=build_settings(KafkaRestSettings, **kafka_rest) if kafka_rest is not None else None,
        client=build_settings(ClientSettings, **(config_dict.get("client") or {})),
    )


def load_settings_from_file(file_path: Union[str, Path]) -> FileSettings:
    """Load and validate settings from a JSON or YAML file."""
    return create_settings_from_dict(load_config_from_file(file_path))
