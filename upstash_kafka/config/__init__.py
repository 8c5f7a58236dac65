"""
Configuration package for the Upstash Kafka client.

Settings are read from environment variables, an optional ``.env`` file, or a
JSON/YAML configuration file.
"""

from .settings import (
    ClientSettings,
    KafkaRestSettings,
    UpstashSettings,
    LogLevel,
    DEFAULT_API_URL,
    settings,
    get_settings,
    reload_settings,
    build_settings,
    load_upstash_settings,
    load_kafka_rest_settings,
)

from .utils import (
    FileSettings,
    load_config_from_file,
    create_settings_from_dict,
    load_settings_from_file,
)

__all__ = [
    # Settings classes
    "ClientSettings",
    "KafkaRestSettings",
    "UpstashSettings",
    "FileSettings",

    # Enums and constants
    "LogLevel",
    "DEFAULT_API_URL",

    # Settings instances and functions
    "settings",
    "get_settings",
    "reload_settings",
    "build_settings",
    "load_upstash_settings",
    "load_kafka_rest_settings",

    # File helpers
    "load_config_from_file",
    "create_settings_from_dict",
    "load_settings_from_file",
]
