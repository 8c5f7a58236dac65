"""
Async client for the Upstash Kafka provisioning API and Kafka REST proxy.

Example::

    from upstash_kafka import Client, CreateTopicRequest, CleanupPolicy

    async with Client.from_env() as client:
        clusters = await client.kafka().list_clusters()
"""

__version__ = "0.1.0"

from .exceptions import (
    ErrorKind,
    UpstashError,
    InternalError,
    InvalidDataError,
    ApiError,
    AlreadyInitializedError,
    ConfigurationError,
    context,
    wrap_error,
)
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all
from .handler import Handler
from .services import CONSUME_HEADERS, KafkaHandler, KafkaService
from .client import Client, Target
from .registry import Clients, initialize, instance

__all__ = [
    "__version__",
    # Errors
    "ErrorKind",
    "UpstashError",
    "InternalError",
    "InvalidDataError",
    "ApiError",
    "AlreadyInitializedError",
    "ConfigurationError",
    "context",
    "wrap_error",
    # Transport
    "Client",
    "Target",
    "Handler",
    "KafkaHandler",
    "KafkaService",
    "CONSUME_HEADERS",
    # Process-wide clients
    "Clients",
    "initialize",
    "instance",
] + list(_models_all)
