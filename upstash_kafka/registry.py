"""
Process-wide client slots and the explicit :class:`Clients` holder.

Each API has one slot. A slot is set once at startup and only read after
that; setting it again is a programming error. Applications that prefer to
pass configuration around explicitly use :class:`Clients` instead.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Optional, Union

from .client import Client, Target
from .exceptions import AlreadyInitializedError, UpstashError
from .services.kafka_service import KafkaHandler


logger = logging.getLogger(__name__)

_instances: Dict[Target, Client] = {}
_lock = threading.Lock()


def initialize(client: Client) -> None:
    """Store ``client`` in the slot of its target.

    Raises:
        AlreadyInitializedError: If the slot is already set
    """
    with _lock:
        if client.target in _instances:
            raise AlreadyInitializedError(client.target.value)
        _instances[client.target] = client
    logger.info(f"Initialized process-wide {client.target.value} client")


def instance(target: Union[Target, str] = Target.PROVISIONING) -> Optional[Client]:
    """Get the client stored for ``target``, or None."""
    return _instances.get(Target(target))


def reset() -> None:
    """Empty every slot. Test helper; never called by the library."""
    with _lock:
        _instances.clear()


@dataclass
class Clients:
    """Explicitly configured clients for both APIs, built once and passed around."""
    provisioning: Optional[Client] = None
    rest: Optional[Client] = None

    @classmethod
    def from_env(cls, provisioning: bool = True, rest: bool = True, **kwargs) -> "Clients":
        """Build the requested clients from the environment.

        Raises:
            ConfigurationError: If a required variable is missing
        """
        return cls(
            provisioning=Client.from_env(**kwargs) if provisioning else None,
            rest=Client.rest_from_env(**kwargs) if rest else None,
        )

    def _require(self, target: Target) -> Client:
        client = self.provisioning if target is Target.PROVISIONING else self.rest
        if client is None:
            raise UpstashError.from_builder(f"{target.value} handler", f"a {target.value} client")
        return client

    def kafka(self) -> KafkaHandler:
        return self._require(Target.PROVISIONING).kafka()

    def produce_api(self) -> KafkaHandler:
        return self._require(Target.REST).produce_api()

    def fetch_api(self) -> KafkaHandler:
        return self._require(Target.REST).fetch_api()

    def consume_api(self) -> KafkaHandler:
        return self._require(Target.REST).consume_api()

    def consumer_admin(self) -> KafkaHandler:
        return self._require(Target.REST).consumer_admin()

    async def aclose(self) -> None:
        for client in (self.provisioning, self.rest):
            if client is not None:
                await client.aclose()

    async def __aenter__(self) -> "Clients":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
