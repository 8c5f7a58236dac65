"""
Kafka service surface.

One method per remote operation. Each method builds a route from the given
identifiers, performs a single HTTP call through the handler's client and
returns the decoded DTO. Errors propagate unchanged; nothing is retried.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Sequence

from ..handler import Handler
from ..models import (
    ClusterResponse,
    ClusterStats,
    CommitRequest,
    CommitResponse,
    ConsumeRequest,
    ConsumeResponse,
    CreateClusterRequest,
    CreateCredentialRequest,
    CreateTopicRequest,
    CredentialResponse,
    DeleteConsumerResponse,
    FetchRequest,
    FetchResponse,
    GroupInstance,
    Message,
    ProduceResponse,
    ReconfigureTopicRequest,
    RenameClusterRequest,
    TopicResponse,
    TopicStats,
)


logger = logging.getLogger(__name__)


# Consumer polls always commit manually and start from the latest offset,
# whatever the broker defaults are.
CONSUME_HEADERS = {
    "Kafka-Enable-Auto-Commit": "false",
    "Kafka-Auto-Offset-Reset": "latest",
}


class KafkaService(ABC):
    """Operations of the provisioning API and the Kafka REST proxy."""

    # Clusters

    @abstractmethod
    async def create_cluster(self, request: CreateClusterRequest) -> ClusterResponse:
        ...

    @abstractmethod
    async def list_clusters(self) -> List[ClusterResponse]:
        ...

    @abstractmethod
    async def get_cluster(self, cluster_id: str) -> ClusterResponse:
        ...

    @abstractmethod
    async def rename_cluster(self, cluster_id: str, request: RenameClusterRequest) -> ClusterResponse:
        ...

    @abstractmethod
    async def reset_password(self, cluster_id: str) -> ClusterResponse:
        ...

    @abstractmethod
    async def delete_cluster(self, cluster_id: str) -> str:
        ...

    # Topics

    @abstractmethod
    async def create_topic(self, request: CreateTopicRequest) -> TopicResponse:
        ...

    @abstractmethod
    async def get_topic(self, topic_id: str) -> TopicResponse:
        ...

    @abstractmethod
    async def list_topics(self, cluster_id: str) -> List[TopicResponse]:
        ...

    @abstractmethod
    async def reconfigure_topic(self, topic_id: str, request: ReconfigureTopicRequest) -> TopicResponse:
        ...

    @abstractmethod
    async def delete_topic(self, topic_id: str) -> str:
        ...

    # Credentials

    @abstractmethod
    async def create_credential(self, request: CreateCredentialRequest) -> CredentialResponse:
        ...

    @abstractmethod
    async def list_credentials(self) -> List[CredentialResponse]:
        ...

    @abstractmethod
    async def delete_credential(self, credential_id: str) -> str:
        ...

    # Stats

    @abstractmethod
    async def cluster_stats(self, cluster_id: str) -> ClusterStats:
        ...

    @abstractmethod
    async def topic_stats(self, topic_id: str) -> TopicStats:
        ...

    # Data plane

    @abstractmethod
    async def produce(self, messages: Sequence[Message]) -> List[ProduceResponse]:
        ...

    @abstractmethod
    async def fetch(self, request: FetchRequest) -> List[FetchResponse]:
        ...

    @abstractmethod
    async def consume(self, group: str, consumer: str, request: ConsumeRequest) -> List[ConsumeResponse]:
        ...

    @abstractmethod
    async def commit(self, group: str, consumer: str, offsets: Sequence[CommitRequest]) -> CommitResponse:
        ...

    @abstractmethod
    async def list_consumers(self) -> List[GroupInstance]:
        ...

    @abstractmethod
    async def delete_consumer(self, group: str, consumer: str) -> DeleteConsumerResponse:
        ...


class KafkaHandler(Handler, KafkaService):
    """KafkaService implemented over a handler's HTTP client.

    Which operations make sense depends on the handler's path: cluster, topic,
    credential and stats calls on ``Client.kafka()``; ``produce``, ``fetch``
    and ``consume`` on the matching data-plane handlers; ``commit``,
    ``list_consumers`` and ``delete_consumer`` on ``Client.consumer_admin()``.
    """

    async def create_cluster(self, request: CreateClusterRequest) -> ClusterResponse:
        logger.info(f"Creating cluster: {request.name} in {request.region.value}")
        return await self.client.post(self.route("cluster"), ClusterResponse, json=request)

    async def list_clusters(self) -> List[ClusterResponse]:
        return await self.client.get(self.route("clusters"), List[ClusterResponse])

    async def get_cluster(self, cluster_id: str) -> ClusterResponse:
        return await self.client.get(self.route("cluster", cluster_id), ClusterResponse)

    async def rename_cluster(self, cluster_id: str, request: RenameClusterRequest) -> ClusterResponse:
        logger.info(f"Renaming cluster {cluster_id} to {request.name}")
        return await self.client.post(self.route("rename-cluster", cluster_id), ClusterResponse, json=request)

    async def reset_password(self, cluster_id: str) -> ClusterResponse:
        logger.info(f"Resetting password of cluster {cluster_id}")
        return await self.client.post(self.route("reset-password", cluster_id), ClusterResponse)

    async def delete_cluster(self, cluster_id: str) -> str:
        logger.info(f"Deleting cluster {cluster_id}")
        return await self.client.delete(self.route("cluster", cluster_id), str)

    async def create_topic(self, request: CreateTopicRequest) -> TopicResponse:
        logger.info(f"Creating topic: {request.name} in cluster {request.cluster_id}")
        return await self.client.post(self.route("topic"), TopicResponse, json=request)

    async def get_topic(self, topic_id: str) -> TopicResponse:
        return await self.client.get(self.route("topic", topic_id), TopicResponse)

    async def list_topics(self, cluster_id: str) -> List[TopicResponse]:
        return await self.client.get(self.route("topics", cluster_id), List[TopicResponse])

    async def reconfigure_topic(self, topic_id: str, request: ReconfigureTopicRequest) -> TopicResponse:
        logger.info(f"Reconfiguring topic {topic_id}")
        return await self.client.post(self.route("update-topic", topic_id), TopicResponse, json=request)

    async def delete_topic(self, topic_id: str) -> str:
        logger.info(f"Deleting topic {topic_id}")
        return await self.client.delete(self.route("topic", topic_id), str)

    async def create_credential(self, request: CreateCredentialRequest) -> CredentialResponse:
        logger.info(f"Creating credential: {request.credential_name} for topic {request.topic}")
        return await self.client.post(self.route("credential"), CredentialResponse, json=request)

    async def list_credentials(self) -> List[CredentialResponse]:
        return await self.client.get(self.route("credentials"), List[CredentialResponse])

    async def delete_credential(self, credential_id: str) -> str:
        logger.info(f"Deleting credential {credential_id}")
        return await self.client.delete(self.route("credential", credential_id), str)

    async def cluster_stats(self, cluster_id: str) -> ClusterStats:
        return await self.client.get(self.route("stats", "cluster", cluster_id), ClusterStats)

    async def topic_stats(self, topic_id: str) -> TopicStats:
        return await self.client.get(self.route("stats", "topic", topic_id), TopicStats)

    async def produce(self, messages: Sequence[Message]) -> List[ProduceResponse]:
        logger.debug(f"Producing {len(messages)} message(s)")
        return await self.client.post(self.route(), List[ProduceResponse], json=list(messages))

    async def fetch(self, request: FetchRequest) -> List[FetchResponse]:
        return await self.client.post(self.route(), List[FetchResponse], json=request)

    async def consume(self, group: str, consumer: str, request: ConsumeRequest) -> List[ConsumeResponse]:
        return await self.client.post(
            self.route(group, consumer),
            List[ConsumeResponse],
            json=request,
            headers=CONSUME_HEADERS
        )

    async def commit(self, group: str, consumer: str, offsets: Sequence[CommitRequest]) -> CommitResponse:
        return await self.client.post(self.route("commit", group, consumer), CommitResponse, json=list(offsets))

    async def list_consumers(self) -> List[GroupInstance]:
        return await self.client.get(self.route("consumers"), List[GroupInstance])

    async def delete_consumer(self, group: str, consumer: str) -> DeleteConsumerResponse:
        logger.info(f"Deleting consumer {consumer} of group {group}")
        return await self.client.delete(self.route("delete-consumer", group, consumer), DeleteConsumerResponse)
