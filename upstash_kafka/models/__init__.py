"""Data models package for the Upstash Kafka client."""

# Base models
from .base import UpstashModel, UpstashRequest, dump_payload

# Cluster models
from .cluster import (
    Region,
    CreateClusterRequest,
    RenameClusterRequest,
    ClusterResponse,
)

# Topic models
from .topic import (
    CleanupPolicy,
    CreateTopicRequest,
    ReconfigureTopicRequest,
    TopicResponse,
)

# Credential models
from .credential import (
    CredentialState,
    CredentialPermissions,
    CreateCredentialRequest,
    CredentialResponse,
)

# Stats models
from .stats import Stat, ClusterStats, TopicStats

# Message models
from .message import (
    Message,
    ProduceResponse,
    FetchRequest,
    FetchResponse,
    ConsumeRequest,
    ConsumeResponse,
    CommitRequest,
    CommitResponse,
    DeleteConsumerResponse,
    StatusResponse,
    Topic,
    ConsumerInstance,
    GroupInstance,
)

__all__ = [
    # Base
    "UpstashModel",
    "UpstashRequest",
    "dump_payload",
    # Cluster
    "Region",
    "CreateClusterRequest",
    "RenameClusterRequest",
    "ClusterResponse",
    # Topic
    "CleanupPolicy",
    "CreateTopicRequest",
    "ReconfigureTopicRequest",
    "TopicResponse",
    # Credential
    "CredentialState",
    "CredentialPermissions",
    "CreateCredentialRequest",
    "CredentialResponse",
    # Stats
    "Stat",
    "ClusterStats",
    "TopicStats",
    # Message
    "Message",
    "ProduceResponse",
    "FetchRequest",
    "FetchResponse",
    "ConsumeRequest",
    "ConsumeResponse",
    "CommitRequest",
    "CommitResponse",
    "DeleteConsumerResponse",
    "StatusResponse",
    "Topic",
    "ConsumerInstance",
    "GroupInstance",
]
