"""Topic-related data models."""

from enum import Enum
from typing import Optional

from pydantic import Field

from .base import I32_MAX, I32_MIN, U32_MAX, U64_MAX, UpstashModel, UpstashRequest


class CleanupPolicy(str, Enum):
    """Log cleanup policy of a topic."""
    COMPACT = "compact"
    DELETE = "delete"


class CreateTopicRequest(UpstashRequest):
    """Request to create a topic inside a cluster."""
    name: str = Field(..., description="Topic name")
    partitions: int = Field(..., ge=0, le=U32_MAX, description="Number of partitions")
    retention_time: int = Field(..., ge=I32_MIN, le=I32_MAX, description="Retention time in milliseconds")
    retention_size: int = Field(..., ge=I32_MIN, le=I32_MAX, description="Retention size in bytes")
    max_message_size: int = Field(..., ge=I32_MIN, le=I32_MAX, description="Maximum message size in bytes")
    cleanup_policy: CleanupPolicy = Field(..., description="Cleanup policy")
    cluster_id: str = Field(..., description="Owning cluster ID")


class ReconfigureTopicRequest(UpstashRequest):
    """Request to change the limits of an existing topic."""
    retention_time: Optional[int] = Field(None, ge=I32_MIN, le=I32_MAX, description="Retention time in milliseconds")
    retention_size: Optional[int] = Field(None, ge=I32_MIN, le=I32_MAX, description="Retention size in bytes")
    max_message_size: Optional[int] = Field(None, ge=I32_MIN, le=I32_MAX, description="Maximum message size in bytes")


class TopicResponse(UpstashModel):
    """A topic as reported by the API."""
    topic_id: str = Field(..., description="Topic ID")
    topic_name: str = Field(..., description="Topic name")
    cluster_id: str = Field(..., description="Owning cluster ID")
    region: str = Field(..., description="Cluster region")
    creation_time: int = Field(..., ge=0, le=U64_MAX, description="Creation time (epoch seconds)")
    state: str = Field(..., description="Topic state")
    partitions: int = Field(..., ge=0, le=U32_MAX, description="Number of partitions")
    multizone: Optional[bool] = Field(None, description="Whether the cluster is multizone")
    tcp_endpoint: str = Field(..., description="Broker TCP endpoint")
    rest_endpoint: str = Field(..., description="REST proxy endpoint")
    username: str = Field(..., description="Cluster username")
    password: str = Field(..., description="Cluster password")
    cleanup_policy: str = Field(..., description="Cleanup policy")
    retention_size: int = Field(..., ge=I32_MIN, le=I32_MAX, description="Retention size in bytes")
    retention_time: int = Field(..., ge=I32_MIN, le=I32_MAX, description="Retention time in milliseconds")
    max_message_size: int = Field(..., ge=I32_MIN, le=I32_MAX, description="Maximum message size in bytes")
