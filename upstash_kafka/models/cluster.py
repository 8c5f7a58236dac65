"""Cluster-related data models."""

from enum import Enum
from typing import Optional

from pydantic import Field

from .base import I32_MAX, I32_MIN, U32_MAX, U64_MAX, UpstashModel, UpstashRequest


class Region(str, Enum):
    """Regions a cluster can be provisioned in."""
    US_EAST_1 = "us-east-1"
    EU_WEST_1 = "eu-west-1"


class CreateClusterRequest(UpstashRequest):
    """Request to provision a new cluster."""
    name: str = Field(..., description="Cluster name")
    region: Region = Field(..., description="Cluster region")
    multizone: bool = Field(default=False, description="Replicate across availability zones")


class RenameClusterRequest(UpstashRequest):
    """Request to rename a cluster."""
    name: str = Field(..., description="New cluster name")


class ClusterResponse(UpstashModel):
    """A provisioned cluster as reported by the API."""
    cluster_id: str = Field(..., description="Cluster ID")
    name: str = Field(..., description="Cluster name")
    region: str = Field(..., description="Cluster region")
    type_name: str = Field(..., alias="type", description="Cluster plan type")
    multizone: Optional[bool] = Field(None, description="Whether the cluster is multizone")
    tcp_endpoint: str = Field(..., description="Broker TCP endpoint")
    rest_endpoint: str = Field(..., description="REST proxy endpoint")
    state: str = Field(..., description="Cluster state")
    username: str = Field(..., description="Cluster username")
    password: str = Field(..., description="Cluster password")
    max_retention_size: int = Field(..., ge=0, le=U64_MAX, description="Maximum retention size in bytes")
    max_retention_time: int = Field(..., ge=0, le=U64_MAX, description="Maximum retention time in milliseconds")
    max_messages_per_second: int = Field(..., ge=0, le=U32_MAX, description="Message rate limit")
    creation_time: int = Field(..., ge=0, le=U64_MAX, description="Creation time (epoch seconds)")
    max_message_size: int = Field(..., ge=I32_MIN, le=I32_MAX, description="Maximum message size in bytes")
    max_partitions: int = Field(..., ge=0, le=U32_MAX, description="Maximum number of partitions")
