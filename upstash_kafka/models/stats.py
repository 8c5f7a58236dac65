"""Usage statistics models. Read-only, fetched on demand."""

from typing import List

from pydantic import Field

from .base import U64_MAX, UpstashModel


class Stat(UpstashModel):
    """A single point of a time series."""
    x: str = Field(..., description="Timestamp label")
    y: int = Field(..., ge=0, le=U64_MAX, description="Value")


class TopicStats(UpstashModel):
    """Throughput and storage aggregates for a topic."""
    throughput: List[Stat] = Field(..., description="Total throughput series")
    produce_throughput: List[Stat] = Field(..., description="Produce throughput series")
    consume_throughput: List[Stat] = Field(..., description="Consume throughput series")
    diskusage: List[Stat] = Field(..., description="Disk usage series")
    total_monthly_storage: int = Field(..., ge=0, le=U64_MAX)
    total_monthly_produce: int = Field(..., ge=0, le=U64_MAX)
    total_monthly_consume: int = Field(..., ge=0, le=U64_MAX)


class ClusterStats(TopicStats):
    """Throughput, storage and billing aggregates for a cluster."""
    days: List[str] = Field(..., description="Day labels of the daily series")
    dailyproduce: List[Stat] = Field(..., description="Messages produced per day")
    dailyconsume: List[Stat] = Field(..., description="Messages consumed per day")
    total_monthly_billing: int = Field(..., ge=0, le=U64_MAX)
