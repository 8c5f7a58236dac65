"""Message-related data models for the REST proxy (produce, fetch, consume, commit)."""

from typing import List, Optional

from pydantic import Field

from ..exceptions import ApiError
from .base import U16_MAX, U64_MAX, U8_MAX, UpstashModel, UpstashRequest


class Message(UpstashRequest):
    """A record to produce."""
    topic: str = Field(..., description="Topic name")
    value: str = Field(..., description="Message value")
    partition: int = Field(default=0, ge=0, le=U8_MAX, description="Target partition")
    key: str = Field(default="", description="Message key")

    @classmethod
    def new(cls, topic: str, value: str, partition: Optional[int] = None, key: Optional[str] = None) -> "Message":
        """Build a message, falling back to partition 0 and an empty key."""
        return cls(
            topic=topic,
            value=value,
            partition=partition if partition is not None else 0,
            key=key if key is not None else "",
        )


class ProduceResponse(UpstashModel):
    """Where a produced message was committed."""
    topic: str = Field(..., description="Topic name")
    partition: int = Field(..., ge=0, le=U8_MAX, description="Partition")
    offset: int = Field(..., ge=0, le=U64_MAX, description="Offset")


class FetchRequest(UpstashRequest):
    """Point read of a partition starting at an offset."""
    topic: str = Field(..., description="Topic name")
    partition: int = Field(..., ge=0, le=U8_MAX, description="Partition")
    offset: int = Field(..., ge=0, le=U64_MAX, description="Starting offset")


class FetchResponse(UpstashModel):
    """A fetched record."""
    topic: str
    partition: int = Field(..., ge=0, le=U8_MAX)
    offset: int = Field(..., ge=0, le=U64_MAX)
    key: str
    value: str


class ConsumeRequest(UpstashRequest):
    """Consumer-group poll of a topic."""
    topic: str = Field(..., description="Topic name")


class ConsumeResponse(UpstashModel):
    """A record returned by a consumer-group poll."""
    key: str
    offset: int = Field(..., ge=0, le=U64_MAX)
    partition: int = Field(..., ge=0, le=U64_MAX)
    timestamp: int = Field(..., ge=0, le=U64_MAX)
    topic: str
    value: str


class CommitRequest(UpstashRequest):
    """An offset to commit for a consumer instance."""
    topic: str = Field(..., description="Topic name")
    partition: int = Field(..., ge=0, le=U8_MAX, description="Partition")
    offset: int = Field(..., ge=0, le=U64_MAX, description="Offset to commit")


class StatusResponse(UpstashModel):
    """Envelope with an embedded status, returned by commit and consumer deletion.

    The remote service may report a failure inside a successful HTTP
    response; the envelope is returned as-is and ``raise_for_error`` promotes
    it on request.
    """
    result: str = Field(..., description="Result text")
    error: str = Field(..., description="Error text, empty on success")
    status: int = Field(..., ge=0, le=U16_MAX, description="Embedded status code")

    @property
    def ok(self) -> bool:
        return not self.error and self.status < 400

    def raise_for_error(self) -> "StatusResponse":
        if not self.ok:
            raise ApiError(
                self.error or f"Request failed with status {self.status}",
                detail=self.error,
                details={"status": self.status, "result": self.result}
            )
        return self


class CommitResponse(StatusResponse):
    """Result of an offset commit."""


class DeleteConsumerResponse(StatusResponse):
    """Result of removing a consumer instance."""


class Topic(UpstashModel):
    """A topic subscription of a consumer instance."""
    topic: str


class ConsumerInstance(UpstashModel):
    """A consumer registered in a group."""
    name: str
    topics: List[Topic] = Field(..., description="Subscribed topics")


class GroupInstance(UpstashModel):
    """A consumer group and its registered consumers."""
    name: str
    instances: List[ConsumerInstance] = Field(..., description="Registered consumers")
