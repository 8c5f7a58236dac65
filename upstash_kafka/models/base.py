"""Base data models shared by the request and response DTOs."""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


I32_MIN = -(2 ** 31)
I32_MAX = 2 ** 31 - 1
U8_MAX = 2 ** 8 - 1
U16_MAX = 2 ** 16 - 1
U32_MAX = 2 ** 32 - 1
U64_MAX = 2 ** 64 - 1


class UpstashModel(BaseModel):
    """Base model for every DTO exchanged with the API."""
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )


class UpstashRequest(UpstashModel):
    """Base model for request bodies."""

    def to_payload(self) -> Dict[str, Any]:
        """Render the JSON body sent on the wire; unset optional fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_payload(value: Any) -> Any:
    """Convert a request body (model, list of models, plain JSON) to JSON-ready data."""
    if isinstance(value, UpstashRequest):
        return value.to_payload()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [dump_payload(item) for item in value]
    if isinstance(value, dict):
        return {key: dump_payload(item) for key, item in value.items()}
    if isinstance(value, Enum):
        return value.value
    return value
