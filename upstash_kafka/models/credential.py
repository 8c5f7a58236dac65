"""Credential-related data models."""

from enum import Enum

from pydantic import Field

from .base import U64_MAX, UpstashModel, UpstashRequest


class CredentialState(str, Enum):
    """Lifecycle state of a credential."""
    ACTIVE = "active"
    DELETED = "deleted"


class CredentialPermissions(str, Enum):
    """What a credential is allowed to do on its topic."""
    ALL = "ALL"
    PRODUCE = "PRODUCE"
    CONSUME = "CONSUME"


class CreateCredentialRequest(UpstashRequest):
    """Request to create a credential scoped to a topic."""
    credential_name: str = Field(..., description="Credential name")
    topic: str = Field(..., description="Topic the credential is bound to")
    permissions: CredentialPermissions = Field(..., description="Granted permissions")
    cluster_id: str = Field(..., description="Owning cluster ID")


class CredentialResponse(UpstashModel):
    """A credential as reported by the API."""
    credential_id: str = Field(..., description="Credential ID")
    credential_name: str = Field(..., description="Credential name")
    topic: str = Field(..., description="Topic the credential is bound to")
    permissions: CredentialPermissions = Field(..., description="Granted permissions")
    cluster_id: str = Field(..., description="Owning cluster ID")
    username: str = Field(..., description="Credential username")
    creation_time: int = Field(..., ge=0, le=U64_MAX, description="Creation time (epoch seconds)")
    state: CredentialState = Field(..., description="Credential state")
    password: str = Field(..., description="Credential password")
    encoded_username: str = Field(..., description="Base64 encoded username")
