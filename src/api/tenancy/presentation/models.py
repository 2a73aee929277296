"""Pydantic models for tenancy API requests and responses.

Request bodies use the browser client's camelCase field names. Required
fields are declared optional here so that a missing field reaches the
workflow and is reported as "Missing required fields: ..." rather than a
schema error.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from shared_kernel.identity_service.types import (
    AttributeDefinition,
    AttributeValue,
    Invitation,
    TenantUser,
)
from tenancy.application.value_objects import ProjectedAttribute
from tenancy.domain.value_objects import DeletionLogRecord, IdentityContext

AttributeValues = dict[str, AttributeValue]


class UserRegisterRequest(BaseModel):
    """Request model for registering a user into a tenant."""

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = Field(default=None, description="Email of the new user")
    password: str | None = Field(default=None, description="Initial password")
    tenant_id: str | None = Field(
        default=None, alias="tenantId", description="Tenant to register into"
    )
    user_attribute_values: AttributeValues | None = Field(
        default=None,
        alias="userAttributeValues",
        description="User attribute values keyed by attribute name",
    )


class UserDeleteRequest(BaseModel):
    """Request model for deleting a user from a tenant."""

    model_config = ConfigDict(populate_by_name=True)

    tenant_id: str | None = Field(default=None, alias="tenantId", description="Tenant ID")
    user_id: str | None = Field(
        default=None, alias="userId", description="Tenant user ID to delete"
    )


class SelfSignUpRequest(BaseModel):
    """Request model for self-service tenant sign-up."""

    model_config = ConfigDict(populate_by_name=True)

    tenant_name: str | None = Field(
        default=None, alias="tenantName", description="Name of the new tenant"
    )
    tenant_attribute_values: AttributeValues | None = Field(
        default=None,
        alias="tenantAttributeValues",
        description="Tenant attribute values keyed by attribute name",
    )
    user_attribute_values: AttributeValues | None = Field(
        default=None,
        alias="userAttributeValues",
        description="Attribute values for the caller's membership",
    )


class UserInvitationRequest(BaseModel):
    """Request model for inviting an email address into a tenant."""

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = Field(default=None, description="Email to invite")
    tenant_id: str | None = Field(
        default=None, alias="tenantId", description="Tenant to invite into"
    )


class MessageResponse(BaseModel):
    """Acknowledgement of a completed operation."""

    message: str = Field(..., description="Human-readable result")


class TenantMembershipResponse(BaseModel):
    """A tenant the caller belongs to."""

    id: str = Field(..., description="Tenant ID")
    name: str = Field(..., description="Tenant name")
    role_names: list[str] = Field(..., description="Roles held in the tenant")


class UserInfoResponse(BaseModel):
    """Response model for the resolved caller identity."""

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User email")
    tenants: list[TenantMembershipResponse] = Field(
        ..., description="Tenants the user belongs to"
    )

    @classmethod
    def from_domain(cls, context: IdentityContext) -> UserInfoResponse:
        """Convert an IdentityContext to API response.

        Args:
            context: Resolved caller identity

        Returns:
            UserInfoResponse
        """
        return cls(
            id=context.user_id,
            email=context.email,
            tenants=[
                TenantMembershipResponse(
                    id=m.tenant_id,
                    name=m.tenant_name,
                    role_names=list(m.role_names),
                )
                for m in context.tenants
            ],
        )


class TenantUserResponse(BaseModel):
    """Response model for a tenant member."""

    id: str = Field(..., description="Tenant user ID")
    tenant_id: str = Field(..., description="Tenant ID")
    email: str = Field(..., description="User email")
    attributes: dict[str, Any] = Field(..., description="User attribute values")

    @classmethod
    def from_domain(cls, user: TenantUser) -> TenantUserResponse:
        return cls(
            id=user.id,
            tenant_id=user.tenant_id,
            email=user.email,
            attributes=user.attributes,
        )


class AttributeDefinitionResponse(BaseModel):
    """Response model for an attribute definition."""

    attribute_name: str = Field(..., description="Attribute name")
    display_name: str = Field(..., description="Display name")
    attribute_type: str = Field(..., description="Declared type")

    @classmethod
    def from_domain(cls, definition: AttributeDefinition) -> AttributeDefinitionResponse:
        return cls(
            attribute_name=definition.attribute_name,
            display_name=definition.display_name,
            attribute_type=definition.attribute_type,
        )


class TenantAttributeDefinitionsResponse(BaseModel):
    """Response model for the tenant attribute definition list."""

    tenant_attributes: list[AttributeDefinitionResponse]


class UserAttributeDefinitionsResponse(BaseModel):
    """Response model for the user attribute definition list."""

    user_attributes: list[AttributeDefinitionResponse]


class ProjectedAttributeResponse(BaseModel):
    """A tenant attribute with its definition and current value."""

    display_name: str = Field(..., description="Display name")
    attribute_type: str = Field(..., description="Declared type")
    value: AttributeValue = Field(..., description="Current value, null if unset")

    @classmethod
    def from_domain(cls, attribute: ProjectedAttribute) -> ProjectedAttributeResponse:
        return cls(
            display_name=attribute.display_name,
            attribute_type=attribute.attribute_type,
            value=attribute.value,
        )


class DeletionLogResponse(BaseModel):
    """Response model for a deletion audit record."""

    id: int = Field(..., description="Record ID")
    tenant_id: str = Field(..., description="Tenant ID")
    user_id: str = Field(..., description="Deleted user ID")
    email: str = Field(..., description="Email of the deleted user")
    delete_at: str | None = Field(..., description="Deletion time (ISO 8601)")

    @classmethod
    def from_domain(cls, record: DeletionLogRecord) -> DeletionLogResponse:
        """Convert a DeletionLogRecord to API response.

        Args:
            record: Stored deletion record

        Returns:
            DeletionLogResponse
        """
        return cls(
            id=record.id or 0,
            tenant_id=record.tenant_id,
            user_id=record.user_id,
            email=record.email,
            delete_at=record.deleted_at.isoformat() if record.deleted_at else None,
        )


class InvitationEnvResponse(BaseModel):
    """Environment and roles granted by an invitation."""

    id: int
    role_names: list[str]


class InvitationResponse(BaseModel):
    """Response model for a tenant invitation."""

    id: str = Field(..., description="Invitation ID")
    email: str = Field(..., description="Invited email")
    status: str | None = Field(default=None, description="Invitation status")
    invitation_url: str | None = Field(default=None, description="Acceptance URL")
    expired_at: int | None = Field(default=None, description="Expiry (unix time)")
    envs: list[InvitationEnvResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, invitation: Invitation) -> InvitationResponse:
        return cls(
            id=invitation.id,
            email=invitation.email,
            status=invitation.status,
            invitation_url=invitation.invitation_url,
            expired_at=invitation.expired_at,
            envs=[
                InvitationEnvResponse(id=env.env_id, role_names=list(env.role_names))
                for env in invitation.envs
            ],
        )
