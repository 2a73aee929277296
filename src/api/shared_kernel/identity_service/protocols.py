"""Identity service provider protocol.

Defines the typed boundary over the external identity/authorization service
(accounts, tenants, memberships, roles, attributes, invitations, billing
plans). The primary implementation is ``SaaSusIdentityClient``; the protocol
lets workflows be tested against mocks.

Every operation surfaces failures as ``IdentityServiceError`` without retrying
or reinterpreting them.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from shared_kernel.identity_service.types import (
    AttributeDefinition,
    AttributeValue,
    Credentials,
    EnvRoleAssignment,
    Invitation,
    Role,
    TenantRecord,
    TenantUser,
    UserInfo,
)


@runtime_checkable
class IdentityServiceProvider(Protocol):
    """Protocol for identity service clients."""

    async def get_user_info(self, id_token: str) -> UserInfo:
        """Resolve the user behind an ID token.

        Raises:
            IdentityServiceError: If the token is rejected or the call fails
        """
        ...

    async def get_credentials(self, code: str) -> Credentials:
        """Exchange a temporary login code for credentials."""
        ...

    async def refresh_credentials(self, refresh_token: str) -> Credentials:
        """Exchange a refresh token for fresh credentials."""
        ...

    async def create_saas_user(self, email: str, password: str) -> str:
        """Create an account and return its user ID."""
        ...

    async def create_tenant(
        self,
        name: str,
        attributes: Mapping[str, AttributeValue],
        back_office_staff_email: str,
    ) -> str:
        """Create a tenant and return its tenant ID."""
        ...

    async def get_tenant(self, tenant_id: str) -> TenantRecord:
        """Fetch a tenant, including its current attribute values."""
        ...

    async def list_tenant_users(self, tenant_id: str) -> list[TenantUser]:
        """List all memberships of a tenant."""
        ...

    async def create_tenant_user(
        self,
        tenant_id: str,
        email: str,
        attributes: Mapping[str, AttributeValue],
    ) -> TenantUser:
        """Attach an existing account to a tenant with the given attributes."""
        ...

    async def get_tenant_user(self, tenant_id: str, user_id: str) -> TenantUser:
        """Fetch one tenant membership."""
        ...

    async def delete_tenant_user(self, tenant_id: str, user_id: str) -> None:
        """Remove a membership from a tenant."""
        ...

    async def list_roles(self) -> list[Role]:
        """List the role catalog."""
        ...

    async def assign_tenant_user_roles(
        self,
        tenant_id: str,
        user_id: str,
        env_id: int,
        role_names: Sequence[str],
    ) -> None:
        """Assign roles to a tenant membership within one environment."""
        ...

    async def list_tenant_attributes(self) -> list[AttributeDefinition]:
        """List tenant attribute definitions."""
        ...

    async def list_user_attributes(self) -> list[AttributeDefinition]:
        """List user attribute definitions."""
        ...

    async def list_tenant_invitations(self, tenant_id: str) -> list[Invitation]:
        """List invitations issued for a tenant."""
        ...

    async def create_tenant_invitation(
        self,
        tenant_id: str,
        email: str,
        access_token: str,
        envs: Sequence[EnvRoleAssignment],
    ) -> Invitation:
        """Invite an email address into a tenant.

        Args:
            tenant_id: Tenant to invite into
            email: Address of the invitee
            access_token: The issuer's access token, forwarded verbatim
            envs: Environments and roles the invitation grants
        """
        ...

    async def get_pricing_plan(self, plan_id: str) -> dict[str, Any]:
        """Fetch a billing plan as returned by the pricing API."""
        ...
