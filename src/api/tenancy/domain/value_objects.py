"""Value objects for the Tenancy domain.

Value objects are immutable descriptors of the caller, the tenants they
belong to and the records the gateway produces. None of them are mutated
after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from shared_kernel.identity_service.types import EnvRoleAssignment, UserInfo


@dataclass(frozen=True)
class TenantMembership:
    """A tenant the caller belongs to, with the roles held there."""

    tenant_id: str
    tenant_name: str = ""
    role_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class IdentityContext:
    """The resolved identity of the caller for one request.

    Produced once per request by the authentication dependency and passed
    explicitly into every workflow call. Never persisted.
    """

    user_id: str
    email: str
    tenants: tuple[TenantMembership, ...] = ()

    @property
    def tenant_ids(self) -> tuple[str, ...]:
        """IDs of all tenants the caller belongs to, in order."""
        return tuple(membership.tenant_id for membership in self.tenants)

    def belongs_to(self, tenant_id: str) -> bool:
        """Check whether the caller holds a membership in the given tenant."""
        return any(m.tenant_id == tenant_id for m in self.tenants)

    @classmethod
    def from_user_info(cls, user_info: UserInfo) -> IdentityContext:
        """Build an identity context from the identity service's userinfo.

        Args:
            user_info: Userinfo resolved from the caller's ID token

        Returns:
            IdentityContext carrying the caller's memberships in order
        """
        return cls(
            user_id=user_info.id,
            email=user_info.email,
            tenants=tuple(
                TenantMembership(
                    tenant_id=tenant.id,
                    tenant_name=tenant.name,
                    role_names=tenant.role_names,
                )
                for tenant in user_info.tenants
            ),
        )


@dataclass(frozen=True)
class DeletionLogRecord:
    """Audit record of a user removed from a tenant.

    Written exactly once per successful deletion. ``id`` is None until the
    record has been stored.
    """

    tenant_id: str
    user_id: str
    email: str
    deleted_at: datetime
    id: int | None = None


@dataclass(frozen=True)
class InvitationRequest:
    """An invitation to submit to the identity service.

    ``access_token`` is the issuer's own access token, forwarded verbatim.
    """

    email: str
    tenant_id: str
    access_token: str
    envs: tuple[EnvRoleAssignment, ...]
