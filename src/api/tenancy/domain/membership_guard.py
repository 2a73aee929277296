"""Tenant membership rule.

Every tenant-scoped operation must confirm that the caller belongs to the
tenant named in the request before any call to the identity service or the
audit store is made.
"""

from __future__ import annotations

from enum import StrEnum

from tenancy.domain.exceptions import (
    NoTenantsError,
    NoUserError,
    TenantNotBelongedError,
)
from tenancy.domain.value_objects import IdentityContext


class MembershipDecision(StrEnum):
    """Outcome of a membership check."""

    ALLOWED = "allowed"
    NO_USER = "no_user"
    NO_TENANTS = "no_tenants"
    TENANT_NOT_BELONGED = "tenant_not_belonged"


class TenantMembershipGuard:
    """Side-effect-free membership predicate with raising helpers."""

    def authorize(
        self, context: IdentityContext | None, tenant_id: str
    ) -> MembershipDecision:
        """Decide whether the caller may act on a tenant.

        Args:
            context: Resolved caller identity, or None if none was resolved
            tenant_id: Tenant the request targets

        Returns:
            ALLOWED, or the reason the caller is denied. A caller without any
            membership is reported as NO_TENANTS, distinct from a caller whose
            memberships exclude the target (TENANT_NOT_BELONGED).
        """
        if context is None:
            return MembershipDecision.NO_USER
        if not context.tenants:
            return MembershipDecision.NO_TENANTS
        if not context.belongs_to(tenant_id):
            return MembershipDecision.TENANT_NOT_BELONGED
        return MembershipDecision.ALLOWED

    def ensure_member(self, context: IdentityContext | None, tenant_id: str) -> None:
        """Require the caller to belong to a tenant.

        Raises:
            NoUserError: If no caller identity was resolved
            NoTenantsError: If the caller belongs to no tenant
            TenantNotBelongedError: If the caller does not belong to tenant_id
        """
        decision = self.authorize(context, tenant_id)
        if decision is MembershipDecision.NO_USER:
            raise NoUserError()
        if decision is MembershipDecision.NO_TENANTS:
            raise NoTenantsError()
        if decision is MembershipDecision.TENANT_NOT_BELONGED:
            raise TenantNotBelongedError(tenant_id)

    def ensure_has_tenants(self, context: IdentityContext | None) -> None:
        """Require the caller to belong to at least one tenant.

        Raises:
            NoUserError: If no caller identity was resolved
            NoTenantsError: If the caller belongs to no tenant
        """
        if context is None:
            raise NoUserError()
        if not context.tenants:
            raise NoTenantsError()
