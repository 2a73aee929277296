"""Unit tests for the tenant membership guard."""

import pytest

from tenancy.domain.exceptions import (
    NoTenantsError,
    NoUserError,
    TenantAccessError,
    TenantNotBelongedError,
)
from tenancy.domain.membership_guard import MembershipDecision, TenantMembershipGuard
from tenancy.domain.value_objects import IdentityContext, TenantMembership


@pytest.fixture
def guard() -> TenantMembershipGuard:
    return TenantMembershipGuard()


@pytest.fixture
def member() -> IdentityContext:
    """Caller belonging to tenants t-1 and t-2."""
    return IdentityContext(
        user_id="user-1",
        email="alice@example.com",
        tenants=(
            TenantMembership(tenant_id="t-1", tenant_name="Acme"),
            TenantMembership(tenant_id="t-2", tenant_name="Globex"),
        ),
    )


@pytest.fixture
def loner() -> IdentityContext:
    """Caller with no tenant memberships."""
    return IdentityContext(user_id="user-2", email="bob@example.com")


class TestAuthorize:
    """Tests for TenantMembershipGuard.authorize."""

    def test_allows_member_of_target_tenant(self, guard, member):
        assert guard.authorize(member, "t-2") is MembershipDecision.ALLOWED

    def test_rejects_missing_context(self, guard):
        assert guard.authorize(None, "t-1") is MembershipDecision.NO_USER

    def test_distinguishes_no_tenants_from_not_belonged(self, guard, member, loner):
        """A caller with no memberships is reported differently from a stranger."""
        assert guard.authorize(loner, "t-1") is MembershipDecision.NO_TENANTS
        assert (
            guard.authorize(member, "t-9")
            is MembershipDecision.TENANT_NOT_BELONGED
        )

    def test_tenant_ids_compare_exactly(self, guard, member):
        """Tenant IDs are not case-folded or trimmed."""
        assert (
            guard.authorize(member, "T-1") is MembershipDecision.TENANT_NOT_BELONGED
        )
        assert (
            guard.authorize(member, " t-1") is MembershipDecision.TENANT_NOT_BELONGED
        )


class TestEnsureMember:
    """Tests for TenantMembershipGuard.ensure_member."""

    def test_returns_none_for_member(self, guard, member):
        assert guard.ensure_member(member, "t-1") is None

    def test_raises_no_user(self, guard):
        with pytest.raises(NoUserError, match="No user"):
            guard.ensure_member(None, "t-1")

    def test_raises_no_tenants(self, guard, loner):
        with pytest.raises(NoTenantsError, match="No tenants found for the user"):
            guard.ensure_member(loner, "t-1")

    def test_raises_not_belonged(self, guard, member):
        with pytest.raises(TenantNotBelongedError) as exc_info:
            guard.ensure_member(member, "t-9")

        assert str(exc_info.value) == "Tenant that does not belong"
        assert exc_info.value.tenant_id == "t-9"

    def test_all_denials_share_base_class(self, guard, member, loner):
        for context, tenant_id in ((None, "t-1"), (loner, "t-1"), (member, "t-9")):
            with pytest.raises(TenantAccessError):
                guard.ensure_member(context, tenant_id)


class TestEnsureHasTenants:
    """Tests for TenantMembershipGuard.ensure_has_tenants."""

    def test_accepts_any_membership(self, guard, member):
        assert guard.ensure_has_tenants(member) is None

    def test_rejects_caller_without_tenants(self, guard, loner):
        with pytest.raises(NoTenantsError):
            guard.ensure_has_tenants(loner)

    def test_rejects_missing_context(self, guard):
        with pytest.raises(NoUserError):
            guard.ensure_has_tenants(None)
