"""Shared fixtures for Tenancy unit tests."""

from unittest.mock import AsyncMock

import pytest

from shared_kernel.identity_service.protocols import IdentityServiceProvider
from shared_kernel.identity_service.types import (
    AttributeDefinition,
    Role,
    TenantUser,
)
from tenancy.domain.value_objects import IdentityContext, TenantMembership


@pytest.fixture
def mock_identity_service() -> AsyncMock:
    """Identity service mock with a minimal happy-path catalog."""
    service = AsyncMock(spec=IdentityServiceProvider)
    service.list_user_attributes.return_value = [
        AttributeDefinition(
            attribute_name="age", display_name="Age", attribute_type="number"
        ),
    ]
    service.list_tenant_attributes.return_value = [
        AttributeDefinition(
            attribute_name="employees",
            display_name="Employees",
            attribute_type="number",
        ),
        AttributeDefinition(
            attribute_name="region", display_name="Region", attribute_type="string"
        ),
    ]
    service.list_roles.return_value = [Role(role_name="admin")]
    service.create_saas_user.return_value = "saas-user-1"
    service.create_tenant_user.return_value = TenantUser(
        id="tenant-user-1", tenant_id="t-1", email="new@example.com"
    )
    service.create_tenant.return_value = "t-new"
    return service


@pytest.fixture
def member_context() -> IdentityContext:
    """Caller belonging to tenant t-1."""
    return IdentityContext(
        user_id="caller-1",
        email="owner@example.com",
        tenants=(
            TenantMembership(tenant_id="t-1", tenant_name="Acme", role_names=("admin",)),
        ),
    )


@pytest.fixture
def tenantless_context() -> IdentityContext:
    """Caller with no tenant memberships."""
    return IdentityContext(user_id="caller-2", email="drifter@example.com")
