"""Unit tests for TenantDirectoryService."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest

from shared_kernel.identity_service.exceptions import IdentityServiceError
from shared_kernel.identity_service.types import TenantUser
from tenancy.application.observability import TenantDirectoryProbe
from tenancy.application.services.tenant_directory_service import (
    TenantDirectoryService,
)
from tenancy.domain.exceptions import (
    MissingRequiredFieldError,
    NoTenantsError,
    TenantNotBelongedError,
)
from tenancy.domain.value_objects import DeletionLogRecord
from tenancy.ports.exceptions import AuditLogStoreError
from tenancy.ports.repositories import IDeletionLogRepository


@pytest.fixture
def mock_repository() -> Mock:
    repository = Mock(spec=IDeletionLogRepository)
    repository.list_by_tenant = AsyncMock(
        return_value=[
            DeletionLogRecord(
                id=1,
                tenant_id="t-1",
                user_id="u-1",
                email="gone@example.com",
                deleted_at=datetime(2025, 1, 1, tzinfo=UTC),
            )
        ]
    )
    return repository


@pytest.fixture
def mock_probe() -> Mock:
    return Mock(spec=TenantDirectoryProbe)


@pytest.fixture
def service(
    mock_identity_service: AsyncMock, mock_repository: Mock, mock_probe: Mock
) -> TenantDirectoryService:
    mock_identity_service.list_tenant_users.return_value = [
        TenantUser(id="u-1", tenant_id="t-1", email="a@example.com")
    ]
    mock_identity_service.get_pricing_plan.return_value = {
        "id": "plan-1",
        "name": "Basic",
    }
    return TenantDirectoryService(
        identity_service=mock_identity_service,
        deletion_log_repository=mock_repository,
        probe=mock_probe,
    )


class TestListTenantUsers:
    """Tests for TenantDirectoryService.list_tenant_users."""

    @pytest.mark.asyncio
    async def test_lists_member_tenant(
        self, service, mock_identity_service, mock_probe, member_context
    ):
        users = await service.list_tenant_users(member_context, "t-1")

        assert [u.id for u in users] == ["u-1"]
        mock_identity_service.list_tenant_users.assert_awaited_once_with("t-1")
        mock_probe.lookup_completed.assert_called_once_with(
            operation="list_tenant_users", count=1
        )

    @pytest.mark.asyncio
    async def test_rejects_foreign_tenant(
        self, service, mock_identity_service, member_context
    ):
        with pytest.raises(TenantNotBelongedError):
            await service.list_tenant_users(member_context, "t-2")

        mock_identity_service.list_tenant_users.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_requires_tenant_id(self, service, member_context):
        with pytest.raises(MissingRequiredFieldError):
            await service.list_tenant_users(member_context, None)


class TestAttributeDefinitions:
    """Tests for the attribute definition pass-throughs."""

    @pytest.mark.asyncio
    async def test_lists_tenant_attribute_definitions(
        self, service, mock_identity_service
    ):
        definitions = await service.list_tenant_attribute_definitions()

        assert [d.attribute_name for d in definitions] == ["employees", "region"]

    @pytest.mark.asyncio
    async def test_lists_user_attribute_definitions(self, service):
        definitions = await service.list_user_attribute_definitions()

        assert [d.attribute_name for d in definitions] == ["age"]

    @pytest.mark.asyncio
    async def test_upstream_failure_is_reported(
        self, service, mock_identity_service, mock_probe
    ):
        error = IdentityServiceError("down", status_code=503)
        mock_identity_service.list_user_attributes.side_effect = error

        with pytest.raises(IdentityServiceError):
            await service.list_user_attribute_definitions()

        mock_probe.lookup_failed.assert_called_once_with(
            operation="list_user_attributes", error=error
        )


class TestListDeletionLogs:
    """Tests for TenantDirectoryService.list_deletion_logs."""

    @pytest.mark.asyncio
    async def test_lists_member_tenant_logs(
        self, service, mock_repository, member_context
    ):
        records = await service.list_deletion_logs(member_context, "t-1")

        assert [r.email for r in records] == ["gone@example.com"]
        mock_repository.list_by_tenant.assert_awaited_once_with("t-1")

    @pytest.mark.asyncio
    async def test_rejects_foreign_tenant(
        self, service, mock_repository, member_context
    ):
        with pytest.raises(TenantNotBelongedError):
            await service.list_deletion_logs(member_context, "t-2")

        mock_repository.list_by_tenant.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_failure_is_reported(
        self, service, mock_repository, mock_probe, member_context
    ):
        error = AuditLogStoreError("db down")
        mock_repository.list_by_tenant.side_effect = error

        with pytest.raises(AuditLogStoreError):
            await service.list_deletion_logs(member_context, "t-1")

        mock_probe.lookup_failed.assert_called_once_with(
            operation="list_deletion_logs", error=error
        )


class TestGetPricingPlan:
    """Tests for TenantDirectoryService.get_pricing_plan."""

    @pytest.mark.asyncio
    async def test_returns_plan_for_any_member(
        self, service, mock_identity_service, member_context
    ):
        plan = await service.get_pricing_plan(member_context, "plan-1")

        assert plan == {"id": "plan-1", "name": "Basic"}
        mock_identity_service.get_pricing_plan.assert_awaited_once_with("plan-1")

    @pytest.mark.asyncio
    async def test_rejects_tenantless_caller(
        self, service, mock_identity_service, tenantless_context
    ):
        with pytest.raises(NoTenantsError):
            await service.get_pricing_plan(tenantless_context, "plan-1")

        mock_identity_service.get_pricing_plan.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_requires_plan_id(self, service, member_context):
        with pytest.raises(MissingRequiredFieldError, match="plan_id"):
            await service.get_pricing_plan(member_context, "")
