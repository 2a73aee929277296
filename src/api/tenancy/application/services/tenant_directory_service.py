"""Tenant directory service.

Read-only pass-throughs to the identity service and the audit store: tenant
users, attribute definitions, the deletion log and pricing plans.
"""

from __future__ import annotations

from typing import Any

from shared_kernel.exceptions import UpstreamServiceError
from shared_kernel.identity_service.protocols import IdentityServiceProvider
from shared_kernel.identity_service.types import AttributeDefinition, TenantUser
from tenancy.application.observability import (
    DefaultTenantDirectoryProbe,
    TenantDirectoryProbe,
)
from tenancy.domain.exceptions import TenantAccessError
from tenancy.domain.membership_guard import TenantMembershipGuard
from tenancy.domain.validation import require_fields
from tenancy.domain.value_objects import DeletionLogRecord, IdentityContext
from tenancy.ports.repositories import IDeletionLogRepository


class TenantDirectoryService:
    """Application service for read-only tenant lookups."""

    def __init__(
        self,
        identity_service: IdentityServiceProvider,
        deletion_log_repository: IDeletionLogRepository,
        guard: TenantMembershipGuard | None = None,
        probe: TenantDirectoryProbe | None = None,
    ):
        """Initialize TenantDirectoryService with dependencies.

        Args:
            identity_service: Identity service client
            deletion_log_repository: Audit store for deletion records
            guard: Tenant membership guard
            probe: Optional domain probe for observability
        """
        self._identity_service = identity_service
        self._deletion_log_repository = deletion_log_repository
        self._guard = guard or TenantMembershipGuard()
        self._probe = probe or DefaultTenantDirectoryProbe()

    def _ensure_member(
        self, operation: str, context: IdentityContext | None, tenant_id: str
    ) -> None:
        require_fields({"tenant_id": tenant_id})
        try:
            self._guard.ensure_member(context, tenant_id)
        except TenantAccessError as e:
            self._probe.tenant_access_denied(
                operation=operation, tenant_id=tenant_id, reason=str(e)
            )
            raise

    async def list_tenant_users(
        self, context: IdentityContext | None, tenant_id: str
    ) -> list[TenantUser]:
        """List the members of a tenant the caller belongs to.

        Raises:
            MissingRequiredFieldError: If tenant id is empty
            TenantAccessError: If the caller does not belong to the tenant
            IdentityServiceError: If the identity service call fails
        """
        self._ensure_member("list_tenant_users", context, tenant_id)
        try:
            users = await self._identity_service.list_tenant_users(tenant_id)
        except UpstreamServiceError as e:
            self._probe.lookup_failed(operation="list_tenant_users", error=e)
            raise
        self._probe.lookup_completed(operation="list_tenant_users", count=len(users))
        return users

    async def list_tenant_attribute_definitions(self) -> list[AttributeDefinition]:
        """List tenant attribute definitions."""
        try:
            definitions = await self._identity_service.list_tenant_attributes()
        except UpstreamServiceError as e:
            self._probe.lookup_failed(operation="list_tenant_attributes", error=e)
            raise
        self._probe.lookup_completed(
            operation="list_tenant_attributes", count=len(definitions)
        )
        return definitions

    async def list_user_attribute_definitions(self) -> list[AttributeDefinition]:
        """List user attribute definitions."""
        try:
            definitions = await self._identity_service.list_user_attributes()
        except UpstreamServiceError as e:
            self._probe.lookup_failed(operation="list_user_attributes", error=e)
            raise
        self._probe.lookup_completed(
            operation="list_user_attributes", count=len(definitions)
        )
        return definitions

    async def list_deletion_logs(
        self, context: IdentityContext | None, tenant_id: str
    ) -> list[DeletionLogRecord]:
        """List a tenant's deletion audit records, oldest first.

        Raises:
            MissingRequiredFieldError: If tenant id is empty
            TenantAccessError: If the caller does not belong to the tenant
            AuditLogStoreError: If the audit store query fails
        """
        self._ensure_member("list_deletion_logs", context, tenant_id)
        try:
            records = await self._deletion_log_repository.list_by_tenant(tenant_id)
        except UpstreamServiceError as e:
            self._probe.lookup_failed(operation="list_deletion_logs", error=e)
            raise
        self._probe.lookup_completed(operation="list_deletion_logs", count=len(records))
        return records

    async def get_pricing_plan(
        self, context: IdentityContext | None, plan_id: str
    ) -> dict[str, Any]:
        """Fetch a billing plan for a caller who belongs to some tenant.

        Raises:
            MissingRequiredFieldError: If plan id is empty
            TenantAccessError: If the caller belongs to no tenant
            IdentityServiceError: If the pricing API call fails
        """
        require_fields({"plan_id": plan_id})
        try:
            self._guard.ensure_has_tenants(context)
        except TenantAccessError as e:
            self._probe.tenant_access_denied(
                operation="get_pricing_plan", tenant_id=None, reason=str(e)
            )
            raise

        try:
            plan = await self._identity_service.get_pricing_plan(plan_id)
        except UpstreamServiceError as e:
            self._probe.lookup_failed(operation="get_pricing_plan", error=e)
            raise
        self._probe.lookup_completed(operation="get_pricing_plan")
        return plan
