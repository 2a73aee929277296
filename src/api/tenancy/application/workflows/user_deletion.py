"""User deletion workflow.

Removes a membership from a tenant and appends an audit record of the
removal. The member's email is read before deletion, since the identity
service no longer knows it afterwards.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from shared_kernel.identity_service.exceptions import IdentityServiceError
from shared_kernel.identity_service.protocols import IdentityServiceProvider
from tenancy.application.observability import (
    DefaultUserDeletionProbe,
    UserDeletionProbe,
)
from tenancy.domain.exceptions import TenantAccessError
from tenancy.domain.membership_guard import TenantMembershipGuard
from tenancy.domain.validation import require_fields
from tenancy.domain.value_objects import DeletionLogRecord, IdentityContext
from tenancy.ports.exceptions import AuditLogStoreError
from tenancy.ports.repositories import IDeletionLogRepository


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserDeletionWorkflow:
    """Deletes a tenant member and records the deletion.

    The identity service removal and the audit write are not atomic. If the
    removal fails, nothing is recorded. If the audit write fails after the
    removal, the removal stands and the failure is reported as
    ``audit_log_write_failed``.
    """

    def __init__(
        self,
        identity_service: IdentityServiceProvider,
        deletion_log_repository: IDeletionLogRepository,
        guard: TenantMembershipGuard | None = None,
        probe: UserDeletionProbe | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize the workflow.

        Args:
            identity_service: Identity service client
            deletion_log_repository: Audit store for deletion records
            guard: Tenant membership guard
            probe: Optional domain probe for observability
            clock: Source of the deletion timestamp (UTC)
        """
        self._identity_service = identity_service
        self._deletion_log_repository = deletion_log_repository
        self._guard = guard or TenantMembershipGuard()
        self._probe = probe or DefaultUserDeletionProbe()
        self._clock = clock

    async def delete_user(
        self,
        context: IdentityContext | None,
        tenant_id: str,
        user_id: str,
    ) -> DeletionLogRecord:
        """Delete a user from a tenant and audit the deletion.

        Args:
            context: Resolved caller identity
            tenant_id: Tenant to remove the user from
            user_id: Membership ID of the user to remove

        Returns:
            The stored DeletionLogRecord

        Raises:
            MissingRequiredFieldError: If tenant id or user id is empty
            TenantAccessError: If the caller does not belong to the tenant
            IdentityServiceError: If fetching or deleting the member fails
            AuditLogStoreError: If the deletion could not be recorded
        """
        require_fields({"tenantId": tenant_id, "userId": user_id})

        try:
            self._guard.ensure_member(context, tenant_id)
        except TenantAccessError as e:
            self._probe.tenant_access_denied(tenant_id=tenant_id, reason=str(e))
            raise

        try:
            tenant_user = await self._identity_service.get_tenant_user(
                tenant_id=tenant_id, user_id=user_id
            )
            await self._identity_service.delete_tenant_user(
                tenant_id=tenant_id, user_id=user_id
            )
        except IdentityServiceError as e:
            self._probe.deletion_failed(tenant_id=tenant_id, user_id=user_id, error=e)
            raise

        record = DeletionLogRecord(
            tenant_id=tenant_id,
            user_id=user_id,
            email=tenant_user.email,
            deleted_at=self._clock(),
        )
        try:
            stored = await self._deletion_log_repository.append(record)
        except AuditLogStoreError as e:
            self._probe.audit_log_write_failed(
                tenant_id=tenant_id,
                user_id=user_id,
                email=tenant_user.email,
                error=e,
            )
            raise

        self._probe.user_deleted(
            tenant_id=tenant_id, user_id=user_id, email=tenant_user.email
        )
        return stored
