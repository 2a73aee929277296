"""PostgreSQL implementation of IDeletionLogRepository.

Stores user deletion audit records in the delete_user_log table. Every
append runs in its own transaction so a recorded deletion is durable as soon
as ``append`` returns.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy.domain.value_objects import DeletionLogRecord
from tenancy.infrastructure.models import DeleteUserLogModel
from tenancy.infrastructure.observability import (
    DefaultDeletionLogRepositoryProbe,
    DeletionLogRepositoryProbe,
)
from tenancy.ports.exceptions import AuditLogStoreError
from tenancy.ports.repositories import IDeletionLogRepository


class DeletionLogRepository(IDeletionLogRepository):
    """Repository for deletion audit records in PostgreSQL."""

    def __init__(
        self,
        session: AsyncSession,
        probe: DeletionLogRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultDeletionLogRepositoryProbe()

    async def append(self, record: DeletionLogRecord) -> DeletionLogRecord:
        """Insert a deletion record in a dedicated transaction.

        Args:
            record: The record to store

        Returns:
            The stored record with its surrogate id

        Raises:
            AuditLogStoreError: If the insert fails
        """
        model = DeleteUserLogModel(
            tenant_id=record.tenant_id,
            user_id=record.user_id,
            email=record.email,
            delete_at=record.deleted_at,
        )
        try:
            async with self._session.begin():
                self._session.add(model)
                await self._session.flush()
        except SQLAlchemyError as e:
            self._probe.store_operation_failed(operation="append", error=e)
            raise AuditLogStoreError(f"Failed to write deletion log: {e}") from e

        self._probe.deletion_log_recorded(
            record_id=model.id,
            tenant_id=model.tenant_id,
            user_id=model.user_id,
        )
        return self._to_domain(model)

    async def list_by_tenant(self, tenant_id: str) -> list[DeletionLogRecord]:
        """List a tenant's deletion records, oldest first.

        Args:
            tenant_id: Tenant to query

        Returns:
            Records ordered by deletion time, then id

        Raises:
            AuditLogStoreError: If the query fails
        """
        stmt = (
            select(DeleteUserLogModel)
            .where(DeleteUserLogModel.tenant_id == tenant_id)
            .order_by(DeleteUserLogModel.delete_at, DeleteUserLogModel.id)
        )
        try:
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            self._probe.store_operation_failed(operation="list_by_tenant", error=e)
            raise AuditLogStoreError(f"Failed to read deletion logs: {e}") from e

        self._probe.deletion_logs_listed(tenant_id=tenant_id, count=len(models))
        return [self._to_domain(model) for model in models]

    @staticmethod
    def _to_domain(model: DeleteUserLogModel) -> DeletionLogRecord:
        return DeletionLogRecord(
            id=model.id,
            tenant_id=model.tenant_id,
            user_id=model.user_id,
            email=model.email,
            deleted_at=model.delete_at,
        )
