"""Repository protocols (ports) for the Tenancy bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tenancy.domain.value_objects import DeletionLogRecord


@runtime_checkable
class IDeletionLogRepository(Protocol):
    """Append-only store of user deletion audit records.

    Records are written once and never updated or deleted by the gateway.
    """

    async def append(self, record: DeletionLogRecord) -> DeletionLogRecord:
        """Persist a new deletion record in its own transaction.

        Args:
            record: The record to store (its ``id`` is ignored)

        Returns:
            The stored record with its surrogate ``id`` assigned

        Raises:
            AuditLogStoreError: If the record could not be written
        """
        ...

    async def list_by_tenant(self, tenant_id: str) -> list[DeletionLogRecord]:
        """List all deletion records of a tenant, oldest first.

        Args:
            tenant_id: Tenant to query

        Returns:
            Records ordered by deletion time, then id

        Raises:
            AuditLogStoreError: If the records could not be read
        """
        ...
