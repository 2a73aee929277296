"""Domain probe for deletion log repository operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class DeletionLogRepositoryProbe(Protocol):
    """Domain probe for deletion log persistence."""

    def deletion_log_recorded(
        self, record_id: int, tenant_id: str, user_id: str
    ) -> None:
        """Record that a deletion record was stored."""
        ...

    def deletion_logs_listed(self, tenant_id: str, count: int) -> None:
        """Record that a tenant's deletion records were read."""
        ...

    def store_operation_failed(self, operation: str, error: Exception) -> None:
        """Record that the database rejected an audit store operation."""
        ...

    def with_context(self, context: ObservationContext) -> DeletionLogRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDeletionLogRepositoryProbe:
    """Default implementation of DeletionLogRepositoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultDeletionLogRepositoryProbe:
        return DefaultDeletionLogRepositoryProbe(logger=self._logger, context=context)

    def deletion_log_recorded(
        self, record_id: int, tenant_id: str, user_id: str
    ) -> None:
        self._logger.info(
            "deletion_log_recorded",
            record_id=record_id,
            tenant_id=tenant_id,
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def deletion_logs_listed(self, tenant_id: str, count: int) -> None:
        self._logger.debug(
            "deletion_logs_listed",
            tenant_id=tenant_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def store_operation_failed(self, operation: str, error: Exception) -> None:
        self._logger.error(
            "audit_store_operation_failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
