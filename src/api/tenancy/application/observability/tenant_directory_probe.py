"""Protocol for tenant directory observability.

Covers the read-only lookups: tenant users, attribute definitions, the
deletion audit log and pricing plans.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantDirectoryProbe(Protocol):
    """Domain probe for tenant directory lookups."""

    def tenant_access_denied(self, operation: str, tenant_id: str | None, reason: str) -> None:
        """Record that the caller was refused a lookup."""
        ...

    def lookup_completed(self, operation: str, count: int | None = None) -> None:
        """Record that a lookup succeeded."""
        ...

    def lookup_failed(self, operation: str, error: Exception) -> None:
        """Record that an upstream lookup failed."""
        ...

    def with_context(self, context: ObservationContext) -> TenantDirectoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantDirectoryProbe:
    """Default implementation of TenantDirectoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantDirectoryProbe:
        return DefaultTenantDirectoryProbe(logger=self._logger, context=context)

    def tenant_access_denied(self, operation: str, tenant_id: str | None, reason: str) -> None:
        self._logger.warning(
            "tenant_access_denied",
            operation=operation,
            tenant_id=tenant_id,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def lookup_completed(self, operation: str, count: int | None = None) -> None:
        self._logger.debug(
            "directory_lookup_completed",
            operation=operation,
            count=count,
            **self._get_context_kwargs(),
        )

    def lookup_failed(self, operation: str, error: Exception) -> None:
        self._logger.error(
            "directory_lookup_failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
