"""Protocol for tenant attribute projection observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantAttributeProjectionProbe(Protocol):
    """Domain probe for tenant attribute projection."""

    def tenant_access_denied(self, tenant_id: str, reason: str) -> None:
        """Record that the caller was refused access to the tenant."""
        ...

    def tenant_attributes_projected(self, tenant_id: str, attribute_count: int) -> None:
        """Record that a tenant's attributes were projected."""
        ...

    def projection_failed(self, tenant_id: str, error: Exception) -> None:
        """Record that fetching definitions or the tenant failed."""
        ...

    def with_context(
        self, context: ObservationContext
    ) -> TenantAttributeProjectionProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantAttributeProjectionProbe:
    """Default implementation of TenantAttributeProjectionProbe using structlog."""

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
    ) -> DefaultTenantAttributeProjectionProbe:
        return DefaultTenantAttributeProjectionProbe(
            logger=self._logger, context=context
        )

    def tenant_access_denied(self, tenant_id: str, reason: str) -> None:
        self._logger.warning(
            "tenant_access_denied",
            operation="project_tenant_attributes",
            tenant_id=tenant_id,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def tenant_attributes_projected(self, tenant_id: str, attribute_count: int) -> None:
        self._logger.debug(
            "tenant_attributes_projected",
            tenant_id=tenant_id,
            attribute_count=attribute_count,
            **self._get_context_kwargs(),
        )

    def projection_failed(self, tenant_id: str, error: Exception) -> None:
        self._logger.error(
            "tenant_attribute_projection_failed",
            tenant_id=tenant_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
