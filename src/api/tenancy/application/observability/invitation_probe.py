"""Protocol for tenant invitation observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class InvitationProbe(Protocol):
    """Domain probe for tenant invitations."""

    def tenant_access_denied(self, tenant_id: str, reason: str) -> None:
        """Record that the caller was refused access to the tenant."""
        ...

    def access_token_missing(self, tenant_id: str) -> None:
        """Record that an invitation was attempted without an issuer token."""
        ...

    def invitation_created(self, tenant_id: str, invitation_id: str, email: str) -> None:
        """Record that an invitation was issued."""
        ...

    def invitations_listed(self, tenant_id: str, count: int) -> None:
        """Record that a tenant's invitations were listed."""
        ...

    def invitation_failed(self, tenant_id: str, error: Exception) -> None:
        """Record that the identity service failed an invitation operation."""
        ...

    def with_context(self, context: ObservationContext) -> InvitationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultInvitationProbe:
    """Default implementation of InvitationProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultInvitationProbe:
        return DefaultInvitationProbe(logger=self._logger, context=context)

    def tenant_access_denied(self, tenant_id: str, reason: str) -> None:
        self._logger.warning(
            "tenant_access_denied",
            operation="invitation",
            tenant_id=tenant_id,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def access_token_missing(self, tenant_id: str) -> None:
        self._logger.warning(
            "invitation_access_token_missing",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def invitation_created(self, tenant_id: str, invitation_id: str, email: str) -> None:
        self._logger.info(
            "invitation_created",
            tenant_id=tenant_id,
            invitation_id=invitation_id,
            email=email,
            **self._get_context_kwargs(),
        )

    def invitations_listed(self, tenant_id: str, count: int) -> None:
        self._logger.debug(
            "invitations_listed",
            tenant_id=tenant_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def invitation_failed(self, tenant_id: str, error: Exception) -> None:
        self._logger.error(
            "invitation_failed",
            tenant_id=tenant_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
