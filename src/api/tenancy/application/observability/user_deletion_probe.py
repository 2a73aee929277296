"""Protocol for user deletion observability.

Deletion touches two systems: the identity service removes the membership
and the audit store records it. The probe distinguishes a failure before the
removal from a failure to record a removal that already happened.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class UserDeletionProbe(Protocol):
    """Domain probe for user deletion."""

    def tenant_access_denied(self, tenant_id: str, reason: str) -> None:
        """Record that the caller was refused access to the tenant."""
        ...

    def user_deleted(self, tenant_id: str, user_id: str, email: str) -> None:
        """Record that a user was removed from a tenant and audited."""
        ...

    def deletion_failed(self, tenant_id: str, user_id: str, error: Exception) -> None:
        """Record that the identity service failed before the user was removed."""
        ...

    def audit_log_write_failed(
        self, tenant_id: str, user_id: str, email: str, error: Exception
    ) -> None:
        """Record that a completed removal could not be written to the audit log."""
        ...

    def with_context(self, context: ObservationContext) -> UserDeletionProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserDeletionProbe:
    """Default implementation of UserDeletionProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultUserDeletionProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserDeletionProbe(logger=self._logger, context=context)

    def tenant_access_denied(self, tenant_id: str, reason: str) -> None:
        """Record that the caller was refused access to the tenant."""
        self._logger.warning(
            "tenant_access_denied",
            operation="delete_user",
            tenant_id=tenant_id,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def user_deleted(self, tenant_id: str, user_id: str, email: str) -> None:
        """Record that a user was removed from a tenant and audited."""
        self._logger.info(
            "user_deleted",
            tenant_id=tenant_id,
            user_id=user_id,
            email=email,
            **self._get_context_kwargs(),
        )

    def deletion_failed(self, tenant_id: str, user_id: str, error: Exception) -> None:
        """Record that the identity service failed before the user was removed."""
        self._logger.error(
            "user_deletion_failed",
            tenant_id=tenant_id,
            user_id=user_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def audit_log_write_failed(
        self, tenant_id: str, user_id: str, email: str, error: Exception
    ) -> None:
        """Record that a completed removal could not be written to the audit log."""
        self._logger.error(
            "audit_log_write_failed",
            tenant_id=tenant_id,
            user_id=user_id,
            email=email,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
