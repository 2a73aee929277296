"""Protocol for user registration observability.

Defines the interface for domain probes that capture application-level
domain events for the user registration workflow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class UserRegistrationProbe(Protocol):
    """Domain probe for user registration."""

    def tenant_access_denied(self, tenant_id: str, reason: str) -> None:
        """Record that the caller was refused access to the tenant."""
        ...

    def user_registered(
        self, tenant_id: str, user_id: str, email: str, role_name: str
    ) -> None:
        """Record that a user was registered and given a role."""
        ...

    def registration_failed(self, tenant_id: str, email: str, error: Exception) -> None:
        """Record that an identity service step of the registration failed."""
        ...

    def with_context(self, context: ObservationContext) -> UserRegistrationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserRegistrationProbe:
    """Default implementation of UserRegistrationProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultUserRegistrationProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserRegistrationProbe(logger=self._logger, context=context)

    def tenant_access_denied(self, tenant_id: str, reason: str) -> None:
        """Record that the caller was refused access to the tenant."""
        self._logger.warning(
            "tenant_access_denied",
            operation="register_user",
            tenant_id=tenant_id,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def user_registered(
        self, tenant_id: str, user_id: str, email: str, role_name: str
    ) -> None:
        """Record that a user was registered and given a role."""
        self._logger.info(
            "user_registered",
            tenant_id=tenant_id,
            user_id=user_id,
            email=email,
            role_name=role_name,
            **self._get_context_kwargs(),
        )

    def registration_failed(self, tenant_id: str, email: str, error: Exception) -> None:
        """Record that an identity service step of the registration failed."""
        self._logger.error(
            "user_registration_failed",
            tenant_id=tenant_id,
            email=email,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
