"""Protocol for self sign-up observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class SelfSignUpProbe(Protocol):
    """Domain probe for self-service tenant sign-up."""

    def tenant_signed_up(self, tenant_id: str, tenant_name: str, user_id: str) -> None:
        """Record that a tenant was created with the caller as its admin."""
        ...

    def sign_up_failed(self, tenant_name: str, error: Exception) -> None:
        """Record that an identity service step of the sign-up failed."""
        ...

    def with_context(self, context: ObservationContext) -> SelfSignUpProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultSelfSignUpProbe:
    """Default implementation of SelfSignUpProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultSelfSignUpProbe:
        return DefaultSelfSignUpProbe(logger=self._logger, context=context)

    def tenant_signed_up(self, tenant_id: str, tenant_name: str, user_id: str) -> None:
        self._logger.info(
            "tenant_signed_up",
            tenant_id=tenant_id,
            tenant_name=tenant_name,
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def sign_up_failed(self, tenant_name: str, error: Exception) -> None:
        self._logger.error(
            "tenant_sign_up_failed",
            tenant_name=tenant_name,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
