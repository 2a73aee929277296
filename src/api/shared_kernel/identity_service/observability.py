"""Domain probe for identity service calls."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class IdentityServiceProbe(Protocol):
    """Domain probe for identity service client operations."""

    def request_succeeded(self, operation: str, status_code: int) -> None:
        """Record that an identity service call succeeded."""
        ...

    def request_rejected(
        self, operation: str, status_code: int, payload: Any
    ) -> None:
        """Record that the identity service answered with an error status."""
        ...

    def request_failed(self, operation: str, error: Exception) -> None:
        """Record that an identity service call failed without a response."""
        ...

    def with_context(self, context: ObservationContext) -> IdentityServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultIdentityServiceProbe:
    """Default implementation of IdentityServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultIdentityServiceProbe:
        return DefaultIdentityServiceProbe(logger=self._logger, context=context)

    def request_succeeded(self, operation: str, status_code: int) -> None:
        self._logger.debug(
            "identity_service_request_succeeded",
            operation=operation,
            status_code=status_code,
            **self._get_context_kwargs(),
        )

    def request_rejected(
        self, operation: str, status_code: int, payload: Any
    ) -> None:
        self._logger.warning(
            "identity_service_request_rejected",
            operation=operation,
            status_code=status_code,
            payload=payload,
            **self._get_context_kwargs(),
        )

    def request_failed(self, operation: str, error: Exception) -> None:
        self._logger.error(
            "identity_service_request_failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
