"""Domain probe for application startup and lifecycle events."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class StartupProbe(Protocol):
    """Domain probe for application startup operations."""

    def application_started(self, app_name: str, version: str) -> None:
        """Record that the application finished starting."""
        ...

    def cors_configured(self, allowed_origins: list[str]) -> None:
        """Record the CORS origins the application accepts."""
        ...

    def identity_service_configured(self, api_base_url: str, saas_id: str) -> None:
        """Record which identity service the gateway fronts."""
        ...

    def shutdown_cleanup_failed(self, resource: str, error: Exception) -> None:
        """Record that releasing a resource during shutdown failed."""
        ...

    def application_stopped(self) -> None:
        """Record that the application shut down."""
        ...

    def with_context(self, context: ObservationContext) -> StartupProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultStartupProbe:
        """Create a new probe with observation context bound."""
        return DefaultStartupProbe(logger=self._logger, context=context)

    def application_started(self, app_name: str, version: str) -> None:
        self._logger.info(
            "application_started",
            app_name=app_name,
            version=version,
            **self._get_context_kwargs(),
        )

    def cors_configured(self, allowed_origins: list[str]) -> None:
        self._logger.info(
            "cors_configured",
            allowed_origins=allowed_origins,
            **self._get_context_kwargs(),
        )

    def identity_service_configured(self, api_base_url: str, saas_id: str) -> None:
        """Log identity service target (non-sensitive details only)."""
        self._logger.info(
            "identity_service_configured",
            api_base_url=api_base_url,
            saas_id=saas_id,
            **self._get_context_kwargs(),
        )

    def shutdown_cleanup_failed(self, resource: str, error: Exception) -> None:
        self._logger.warning(
            "shutdown_cleanup_failed",
            resource=resource,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def application_stopped(self) -> None:
        self._logger.info("application_stopped", **self._get_context_kwargs())
