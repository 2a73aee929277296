"""Domain-oriented observability for the credential flow.

Follows the Domain Oriented Observability pattern from Martin Fowler.
"""

from typing import Protocol

import structlog


class CredentialFlowProbe(Protocol):
    """Observability probe for credential exchange and logout."""

    def credentials_issued(self, flow: str) -> None:
        """Called when the identity service issues credentials."""
        ...

    def credential_exchange_failed(self, flow: str, error: str) -> None:
        """Called when a code or refresh token exchange fails."""
        ...

    def refresh_token_missing(self) -> None:
        """Called when /refresh is requested without the refresh cookie."""
        ...

    def logged_out(self) -> None:
        """Called when the refresh cookie is cleared."""
        ...


class DefaultCredentialFlowProbe:
    """Default implementation of CredentialFlowProbe using structlog."""

    def __init__(self) -> None:
        self._logger = structlog.get_logger(__name__)

    def credentials_issued(self, flow: str) -> None:
        """Log when the identity service issues credentials."""
        self._logger.info(
            "credentials_issued",
            flow=flow,
        )

    def credential_exchange_failed(self, flow: str, error: str) -> None:
        """Log when a code or refresh token exchange fails."""
        self._logger.warning(
            "credential_exchange_failed",
            flow=flow,
            error=error,
        )

    def refresh_token_missing(self) -> None:
        """Log when /refresh is requested without the refresh cookie."""
        self._logger.warning("refresh_token_missing")

    def logged_out(self) -> None:
        """Log when the refresh cookie is cleared."""
        self._logger.info("logged_out")
