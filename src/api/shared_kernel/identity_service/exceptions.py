"""Exceptions for identity service operations."""

from __future__ import annotations

from typing import Any

from shared_kernel.exceptions import UpstreamServiceError


class IdentityServiceError(UpstreamServiceError):
    """Raised when the identity service rejects or fails a request.

    Attributes:
        status_code: HTTP status returned by the identity service, or None
            when no response was received.
        payload: Parsed error body, forwarded verbatim.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ):
        super().__init__(message, payload=payload)
        self.status_code = status_code


class IdentityServiceConnectionError(IdentityServiceError):
    """Raised when the identity service cannot be reached."""

    pass
