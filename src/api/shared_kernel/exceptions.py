"""Exceptions shared by every bounded context.

Failures raised by systems the gateway does not own (the identity service,
the audit database) derive from ``UpstreamServiceError`` so the presentation
layer can report them uniformly.
"""

from __future__ import annotations

from typing import Any


class UpstreamServiceError(Exception):
    """Raised when a collaborating service or store fails.

    Attributes:
        payload: The error body returned by the upstream system, forwarded
            verbatim to the client. None when the failure produced no body
            (e.g. a connection error).
    """

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload

    @property
    def detail(self) -> Any:
        """Payload to surface to the caller."""
        if self.payload is not None:
            return self.payload
        return str(self)
