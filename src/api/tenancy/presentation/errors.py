"""Translation of tenancy exceptions into HTTP errors.

| Exception                                   | Status | Detail                    |
|---------------------------------------------|--------|---------------------------|
| InvalidRequestError, TenantAccessError      | 400    | exception message         |
| AuthenticationRequiredError                 | 401    | exception message         |
| UpstreamServiceError                        | 500    | upstream payload verbatim |
| anything else                               | 500    | "Failed to <operation>"   |
"""

from __future__ import annotations

from typing import Protocol

import structlog
from fastapi import HTTPException, status

from shared_kernel.exceptions import UpstreamServiceError
from tenancy.domain.exceptions import (
    AuthenticationRequiredError,
    InvalidRequestError,
    TenantAccessError,
)


class RequestFailureProbe(Protocol):
    """Domain probe for failures not already reported by a workflow probe."""

    def request_rejected(self, failure_detail: str, error: Exception) -> None:
        """Record a request refused with a client error."""
        ...

    def unexpected_error(self, failure_detail: str, error: Exception) -> None:
        """Record an exception with no HTTP mapping."""
        ...


class DefaultRequestFailureProbe:
    """Default implementation of RequestFailureProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def request_rejected(self, failure_detail: str, error: Exception) -> None:
        self._logger.warning(
            "request_rejected",
            failure_detail=failure_detail,
            error=str(error),
            error_type=type(error).__name__,
        )

    def unexpected_error(self, failure_detail: str, error: Exception) -> None:
        self._logger.exception(
            "unexpected_request_error",
            failure_detail=failure_detail,
            error=str(error),
            error_type=type(error).__name__,
        )


_probe: RequestFailureProbe = DefaultRequestFailureProbe()


def http_error(error: Exception, failure_detail: str) -> HTTPException:
    """Map an exception raised by a workflow to an HTTPException.

    Args:
        error: The exception raised while serving the request
        failure_detail: Detail used for unmapped exceptions
            (e.g. "Failed to register user")

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, (InvalidRequestError, TenantAccessError)):
        _probe.request_rejected(failure_detail=failure_detail, error=error)
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(error),
        )
    if isinstance(error, AuthenticationRequiredError):
        _probe.request_rejected(failure_detail=failure_detail, error=error)
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(error),
        )
    if isinstance(error, UpstreamServiceError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error.detail,
        )
    _probe.unexpected_error(failure_detail=failure_detail, error=error)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=failure_detail,
    )
