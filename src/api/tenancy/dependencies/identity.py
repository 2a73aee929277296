"""Caller identity resolution for FastAPI endpoints.

Every authenticated endpoint resolves the ``Authorization: Bearer <ID token>``
header to an IdentityContext through the identity service's userinfo call.
FastAPI caches the result per request, so downstream dependencies share one
lookup.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from infrastructure.identity_service_dependencies import get_identity_service
from shared_kernel.identity_service.exceptions import IdentityServiceError
from shared_kernel.identity_service.protocols import IdentityServiceProvider
from shared_kernel.observability_context import ObservationContext
from tenancy.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from tenancy.domain.value_objects import IdentityContext

# Upstream statuses meaning the ID token itself was rejected
_REJECTED_TOKEN_STATUSES = frozenset({400, 401, 403, 404})

bearer_scheme = HTTPBearer(auto_error=False)


def get_authentication_probe() -> AuthenticationProbe:
    """Get AuthenticationProbe instance.

    Returns:
        DefaultAuthenticationProbe instance for observability
    """
    return DefaultAuthenticationProbe()


async def get_identity_context(
    identity_service: Annotated[
        IdentityServiceProvider, Depends(get_identity_service)
    ],
    auth_probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ] = None,
) -> IdentityContext:
    """Resolve the caller's identity from the bearer ID token.

    Args:
        identity_service: Identity service client
        auth_probe: Authentication probe for observability
        credentials: Bearer credentials from the Authorization header

    Returns:
        IdentityContext for the caller

    Raises:
        HTTPException 401: If the token is missing or rejected
        HTTPException 500: If the identity service fails for another reason
    """
    if credentials is None or not credentials.credentials:
        auth_probe.authentication_failed(reason="Missing authorization")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user_info = await identity_service.get_user_info(credentials.credentials)
    except IdentityServiceError as e:
        if e.status_code in _REJECTED_TOKEN_STATUSES:
            auth_probe.authentication_failed(reason="Invalid ID token")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid ID token",
                headers={"WWW-Authenticate": "Bearer"},
            ) from e
        auth_probe.authentication_failed(reason=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.detail,
        ) from e

    context = IdentityContext.from_user_info(user_info)
    auth_probe.user_authenticated(
        user_id=context.user_id,
        email=context.email,
        tenant_count=len(context.tenants),
    )
    return context


def get_observation_context(
    request: Request,
    identity: Annotated[IdentityContext, Depends(get_identity_context)],
) -> ObservationContext:
    """Build the observation context bound to this request's probes.

    Args:
        request: Incoming request (X-Request-ID is used when present)
        identity: Resolved caller identity

    Returns:
        ObservationContext carrying the request id and caller id
    """
    return ObservationContext(
        request_id=request.headers.get("X-Request-ID"),
        user_id=identity.user_id,
    )
