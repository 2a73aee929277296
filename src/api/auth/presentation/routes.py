"""Credential routes for the browser login flow.

The identity service's hosted login page redirects back to the browser
client with a temporary code. The client exchanges it here for an ID token,
an access token and a refresh token. The refresh token is kept in an
httponly cookie and exchanged on /refresh until /logout clears it.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from auth.observability import CredentialFlowProbe, DefaultCredentialFlowProbe
from infrastructure.identity_service_dependencies import get_identity_service
from infrastructure.settings import Settings, get_settings
from shared_kernel.identity_service.exceptions import IdentityServiceError
from shared_kernel.identity_service.protocols import IdentityServiceProvider
from shared_kernel.identity_service.types import Credentials

router = APIRouter(tags=["auth"])


def get_settings_dep() -> Settings:
    """Dependency for application settings."""
    return get_settings()


def get_credential_probe_dep() -> CredentialFlowProbe:
    """Dependency for credential flow probe."""
    return DefaultCredentialFlowProbe()


def _credentials_body(credentials: Credentials) -> dict[str, str | None]:
    return {
        "id_token": credentials.id_token,
        "access_token": credentials.access_token,
        "refresh_token": credentials.refresh_token,
    }


@router.get("/credentials")
async def exchange_code(
    response: Response,
    identity_service: Annotated[
        IdentityServiceProvider, Depends(get_identity_service)
    ],
    settings: Annotated[Settings, Depends(get_settings_dep)],
    probe: Annotated[CredentialFlowProbe, Depends(get_credential_probe_dep)],
    code: str = Query(...),
) -> dict[str, str | None]:
    """Exchange the login callback code for credentials.

    Sets the refresh token in an httponly cookie.

    Args:
        code: Temporary code from the identity service's login redirect

    Returns:
        The issued ID, access and refresh tokens

    Raises:
        HTTPException: 500 with the identity service payload if the exchange fails
    """
    try:
        credentials = await identity_service.get_credentials(code)
    except IdentityServiceError as e:
        probe.credential_exchange_failed(flow="temp_code", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.detail,
        ) from e

    if credentials.refresh_token:
        response.set_cookie(
            settings.refresh_token_cookie_name,
            credentials.refresh_token,
            httponly=True,
            secure=settings.refresh_token_cookie_secure,
            samesite="lax",
        )
    probe.credentials_issued(flow="temp_code")
    return _credentials_body(credentials)


@router.get("/refresh")
async def refresh(
    request: Request,
    identity_service: Annotated[
        IdentityServiceProvider, Depends(get_identity_service)
    ],
    settings: Annotated[Settings, Depends(get_settings_dep)],
    probe: Annotated[CredentialFlowProbe, Depends(get_credential_probe_dep)],
) -> dict[str, str | None]:
    """Exchange the refresh-token cookie for fresh credentials.

    Raises:
        HTTPException: 400 if the refresh cookie is absent
        HTTPException: 500 with the identity service payload if the exchange fails
    """
    refresh_token = request.cookies.get(settings.refresh_token_cookie_name)
    if not refresh_token:
        probe.refresh_token_missing()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Refresh token not found",
        )

    try:
        credentials = await identity_service.refresh_credentials(refresh_token)
    except IdentityServiceError as e:
        probe.credential_exchange_failed(flow="refresh_token", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.detail,
        ) from e

    probe.credentials_issued(flow="refresh_token")
    return _credentials_body(credentials)


@router.post("/logout")
async def logout(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings_dep)],
    probe: Annotated[CredentialFlowProbe, Depends(get_credential_probe_dep)],
) -> dict[str, str]:
    """Clear the refresh-token cookie."""
    response.delete_cookie(
        settings.refresh_token_cookie_name,
        httponly=True,
        secure=settings.refresh_token_cookie_secure,
        samesite="lax",
    )
    probe.logged_out()
    return {"message": "Logged out successfully"}
