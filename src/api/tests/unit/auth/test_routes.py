"""Unit tests for credential routes.

The identity service is replaced with an AsyncMock so the login, refresh and
logout flows can be exercised without the SaaSus API.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from infrastructure.settings import Settings
from shared_kernel.identity_service.exceptions import IdentityServiceError
from shared_kernel.identity_service.protocols import IdentityServiceProvider
from shared_kernel.identity_service.types import Credentials

COOKIE_NAME = "SaaSusRefreshToken"


@pytest.fixture
def mock_identity_service() -> AsyncMock:
    return AsyncMock(spec=IdentityServiceProvider)


@pytest.fixture
def mock_probe() -> MagicMock:
    """Create mock observability probe."""
    from auth.observability import CredentialFlowProbe

    return MagicMock(spec=CredentialFlowProbe)


@pytest.fixture
def test_client(mock_identity_service: AsyncMock, mock_probe: MagicMock) -> TestClient:
    """Create TestClient with mocked dependencies."""
    from auth.presentation.routes import (
        get_credential_probe_dep,
        get_settings_dep,
        router,
    )
    from infrastructure.identity_service_dependencies import get_identity_service

    app = FastAPI()
    app.dependency_overrides[get_identity_service] = lambda: mock_identity_service
    app.dependency_overrides[get_credential_probe_dep] = lambda: mock_probe
    app.dependency_overrides[get_settings_dep] = lambda: Settings(
        refresh_token_cookie_name=COOKIE_NAME,
        refresh_token_cookie_secure=False,
    )
    app.include_router(router)

    return TestClient(app)


class TestCredentialsEndpoint:
    """Tests for GET /credentials."""

    def test_returns_tokens_and_sets_refresh_cookie(
        self, test_client, mock_identity_service, mock_probe
    ):
        mock_identity_service.get_credentials.return_value = Credentials(
            id_token="id-1", access_token="acc-1", refresh_token="ref-1"
        )

        response = test_client.get("/credentials", params={"code": "temp-code"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id_token": "id-1",
            "access_token": "acc-1",
            "refresh_token": "ref-1",
        }
        set_cookie = response.headers["set-cookie"]
        assert f"{COOKIE_NAME}=ref-1" in set_cookie
        assert "httponly" in set_cookie.lower()
        assert "samesite=lax" in set_cookie.lower()
        mock_identity_service.get_credentials.assert_awaited_once_with("temp-code")
        mock_probe.credentials_issued.assert_called_once_with(flow="temp_code")

    def test_code_is_required(self, test_client, mock_identity_service):
        response = test_client.get("/credentials")

        assert response.status_code == 422
        mock_identity_service.get_credentials.assert_not_awaited()

    def test_exchange_failure_returns_500_with_payload(
        self, test_client, mock_identity_service, mock_probe
    ):
        mock_identity_service.get_credentials.side_effect = IdentityServiceError(
            "rejected", status_code=400, payload={"message": "code expired"}
        )

        response = test_client.get("/credentials", params={"code": "stale"})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"] == {"message": "code expired"}
        mock_probe.credential_exchange_failed.assert_called_once()
        assert "set-cookie" not in response.headers


class TestRefreshEndpoint:
    """Tests for GET /refresh."""

    def test_exchanges_refresh_cookie(self, test_client, mock_identity_service):
        mock_identity_service.refresh_credentials.return_value = Credentials(
            id_token="id-2", access_token="acc-2"
        )
        test_client.cookies.set(COOKIE_NAME, "ref-1")

        response = test_client.get("/refresh")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id_token": "id-2",
            "access_token": "acc-2",
            "refresh_token": None,
        }
        mock_identity_service.refresh_credentials.assert_awaited_once_with("ref-1")

    def test_missing_cookie_returns_400(self, test_client, mock_identity_service, mock_probe):
        response = test_client.get("/refresh")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Refresh token not found"
        mock_identity_service.refresh_credentials.assert_not_awaited()
        mock_probe.refresh_token_missing.assert_called_once()

    def test_refresh_failure_returns_500(self, test_client, mock_identity_service):
        mock_identity_service.refresh_credentials.side_effect = IdentityServiceError(
            "rejected", status_code=401, payload={"message": "revoked"}
        )
        test_client.cookies.set(COOKIE_NAME, "ref-1")

        response = test_client.get("/refresh")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"] == {"message": "revoked"}


class TestLogoutEndpoint:
    """Tests for POST /logout."""

    def test_clears_refresh_cookie(self, test_client, mock_probe):
        response = test_client.post("/logout")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Logged out successfully"}
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith(f'{COOKIE_NAME}=""') or set_cookie.startswith(
            f"{COOKIE_NAME}=;"
        )
        assert "max-age=0" in set_cookie.lower()
        mock_probe.logged_out.assert_called_once()
