"""SaaSus Platform client implementation of IdentityServiceProvider.

Wraps the SaaSus Auth and Pricing REST APIs with an ``httpx.AsyncClient``.
Requests are signed with SAASUSSIGV1; error responses are surfaced as
``IdentityServiceError`` carrying the upstream payload verbatim.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence
from urllib.parse import quote

import httpx

from shared_kernel.identity_service.exceptions import (
    IdentityServiceConnectionError,
    IdentityServiceError,
)
from shared_kernel.identity_service.observability import (
    DefaultIdentityServiceProbe,
    IdentityServiceProbe,
)
from shared_kernel.identity_service.saasus.signature import SaaSusSignatureAuth
from shared_kernel.identity_service.types import (
    AttributeDefinition,
    AttributeValue,
    Credentials,
    EnvRoleAssignment,
    Invitation,
    Role,
    TenantRecord,
    TenantUser,
    UserInfo,
)


def _segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(value, safe="")


class SaaSusIdentityClient:
    """SaaSus Platform client implementing the IdentityServiceProvider protocol.

    The underlying ``httpx.AsyncClient`` is created lazily and reused for the
    lifetime of the instance; call ``close()`` on shutdown.
    """

    def __init__(
        self,
        auth_api_url: str,
        pricing_api_url: str,
        saas_id: str,
        api_key: str,
        secret_key: str,
        timeout: float = 30.0,
        probe: IdentityServiceProbe | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the SaaSus client.

        Args:
            auth_api_url: Base URL of the Auth API (e.g. "https://api.saasus.io/v1/auth")
            pricing_api_url: Base URL of the Pricing API
            saas_id: SaaS ID
            api_key: API key
            secret_key: Secret key used for request signatures
            timeout: Per-request timeout in seconds
            probe: Optional domain probe for observability
            transport: Optional httpx transport (tests inject ``httpx.MockTransport``)
        """
        self._auth_api_url = auth_api_url.rstrip("/")
        self._pricing_api_url = pricing_api_url.rstrip("/")
        self._signature = SaaSusSignatureAuth(
            saas_id=saas_id,
            api_key=api_key,
            secret_key=secret_key,
        )
        self._timeout = timeout
        self._transport = transport
        self._probe = probe or DefaultIdentityServiceProbe()
        self._client: httpx.AsyncClient | None = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Lazily initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                auth=self._signature,
                timeout=self._timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client, if one was opened."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        operation: str,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        json: Any = None,
    ) -> Any:
        """Send a signed request and decode the JSON response.

        Args:
            operation: Operation name used in probe events
            method: HTTP method
            url: Absolute request URL
            params: Optional query parameters
            json: Optional JSON body

        Returns:
            Decoded JSON body, or None for empty responses

        Raises:
            IdentityServiceConnectionError: If no response was received
            IdentityServiceError: If the service answered with an error status
        """
        client = self._ensure_client()
        try:
            response = await client.request(method, url, params=params, json=json)
        except httpx.HTTPError as e:
            self._probe.request_failed(operation=operation, error=e)
            raise IdentityServiceConnectionError(
                f"{operation} failed: {e}"
            ) from e

        if response.is_error:
            payload = self._error_payload(response)
            self._probe.request_rejected(
                operation=operation,
                status_code=response.status_code,
                payload=payload,
            )
            raise IdentityServiceError(
                f"{operation} failed with HTTP {response.status_code}",
                status_code=response.status_code,
                payload=payload,
            )

        self._probe.request_succeeded(
            operation=operation, status_code=response.status_code
        )

        if not response.content:
            return None
        return response.json()

    @staticmethod
    def _error_payload(response: httpx.Response) -> Any:
        """Decode an error body, falling back to raw text."""
        try:
            return response.json()
        except ValueError:
            return response.text or None

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    async def get_user_info(self, id_token: str) -> UserInfo:
        data = await self._request(
            "get_user_info",
            "GET",
            f"{self._auth_api_url}/userinfo",
            params={"token": id_token},
        )
        return UserInfo.from_api(data)

    async def get_credentials(self, code: str) -> Credentials:
        data = await self._request(
            "get_credentials",
            "GET",
            f"{self._auth_api_url}/credentials",
            params={"code": code, "auth-flow": "tempCodeAuth"},
        )
        return Credentials.from_api(data)

    async def refresh_credentials(self, refresh_token: str) -> Credentials:
        data = await self._request(
            "refresh_credentials",
            "GET",
            f"{self._auth_api_url}/credentials",
            params={"auth-flow": "refreshTokenAuth", "refresh-token": refresh_token},
        )
        return Credentials.from_api(data)

    # ------------------------------------------------------------------
    # Accounts and tenants
    # ------------------------------------------------------------------

    async def create_saas_user(self, email: str, password: str) -> str:
        data = await self._request(
            "create_saas_user",
            "POST",
            f"{self._auth_api_url}/users",
            json={"email": email, "password": password},
        )
        return data["id"]

    async def create_tenant(
        self,
        name: str,
        attributes: Mapping[str, AttributeValue],
        back_office_staff_email: str,
    ) -> str:
        data = await self._request(
            "create_tenant",
            "POST",
            f"{self._auth_api_url}/tenants",
            json={
                "name": name,
                "attributes": dict(attributes),
                "back_office_staff_email": back_office_staff_email,
            },
        )
        return data["id"]

    async def get_tenant(self, tenant_id: str) -> TenantRecord:
        data = await self._request(
            "get_tenant",
            "GET",
            f"{self._auth_api_url}/tenants/{_segment(tenant_id)}",
        )
        return TenantRecord.from_api(data)

    # ------------------------------------------------------------------
    # Tenant memberships
    # ------------------------------------------------------------------

    async def list_tenant_users(self, tenant_id: str) -> list[TenantUser]:
        data = await self._request(
            "list_tenant_users",
            "GET",
            f"{self._auth_api_url}/tenants/{_segment(tenant_id)}/users",
        )
        return [TenantUser.from_api(u) for u in data.get("users") or []]

    async def create_tenant_user(
        self,
        tenant_id: str,
        email: str,
        attributes: Mapping[str, AttributeValue],
    ) -> TenantUser:
        data = await self._request(
            "create_tenant_user",
            "POST",
            f"{self._auth_api_url}/tenants/{_segment(tenant_id)}/users",
            json={"email": email, "attributes": dict(attributes)},
        )
        return TenantUser.from_api(data)

    async def get_tenant_user(self, tenant_id: str, user_id: str) -> TenantUser:
        data = await self._request(
            "get_tenant_user",
            "GET",
            f"{self._auth_api_url}/tenants/{_segment(tenant_id)}"
            f"/users/{_segment(user_id)}",
        )
        return TenantUser.from_api(data)

    async def delete_tenant_user(self, tenant_id: str, user_id: str) -> None:
        await self._request(
            "delete_tenant_user",
            "DELETE",
            f"{self._auth_api_url}/tenants/{_segment(tenant_id)}"
            f"/users/{_segment(user_id)}",
        )

    # ------------------------------------------------------------------
    # Roles and attributes
    # ------------------------------------------------------------------

    async def list_roles(self) -> list[Role]:
        data = await self._request("list_roles", "GET", f"{self._auth_api_url}/roles")
        return [Role.from_api(r) for r in data.get("roles") or []]

    async def assign_tenant_user_roles(
        self,
        tenant_id: str,
        user_id: str,
        env_id: int,
        role_names: Sequence[str],
    ) -> None:
        await self._request(
            "assign_tenant_user_roles",
            "POST",
            f"{self._auth_api_url}/tenants/{_segment(tenant_id)}"
            f"/users/{_segment(user_id)}/envs/{env_id}/roles",
            json={"role_names": list(role_names)},
        )

    async def list_tenant_attributes(self) -> list[AttributeDefinition]:
        data = await self._request(
            "list_tenant_attributes",
            "GET",
            f"{self._auth_api_url}/tenant-attributes",
        )
        return [
            AttributeDefinition.from_api(a) for a in data.get("tenant_attributes") or []
        ]

    async def list_user_attributes(self) -> list[AttributeDefinition]:
        data = await self._request(
            "list_user_attributes",
            "GET",
            f"{self._auth_api_url}/user-attributes",
        )
        return [
            AttributeDefinition.from_api(a) for a in data.get("user_attributes") or []
        ]

    # ------------------------------------------------------------------
    # Invitations
    # ------------------------------------------------------------------

    async def list_tenant_invitations(self, tenant_id: str) -> list[Invitation]:
        data = await self._request(
            "list_tenant_invitations",
            "GET",
            f"{self._auth_api_url}/tenants/{_segment(tenant_id)}/invitations",
        )
        return [Invitation.from_api(i) for i in data.get("invitations") or []]

    async def create_tenant_invitation(
        self,
        tenant_id: str,
        email: str,
        access_token: str,
        envs: Sequence[EnvRoleAssignment],
    ) -> Invitation:
        data = await self._request(
            "create_tenant_invitation",
            "POST",
            f"{self._auth_api_url}/tenants/{_segment(tenant_id)}/invitations",
            json={
                "email": email,
                "access_token": access_token,
                "envs": [env.to_api() for env in envs],
            },
        )
        return Invitation.from_api(data)

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    async def get_pricing_plan(self, plan_id: str) -> dict[str, Any]:
        return await self._request(
            "get_pricing_plan",
            "GET",
            f"{self._pricing_api_url}/plans/{_segment(plan_id)}",
        )
