"""Identity service client dependency injection.

Provides the SaaSus client factory for dependency injection in FastAPI
endpoints and application workflows.

Note: A single SaaSusIdentityClient is shared process-wide so that its
underlying httpx connection pool is reused across requests. The client is
closed from the application lifespan on shutdown.
"""

from __future__ import annotations

from functools import lru_cache

from infrastructure.settings import get_identity_service_settings
from shared_kernel.identity_service.protocols import IdentityServiceProvider
from shared_kernel.identity_service.saasus.client import SaaSusIdentityClient


@lru_cache
def _get_saasus_client() -> SaaSusIdentityClient:
    settings = get_identity_service_settings()
    return SaaSusIdentityClient(
        auth_api_url=settings.auth_api_url,
        pricing_api_url=settings.pricing_api_url,
        saas_id=settings.saas_id,
        api_key=settings.api_key,
        secret_key=settings.secret_key.get_secret_value(),
        timeout=settings.request_timeout_seconds,
    )


def get_identity_service() -> IdentityServiceProvider:
    """Get the identity service client.

    Returns:
        Configured SaaSus client implementing IdentityServiceProvider protocol
    """
    return _get_saasus_client()


async def close_identity_service() -> None:
    """Close the shared identity service client, if it was ever created."""
    if _get_saasus_client.cache_info().currsize == 0:
        return
    await _get_saasus_client().close()
    _get_saasus_client.cache_clear()
