"""SAASUSSIGV1 request signing.

Every SaaSus API request carries an HMAC-SHA256 signature computed over the
minute-resolution UTC timestamp, the API key, the HTTP method, the request
host and path (with query string) and the raw request body, keyed with the
SaaS secret key.
"""

from __future__ import annotations

import hashlib
import hmac
from datetime import datetime, timezone
from typing import Callable, Generator

import httpx

SIGNATURE_SCHEME = "SAASUSSIGV1"
_TIMESTAMP_FORMAT = "%Y%m%d%H%M"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def compute_signature(
    secret_key: str,
    api_key: str,
    method: str,
    url: httpx.URL,
    body: bytes,
    timestamp: datetime,
) -> str:
    """Compute the hex-encoded SAASUSSIGV1 signature for a request.

    Args:
        secret_key: SaaS secret key
        api_key: SaaS API key
        method: HTTP method (any case)
        url: Full request URL
        body: Raw request body (empty for GET/DELETE)
        timestamp: Signing time, UTC

    Returns:
        Lowercase hex digest
    """
    message = b"".join(
        [
            timestamp.astimezone(timezone.utc).strftime(_TIMESTAMP_FORMAT).encode(),
            api_key.encode(),
            method.upper().encode(),
            url.netloc,
            url.raw_path,
            body,
        ]
    )
    return hmac.new(secret_key.encode(), message, hashlib.sha256).hexdigest()


class SaaSusSignatureAuth(httpx.Auth):
    """httpx auth flow adding the SAASUSSIGV1 Authorization header."""

    requires_request_body = True

    def __init__(
        self,
        saas_id: str,
        api_key: str,
        secret_key: str,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._saas_id = saas_id
        self._api_key = api_key
        self._secret_key = secret_key
        self._clock = clock

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        signature = compute_signature(
            secret_key=self._secret_key,
            api_key=self._api_key,
            method=request.method,
            url=request.url,
            body=request.content,
            timestamp=self._clock(),
        )
        request.headers["Authorization"] = (
            f"{SIGNATURE_SCHEME} Sig={signature}, "
            f"SaaSID={self._saas_id}, APIKey={self._api_key}"
        )
        yield request
