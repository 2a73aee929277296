"""Unit tests for SAASUSSIGV1 request signing."""

import hashlib
import hmac
from datetime import UTC, datetime, timedelta, timezone

import httpx

from shared_kernel.identity_service.saasus.signature import (
    SaaSusSignatureAuth,
    compute_signature,
)

SIGNED_AT = datetime(2025, 2, 3, 4, 5, 59, tzinfo=UTC)


class TestComputeSignature:
    """Tests for compute_signature."""

    def test_matches_hmac_over_documented_fields(self):
        url = httpx.URL("https://api.example.test/v1/auth/userinfo?token=abc")

        signature = compute_signature(
            secret_key="secret",
            api_key="key",
            method="get",
            url=url,
            body=b"",
            timestamp=SIGNED_AT,
        )

        expected = hmac.new(
            b"secret",
            b"202502030405keyGETapi.example.test/v1/auth/userinfo?token=abc",
            hashlib.sha256,
        ).hexdigest()
        assert signature == expected

    def test_timestamp_has_minute_resolution(self):
        url = httpx.URL("https://api.example.test/v1/auth/roles")
        kwargs = dict(secret_key="s", api_key="k", method="GET", url=url, body=b"")

        a = compute_signature(timestamp=SIGNED_AT, **kwargs)
        b = compute_signature(timestamp=SIGNED_AT - timedelta(seconds=59), **kwargs)

        assert a == b

    def test_timestamp_is_normalized_to_utc(self):
        url = httpx.URL("https://api.example.test/v1/auth/roles")
        kwargs = dict(secret_key="s", api_key="k", method="GET", url=url, body=b"")
        tokyo = SIGNED_AT.astimezone(timezone(timedelta(hours=9)))

        assert compute_signature(timestamp=tokyo, **kwargs) == compute_signature(
            timestamp=SIGNED_AT, **kwargs
        )

    def test_body_changes_signature(self):
        url = httpx.URL("https://api.example.test/v1/auth/tenants")
        kwargs = dict(secret_key="s", api_key="k", method="POST", url=url, timestamp=SIGNED_AT)

        assert compute_signature(body=b'{"a":1}', **kwargs) != compute_signature(
            body=b'{"a":2}', **kwargs
        )


class TestSaaSusSignatureAuth:
    """Tests for the httpx auth flow."""

    def test_sets_authorization_header(self):
        auth = SaaSusSignatureAuth(
            saas_id="saas-1", api_key="key-1", secret_key="secret-1", clock=lambda: SIGNED_AT
        )
        request = httpx.Request("GET", "https://api.example.test/v1/auth/roles")

        signed = next(auth.auth_flow(request))

        expected = compute_signature(
            secret_key="secret-1",
            api_key="key-1",
            method="GET",
            url=request.url,
            body=b"",
            timestamp=SIGNED_AT,
        )
        assert signed.headers["Authorization"] == (
            f"SAASUSSIGV1 Sig={expected}, SaaSID=saas-1, APIKey=key-1"
        )
