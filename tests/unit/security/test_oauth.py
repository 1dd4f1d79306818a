"""Unit tests for the Authorization header providers."""
from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import jwt as pyjwt
import pytest
import respx

from fcm_push.kernel.errors import AuthError
from fcm_push.security import (
    FIREBASE_MESSAGING_SCOPE,
    ApiKeyAuth,
    AuthProvider,
    ServiceAccountCredentials,
    ServiceAccountTokenProvider,
)
from fcm_push.security.oauth import JWT_BEARER_GRANT_TYPE

TOKEN_URI = "https://oauth2.test/token"


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


# ---------------------------------------------------------------------------
# ApiKeyAuth
# ---------------------------------------------------------------------------
class TestApiKeyAuth:
    def test_header(self) -> None:
        assert ApiKeyAuth("AAAA").authorization_header() == "key=AAAA"

    def test_repr_hides_key(self) -> None:
        assert "AAAA" not in repr(ApiKeyAuth("AAAA"))

    def test_is_auth_provider(self) -> None:
        assert isinstance(ApiKeyAuth("k"), AuthProvider)


# ---------------------------------------------------------------------------
# ServiceAccountTokenProvider
# ---------------------------------------------------------------------------
class TestAssertion:
    def test_claims_and_signature(self, service_account: ServiceAccountCredentials, rsa_private_key) -> None:
        provider = ServiceAccountTokenProvider(service_account)
        assertion = provider.build_assertion(1_700_000_000)
        claims = pyjwt.decode(
            assertion,
            rsa_private_key.public_key(),
            algorithms=["RS256"],
            audience=TOKEN_URI,
            options={"verify_exp": False, "verify_iat": False},
        )
        assert claims["iss"] == service_account.client_email
        assert claims["scope"] == FIREBASE_MESSAGING_SCOPE
        assert claims["exp"] - claims["iat"] == 3600
        assert pyjwt.get_unverified_header(assertion)["kid"] == "kid-1"

    def test_bad_private_key(self) -> None:
        creds = ServiceAccountCredentials(
            project_id="p", client_email="a@b", private_key="not a pem", token_uri=TOKEN_URI
        )
        with pytest.raises(AuthError):
            ServiceAccountTokenProvider(creds).build_assertion(0)

    def test_missing_email(self, private_key_pem: str) -> None:
        creds = ServiceAccountCredentials(project_id="p", private_key=private_key_pem)
        with pytest.raises(AuthError):
            ServiceAccountTokenProvider(creds).authorization_header()


class TestTokenExchange:
    def test_bearer_header(
        self, service_account: ServiceAccountCredentials, respx_mock: respx.MockRouter
    ) -> None:
        route = respx_mock.post(TOKEN_URI).mock(
            return_value=httpx.Response(200, json={"access_token": "ya29.token", "expires_in": 3599})
        )
        provider = ServiceAccountTokenProvider(service_account)
        assert provider.authorization_header() == "Bearer ya29.token"
        form = parse_qs(route.calls.last.request.content.decode())
        assert form["grant_type"] == [JWT_BEARER_GRANT_TYPE]
        assert form["assertion"][0].count(".") == 2

    def test_token_cached_until_expiry(
        self, service_account: ServiceAccountCredentials, respx_mock: respx.MockRouter
    ) -> None:
        route = respx_mock.post(TOKEN_URI).mock(
            side_effect=[
                httpx.Response(200, json={"access_token": "first", "expires_in": 3600}),
                httpx.Response(200, json={"access_token": "second", "expires_in": 3600}),
            ]
        )
        clock = FakeClock()
        provider = ServiceAccountTokenProvider(service_account, clock=clock)
        assert provider.access_token() == "first"
        clock.now += 3000
        assert provider.access_token() == "first"
        clock.now += 560
        assert provider.access_token() == "second"
        assert route.call_count == 2

    def test_rejected_credentials(
        self, service_account: ServiceAccountCredentials, respx_mock: respx.MockRouter
    ) -> None:
        respx_mock.post(TOKEN_URI).mock(return_value=httpx.Response(400, json={"error": "invalid_grant"}))
        with pytest.raises(AuthError) as exc_info:
            ServiceAccountTokenProvider(service_account).access_token()
        assert exc_info.value.detail["status_code"] == 400

    def test_network_failure(
        self, service_account: ServiceAccountCredentials, respx_mock: respx.MockRouter
    ) -> None:
        respx_mock.post(TOKEN_URI).mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(AuthError) as exc_info:
            ServiceAccountTokenProvider(service_account).access_token()
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_no_access_token_in_response(
        self, service_account: ServiceAccountCredentials, respx_mock: respx.MockRouter
    ) -> None:
        respx_mock.post(TOKEN_URI).mock(return_value=httpx.Response(200, json={"token_type": "Bearer"}))
        with pytest.raises(AuthError):
            ServiceAccountTokenProvider(service_account).access_token()

    def test_non_json_response(
        self, service_account: ServiceAccountCredentials, respx_mock: respx.MockRouter
    ) -> None:
        respx_mock.post(TOKEN_URI).mock(return_value=httpx.Response(200, text="ok"))
        with pytest.raises(AuthError):
            ServiceAccountTokenProvider(service_account).access_token()

    def test_failure_is_not_cached(
        self, service_account: ServiceAccountCredentials, respx_mock: respx.MockRouter
    ) -> None:
        respx_mock.post(TOKEN_URI).mock(
            side_effect=[
                httpx.Response(500),
                httpx.Response(200, json={"access_token": "later"}),
            ]
        )
        provider = ServiceAccountTokenProvider(service_account)
        with pytest.raises(AuthError):
            provider.access_token()
        assert provider.access_token() == "later"
