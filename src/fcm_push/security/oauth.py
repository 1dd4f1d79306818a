"""Security – Authorization header providers for both FCM protocols.

``ApiKeyAuth`` is the static ``key=<server key>`` scheme of the legacy API.
``ServiceAccountTokenProvider`` performs the OAuth2 JWT-bearer exchange
(RFC 7523) against the service account's ``token_uri`` and caches the access
token until shortly before it expires.
"""
from __future__ import annotations

import time
from typing import Any, Callable, Protocol, runtime_checkable

import httpx
import jwt as pyjwt

from fcm_push.kernel.errors import AuthError
from fcm_push.observability.logging import get_logger
from fcm_push.security.credentials import ServiceAccountCredentials

FIREBASE_MESSAGING_SCOPE = "https://www.googleapis.com/auth/firebase.messaging"
JWT_BEARER_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:jwt-bearer"

logger = get_logger(__name__)


@runtime_checkable
class AuthProvider(Protocol):
    """Port: produce the value of the ``Authorization`` header."""

    def authorization_header(self) -> str: ...


class ApiKeyAuth:
    """Legacy server-key authorization. No network call."""

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    def authorization_header(self) -> str:
        return f"key={self._api_key}"

    def __repr__(self) -> str:
        return "ApiKeyAuth(api_key='***')"


class ServiceAccountTokenProvider:
    """Mint ``Bearer`` tokens from a service account.

    Args:
        credentials: Parsed service-account key.
        scope: OAuth2 scope requested for the token.
        lifetime: Requested assertion lifetime in seconds (Google caps it at 3600).
        timeout: Timeout for the token request; ``None`` disables it.
        clock: Returns the current UNIX time; injectable for tests.
    """

    EXPIRY_MARGIN = 60

    def __init__(
        self,
        credentials: ServiceAccountCredentials,
        *,
        scope: str = FIREBASE_MESSAGING_SCOPE,
        lifetime: int = 3600,
        timeout: float | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._credentials = credentials
        self._scope = scope
        self._lifetime = lifetime
        self._timeout = timeout
        self._clock = clock
        self._token: str | None = None
        self._expires_at = 0.0

    def authorization_header(self) -> str:
        return f"Bearer {self.access_token()}"

    def access_token(self) -> str:
        now = self._clock()
        if self._token is not None and now < self._expires_at - self.EXPIRY_MARGIN:
            return self._token
        assertion = self.build_assertion(int(now))
        token, expires_in = self._exchange(assertion)
        self._token = token
        self._expires_at = now + expires_in
        return token

    def build_assertion(self, issued_at: int) -> str:
        """Sign the JWT-bearer assertion with the service account's private key."""
        creds = self._credentials
        if not creds.client_email or not creds.private_key:
            raise AuthError("Service account credentials need 'client_email' and 'private_key'")
        claims = {
            "iss": creds.client_email,
            "scope": self._scope,
            "aud": creds.token_uri,
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
        }
        headers = {"kid": creds.private_key_id} if creds.private_key_id else None
        try:
            return pyjwt.encode(claims, creds.private_key, algorithm="RS256", headers=headers)
        except (pyjwt.PyJWTError, NotImplementedError, ValueError, TypeError) as exc:
            raise AuthError(f"Could not sign token assertion: {exc}", cause=exc) from exc

    def _exchange(self, assertion: str) -> tuple[str, float]:
        token_uri = self._credentials.token_uri
        logger.debug("fcm.oauth.exchange", token_uri=token_uri)
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.post(
                    token_uri,
                    data={"grant_type": JWT_BEARER_GRANT_TYPE, "assertion": assertion},
                )
        except httpx.HTTPError as exc:
            raise AuthError(f"Token request to '{token_uri}' failed: {exc}", cause=exc) from exc

        if not response.is_success:
            raise AuthError(
                f"Token request rejected with HTTP {response.status_code}",
                detail={"status_code": response.status_code, "body": response.text[:500]},
            )
        try:
            document: Any = response.json()
        except ValueError as exc:
            raise AuthError("Token response is not JSON", cause=exc) from exc
        token = document.get("access_token") if isinstance(document, dict) else None
        if not isinstance(token, str) or not token:
            raise AuthError("Token response carries no 'access_token'")
        try:
            expires_in = float(document.get("expires_in") or self._lifetime)
        except (TypeError, ValueError):
            expires_in = float(self._lifetime)
        return token, expires_in


__all__ = [
    "ApiKeyAuth",
    "AuthProvider",
    "FIREBASE_MESSAGING_SCOPE",
    "JWT_BEARER_GRANT_TYPE",
    "ServiceAccountTokenProvider",
]
