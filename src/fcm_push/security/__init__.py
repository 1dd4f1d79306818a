"""Security – credentials and Authorization header providers."""
from fcm_push.security.credentials import GOOGLE_TOKEN_URI, ServiceAccountCredentials
from fcm_push.security.oauth import (
    FIREBASE_MESSAGING_SCOPE,
    ApiKeyAuth,
    AuthProvider,
    ServiceAccountTokenProvider,
)

__all__ = [
    "ApiKeyAuth",
    "AuthProvider",
    "FIREBASE_MESSAGING_SCOPE",
    "GOOGLE_TOKEN_URI",
    "ServiceAccountCredentials",
    "ServiceAccountTokenProvider",
]
