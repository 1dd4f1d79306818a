"""Application-layer errors — failures before a request is ever sent."""

from __future__ import annotations

from fcm_push.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class AuthError(ApplicationError):
    """Credentials could not be parsed or an access token could not be obtained.

    Terminal for the send attempt: the token fetch is never retried.
    """

    default_code = "auth_error"


__all__ = ["ApplicationError", "AuthError"]
