"""Infrastructure errors — I/O failures and wire-format problems."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fcm_push.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from fcm_push.messaging.response import ResponseStatus


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure."""

    default_code = "infrastructure_error"


class TransportError(InfrastructureError):
    """The HTTP request never produced a response (DNS, refused, timeout, …)."""

    default_code = "transport_error"
    retryable = True

    def __init__(self, url: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Request to '{url}' failed", **kwargs)
        self.url = url
        self.detail.setdefault("url", url)


class SerializationError(InfrastructureError):
    """Failed to serialize an outgoing payload."""

    default_code = "serialization_error"


class UnsupportedTargetError(SerializationError):
    """The message target cannot be expressed in the selected protocol."""

    default_code = "unsupported_target"


class ParseError(InfrastructureError):
    """A response body could not be decoded.

    ``status`` holds whatever was captured before the failure (status code,
    ``Retry-After``), so callers can still inspect it.
    """

    default_code = "parse_error"

    def __init__(self, message: str, *, status: ResponseStatus, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.status = status


__all__ = [
    "InfrastructureError",
    "ParseError",
    "SerializationError",
    "TransportError",
    "UnsupportedTargetError",
]
