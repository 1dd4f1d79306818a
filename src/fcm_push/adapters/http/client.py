"""HTTP adapter – blocking transport for FCM send requests."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable

import httpx

from fcm_push.kernel.errors import TransportError


@dataclass(frozen=True)
class TransportResponse:
    """Status, headers and fully-read body of one HTTP response.

    ``headers`` is an :class:`httpx.Headers`, so lookups are case-insensitive.
    """

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: bytes = b""


@runtime_checkable
class Transport(Protocol):
    """Port: send one POST and return the complete response."""

    def post(self, url: str, body: bytes, headers: Mapping[str, str]) -> TransportResponse: ...

    def close(self) -> None: ...


class HttpxTransport:
    """Thin blocking httpx wrapper with structured error mapping.

    ``timeout=None`` (the default) leaves requests without a deadline.
    """

    def __init__(self, timeout: float | None = None, **kwargs: Any) -> None:
        self._client = httpx.Client(timeout=timeout, **kwargs)

    def __enter__(self) -> HttpxTransport:
        self._client.__enter__()
        return self

    def __exit__(self, *args: Any) -> None:
        self._client.__exit__(*args)

    def close(self) -> None:
        self._client.close()

    def post(self, url: str, body: bytes, headers: Mapping[str, str]) -> TransportResponse:
        try:
            response = self._client.post(
                url, content=body, headers={"Content-Type": "application/json", **headers}
            )
            content = response.read()
        except httpx.TimeoutException as exc:
            raise TransportError(url, f"HTTP request timed out: POST {url}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise TransportError(url, f"HTTP request failed: POST {url}: {exc}", cause=exc) from exc
        return TransportResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=content,
        )


__all__ = ["HttpxTransport", "Transport", "TransportResponse"]
