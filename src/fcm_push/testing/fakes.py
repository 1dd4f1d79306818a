"""Testing fakes – transport and auth doubles that never touch the network."""
from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from fcm_push.adapters.http import TransportResponse


@dataclass(frozen=True)
class RecordedRequest:
    url: str
    body: bytes
    headers: dict[str, str]

    def json(self) -> Any:
        return json.loads(self.body)


class FakeTransport:
    """Transport that records requests and replays queued responses or errors."""

    def __init__(self) -> None:
        self.requests: list[RecordedRequest] = []
        self._queue: deque[TransportResponse | Exception] = deque()
        self.closed = False

    def respond(
        self,
        status_code: int = 200,
        body: bytes | dict[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> FakeTransport:
        raw = json.dumps(body).encode() if isinstance(body, dict) else (body or b"")
        self._queue.append(
            TransportResponse(status_code=status_code, headers=httpx.Headers(headers or {}), body=raw)
        )
        return self

    def fail(self, exc: Exception) -> FakeTransport:
        self._queue.append(exc)
        return self

    def post(self, url: str, body: bytes, headers: Mapping[str, str]) -> TransportResponse:
        self.requests.append(RecordedRequest(url=url, body=body, headers=dict(headers)))
        if not self._queue:
            raise AssertionError("FakeTransport has no queued response")
        outcome = self._queue.popleft()
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True

    @property
    def count(self) -> int:
        return len(self.requests)

    def last(self) -> RecordedRequest | None:
        return self.requests[-1] if self.requests else None


class StaticAuth:
    """AuthProvider returning a fixed header value and counting calls."""

    def __init__(self, header: str = "Bearer test-token") -> None:
        self.header = header
        self.calls = 0

    def authorization_header(self) -> str:
        self.calls += 1
        return self.header


__all__ = ["FakeTransport", "RecordedRequest", "StaticAuth"]
