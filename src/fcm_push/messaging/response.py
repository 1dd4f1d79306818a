"""Messaging – ResponseStatus and the per-protocol response normalizers.

Both protocols end up in the legacy result shape: callers inspect ``ok`` and
``results`` and never need to know which endpoint answered.
"""
from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from fcm_push.kernel.errors import ParseError
from fcm_push.messaging import retry
from fcm_push.observability.logging import get_logger

RETRY_AFTER_HEADER = "Retry-After"


@dataclass
class ResponseStatus:
    """Unified outcome of one send.

    ``status_code`` is forced to ``200`` for every parsed HTTP v1 response so
    legacy-style consumers keep working; ``raw_status_code`` always holds the
    status the server actually returned.
    """

    ok: bool = False
    status_code: int = 0
    multicast_id: int = 0
    success: int = 0
    failure: int = 0
    canonical_ids: int = 0
    results: list[dict[str, str]] = field(default_factory=list)
    message_id: int | str | None = None
    err: str = ""
    retry_after: str = ""
    raw_status_code: int = 0

    def is_retryable(self) -> bool:
        return retry.is_retryable(self)

    def retry_after_duration(self) -> timedelta:
        return retry.retry_after_duration(self)

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    def log_results(self, logger: Any = None) -> None:
        """Emit the status and each per-target result as structured log events."""
        log = logger or get_logger(__name__)
        log.info(
            "fcm.response",
            ok=self.ok,
            status_code=self.status_code,
            success=self.success,
            failure=self.failure,
            canonical_ids=self.canonical_ids,
            message_id=self.message_id,
            err=self.err,
        )
        for index, result in enumerate(self.results):
            log.info("fcm.response.result", index=index, **result)


def _decode(body: bytes, status: ResponseStatus) -> dict[str, Any]:
    try:
        document = json.loads(body)
    except ValueError as exc:
        raise ParseError(f"Response body is not JSON: {exc}", status=status, cause=exc) from exc
    if not isinstance(document, dict):
        raise ParseError(
            f"Response body must be a JSON object, got {type(document).__name__}", status=status
        )
    return document


def _results(raw: Any, status: ResponseStatus) -> list[dict[str, str]]:
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(item, dict) for item in raw):
        raise ParseError("'results' must be a list of objects", status=status)
    return [{str(k): str(v) for k, v in item.items()} for item in raw]


def normalize_legacy(status_code: int, body: bytes, retry_after: str = "") -> ResponseStatus:
    """Map a legacy ``/fcm/send`` response onto :class:`ResponseStatus`.

    Non-200 responses are not parsed: only the status code and ``Retry-After``
    are reported.
    """
    status = ResponseStatus(status_code=status_code, raw_status_code=status_code, retry_after=retry_after)
    if status_code != 200:
        return status

    document = _decode(body, status)
    try:
        status.multicast_id = int(document.get("multicast_id") or 0)
        status.success = int(document.get("success") or 0)
        status.failure = int(document.get("failure") or 0)
        status.canonical_ids = int(document.get("canonical_ids") or 0)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Malformed counter in response: {exc}", status=status, cause=exc) from exc
    status.results = _results(document.get("results"), status)
    status.message_id = document.get("message_id")
    status.err = str(document.get("error") or "")
    status.ok = True
    return status


def normalize_v1(status_code: int, body: bytes, retry_after: str = "") -> ResponseStatus:
    """Map an HTTP v1 response (any status) onto the legacy-shaped :class:`ResponseStatus`."""
    status = ResponseStatus(status_code=status_code, raw_status_code=status_code, retry_after=retry_after)
    document = _decode(body, status)

    error = document.get("error") or {}
    if not isinstance(error, dict):
        raise ParseError("'error' must be an object", status=status)

    message = error.get("message") or ""
    status.status_code = 200
    if message:
        status.failure = 1
        status.results = [{retry.ERROR_KEY: str(error.get("status") or "")}]
        status.err = str(message)
        status.ok = False
    else:
        name = str(document.get("name") or "")
        status.success = 1
        status.results = [{"message_id": name}]
        status.message_id = name
        status.ok = True
    return status


__all__ = ["RETRY_AFTER_HEADER", "ResponseStatus", "normalize_legacy", "normalize_v1"]
