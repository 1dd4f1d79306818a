"""Messaging – retry classification for a normalized :class:`ResponseStatus`.

The library never resends by itself; these helpers only tell the caller
whether a resend makes sense and how long the server asked it to wait.
"""
from __future__ import annotations

import re
from datetime import timedelta
from typing import TYPE_CHECKING

from fcm_push.kernel.errors import FormatError

if TYPE_CHECKING:
    from fcm_push.messaging.response import ResponseStatus

ERROR_KEY = "error"

#: Per-result error names that indicate a transient server-side condition.
#: ``UNAVAILABLE``/``INTERNAL`` are the HTTP v1 spellings.
RETRYABLE_ERRORS: frozenset[str] = frozenset(
    {"Unavailable", "InternalServerError", "UNAVAILABLE", "INTERNAL"}
)

_UNIT_MICROSECONDS = {
    "ns": 0.001,
    "us": 1.0,
    "µs": 1.0,  # U+00B5
    "μs": 1.0,  # U+03BC
    "ms": 1_000.0,
    "s": 1_000_000.0,
    "m": 60_000_000.0,
    "h": 3_600_000_000.0,
}
_SECONDS = re.compile(r"[0-9]+")
_DURATION_PART = re.compile(r"([0-9]+\.?[0-9]*|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h)")


def is_retryable(status: ResponseStatus) -> bool:
    """True for 5xx responses and for 200 responses carrying a transient per-result error."""
    if status.status_code >= 500:
        return True
    if status.status_code == 200:
        for result in status.results:
            for key, value in result.items():
                if key == ERROR_KEY and value in RETRYABLE_ERRORS:
                    return True
    return False


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"300ms"``, ``"1.5h"`` or ``"2h45m"``.

    A bare non-negative integer is read as seconds, which is how HTTP
    ``Retry-After`` expresses a delay.
    """
    raw = text.strip()
    if _SECONDS.fullmatch(raw):
        return _to_timedelta(text, seconds=int(raw))

    sign = 1
    body = raw
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if body == "0":
        return timedelta(0)
    if not body:
        raise FormatError(f"Invalid duration {text!r}", value=text)

    total = 0.0
    position = 0
    for match in _DURATION_PART.finditer(body):
        if match.start() != position:
            break
        total += float(match.group(1)) * _UNIT_MICROSECONDS[match.group(2)]
        position = match.end()
    if position != len(body):
        raise FormatError(f"Invalid duration {text!r}", value=text)
    return _to_timedelta(text, microseconds=sign * total)


def _to_timedelta(text: str, **amount: float) -> timedelta:
    try:
        return timedelta(**amount)
    except (OverflowError, ValueError) as exc:
        raise FormatError(f"Duration out of range {text!r}", value=text, cause=exc) from exc


def retry_after_duration(status: ResponseStatus) -> timedelta:
    """Return the ``Retry-After`` hint of *status*.

    Raises:
        FormatError: the header was absent or is not a duration. Treat this
            as "no hint available", not as a send failure.
    """
    if not status.retry_after:
        raise FormatError("Response carried no Retry-After header")
    return parse_duration(status.retry_after)


__all__ = [
    "ERROR_KEY",
    "RETRYABLE_ERRORS",
    "is_retryable",
    "parse_duration",
    "retry_after_duration",
]
