"""Domain errors — invalid values handed to the library."""

from __future__ import annotations

from typing import Any

from fcm_push.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a value does not satisfy a domain rule."""

    default_code = "domain_error"


class FormatError(DomainError):
    """A textual value (e.g. a ``Retry-After`` header) has an invalid format.

    Local to the accessor that parses the value; callers treat it as
    "no hint available", never as a send failure.
    """

    default_code = "format_error"

    def __init__(self, message: str, *, value: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.value = value


__all__ = ["DomainError", "FormatError"]
