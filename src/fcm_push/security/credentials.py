"""Security – service-account credential bundle for the HTTP v1 API."""
from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fcm_push.config.validation import ConfigError, MissingRequiredSettingError
from fcm_push.kernel.errors import AuthError

GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"


@dataclass(frozen=True)
class ServiceAccountCredentials:
    """Fields of a Google service-account JSON key file.

    Unknown keys are ignored; ``private_key`` is kept out of ``repr``.
    """

    project_id: str = ""
    private_key: str = field(default="", repr=False)
    client_email: str = ""
    token_uri: str = GOOGLE_TOKEN_URI
    type: str = "service_account"
    private_key_id: str = field(default="", repr=False)
    client_id: str = ""
    auth_uri: str = ""
    auth_provider_x509_cert_url: str = ""
    client_x509_cert_url: str = ""

    @classmethod
    def from_dict(cls, info: dict[str, Any]) -> ServiceAccountCredentials:
        if not isinstance(info, dict):
            raise AuthError(f"Credentials must be a JSON object, got {type(info).__name__}")
        kwargs: dict[str, str] = {}
        for f in dataclasses.fields(cls):
            if f.name not in info or info[f.name] is None:
                continue
            value = info[f.name]
            if not isinstance(value, str):
                raise AuthError(
                    f"Credential field '{f.name}' must be a string",
                    detail={"field": f.name, "type": type(value).__name__},
                )
            kwargs[f.name] = value
        if not kwargs.get("token_uri"):
            kwargs.pop("token_uri", None)
        return cls(**kwargs)

    @classmethod
    def from_json(cls, text: str | bytes) -> ServiceAccountCredentials:
        try:
            info = json.loads(text)
        except ValueError as exc:
            raise AuthError(f"Credentials are not valid JSON: {exc}", cause=exc) from exc
        return cls.from_dict(info)

    @classmethod
    def from_file(cls, path: str | Path) -> ServiceAccountCredentials:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read credentials file '{path}': {exc}", cause=exc) from exc
        return cls.from_json(text)

    def require_project_id(self) -> str:
        """Return ``project_id``; raise :class:`MissingRequiredSettingError` when empty."""
        if not self.project_id.strip():
            raise MissingRequiredSettingError("project_id")
        return self.project_id

    def to_dict(self) -> dict[str, str]:
        return dataclasses.asdict(self)


__all__ = ["GOOGLE_TOKEN_URI", "ServiceAccountCredentials"]
