"""Config settings – Settings base class and FcmSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from fcm_push.config.validation.errors import InvalidSettingValueError

LEGACY_SEND_URL = "https://fcm.googleapis.com/fcm/send"
V1_SEND_URL_TEMPLATE = "https://fcm.googleapis.com/v1/projects/{project_id}/messages:send"


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class FcmSettings(Settings):
    """Settings for :class:`~fcm_push.client.FcmClient`.

    Read from ``FCM_API_KEY``, ``FCM_CREDENTIALS_FILE``, ``FCM_LEGACY_URL``,
    ``FCM_V1_URL_TEMPLATE`` and ``FCM_TIMEOUT``. A ``timeout`` of ``0``
    leaves the transport without a deadline.
    """

    _prefix: ClassVar[str] = "FCM"

    api_key: str = ""
    credentials_file: str = ""
    legacy_url: str = LEGACY_SEND_URL
    v1_url_template: str = V1_SEND_URL_TEMPLATE
    timeout: float = 0.0

    def _validate(self) -> None:
        if self.timeout < 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be >= 0")
        if "{project_id}" not in self.v1_url_template:
            raise InvalidSettingValueError(
                "v1_url_template", self.v1_url_template, "must contain '{project_id}'"
            )

    @property
    def use_v1(self) -> bool:
        return bool(self.credentials_file)


__all__ = ["FcmSettings", "LEGACY_SEND_URL", "Settings", "V1_SEND_URL_TEMPLATE"]
