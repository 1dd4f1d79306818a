"""FcmClient – fluent message builder and single-request sender.

Usage::

    client = FcmClient(api_key="AAAA...")
    status = (
        client.new_message_to(device_token, {"order": {"id": 42}})
        .set_priority(PRIORITY_HIGH)
        .set_time_to_live(3600)
        .send()
    )
    if not status.ok and status.is_retryable():
        delay = status.retry_after_duration()

Passing ``credentials`` switches the client to the HTTP v1 API.
"""
from __future__ import annotations

from typing import Any

from fcm_push.adapters.http import HttpxTransport, Transport
from fcm_push.config.settings import LEGACY_SEND_URL, V1_SEND_URL_TEMPLATE, FcmSettings
from fcm_push.messaging.data import DataTree
from fcm_push.messaging.message import Message, NotificationPayload, clamp_ttl, normalize_priority
from fcm_push.messaging.response import RETRY_AFTER_HEADER, ResponseStatus, normalize_legacy, normalize_v1
from fcm_push.messaging.translator import encode_payload, to_legacy_payload, to_v1_payload
from fcm_push.observability.logging import get_logger
from fcm_push.security import ApiKeyAuth, AuthProvider, ServiceAccountCredentials, ServiceAccountTokenProvider

logger = get_logger(__name__)


class FcmClient:
    """Build one FCM message and send it over the legacy or HTTP v1 protocol.

    Every setter changes a single field of :attr:`message` and returns the
    client. The client is not thread-safe; use one instance per concurrent
    sender.
    """

    def __init__(
        self,
        api_key: str = "",
        credentials: ServiceAccountCredentials | None = None,
        *,
        auth: AuthProvider | None = None,
        transport: Transport | None = None,
        legacy_url: str = LEGACY_SEND_URL,
        v1_url_template: str = V1_SEND_URL_TEMPLATE,
        timeout: float | None = None,
    ) -> None:
        self.api_key = api_key
        self.credentials = credentials
        self.legacy_url = legacy_url
        self.v1_url_template = v1_url_template
        self.message = Message()
        self._transport = transport or HttpxTransport(timeout=timeout)
        if auth is not None:
            self._auth = auth
        elif credentials is not None:
            self._auth = ServiceAccountTokenProvider(credentials, timeout=timeout)
        else:
            self._auth = ApiKeyAuth(api_key)

    @classmethod
    def from_settings(cls, settings: FcmSettings, **kwargs: Any) -> FcmClient:
        """Build a client from :class:`FcmSettings`; a credentials file selects HTTP v1."""
        credentials = (
            ServiceAccountCredentials.from_file(settings.credentials_file) if settings.use_v1 else None
        )
        return cls(
            settings.api_key,
            credentials,
            legacy_url=settings.legacy_url,
            v1_url_template=settings.v1_url_template,
            timeout=settings.timeout or None,
            **kwargs,
        )

    def __enter__(self) -> FcmClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    @property
    def use_v1(self) -> bool:
        return self.credentials is not None

    @property
    def protocol(self) -> str:
        return "v1" if self.use_v1 else "legacy"

    # ------------------------------------------------------------------
    # Targets and data
    # ------------------------------------------------------------------

    def new_message_to(self, to: str, data: DataTree) -> FcmClient:
        """Target a device token or ``/topics/<name>`` and attach *data*."""
        self.message.to = to
        self.message.data = data
        return self

    def new_topic_message(self, to: str, data: dict[str, str]) -> FcmClient:
        return self.new_message_to(to, data)

    def new_multicast_message(self, registration_ids: list[str], data: DataTree) -> FcmClient:
        """Target a list of device tokens (legacy protocol only)."""
        self.message.registration_ids = list(registration_ids)
        self.message.data = data
        return self

    def append_devices(self, registration_ids: list[str]) -> FcmClient:
        self.message.registration_ids = self.message.registration_ids + list(registration_ids)
        return self

    def set_data(self, data: DataTree) -> FcmClient:
        self.message.data = data
        return self

    def set_condition(self, condition: str) -> FcmClient:
        """Target devices matching a topic expression, e.g. ``"'a' in topics && 'b' in topics"``."""
        self.message.condition = condition
        return self

    # ------------------------------------------------------------------
    # Delivery options
    # ------------------------------------------------------------------

    def set_priority(self, priority: str) -> FcmClient:
        """``"high"`` is kept; anything else becomes ``"normal"``."""
        self.message.priority = normalize_priority(priority)
        return self

    def set_collapse_key(self, collapse_key: str) -> FcmClient:
        self.message.collapse_key = collapse_key
        return self

    def set_notification_payload(self, payload: NotificationPayload) -> FcmClient:
        self.message.notification = payload
        return self

    def set_content_available(self, content_available: bool) -> FcmClient:
        self.message.content_available = content_available
        return self

    def set_delay_while_idle(self, delay_while_idle: bool) -> FcmClient:
        self.message.delay_while_idle = delay_while_idle
        return self

    def set_time_to_live(self, ttl: int) -> FcmClient:
        """Seconds to keep the message while the device is offline, clamped to ``MAX_TTL``."""
        self.message.time_to_live = clamp_ttl(ttl)
        return self

    def set_restricted_package_name(self, package_name: str) -> FcmClient:
        self.message.restricted_package_name = package_name
        return self

    def set_dry_run(self, dry_run: bool) -> FcmClient:
        self.message.dry_run = dry_run
        return self

    def set_analytics_label(self, label: str) -> FcmClient:
        """HTTP v1 only: ``fcm_options.analytics_label``."""
        self.message.analytics_label = label
        return self

    def reset_message(self) -> FcmClient:
        self.message = Message()
        return self

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    def _endpoint(self) -> str:
        if self.credentials is not None:
            return self.v1_url_template.format(project_id=self.credentials.require_project_id())
        return self.legacy_url

    def send(self) -> ResponseStatus:
        """Send :attr:`message` once and return the normalized status.

        Raises:
            SerializationError: the message cannot be encoded for the protocol.
            ConfigError: HTTP v1 credentials carry no project id.
            AuthError: no access token could be obtained.
            TransportError: the request never produced a response.
            ParseError: the response body is malformed; ``exc.status`` holds
                what was captured before the failure.
        """
        payload = to_v1_payload(self.message) if self.use_v1 else to_legacy_payload(self.message)
        body = encode_payload(payload)
        url = self._endpoint()
        headers = {
            "Authorization": self._auth.authorization_header(),
            "Content-Type": "application/json",
        }

        logger.debug("fcm.send", protocol=self.protocol, url=url, size=len(body))
        response = self._transport.post(url, body, headers)
        retry_after = response.headers.get(RETRY_AFTER_HEADER, "")

        normalize = normalize_v1 if self.use_v1 else normalize_legacy
        status = normalize(response.status_code, response.body, retry_after)
        logger.debug(
            "fcm.sent",
            protocol=self.protocol,
            ok=status.ok,
            status_code=status.raw_status_code,
            failure=status.failure,
        )
        return status

    def __repr__(self) -> str:
        return f"FcmClient(protocol={self.protocol!r}, message={self.message!r})"


__all__ = ["FcmClient"]
