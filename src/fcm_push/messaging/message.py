"""Messaging – the message under construction and its notification payload."""
from __future__ import annotations

from dataclasses import dataclass, field

from fcm_push.messaging.data import DataTree

#: Longest time-to-live FCM accepts: four weeks, in seconds.
MAX_TTL = 2_419_200

PRIORITY_HIGH = "high"
PRIORITY_NORMAL = "normal"

TOPIC_PREFIX = "/topics/"


@dataclass
class NotificationPayload:
    """Display payload shown by the device.

    Field names follow the legacy HTTP protocol; ``badge`` is kept as the
    string the legacy API expects and parsed to a count for HTTP v1.
    """

    title: str = ""
    body: str = ""
    icon: str = ""
    sound: str = ""
    badge: str = ""
    tag: str = ""
    color: str = ""
    click_action: str = ""
    body_loc_key: str = ""
    body_loc_args: str = ""
    title_loc_key: str = ""
    title_loc_args: str = ""
    android_channel_id: str = ""

    def is_empty(self) -> bool:
        return not any(vars(self).values())


@dataclass
class Message:
    """A single notification request.

    Exactly one target is expected: ``to`` (device token or
    ``/topics/<name>``), ``condition``, or ``registration_ids`` (legacy only).
    """

    data: DataTree = None
    to: str = ""
    registration_ids: list[str] = field(default_factory=list)
    collapse_key: str = ""
    priority: str = ""
    notification: NotificationPayload = field(default_factory=NotificationPayload)
    content_available: bool = False
    delay_while_idle: bool = False
    time_to_live: int | None = None
    restricted_package_name: str = ""
    dry_run: bool = False
    condition: str = ""
    analytics_label: str = ""

    @property
    def topic(self) -> str | None:
        """Topic name when ``to`` addresses a topic, else ``None``."""
        if self.to.startswith(TOPIC_PREFIX):
            return self.to[len(TOPIC_PREFIX):]
        return None


def clamp_ttl(ttl: int) -> int:
    return MAX_TTL if ttl > MAX_TTL else ttl


def normalize_priority(priority: str) -> str:
    return PRIORITY_HIGH if priority == PRIORITY_HIGH else PRIORITY_NORMAL


__all__ = [
    "MAX_TTL",
    "Message",
    "NotificationPayload",
    "PRIORITY_HIGH",
    "PRIORITY_NORMAL",
    "TOPIC_PREFIX",
    "clamp_ttl",
    "normalize_priority",
]
