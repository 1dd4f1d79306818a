"""Messaging – Message → wire payload conversions for both FCM protocols.

``to_legacy_payload`` mirrors the flat legacy schema field for field.
``to_v1_payload`` builds the nested HTTP v1 ``{"message": {...}}`` request,
duplicating the display fields into ``android.notification`` and replacing
the data tree with its flattened string map.
"""
from __future__ import annotations

import dataclasses
import json
from typing import Any

from fcm_push.kernel.errors import SerializationError, UnsupportedTargetError
from fcm_push.messaging.data import flatten_data, to_compact_json
from fcm_push.messaging.message import Message, NotificationPayload

ALERT_KEY = "alert"

_LEGACY_FIELDS = (
    "data",
    "to",
    "registration_ids",
    "collapse_key",
    "priority",
    "notification",
    "content_available",
    "delay_while_idle",
    "time_to_live",
    "restricted_package_name",
    "dry_run",
    "condition",
)


def _is_empty(value: Any) -> bool:
    return value is None or value is False or value == "" or value == [] or value == {}


def _compact(mapping: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in mapping.items() if not _is_empty(v)}


# ---------------------------------------------------------------------------
# Legacy
# ---------------------------------------------------------------------------


def to_legacy_payload(message: Message) -> dict[str, Any]:
    """Return the legacy ``/fcm/send`` body; empty optional fields are omitted."""
    payload: dict[str, Any] = {}
    for name in _LEGACY_FIELDS:
        value = getattr(message, name)
        if name == "notification":
            value = _compact(dataclasses.asdict(value))
        elif name == "registration_ids":
            value = list(value)
        elif name == "time_to_live":
            if value is not None:
                payload[name] = value
            continue
        if not _is_empty(value):
            payload[name] = value
    return payload


def from_legacy_payload(payload: dict[str, Any]) -> Message:
    """Rebuild a :class:`Message` from a decoded legacy body."""
    known = {f.name for f in dataclasses.fields(NotificationPayload)}
    notification = NotificationPayload(
        **{k: v for k, v in (payload.get("notification") or {}).items() if k in known}
    )
    return Message(
        data=payload.get("data"),
        to=payload.get("to", ""),
        registration_ids=list(payload.get("registration_ids") or []),
        collapse_key=payload.get("collapse_key", ""),
        priority=payload.get("priority", ""),
        notification=notification,
        content_available=bool(payload.get("content_available", False)),
        delay_while_idle=bool(payload.get("delay_while_idle", False)),
        time_to_live=payload.get("time_to_live"),
        restricted_package_name=payload.get("restricted_package_name", ""),
        dry_run=bool(payload.get("dry_run", False)),
        condition=payload.get("condition", ""),
    )


# ---------------------------------------------------------------------------
# HTTP v1
# ---------------------------------------------------------------------------


def badge_count(badge: str) -> int:
    """Parse the legacy badge string; anything unparsable counts as ``0``."""
    try:
        return int(badge.strip())
    except ValueError:
        return 0


def _loc_args(raw: str) -> list[str]:
    # legacy carries loc args as a JSON array encoded in a string
    if not raw:
        return []
    try:
        decoded = json.loads(raw)
    except ValueError:
        return [raw]
    if isinstance(decoded, list):
        return [item if isinstance(item, str) else to_compact_json(item) for item in decoded]
    return [raw]


def _v1_target(message: Message) -> dict[str, str]:
    if message.registration_ids:
        raise UnsupportedTargetError(
            "HTTP v1 sends to a single target; use the legacy protocol for registration_ids",
            detail={"registration_ids": len(message.registration_ids)},
        )
    targets: dict[str, str] = {}
    topic = message.topic
    if topic is not None:
        if not topic:
            raise UnsupportedTargetError(f"Topic name is empty in {message.to!r}", detail={"to": message.to})
        targets["topic"] = topic
    elif message.to:
        targets["token"] = message.to
    if message.condition:
        targets["condition"] = message.condition
    if len(targets) != 1:
        raise UnsupportedTargetError(
            "HTTP v1 requires exactly one of token, topic or condition",
            detail={"targets": sorted(targets)},
        )
    return targets


def to_v1_payload(message: Message) -> dict[str, Any]:
    """Return the HTTP v1 ``messages:send`` body for *message*.

    Raises:
        UnsupportedTargetError: no target, several targets, or a multicast list.
        SerializationError: the data tree holds values JSON cannot represent.
    """
    data = message.data
    flat = flatten_data(data)

    notification = message.notification
    title = notification.title
    body = notification.body
    if isinstance(data, dict):
        alert = data.get(ALERT_KEY)
        if isinstance(alert, str) and alert:
            title = alert

    android_notification = _compact(
        {
            "title": title,
            "body": body,
            "icon": notification.icon,
            "color": notification.color,
            "sound": notification.sound,
            "tag": notification.tag,
            "click_action": notification.click_action,
            "body_loc_key": notification.body_loc_key,
            "body_loc_args": _loc_args(notification.body_loc_args),
            "title_loc_key": notification.title_loc_key,
            "title_loc_args": _loc_args(notification.title_loc_args),
            "channel_id": notification.android_channel_id,
        }
    )
    android_notification["notification_count"] = badge_count(notification.badge)

    android = _compact(
        {
            "collapse_key": message.collapse_key,
            "priority": message.priority,
            "restricted_package_name": message.restricted_package_name,
        }
    )
    if message.time_to_live is not None:
        android["ttl"] = f"{message.time_to_live}s"
    android["data"] = flat
    android["notification"] = android_notification

    v1_message: dict[str, Any] = _v1_target(message)
    display = _compact({"title": title, "body": body})
    if display:
        v1_message["notification"] = display
    v1_message["data"] = flat
    v1_message["android"] = android
    if message.analytics_label:
        v1_message["fcm_options"] = {"analytics_label": message.analytics_label}

    request: dict[str, Any] = {"message": v1_message}
    if message.dry_run:
        request["validate_only"] = True
    return request


def encode_payload(payload: dict[str, Any]) -> bytes:
    """Encode a wire payload as compact UTF-8 JSON."""
    try:
        return to_compact_json(payload).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SerializationError(f"Payload is not valid UTF-8: {exc}", cause=exc) from exc


__all__ = [
    "ALERT_KEY",
    "badge_count",
    "encode_payload",
    "from_legacy_payload",
    "to_legacy_payload",
    "to_v1_payload",
]
