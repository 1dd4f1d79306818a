"""Messaging – message model, payload translation, response normalization."""
from fcm_push.messaging.data import DataTree, flatten_data
from fcm_push.messaging.message import (
    MAX_TTL,
    PRIORITY_HIGH,
    PRIORITY_NORMAL,
    Message,
    NotificationPayload,
)
from fcm_push.messaging.response import ResponseStatus, normalize_legacy, normalize_v1
from fcm_push.messaging.retry import RETRYABLE_ERRORS, is_retryable, parse_duration, retry_after_duration
from fcm_push.messaging.translator import (
    encode_payload,
    from_legacy_payload,
    to_legacy_payload,
    to_v1_payload,
)

__all__ = [
    "DataTree",
    "MAX_TTL",
    "Message",
    "NotificationPayload",
    "PRIORITY_HIGH",
    "PRIORITY_NORMAL",
    "RETRYABLE_ERRORS",
    "ResponseStatus",
    "encode_payload",
    "flatten_data",
    "from_legacy_payload",
    "is_retryable",
    "normalize_legacy",
    "normalize_v1",
    "parse_duration",
    "retry_after_duration",
    "to_legacy_payload",
    "to_v1_payload",
]
