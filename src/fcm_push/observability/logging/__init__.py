"""Observability – structured logging helpers."""
from fcm_push.observability.logging.factory import JsonLoggerFactory, get_logger
from fcm_push.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
