"""
fcm_push – Firebase Cloud Messaging client (legacy + HTTP v1).

Import path convention::

    from fcm_push import FcmClient
    from fcm_push.messaging import NotificationPayload, ResponseStatus
    from fcm_push.kernel.errors import AuthError, TransportError
"""

from fcm_push.client import FcmClient
from fcm_push.messaging import MAX_TTL, PRIORITY_HIGH, PRIORITY_NORMAL, NotificationPayload, ResponseStatus

__version__ = "0.1.0"
__all__ = [
    "FcmClient",
    "MAX_TTL",
    "NotificationPayload",
    "PRIORITY_HIGH",
    "PRIORITY_NORMAL",
    "ResponseStatus",
    "__version__",
]
