"""HTTP adapter – blocking transport used by the FCM client."""
from fcm_push.adapters.http.client import HttpxTransport, Transport, TransportResponse

__all__ = ["HttpxTransport", "Transport", "TransportResponse"]
