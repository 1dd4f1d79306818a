"""Testing – in-memory doubles for the client's ports."""
from fcm_push.testing.fakes import FakeTransport, RecordedRequest, StaticAuth

__all__ = ["FakeTransport", "RecordedRequest", "StaticAuth"]
