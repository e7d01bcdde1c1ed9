# Mock Services Package
# Provides mock implementations of external services for testing

from .backend_server import BASE_URL, MockResearchBackend, RecordingSession
from .native_window import FakeWindowHandle

__all__ = [
    "BASE_URL",
    "FakeWindowHandle",
    "MockResearchBackend",
    "RecordingSession",
]
