"""Mock providers for testing."""

from .google import MockGoogleProvider
from .kakao import MockKakaoProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockGoogleProvider",
    "MockKakaoProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
