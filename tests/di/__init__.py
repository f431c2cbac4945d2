"""Mock providers for testing."""

from .identity import MockIdentityProvider
from .notification import MockNotificationProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockIdentityProvider",
    "MockNotificationProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
