"""Infrastructure providers."""

# Import bases
from .identity import IdentityProvider
from .notification import NotificationProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .identity import ProdIdentityProvider  # noqa: F401
from .notification import ProdNotificationProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "IdentityProvider",
    "NotificationProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
]
