"""Dependency injection module.

Every provider class listed in PROVIDERS is either always real (config,
domain, application) or a mockable component base whose subclasses are
the production and mock implementations.
"""

from typing import Type

from tkchat.util.di.application import ProdApplicationProvider
from tkchat.util.di.base import Component, ProviderBase
from tkchat.util.di.core import ProdConfigProvider
from tkchat.util.di.domain import ProdDomainProvider
from tkchat.util.di.infrastructure import (
    IdentityProvider,
    NotificationProvider,
    PersistenceProvider,
    ProdIdentityProvider,
    ProdNotificationProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    IdentityProvider,
    NotificationProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that can be swapped for a mock."""
    return {base.__mock_component__ for base in PROVIDERS if base.__mock_component__}


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation class for one entry of PROVIDERS.

    Mock implementations register themselves by subclassing the component
    base, so they are only found once the module defining them is imported.

    Raises:
        ValueError: If the requested implementation is not registered
    """
    if base.__mock_component__ is None:
        return base

    impl = next(
        (c for c in base.__subclasses__() if c.__is_mock__ == use_mock),
        None,
    )
    if impl is None:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {base.__mock_component__}")
    return impl


def select_providers(mocked: set[Component]) -> list[ProviderBase]:
    """Instantiate one provider per PROVIDERS entry.

    Args:
        mocked: Components to serve from their mock implementation

    Raises:
        ValueError: If a name is unknown, or a real component depends on
            a mocked one
    """
    unknown = mocked - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    for base in PROVIDERS:
        component = base.__mock_component__
        if component and component not in mocked:
            clash = base.__depends_on__ & mocked
            if clash:
                raise ValueError(
                    f"Component '{component}' needs {sorted(clash)} to be real"
                )

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "select_providers",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "IdentityProvider",
    "NotificationProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
]
