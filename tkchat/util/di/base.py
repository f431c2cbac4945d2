"""Provider base class and component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a mock implementation under tests/di
Component = Literal["persistence", "identity", "notification"]


class ProviderBase(Provider):
    """Base for every provider in PROVIDERS.

    Attributes:
        __mock_component__: Component name when the provider has a mock
            twin; None for providers that are always real
        __is_mock__: Whether this subclass is the mock twin
        __depends_on__: Components that must also be real when this one is
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    __depends_on__: ClassVar[frozenset[Component]] = frozenset()
