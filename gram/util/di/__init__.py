"""Dependency injection wiring."""

from typing import Type

from gram.util.di.application import ProdApplicationProvider
from gram.util.di.base import Component, ProviderBase
from gram.util.di.core import ProdConfigProvider
from gram.util.di.domain import ProdDomainProvider
from gram.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Order does not matter to dishka; bases of mockable components are listed
# instead of their implementations.
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the class to instantiate.

    Concrete providers (no subclasses) are returned unchanged. For a
    mockable component the subclass whose __is_mock__ equals use_mock is
    returned.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if getattr(implementation, "__is_mock__", False) == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    name = base.__mock_component__ or base.__name__
    raise ValueError(f"No {kind} implementation for {name}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
