"""Dependency injection module."""

from typing import Type

from aevium.util.di.application import ProdApplicationProvider
from aevium.util.di.base import Component, ProviderBase
from aevium.util.di.core import ConfigProvider, ProdConfigProvider
from aevium.util.di.domain import ProdDomainProvider
from aevium.util.di.infrastructure import LedgerProvider, ProdLedgerProvider
from aevium.util.di.persistence import ProdPersistenceProvider

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdDomainProvider,
    ProdApplicationProvider,
    ProdPersistenceProvider,
    # Mockable components
    ConfigProvider,
    LedgerProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Mockable component, select by __is_mock__ flag

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdApplicationProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    # Mockable component bases
    "ConfigProvider",
    "LedgerProvider",
    # Production implementations
    "ProdConfigProvider",
    "ProdLedgerProvider",
]
