"""Dependency injection module.

Providers come in two kinds. Core providers (config, domain services, use
cases) are concrete and always used as-is. Infrastructure components
(persistence, revalidation) have a production subclass here and a mock
subclass under ``tests.di``; the subclass is picked by its ``__is_mock__``
flag.
"""

from typing import Iterable, Type

from threads.util.di.application import ProdApplicationProvider
from threads.util.di.base import Component, ProviderBase
from threads.util.di.core import ProdConfigProvider
from threads.util.di.domain import ProdDomainProvider
from threads.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdRevalidationProvider,
    RevalidationProvider,
)
from threads.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    RevalidationProvider,
]


def mockable_components() -> dict[Component, Type[ProviderBase]]:
    """Map each swappable component name to its provider base."""
    return {
        base.__mock_component__: base
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class for a base.

    A base without subclasses is concrete and returned unchanged.

    Raises:
        DependencyInjectionError: If the base has no subclass of the requested kind
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    for candidate in subclasses:
        if candidate.__is_mock__ == use_mock:
            return candidate

    raise DependencyInjectionError(
        base.__mock_component__ or base.__name__,
        "no mock provider registered" if use_mock else "no production provider",
    )


def select_providers(mocked: Iterable[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per entry in ``PROVIDERS``.

    Args:
        mocked: Components that should use their mock implementation

    Returns:
        Provider instances ready for ``make_async_container``
    """
    mocked = set(mocked)
    unknown = mocked - set(mockable_components())
    if unknown:
        raise DependencyInjectionError(
            ", ".join(sorted(unknown)), "not a swappable component"
        )
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProdRevalidationProvider",
    "ProviderBase",
    "RevalidationProvider",
    "get_provider",
    "mockable_components",
    "select_providers",
]
