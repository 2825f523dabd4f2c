"""Dependency injection wiring."""

from typing import Type

from inviteflow.util.di.application import ProdApplicationProvider
from inviteflow.util.di.base import Component, ProviderBase
from inviteflow.util.di.core import ProdConfigProvider
from inviteflow.util.di.domain import ProdDomainProvider
from inviteflow.util.di.infrastructure import (
    MailProvider,
    PersistenceProvider,
    ProdMailProvider,
    ProdPersistenceProvider,
)

# Every provider the container needs, concrete or component base
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    MailProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve ``base`` to the provider class to instantiate."""
    return base.implementation(use_mock)


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation loaded."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.is_mockable()
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "MailProvider",
    "PersistenceProvider",
    "ProdMailProvider",
    "ProdPersistenceProvider",
]
