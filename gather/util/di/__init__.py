"""Dependency injection module."""

from typing import Type

from gather.util.di.application import ProdApplicationProvider
from gather.util.di.base import Component, ProviderBase
from gather.util.di.core import ProdConfigProvider
from gather.util.di.domain import ProdDomainProvider
from gather.util.di.infrastructure import (
    GoogleProvider,
    KakaoProvider,
    OAuthAggregatorProvider,
    PersistenceProvider,
    ProdGoogleProvider,
    ProdKakaoProvider,
    ProdPersistenceProvider,
)

# Every provider of the app, concrete ones and mockable component bases
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    KakaoProvider,
    GoogleProvider,
    PersistenceProvider,
    # Combines the Kakao and Google gateways into one map
    OAuthAggregatorProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_mockable() and base.__mock_component__
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "mockable_components",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "GoogleProvider",
    "KakaoProvider",
    "OAuthAggregatorProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdGoogleProvider",
    "ProdKakaoProvider",
    "ProdPersistenceProvider",
]
