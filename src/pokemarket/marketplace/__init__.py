"""Marketplace layer: catalog, registry, token lifecycle and deployment."""

from pokemarket.marketplace.catalog import CatalogStore
from pokemarket.marketplace.market import Marketplace
from pokemarket.marketplace.registry import (
    MarketplaceRegistry,
    initialize_registry,
    load_catalog,
    load_registry,
    registry_address,
)
from pokemarket.marketplace.tokens import UNLISTED, PokemonToken, TokenDetails, TokenManager

__all__ = [
    "CatalogStore",
    "Marketplace",
    "MarketplaceRegistry",
    "PokemonToken",
    "TokenDetails",
    "TokenManager",
    "UNLISTED",
    "initialize_registry",
    "load_catalog",
    "load_registry",
    "registry_address",
]
