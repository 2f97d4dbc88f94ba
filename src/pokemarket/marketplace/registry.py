"""Marketplace registry: the per-deployment singleton.

The registry lives on a named object whose address is derived from the
deployer and a fixed seed. That address doubles as the one-time
initialization guard: if the object exists, the marketplace is deployed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pokemarket.config import MarketplaceSettings
from pokemarket.core.capability import ExtendRef
from pokemarket.core.identity import ObjectId, derive_seed_address, normalize_address
from pokemarket.core.resource import resource
from pokemarket.core.types import Address
from pokemarket.errors import AlreadyInitialized, NotFound
from pokemarket.events import EventHandle, EventKind
from pokemarket.ledger import Ledger
from pokemarket.marketplace.catalog import CatalogStore

logger = logging.getLogger(__name__)


@resource
@dataclass(frozen=True, slots=True)
class MarketplaceRegistry:
    """Event handles and authority capability for one marketplace."""

    mint_events: EventHandle
    sale_events: EventHandle
    listing_events: EventHandle
    extend_ref: ExtendRef

    def handle(self, kind: EventKind) -> EventHandle:
        return {
            EventKind.MINT: self.mint_events,
            EventKind.SALE: self.sale_events,
            EventKind.LISTING: self.listing_events,
        }[kind]


def registry_address(deployer: Address, seed: str) -> ObjectId:
    """Deterministic address of the registry deployed by `deployer`."""
    return derive_seed_address(normalize_address(deployer), seed.encode())


def initialize_registry(
    ledger: Ledger, deployer: Address, settings: MarketplaceSettings
) -> ObjectId:
    """Create the registry object and its catalog exactly once.

    Args:
        ledger: Ledger to deploy on.
        deployer: Account that owns the marketplace object.
        settings: Capacity, URI base and seed for this deployment.

    Returns:
        Address of the registry object.

    Raises:
        AlreadyInitialized: If the registry already exists for this deployer and seed.
    """
    address = registry_address(deployer, settings.registry_seed)
    with ledger.transaction("initialize"):
        if ledger.objects.object_exists(address):
            raise AlreadyInitialized(f"Marketplace already deployed at {address}")

        ctor = ledger.objects.create_named_object(deployer, settings.registry_seed.encode())
        owner = ctor.target.address
        registry = MarketplaceRegistry(
            mint_events=EventHandle.for_owner(owner, EventKind.MINT),
            sale_events=EventHandle.for_owner(owner, EventKind.SALE),
            listing_events=EventHandle.for_owner(owner, EventKind.LISTING),
            extend_ref=ctor.generate_extend_ref(),
        )
        catalog = CatalogStore.initialize(settings.uri_base, settings.max_capacity)
        ledger.objects.set_resource(ctor.target, registry)
        ledger.objects.set_resource(ctor.target, catalog)

    logger.info(
        "Initialized marketplace %s for %s with %d catalog slots",
        ctor.target.short(),
        normalize_address(deployer),
        len(catalog),
    )
    return ctor.target


def load_registry(ledger: Ledger, address: ObjectId) -> MarketplaceRegistry:
    """Read the registry resource at `address`.

    Raises:
        NotFound: If no registry lives at that address.
    """
    registry = ledger.objects.get_resource(address, MarketplaceRegistry, copy=False)
    if registry is None:
        raise NotFound(f"No marketplace registry at {address}")
    return registry


def load_catalog(ledger: Ledger, address: ObjectId) -> CatalogStore:
    """Read the catalog stored next to the registry.

    Raises:
        NotFound: If no catalog lives at that address.
    """
    catalog = ledger.objects.get_resource(address, CatalogStore, copy=False)
    if catalog is None:
        raise NotFound(f"No catalog at {address}")
    return catalog
