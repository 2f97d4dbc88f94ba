"""Marketplace: deployment entry point and indexer-facing reads.

Usage:
    ledger = Ledger()
    market = Marketplace.initialize("0xdeployer", ledger)

    token = market.tokens.create("0xa11ce", 3, "Bulbasaur", "Seed Pokemon", 100)
    for logged in market.events(EventKind.MINT):
        print(logged.to_dict())

    # Later, reattach to the same deployment
    market = Marketplace.attach("0xdeployer", ledger)
"""

from __future__ import annotations

from pokemarket.config import MarketplaceSettings
from pokemarket.core.identity import ObjectId
from pokemarket.core.types import Address
from pokemarket.events import EventKind, LoggedEvent
from pokemarket.ledger import Ledger
from pokemarket.marketplace.catalog import CatalogStore
from pokemarket.marketplace.registry import (
    MarketplaceRegistry,
    initialize_registry,
    load_catalog,
    load_registry,
    registry_address,
)
from pokemarket.marketplace.tokens import TokenManager


class Marketplace:
    """One deployed marketplace on a ledger.

    Construct through `initialize` (first deployment) or `attach` (existing
    deployment). The registry itself lives on the ledger, so any number of
    Marketplace instances may point at it without creating a second one.
    """

    def __init__(self, ledger: Ledger, address: ObjectId, settings: MarketplaceSettings):
        self.ledger = ledger
        self.address = address
        self.settings = settings
        self.tokens = TokenManager(ledger, address, settings)

    @classmethod
    def initialize(
        cls,
        deployer: Address,
        ledger: Ledger | None = None,
        settings: MarketplaceSettings | None = None,
    ) -> Marketplace:
        """Deploy the catalog and registry.

        Args:
            deployer: Account deploying the marketplace.
            ledger: Ledger to deploy on (a fresh one if omitted).
            settings: Deployment settings (loaded from the environment if omitted).

        Returns:
            The deployed marketplace.

        Raises:
            AlreadyInitialized: If this deployer already deployed with the same seed.
        """
        ledger = ledger or Ledger()
        settings = settings or MarketplaceSettings()
        address = initialize_registry(ledger, deployer, settings)
        return cls(ledger, address, settings)

    @classmethod
    def attach(
        cls,
        deployer: Address,
        ledger: Ledger,
        settings: MarketplaceSettings | None = None,
    ) -> Marketplace:
        """Bind to an existing deployment.

        Raises:
            NotFound: If nothing is deployed at the derived address.
        """
        settings = settings or MarketplaceSettings()
        address = registry_address(deployer, settings.registry_seed)
        load_registry(ledger, address)
        return cls(ledger, address, settings)

    @property
    def registry(self) -> MarketplaceRegistry:
        return load_registry(self.ledger, self.address)

    @property
    def catalog(self) -> CatalogStore:
        return load_catalog(self.ledger, self.address)

    @property
    def signer(self) -> Address:
        """The marketplace's own acting address, via its extend capability."""
        return self.registry.extend_ref.generate_signer()

    def events(self, kind: EventKind, start: int = 0, limit: int | None = None) -> list[LoggedEvent]:
        """Read a slice of one event log in append order."""
        with self.ledger.read():
            return list(self.ledger.events.read(self.registry.handle(kind).log_id, start, limit))

    def event_count(self, kind: EventKind) -> int:
        with self.ledger.read():
            return self.ledger.events.count(self.registry.handle(kind).log_id)
