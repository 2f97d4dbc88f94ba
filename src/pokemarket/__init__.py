"""pokemarket: a bounded marketplace of uniquely identified Pokemon tokens.

Usage:
    from pokemarket import Ledger, Marketplace

    ledger = Ledger()
    market = Marketplace.initialize("0xdeployer", ledger)

    token = market.tokens.create("0xa11ce", 3, "Bulbasaur", "Seed Pokemon", 100)
    ledger.coins.deposit("0xb0b", 500)
    market.tokens.buy("0xb0b", token)

    assert market.tokens.get_owner(token) == "0xb0b"
"""

__version__ = "0.1.0"

# Core primitives
from pokemarket.core import (
    Address,
    BurnRef,
    ConstructorRef,
    ExtendRef,
    MutatorRef,
    ObjectId,
    resource,
)

# Configuration
from pokemarket.config import MarketplaceSettings

# Errors
from pokemarket.errors import (
    AlreadyInitialized,
    AlreadyListed,
    AlreadyMinted,
    InsufficientFunds,
    InvalidId,
    InvalidPrice,
    MarketplaceError,
    NotAuthorized,
    NotFound,
    NotListed,
    OutOfRange,
)

# Events
from pokemarket.events import (
    EventKind,
    EventSink,
    InMemoryEventSink,
    ListingEvent,
    LoggedEvent,
    MintEvent,
    SaleEvent,
)

# Ledger and collaborators
from pokemarket.ledger import Ledger
from pokemarket.payment import CoinStore, LocalCoinStore

# Marketplace
from pokemarket.marketplace import (
    CatalogStore,
    Marketplace,
    MarketplaceRegistry,
    PokemonToken,
    TokenDetails,
    TokenManager,
)
from pokemarket.storage import LocalObjectStore, ObjectStore

__all__ = [
    # Version
    "__version__",
    # Core
    "Address",
    "ObjectId",
    "resource",
    "BurnRef",
    "ConstructorRef",
    "ExtendRef",
    "MutatorRef",
    # Config
    "MarketplaceSettings",
    # Errors
    "MarketplaceError",
    "InvalidId",
    "InvalidPrice",
    "NotAuthorized",
    "NotFound",
    "InsufficientFunds",
    "AlreadyListed",
    "NotListed",
    "OutOfRange",
    "AlreadyMinted",
    "AlreadyInitialized",
    # Events
    "EventKind",
    "EventSink",
    "InMemoryEventSink",
    "LoggedEvent",
    "MintEvent",
    "ListingEvent",
    "SaleEvent",
    # Ledger
    "Ledger",
    "CoinStore",
    "LocalCoinStore",
    "ObjectStore",
    "LocalObjectStore",
    # Marketplace
    "Marketplace",
    "MarketplaceRegistry",
    "CatalogStore",
    "PokemonToken",
    "TokenDetails",
    "TokenManager",
]
