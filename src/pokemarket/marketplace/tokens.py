"""Token entity manager: the create / list / buy state machine.

Every mutating operation runs inside one ledger transaction. All
preconditions are checked before the first write; anything that fails after
that (the coin transfer, mostly) is undone by the envelope.

Ownership is never cached on the token record. It is always read from the
object store.

Each token records the registry that minted it. A manager only sees its own
marketplace's tokens, even when several marketplaces share one ledger.

Usage:
    manager = TokenManager(ledger, registry_address, settings)
    token = manager.create("0xa11ce", 3, "Bulbasaur", "Seed Pokemon", 100)
    manager.buy("0xb0b", token)
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import NamedTuple

from pokemarket.config import MarketplaceSettings
from pokemarket.core.capability import BurnRef, ExtendRef, MutatorRef
from pokemarket.core.identity import ObjectId, normalize_address
from pokemarket.core.resource import resource
from pokemarket.core.types import Address
from pokemarket.errors import (
    AlreadyListed,
    AlreadyMinted,
    InsufficientFunds,
    InvalidId,
    InvalidPrice,
    NotAuthorized,
    NotFound,
    NotListed,
)
from pokemarket.events import ListingEvent, MintEvent, SaleEvent
from pokemarket.ledger import Ledger
from pokemarket.marketplace.catalog import CatalogStore
from pokemarket.marketplace.registry import MarketplaceRegistry, load_catalog, load_registry

logger = logging.getLogger(__name__)

UNLISTED = 0


@resource
@dataclass(frozen=True, slots=True)
class PokemonToken:
    """Display data and sale state of one collectible. `price == 0` means unlisted."""

    pokemon_id: int
    name: str
    description: str
    price: int
    uri: str
    marketplace: ObjectId


class TokenDetails(NamedTuple):
    pokemon_id: int
    name: str
    description: str
    price: int


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_price(price: object) -> int:
    if not _is_int(price) or price <= 0:  # type: ignore[operator]
        raise InvalidPrice(f"Price must be a positive integer, got {price!r}")
    return price  # type: ignore[return-value]


class TokenManager:
    """Owns the lifecycle of every token minted through one marketplace.

    Args:
        ledger: Ledger holding objects, coins and events.
        registry: Address of the marketplace registry object.
        settings: Deployment settings (ownership rule, price reset, mint uniqueness).
    """

    def __init__(self, ledger: Ledger, registry: ObjectId, settings: MarketplaceSettings):
        self._ledger = ledger
        self._registry_address = registry
        self._settings = settings

    @property
    def _registry(self) -> MarketplaceRegistry:
        return load_registry(self._ledger, self._registry_address)

    @property
    def _catalog(self) -> CatalogStore:
        return load_catalog(self._ledger, self._registry_address)

    def _token(self, token: ObjectId) -> PokemonToken:
        record = self._ledger.objects.get_resource(token, PokemonToken)
        if record is None or record.marketplace != self._registry_address:
            raise NotFound(f"No token at {token}")
        return record

    def _is_minted(self, pokemon_id: int) -> bool:
        return any(
            record.pokemon_id == pokemon_id and record.marketplace == self._registry_address
            for _, (record,) in self._ledger.objects.query(PokemonToken, copy=False)
        )

    # Mutating operations

    def create(
        self,
        creator: Address,
        pokemon_id: int,
        name: str,
        description: str,
        price: int,
    ) -> ObjectId:
        """Mint a new token owned by `creator`.

        Args:
            creator: Account that will own the token.
            pokemon_id: Catalog slot, 1..capacity.
            name: Display name.
            description: Display description.
            price: Initial price, must be positive.

        Returns:
            Address of the new token object.

        Raises:
            InvalidId: If pokemon_id is outside the catalog.
            InvalidPrice: If price is not positive.
            AlreadyMinted: If unique mints are enforced and the id is taken.
        """
        creator = normalize_address(creator)
        objects = self._ledger.objects
        with self._ledger.transaction("create"):
            catalog = self._catalog
            if not _is_int(pokemon_id) or not catalog.contains(pokemon_id):
                raise InvalidId(f"pokemon_id must be in 1..{catalog.capacity}, got {pokemon_id!r}")
            _require_price(price)
            if self._settings.unique_mints and self._is_minted(pokemon_id):
                raise AlreadyMinted(f"pokemon_id {pokemon_id} is already minted")

            uri = catalog.resolve(pokemon_id)
            ctor = objects.create_object(creator)
            token = ctor.target
            objects.set_resource(
                token,
                PokemonToken(
                    pokemon_id=pokemon_id,
                    name=name,
                    description=description,
                    price=price,
                    uri=uri,
                    marketplace=self._registry_address,
                ),
            )
            objects.set_resource(token, ctor.generate_mutator_ref())
            objects.set_resource(token, ctor.generate_burn_ref())
            objects.set_resource(token, ctor.generate_extend_ref())

            self._registry.mint_events.emit(
                self._ledger.events,
                MintEvent(pokemon_id=pokemon_id, creator=creator, name=name, price=price),
            )

        logger.info("Minted pokemon %d as %s for %s at %d", pokemon_id, token.short(), creator, price)
        return token

    def list(self, seller: Address, token: ObjectId, new_price: int) -> None:
        """Put an unlisted token up for sale.

        Raises:
            NotFound: If the token does not exist.
            NotAuthorized: If seller does not own the token.
            InvalidPrice: If new_price is not positive.
            AlreadyListed: If the token already has a non-zero price.
        """
        seller = normalize_address(seller)
        with self._ledger.transaction("list"):
            record = self._token(token)
            if not self._ledger.objects.is_owner(token, seller):
                raise NotAuthorized(f"{seller} does not own {token}")
            _require_price(new_price)
            if record.price != UNLISTED:
                raise AlreadyListed(f"{token} is already listed at {record.price}")

            self._ledger.objects.set_resource(token, dataclasses.replace(record, price=new_price))
            self._registry.listing_events.emit(
                self._ledger.events,
                ListingEvent(pokemon_id=record.pokemon_id, seller=seller, price=new_price),
            )

        logger.info("Listed %s at %d by %s", token.short(), new_price, seller)

    def delist(self, seller: Address, token: ObjectId) -> None:
        """Take a listed token off sale by returning its price to 0.

        Raises:
            NotFound: If the token does not exist.
            NotAuthorized: If seller does not own the token.
            NotListed: If the token is not listed.
        """
        seller = normalize_address(seller)
        with self._ledger.transaction("delist"):
            record = self._token(token)
            if not self._ledger.objects.is_owner(token, seller):
                raise NotAuthorized(f"{seller} does not own {token}")
            if record.price == UNLISTED:
                raise NotListed(f"{token} is not listed")

            self._ledger.objects.set_resource(token, dataclasses.replace(record, price=UNLISTED))
            self._registry.listing_events.emit(
                self._ledger.events,
                ListingEvent(pokemon_id=record.pokemon_id, seller=seller, price=UNLISTED),
            )

        logger.info("Delisted %s by %s", token.short(), seller)

    def buy(self, buyer: Address, token: ObjectId) -> None:
        """Pay the current owner the token's price and take ownership.

        Payment, the Sale event and the ownership transfer are applied together
        or not at all.

        Raises:
            NotFound: If the token does not exist.
            NotAuthorized: If the configured ownership check fails.
            NotListed: If the token's price is 0.
            InsufficientFunds: If the buyer cannot cover the price.
        """
        buyer = normalize_address(buyer)
        objects = self._ledger.objects
        coins = self._ledger.coins
        with self._ledger.transaction("buy"):
            record = self._token(token)
            seller = objects.owner_of(token)
            if self._settings.buy_ownership_check == "buyer":
                if seller != buyer:
                    raise NotAuthorized(f"{buyer} must already own {token}")
            elif seller == buyer:
                raise NotAuthorized(f"{buyer} already owns {token}")
            price = record.price
            if price == UNLISTED:
                raise NotListed(f"{token} is not for sale")
            if coins.balance_of(buyer) < price:
                raise InsufficientFunds(f"{buyer} cannot cover price {price}")

            coins.transfer(buyer, seller, price)
            self._registry.sale_events.emit(
                self._ledger.events,
                SaleEvent(pokemon_id=record.pokemon_id, seller=seller, buyer=buyer, price=price),
            )
            objects.transfer(token, buyer)
            if self._settings.reset_price_on_sale:
                objects.set_resource(token, dataclasses.replace(record, price=UNLISTED))

        logger.info("Sold %s from %s to %s for %d", token.short(), seller, buyer, price)

    # Reads

    def get_price(self, token: ObjectId) -> int:
        """Current price, 0 when unlisted.

        Raises:
            NotFound: If the token does not exist.
        """
        with self._ledger.read():
            return self._token(token).price

    def get_details(self, token: ObjectId) -> TokenDetails:
        """(pokemon_id, name, description, price) of a token.

        Raises:
            NotFound: If the token does not exist.
        """
        with self._ledger.read():
            record = self._token(token)
        return TokenDetails(record.pokemon_id, record.name, record.description, record.price)

    def get_owner(self, token: ObjectId) -> Address:
        with self._ledger.read():
            self._token(token)
            return self._ledger.objects.owner_of(token)

    def get_uri(self, token: ObjectId) -> str:
        with self._ledger.read():
            return self._token(token).uri

    def tokens_of(self, owner: Address) -> list[ObjectId]:
        """This marketplace's tokens currently owned by `owner`, in creation order."""
        objects = self._ledger.objects
        with self._ledger.read():
            owned = []
            for obj in objects.objects_owned_by(owner):
                record = objects.get_resource(obj, PokemonToken, copy=False)
                if record is not None and record.marketplace == self._registry_address:
                    owned.append(obj)
            return owned

    def capabilities(self, token: ObjectId) -> tuple[MutatorRef, BurnRef, ExtendRef]:
        """Capability handles stored on a token.

        Raises:
            NotFound: If the token does not exist.
        """
        objects = self._ledger.objects
        with self._ledger.read():
            self._token(token)
            mutator = objects.get_resource(token, MutatorRef)
            burn = objects.get_resource(token, BurnRef)
            extend = objects.get_resource(token, ExtendRef)
        if mutator is None or burn is None or extend is None:
            raise NotFound(f"Capabilities missing on {token}")
        return mutator, burn, extend
