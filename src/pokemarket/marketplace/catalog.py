"""Catalog store: the fixed set of artwork URIs a token can be bound to."""

from __future__ import annotations

from dataclasses import dataclass

from pokemarket.core.resource import resource
from pokemarket.errors import OutOfRange


@resource
@dataclass(frozen=True, slots=True)
class CatalogStore:
    """Ordered artwork URIs. Slot `i` is bound to `pokemon_id = i + 1`.

    Immutable once built; stored on the marketplace object alongside the
    registry.
    """

    uri_slots: tuple[str, ...]

    @classmethod
    def initialize(cls, base_uri: str, capacity: int = 16) -> CatalogStore:
        """Build the catalog from a base path and each slot's pokemon_id.

        Args:
            base_uri: Base path, with or without a trailing slash.
            capacity: Number of slots.

        Returns:
            A catalog of exactly `capacity` URIs.

        Raises:
            ValueError: If capacity is not positive.
        """
        if capacity < 1:
            raise ValueError(f"Catalog capacity must be positive, got {capacity}")
        base = base_uri.rstrip("/")
        return cls(uri_slots=tuple(f"{base}/{pokemon_id}.png" for pokemon_id in range(1, capacity + 1)))

    @property
    def capacity(self) -> int:
        return len(self.uri_slots)

    def __len__(self) -> int:
        return len(self.uri_slots)

    def contains(self, pokemon_id: int) -> bool:
        return 1 <= pokemon_id <= len(self.uri_slots)

    def resolve(self, pokemon_id: int) -> str:
        """URI bound to `pokemon_id`.

        Raises:
            OutOfRange: If pokemon_id is not in 1..capacity.
        """
        if not self.contains(pokemon_id):
            raise OutOfRange(f"pokemon_id {pokemon_id} outside 1..{len(self.uri_slots)}")
        return self.uri_slots[pokemon_id - 1]
