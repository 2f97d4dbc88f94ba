"""Object allocation service.

ObjectAllocator is a stateful service that hands out object addresses.
"""

from __future__ import annotations

from typing import Any

from pokemarket.core.identity import (
    ObjectId,
    derive_guid_address,
    derive_seed_address,
    normalize_address,
)
from pokemarket.core.types import Address


class ObjectAllocator:
    """Allocates object addresses derived from the creating account.

    Each account has its own creation counter, so addresses depend only on
    (creator, counter) or (creator, seed) and never on allocation order across
    accounts.
    """

    def __init__(self) -> None:
        self._creation_nums: dict[Address, int] = {}
        self._live: set[ObjectId] = set()

    def allocate(self, creator: Address) -> ObjectId:
        """Allocate the next address for `creator`.

        Args:
            creator: Creating account.

        Returns:
            Newly allocated ObjectId.
        """
        creator = normalize_address(creator)
        creation_num = self._creation_nums.get(creator, 0)
        self._creation_nums[creator] = creation_num + 1
        obj = derive_guid_address(creator, creation_num)
        self._live.add(obj)
        return obj

    def allocate_named(self, creator: Address, seed: bytes) -> ObjectId:
        """Allocate the seed-derived address for `creator`.

        Args:
            creator: Creating account.
            seed: Fixed seed naming the object.

        Returns:
            The derived ObjectId.

        Raises:
            ValueError: If that named object already exists.
        """
        obj = derive_seed_address(creator, seed)
        if obj in self._live:
            raise ValueError(f"Named object {obj} already exists")
        self._live.add(obj)
        return obj

    def is_alive(self, obj: ObjectId) -> bool:
        return obj in self._live

    def state(self) -> dict[str, Any]:
        """Counter state for snapshots."""
        return {"creation_nums": dict(self._creation_nums), "live": set(self._live)}

    def load_state(self, state: dict[str, Any]) -> None:
        self._creation_nums = state["creation_nums"]
        self._live = state["live"]
