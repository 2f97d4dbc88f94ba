"""Payment protocol: the fungible coin rail.

Implementations must make `transfer` all-or-nothing: it either moves the full
amount or raises without touching any balance.
"""

from __future__ import annotations

from typing import Protocol

from pokemarket.core.types import Address


class CoinStore(Protocol):
    """Abstract coin balance interface."""

    def balance_of(self, address: Address) -> int:
        """Available balance, 0 for unknown accounts."""
        ...

    def deposit(self, address: Address, amount: int) -> None:
        """Credit `amount` to `address`."""
        ...

    def transfer(self, sender: Address, recipient: Address, amount: int) -> None:
        """Move `amount` from `sender` to `recipient`, atomically."""
        ...

    def snapshot(self) -> bytes:
        """Serialize all balances."""
        ...

    def restore(self, data: bytes) -> None:
        """Restore from snapshot."""
        ...
