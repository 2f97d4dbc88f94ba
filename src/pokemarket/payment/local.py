"""Local in-memory coin store.

Usage:
    coins = LocalCoinStore()
    coins.deposit("0xb0b", 500)
    coins.transfer("0xb0b", "0xa11ce", 100)
"""

from __future__ import annotations

import pickle  # nosec B403 - snapshots never leave the process

from pokemarket.core.identity import normalize_address
from pokemarket.core.types import Address
from pokemarket.errors import InsufficientFunds


class LocalCoinStore:
    """Dict-backed balances keyed by normalized address."""

    def __init__(self) -> None:
        self._balances: dict[Address, int] = {}

    def balance_of(self, address: Address) -> int:
        return self._balances.get(normalize_address(address), 0)

    def deposit(self, address: Address, amount: int) -> None:
        """Credit `amount` to `address`.

        Raises:
            ValueError: If amount is negative.
        """
        if amount < 0:
            raise ValueError(f"Deposit amount must be non-negative, got {amount}")
        address = normalize_address(address)
        self._balances[address] = self._balances.get(address, 0) + amount

    def transfer(self, sender: Address, recipient: Address, amount: int) -> None:
        """Move `amount` from `sender` to `recipient`.

        Both balances are validated before either is written, so a failure
        leaves every balance untouched.

        Raises:
            ValueError: If amount is negative.
            InsufficientFunds: If sender's balance is below amount.
        """
        if amount < 0:
            raise ValueError(f"Transfer amount must be non-negative, got {amount}")
        sender = normalize_address(sender)
        recipient = normalize_address(recipient)
        available = self._balances.get(sender, 0)
        if available < amount:
            raise InsufficientFunds(f"{sender} holds {available}, needs {amount}")
        self._balances[sender] = available - amount
        self._balances[recipient] = self._balances.get(recipient, 0) + amount

    def snapshot(self) -> bytes:
        return pickle.dumps(self._balances)

    def restore(self, data: bytes) -> None:
        self._balances = pickle.loads(data)  # nosec B301 - produced by snapshot() in this process
