"""Payment rail: coin balances and atomic transfers."""

from pokemarket.payment.local import LocalCoinStore
from pokemarket.payment.protocol import CoinStore

__all__ = [
    "CoinStore",
    "LocalCoinStore",
]
