"""Tests for the in-memory coin store.

Critical Invariants:
- A failed transfer moves nothing
- Total supply is conserved by transfers
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pokemarket.errors import InsufficientFunds
from pokemarket.payment import CoinStore, LocalCoinStore


@pytest.fixture
def coins():
    store = LocalCoinStore()
    store.deposit("0xb0b", 500)
    return store


def test_unknown_account_has_zero_balance():
    assert LocalCoinStore().balance_of("0xa11ce") == 0


def test_transfer_moves_full_amount(coins):
    coins.transfer("0xb0b", "0xa11ce", 200)

    assert coins.balance_of("0xb0b") == 300
    assert coins.balance_of("0xa11ce") == 200


def test_insufficient_transfer_changes_nothing(coins):
    """CRITICAL: Failed transfer leaves both balances untouched."""
    with pytest.raises(InsufficientFunds):
        coins.transfer("0xb0b", "0xa11ce", 501)

    assert coins.balance_of("0xb0b") == 500
    assert coins.balance_of("0xa11ce") == 0


def test_self_transfer_is_net_zero(coins):
    coins.transfer("0xb0b", "0xB0B", 100)
    assert coins.balance_of("0xb0b") == 500


@pytest.mark.parametrize("method", ["deposit", "transfer"])
def test_negative_amounts_rejected(coins, method):
    with pytest.raises(ValueError, match="non-negative"):
        if method == "deposit":
            coins.deposit("0xb0b", -1)
        else:
            coins.transfer("0xb0b", "0xa11ce", -1)


def test_snapshot_restore(coins):
    saved = coins.snapshot()
    coins.transfer("0xb0b", "0xa11ce", 100)
    coins.restore(saved)

    assert coins.balance_of("0xb0b") == 500
    assert coins.balance_of("0xa11ce") == 0


@given(amounts=st.lists(st.integers(min_value=0, max_value=1_000), max_size=20))
def test_transfers_conserve_supply(amounts):
    """PROPERTY: Successful or failed, transfers never create or destroy coins."""
    coins: CoinStore = LocalCoinStore()
    coins.deposit("0xa", 1_000)
    coins.deposit("0xb", 1_000)
    accounts = ["0xa", "0xb"]

    for i, amount in enumerate(amounts):
        sender, recipient = accounts[i % 2], accounts[(i + 1) % 2]
        try:
            coins.transfer(sender, recipient, amount)
        except InsufficientFunds:
            pass
        assert coins.balance_of("0xa") + coins.balance_of("0xb") == 2_000
