"""Tests for the ledger's atomic transaction envelope.

Critical Invariants:
- A failing transaction leaves objects, coins and events exactly as before
- Nested transactions join the outermost one
"""

import logging
import threading

import pytest

from pokemarket.errors import InsufficientFunds
from pokemarket.events import EventHandle, EventKind, MintEvent


def _mint_event(pokemon_id: int = 1) -> MintEvent:
    return MintEvent(pokemon_id=pokemon_id, creator="0xa11ce", name="x", price=1)


def test_commit_keeps_all_changes(ledger):
    ledger.coins.deposit("0xb0b", 100)
    handle = EventHandle.for_owner("0xabc", EventKind.MINT)

    with ledger.transaction():
        obj = ledger.objects.create_object("0xa11ce").target
        ledger.coins.transfer("0xb0b", "0xa11ce", 40)
        handle.emit(ledger.events, _mint_event())

    assert ledger.objects.object_exists(obj)
    assert ledger.coins.balance_of("0xa11ce") == 40
    assert ledger.events.count(handle.log_id) == 1


def test_failure_rolls_back_every_collaborator(ledger):
    """CRITICAL: No partial effect survives an aborted transaction."""
    ledger.coins.deposit("0xb0b", 100)
    handle = EventHandle.for_owner("0xabc", EventKind.MINT)
    obj = ledger.objects.create_object("0xa11ce").target

    with pytest.raises(InsufficientFunds):
        with ledger.transaction("doomed"):
            ledger.objects.transfer(obj, "0xb0b")
            handle.emit(ledger.events, _mint_event())
            ledger.coins.transfer("0xb0b", "0xa11ce", 60)
            ledger.coins.transfer("0xb0b", "0xa11ce", 60)

    assert ledger.objects.owner_of(obj) == "0xa11ce"
    assert ledger.events.count(handle.log_id) == 0
    assert ledger.coins.balance_of("0xb0b") == 100
    assert ledger.coins.balance_of("0xa11ce") == 0
    assert not ledger.in_transaction


def test_nested_failure_rolls_back_outer_work(ledger):
    ledger.coins.deposit("0xb0b", 100)

    with pytest.raises(RuntimeError):
        with ledger.transaction("outer"):
            ledger.coins.transfer("0xb0b", "0xa11ce", 10)
            with ledger.transaction("inner"):
                assert ledger.in_transaction
                raise RuntimeError("boom")

    assert ledger.coins.balance_of("0xb0b") == 100


def test_nested_success_commits_with_outer(ledger):
    ledger.coins.deposit("0xb0b", 100)

    with ledger.transaction("outer"):
        with ledger.transaction("inner"):
            ledger.coins.transfer("0xb0b", "0xa11ce", 10)
        assert ledger.in_transaction

    assert ledger.coins.balance_of("0xa11ce") == 10
    assert not ledger.in_transaction


def test_rollback_is_logged_with_error_code(ledger, caplog):
    ledger.coins.deposit("0xb0b", 1)
    with caplog.at_level(logging.WARNING, logger="pokemarket.ledger.ledger"):
        with pytest.raises(InsufficientFunds):
            with ledger.transaction("pay"):
                ledger.coins.transfer("0xb0b", "0xa11ce", 2)

    assert "Rolled back pay: insufficient_funds" in caplog.text


def test_concurrent_transactions_are_serialized(ledger):
    """Threads transferring back and forth never observe or leave torn balances."""
    ledger.coins.deposit("0xa", 1_000)
    ledger.coins.deposit("0xb", 1_000)

    def worker(sender: str, recipient: str) -> None:
        for _ in range(200):
            with ledger.transaction():
                ledger.coins.transfer(sender, recipient, 1)

    threads = [
        threading.Thread(target=worker, args=("0xa", "0xb")),
        threading.Thread(target=worker, args=("0xb", "0xa")),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert ledger.coins.balance_of("0xa") == 1_000
    assert ledger.coins.balance_of("0xb") == 1_000


def test_read_waits_for_open_transaction(ledger):
    """CRITICAL: A reader never observes state a transaction later rolls back."""
    started = threading.Event()
    release = threading.Event()
    observed: list[int] = []

    def writer() -> None:
        try:
            with ledger.transaction("deposit"):
                ledger.coins.deposit("0xa", 50)
                started.set()
                release.wait(timeout=5)
                raise RuntimeError("abort")
        except RuntimeError:
            pass

    def reader() -> None:
        started.wait(timeout=5)
        with ledger.read():
            observed.append(ledger.coins.balance_of("0xa"))

    threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
    for t in threads:
        t.start()
    started.wait(timeout=5)
    release.set()
    for t in threads:
        t.join()

    assert observed == [0]


def test_read_inside_transaction_sees_pending_writes(ledger):
    with ledger.transaction():
        ledger.coins.deposit("0xa", 5)
        with ledger.read():
            assert ledger.coins.balance_of("0xa") == 5
