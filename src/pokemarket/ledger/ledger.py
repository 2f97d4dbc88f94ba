"""Ledger: the host environment every marketplace operation runs against.

Owns the three collaborators (object store, coin store, event sink) and wraps
operations in an atomic transaction envelope: either every mutation made
inside `transaction()` is kept, or the collaborators are restored to exactly
the state they had on entry.

Usage:
    ledger = Ledger()
    ledger.coins.deposit("0xb0b", 1_000)

    with ledger.transaction("buy"):
        ledger.coins.transfer("0xb0b", "0xa11ce", 100)
        ledger.objects.transfer(token, "0xb0b")

    with ledger.read():
        owner = ledger.objects.owner_of(token)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from pokemarket.events.memory import InMemoryEventSink
from pokemarket.events.protocol import EventSink
from pokemarket.payment.local import LocalCoinStore
from pokemarket.payment.protocol import CoinStore
from pokemarket.storage.local import LocalObjectStore
from pokemarket.storage.protocol import ObjectStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LedgerSnapshot:
    """Serialized state of every collaborator at one point in time."""

    objects: bytes
    coins: bytes
    events: bytes


class Ledger:
    """Central ledger state and transaction coordinator.

    Transactions are serialized with a re-entrant lock. A transaction opened
    while another is active on the same thread joins the outer one: only the
    outermost envelope snapshots and restores.
    """

    def __init__(
        self,
        objects: ObjectStore | None = None,
        coins: CoinStore | None = None,
        events: EventSink | None = None,
    ):
        self.objects: ObjectStore = objects or LocalObjectStore()
        self.coins: CoinStore = coins or LocalCoinStore()
        self.events: EventSink = events or InMemoryEventSink()
        self._lock = threading.RLock()
        self._depth = 0

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0

    @contextmanager
    def transaction(self, label: str = "transaction") -> Iterator[Ledger]:
        """Run the enclosed block atomically.

        Args:
            label: Operation name used in log lines.

        Yields:
            This ledger.

        Raises:
            Whatever the enclosed block raised, after state has been restored.
        """
        with self._lock:
            if self._depth:
                self._depth += 1
                try:
                    yield self
                finally:
                    self._depth -= 1
                return

            saved = self.snapshot()
            self._depth = 1
            logger.debug("Begin %s", label)
            try:
                yield self
            except BaseException as e:
                self.restore(saved)
                logger.warning(
                    "Rolled back %s: %s", label, getattr(e, "code", type(e).__name__)
                )
                raise
            else:
                logger.debug("Commit %s", label)
            finally:
                self._depth = 0

    @contextmanager
    def read(self) -> Iterator[Ledger]:
        """Hold the ledger lock for a consistent read.

        Reads taken inside never observe a transaction half-applied or
        half-rolled-back, and stores are not mutated while they iterate.
        Results should be materialized before the block exits.
        """
        with self._lock:
            yield self

    def snapshot(self) -> LedgerSnapshot:
        """Serialize ledger state."""
        return LedgerSnapshot(
            objects=self.objects.snapshot(),
            coins=self.coins.snapshot(),
            events=self.events.snapshot(),
        )

    def restore(self, data: LedgerSnapshot) -> None:
        """Restore from snapshot."""
        self.objects.restore(data.objects)
        self.coins.restore(data.coins)
        self.events.restore(data.events)
