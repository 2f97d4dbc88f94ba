"""Protocols for the event sink.

These protocols define the interface for event storage backends, allowing
different implementations (in-memory, file, database).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pokemarket.events.models import LoggedEvent, MarketEvent


@runtime_checkable
class EventSink(Protocol):
    """Protocol for durable, append-only, ordered event logs.

    A sink holds any number of independent logs keyed by `log_id`. Within one
    log, read order always equals append order. Nothing is guaranteed about
    ordering across logs.

    Usage:
        sink = InMemoryEventSink()
        sink.append("0xabc::mint", MintEvent(...))
        events = sink.read("0xabc::mint", start=0, limit=10)
    """

    def append(self, log_id: str, record: MarketEvent) -> LoggedEvent:
        """Append a record to the end of a log.

        Args:
            log_id: Log to append to (created on first append).
            record: Event payload.

        Returns:
            The stored event with its sequence number.
        """
        ...

    def read(self, log_id: str, start: int = 0, limit: int | None = None) -> list[LoggedEvent]:
        """Read a slice of a log in append order.

        Args:
            log_id: Log to read.
            start: First sequence number to include.
            limit: Maximum number of events, None for all remaining.

        Returns:
            Events in sequence order; empty for unknown logs.
        """
        ...

    def count(self, log_id: str) -> int:
        """Number of events in a log."""
        ...

    def snapshot(self) -> bytes:
        """Serialize every log."""
        ...

    def restore(self, data: bytes) -> None:
        """Restore from snapshot."""
        ...
