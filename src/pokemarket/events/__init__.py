"""Event emitter: append-only logs consumed by external indexers.

Usage:
    from pokemarket.events import EventHandle, EventKind, InMemoryEventSink

    sink = InMemoryEventSink()
    handle = EventHandle.for_owner("0xabc", EventKind.MINT)
    handle.emit(sink, MintEvent(pokemon_id=3, creator="0xa", name="Bulbasaur", price=100))
"""

from pokemarket.events.handle import EventHandle
from pokemarket.events.memory import InMemoryEventSink
from pokemarket.events.models import (
    EventKind,
    ListingEvent,
    LoggedEvent,
    MarketEvent,
    MintEvent,
    SaleEvent,
)
from pokemarket.events.protocol import EventSink

__all__ = [
    "EventHandle",
    "EventKind",
    "EventSink",
    "InMemoryEventSink",
    "ListingEvent",
    "LoggedEvent",
    "MarketEvent",
    "MintEvent",
    "SaleEvent",
]
