"""Event records emitted by the marketplace.

These models are storage-agnostic: every record converts to and from a
JSON-serializable dict so external indexers can consume the logs.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, ClassVar


class EventKind(Enum):
    """The three independent marketplace logs."""

    MINT = "mint"
    LISTING = "listing"
    SALE = "sale"


@dataclass(frozen=True, slots=True)
class MintEvent:
    """A token was created."""

    kind: ClassVar[EventKind] = EventKind.MINT

    pokemon_id: int
    creator: str
    name: str
    price: int


@dataclass(frozen=True, slots=True)
class ListingEvent:
    """A token's sale price changed. `price == 0` records a delisting."""

    kind: ClassVar[EventKind] = EventKind.LISTING

    pokemon_id: int
    seller: str
    price: int


@dataclass(frozen=True, slots=True)
class SaleEvent:
    """A token changed hands against payment."""

    kind: ClassVar[EventKind] = EventKind.SALE

    pokemon_id: int
    seller: str
    buyer: str
    price: int


MarketEvent = MintEvent | ListingEvent | SaleEvent

_EVENT_TYPES: dict[EventKind, type[MintEvent] | type[ListingEvent] | type[SaleEvent]] = {
    EventKind.MINT: MintEvent,
    EventKind.LISTING: ListingEvent,
    EventKind.SALE: SaleEvent,
}


@dataclass(frozen=True, slots=True)
class LoggedEvent:
    """An event as stored in a log, stamped with its position.

    Attributes:
        log_id: Log the event was appended to.
        sequence_number: Zero-based position within that log.
        event: The event payload.
    """

    log_id: str
    sequence_number: int
    event: MarketEvent

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "log_id": self.log_id,
            "sequence_number": self.sequence_number,
            "kind": self.event.kind.value,
            "data": asdict(self.event),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LoggedEvent:
        """Create from dictionary (for deserialization)."""
        event_type = _EVENT_TYPES[EventKind(data["kind"])]
        return cls(
            log_id=data["log_id"],
            sequence_number=data["sequence_number"],
            event=event_type(**data["data"]),
        )
