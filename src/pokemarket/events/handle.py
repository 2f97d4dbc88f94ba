"""Event handles: typed write access to one log."""

from __future__ import annotations

from dataclasses import dataclass

from pokemarket.events.models import EventKind, LoggedEvent, MarketEvent
from pokemarket.events.protocol import EventSink


@dataclass(frozen=True, slots=True)
class EventHandle:
    """Names one log and the single event kind it accepts.

    The handle holds no counter. Sequence numbers come from the sink, so a
    rolled-back sink can never leave a handle out of step.
    """

    log_id: str
    kind: EventKind

    @classmethod
    def for_owner(cls, owner: str, kind: EventKind) -> EventHandle:
        """Handle for the `kind` log scoped to `owner`."""
        return cls(log_id=f"{owner}::{kind.value}", kind=kind)

    def emit(self, sink: EventSink, event: MarketEvent) -> LoggedEvent:
        """Append `event` to this handle's log.

        Raises:
            TypeError: If the event kind does not match the handle.
        """
        if event.kind is not self.kind:
            raise TypeError(
                f"Cannot emit {type(event).__name__} on a {self.kind.value} handle"
            )
        return sink.append(self.log_id, event)
