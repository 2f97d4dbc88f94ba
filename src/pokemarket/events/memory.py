"""In-memory event sink."""

from __future__ import annotations

import pickle  # nosec B403 - snapshots never leave the process

from pokemarket.events.models import LoggedEvent, MarketEvent


class InMemoryEventSink:
    """Unbounded per-log lists. Suitable for tests and single-process use."""

    def __init__(self) -> None:
        self._logs: dict[str, list[LoggedEvent]] = {}

    def append(self, log_id: str, record: MarketEvent) -> LoggedEvent:
        log = self._logs.setdefault(log_id, [])
        logged = LoggedEvent(log_id=log_id, sequence_number=len(log), event=record)
        log.append(logged)
        return logged

    def read(self, log_id: str, start: int = 0, limit: int | None = None) -> list[LoggedEvent]:
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        log = self._logs.get(log_id, [])
        end = len(log) if limit is None else start + limit
        return log[start:end]

    def count(self, log_id: str) -> int:
        return len(self._logs.get(log_id, []))

    def snapshot(self) -> bytes:
        return pickle.dumps(self._logs)

    def restore(self, data: bytes) -> None:
        self._logs = pickle.loads(data)  # nosec B301 - produced by snapshot() in this process
