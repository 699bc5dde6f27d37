"""Shared in-memory collection owned by each tracking module."""

from __future__ import annotations

import time
from typing import Generic, Optional, TypeVar

from lifetracker.logging_setup import get_logger
from lifetracker.services.persistence_service import PersistenceService

logger = get_logger(__name__)

RecordT = TypeVar("RecordT")


class CollectionService(Generic[RecordT]):
    """Ordered, most-recent-first collection persisted under one key.

    Subclasses set ``model`` and build records; every mutation goes through
    ``_replace`` so the whole collection is saved after each change.
    """

    model: type

    def __init__(self, key: str, persistence: Optional[PersistenceService] = None):
        self.key = key
        self.persistence = persistence or PersistenceService()
        self._records: list[RecordT] = self.persistence.load(key, self.model)
        self._last_id = 0

    def list(self) -> tuple[RecordT, ...]:
        """Snapshot of the collection in storage order."""
        return tuple(self._records)

    def get(self, record_id: str) -> Optional[RecordT]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def remove(self, record_id: str) -> None:
        """Delete a record by ID; unknown IDs are ignored."""
        remaining = [r for r in self._records if r.id != record_id]
        if len(remaining) == len(self._records):
            logger.debug("No %s with id %s to remove", self.model.__name__, record_id)
        else:
            logger.info("Removed %s %s", self.model.__name__, record_id)
        self._replace(remaining)

    def clear(self) -> None:
        self._replace([])

    def __len__(self) -> int:
        return len(self._records)

    def _prepend(self, record: RecordT) -> RecordT:
        self._replace([record, *self._records])
        return record

    def _update(self, record_id: str, **changes) -> Optional[RecordT]:
        """Swap a record for a copy with ``changes`` applied."""
        current = self.get(record_id)
        if current is None:
            return None

        updated = current.model_copy(update=changes)
        self._replace([updated if r.id == record_id else r for r in self._records])
        return updated

    def _replace(self, records: list[RecordT]) -> None:
        self._records = records
        self.persistence.save(self.key, self._records)

    def _next_id(self) -> str:
        """Millisecond timestamp ID, bumped past any ID already in use."""
        taken = {r.id for r in self._records}
        candidate = max(time.time_ns() // 1_000_000, self._last_id + 1)
        while str(candidate) in taken:
            candidate += 1
        self._last_id = candidate
        return str(candidate)
