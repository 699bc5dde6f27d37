"""Load and save whole record collections as JSON under a storage key."""

import json
from typing import Optional, Sequence, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from lifetracker.exceptions import CorruptPersistedStateError, PersistenceWriteError
from lifetracker.logging_setup import get_logger
from lifetracker.services.storage_service import LocalStorage

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class PersistenceService:
    """Best-effort persistence of record collections.

    Loading never raises: a corrupt value yields an empty collection. Saving
    reports failures through the log and its return value.
    """

    def __init__(self, storage: Optional[LocalStorage] = None):
        self.storage = storage or LocalStorage()

    def load(self, key: str, model: type[RecordT]) -> list[RecordT]:
        """Read the collection stored under ``key``."""
        try:
            raw = self.storage.get_item(key)
        except SQLAlchemyError as e:
            logger.error("Could not read %s: %s; starting with an empty collection", key, e)
            return []

        if raw is None:
            logger.debug("No stored value for %s", key)
            return []

        try:
            items = self._decode(key, raw)
        except CorruptPersistedStateError as e:
            logger.warning("%s; starting with an empty collection", e)
            return []

        records = []
        seen_ids = set()
        for index, item in enumerate(items):
            try:
                record = model.model_validate(item)
            except ValidationError as e:
                logger.warning(
                    "Skipping invalid %s record %d under %s: %s",
                    model.__name__,
                    index,
                    key,
                    e.errors(include_url=False),
                )
                continue

            # IDs are unique within a collection; the first occurrence wins
            record_id = getattr(record, "id", None)
            if record_id is not None:
                if record_id in seen_ids:
                    logger.warning(
                        "Skipping %s record %d under %s: duplicate id %s",
                        model.__name__,
                        index,
                        key,
                        record_id,
                    )
                    continue
                seen_ids.add(record_id)
            records.append(record)

        logger.debug("Loaded %d %s records from %s", len(records), model.__name__, key)
        return records

    def save(self, key: str, records: Sequence[BaseModel]) -> bool:
        """
        Overwrite ``key`` with the full collection.

        Returns:
            True if written, False if the write failed
        """
        payload = json.dumps(
            [record.model_dump(mode="json", by_alias=True) for record in records]
        )
        try:
            self.storage.set_item(key, payload)
        except PersistenceWriteError as e:
            logger.error("%s; in-memory changes are not saved", e)
            return False

        logger.debug("Saved %d records to %s", len(records), key)
        return True

    @staticmethod
    def _decode(key: str, raw: str) -> list:
        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptPersistedStateError(key, str(e)) from e

        if not isinstance(items, list):
            raise CorruptPersistedStateError(
                key, f"expected a list, got {type(items).__name__}"
            )
        return items
