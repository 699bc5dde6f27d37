"""String-keyed key/value store backed by the database."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from lifetracker.database import get_session
from lifetracker.exceptions import PersistenceWriteError
from lifetracker.models import StoredValue


class LocalStorage:
    """Get/set raw string values by key."""

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        with get_session() as session:
            stored = session.get(StoredValue, key)
            return stored.value if stored else None

    def set_item(self, key: str, value: str) -> None:
        """
        Store a value, overwriting any previous one.

        Raises:
            PersistenceWriteError: if the database rejects the write
        """
        try:
            with get_session() as session:
                stored = session.get(StoredValue, key)
                if stored:
                    stored.value = value
                else:
                    stored = StoredValue(key=key, value=value)
                session.add(stored)
                session.commit()
        except SQLAlchemyError as e:
            raise PersistenceWriteError(key, str(e)) from e
