"""Key/value table backing the per-module collections."""

from sqlmodel import Field, SQLModel


class StoredValue(SQLModel, table=True):
    """One serialized collection stored under a string key."""

    __tablename__ = "local_storage"

    key: str = Field(primary_key=True)
    value: str
