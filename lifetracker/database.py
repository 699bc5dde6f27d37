"""SQLite engine and sessions backing the key/value store."""

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from lifetracker.config import settings
from lifetracker.logging_setup import get_logger

logger = get_logger(__name__)


def create_db_engine(database_url: str) -> Engine:
    # NiceGUI handlers may run outside the thread that opened the connection
    return create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


engine = create_db_engine(settings.database_url)


def use_database(database_url: str) -> Engine:
    """Point every new session at ``database_url`` and create its tables."""
    global engine
    engine.dispose()
    engine = create_db_engine(database_url)
    init_db()
    return engine


def init_db() -> None:
    """Create the storage table if it does not exist yet."""
    from lifetracker.models import StoredValue  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug("Storage ready at %s", engine.url)


def get_session() -> Session:
    return Session(engine)
