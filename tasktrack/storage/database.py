"""SQL-backed key-value storage for tasktrack.

The engine is built from `DATABASE_URL` (SQLite file by default, any
SQLAlchemy URL works). Each key is one row in the `kv_store` table; the
value column holds the serialized snapshot written by the task store.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, DateTime, String, Text, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KeyValueEntryDB(Base):
    """Database model for one stored key."""

    __tablename__ = "kv_store"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)


def _is_sqlite_url(database_url: str) -> bool:
    return "sqlite" in (database_url or "")


def _is_sqlite_memory_url(database_url: str) -> bool:
    return _is_sqlite_url(database_url) and (":memory:" in database_url or database_url.rstrip("/").endswith("sqlite:"))


def get_engine_kwargs(database_url: str, echo: bool = False) -> dict:
    """Keyword arguments for `create_engine` given a database URL.

    SQLite gets `check_same_thread=False` (and a single shared connection
    for in-memory URLs); server databases get a small connection pool.
    Pure function of its inputs, no connection is opened.
    """
    engine_kwargs: dict = {
        "echo": echo,
        "pool_pre_ping": True,
    }

    if _is_sqlite_url(database_url):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if _is_sqlite_memory_url(database_url):
            # One shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        return engine_kwargs

    engine_kwargs["pool_size"] = 2
    engine_kwargs["max_overflow"] = 2
    return engine_kwargs


def build_engine(database_url: str, echo: bool = False) -> Engine:
    return create_engine(database_url, **get_engine_kwargs(database_url, echo=echo))


class SqlKeyValueStore:
    """Key-value store on a SQL table."""

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None, echo: bool = False):
        if engine is None:
            if not database_url:
                raise ValueError("database_url or engine is required")
            engine = build_engine(database_url, echo=echo)
        self.engine = engine
        self._session_factory = sessionmaker(autoflush=False, bind=self.engine)
        Base.metadata.create_all(bind=self.engine)
        logger.info(f"SqlKeyValueStore ready url={self.engine.url!r}")

    def load(self, key: str) -> Optional[str]:
        with self._session_factory() as session:
            entry = session.get(KeyValueEntryDB, key)
            return entry.value if entry else None

    def save(self, key: str, value: str) -> None:
        session = self._session_factory()
        try:
            entry = session.get(KeyValueEntryDB, key)
            if entry is None:
                session.add(KeyValueEntryDB(key=key, value=value))
            else:
                entry.value = value
            session.commit()
            logger.debug(f"Saved key {key} ({len(value)} chars)")
        except Exception as e:
            session.rollback()
            logger.error(f"Failed to save key {key}: {type(e).__name__}: {str(e)}")
            raise
        finally:
            session.close()

    def close(self) -> None:
        self.engine.dispose()
