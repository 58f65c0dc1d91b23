"""Database infrastructure for the record store.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine backing the record store. It belongs to the infrastructure layer
because it deals with an external system (a SQLite file by default).
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

from rideshare_pnl.application.ports.database import DatabaseEnginePort
from rideshare_pnl.infrastructure.settings import AppSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    SQLite file databases get their parent directory created on demand.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine with health checks enabled.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite" and url.database not in (
        None,
        "",
        ":memory:",
    ):
        Path(url.database).expanduser().parent.mkdir(
            parents=True,
            exist_ok=True,
        )
    return create_engine(db_url, pool_pre_ping=True)


_record_store_engine: Optional[Engine] = None


def get_record_store_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the configured record store.

    Returns:
        Engine: Lazily initialized engine for ``RIDESHARE_DB_URL``.
    """
    global _record_store_engine
    if _record_store_engine is None:
        settings = AppSettings.from_env()
        _record_store_engine = _create_engine(settings.db_url)
    return _record_store_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides configuration details behind the port so application
    code can depend only on the protocol. An explicit URL bypasses the
    environment-configured singleton.
    """

    def __init__(self, db_url: str | None = None) -> None:
        """Initialize the adapter.

        Args:
            db_url: Optional database URL overriding the environment.
        """
        self._db_url = db_url
        self._engine: Optional[Engine] = None

    def get_record_store_engine(self) -> Engine:
        """Get the engine for the record store database.

        Returns:
            Engine: SQLAlchemy engine connected to the record store.
        """
        if self._db_url is None:
            return get_record_store_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = [
    "get_record_store_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
