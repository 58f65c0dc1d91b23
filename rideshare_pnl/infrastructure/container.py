"""Composition root for wiring infrastructure adapters."""

from rideshare_pnl.application.ports.database import DatabaseEnginePort
from rideshare_pnl.application.use_cases.migrate_record_store import (
    MigrateRecordStoreUseCase,
    MigrationResult,
)
from rideshare_pnl.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from rideshare_pnl.infrastructure.logging.logger import get_app_logger
from rideshare_pnl.infrastructure.record_store import SqlAlchemyRecordStore


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_record_store(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyRecordStore:
    """Return an initialized record store."""
    resolved_db = db_port or build_database_adapter()
    store = SqlAlchemyRecordStore(resolved_db, logger=get_app_logger())
    store.initialize()
    return store


def migrate_record_store(store: SqlAlchemyRecordStore) -> MigrationResult:
    """Apply pending schema migrations to the store."""
    return MigrateRecordStoreUseCase(store, logger=get_app_logger()).run()


def build_migrated_record_store(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyRecordStore:
    """Return an initialized store brought up to the current schema."""
    store = build_record_store(db_port)
    migrate_record_store(store)
    return store


__all__ = [
    "build_database_adapter",
    "build_record_store",
    "build_migrated_record_store",
    "migrate_record_store",
]
