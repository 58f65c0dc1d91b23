"""Tests for the composition root."""

from pathlib import Path
from unittest.mock import MagicMock

from rideshare_pnl.application.use_cases.migrate_record_store import (
    CURRENT_SCHEMA_VERSION,
)
from rideshare_pnl.infrastructure import container
from rideshare_pnl.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from rideshare_pnl.infrastructure.record_store import SqlAlchemyRecordStore


def test_build_database_adapter_returns_sqlalchemy_adapter() -> None:
    """The default adapter should be the SQLAlchemy implementation."""
    adapter = container.build_database_adapter()

    assert isinstance(adapter, SqlAlchemyDatabaseEngineAdapter)


def test_build_migrated_record_store(monkeypatch, tmp_path: Path) -> None:
    """The built store should be initialized and fully migrated."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    db_port = SqlAlchemyDatabaseEngineAdapter(
        f"sqlite:///{tmp_path / 'store.db'}"
    )

    store = container.build_migrated_record_store(db_port)

    assert isinstance(store, SqlAlchemyRecordStore)
    assert store.read_schema_version() == CURRENT_SCHEMA_VERSION
    assert store.read_raw_config() is not None


def test_migrate_record_store_drops_legacy_rows(
    monkeypatch,
    tmp_path: Path,
) -> None:
    """Legacy earnings written before migration should be removed."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    db_port = SqlAlchemyDatabaseEngineAdapter(
        f"sqlite:///{tmp_path / 'store.db'}"
    )
    store = container.build_record_store(db_port)
    store.replace_raw_records(
        "earnings",
        [
            {"id": "old", "date": "2025-12-01", "grossFare": 900},
            {"date": "2026-03-01", "totalRideDistance": 10, "totalIncome": 5},
        ],
    )

    result = container.migrate_record_store(store)

    assert result.dropped_legacy_earnings == 1
    assert result.backfilled_ids == 1
    earnings = store.get_earnings()
    assert len(earnings) == 1
    assert earnings[0].id != ""
