"""SQLAlchemy-backed flat record store.

Records are kept as JSON payloads in a single ``records`` table, keyed by
collection and kept in insertion order. Settings (the cost configuration
document and the schema version) live in ``store_settings``.
"""

from collections.abc import Callable
from datetime import date
import json
from typing import Any
import uuid

from sqlalchemy import text

from rideshare_pnl.application.ports.database import DatabaseEnginePort
from rideshare_pnl.application.ports.record_store import (
    EARNINGS_COLLECTION,
    EXPENSES_COLLECTION,
    RecordStoreMigrationPort,
    RecordStorePort,
)
from rideshare_pnl.domain.models.records import (
    CostConfiguration,
    EarningRecord,
    ExpenseRecord,
)
from rideshare_pnl.domain.services.configuration import (
    default_cost_configuration,
    resolve_cost_configuration,
)
from rideshare_pnl.infrastructure.logging.logger import get_app_logger

CONFIG_KEY = "cost_config"
SCHEMA_VERSION_KEY = "schema_version"

CREATE_RECORDS_SQL = """
CREATE TABLE IF NOT EXISTS records (
    seq INTEGER PRIMARY KEY AUTOINCREMENT,
    collection TEXT NOT NULL,
    record_id TEXT,
    payload TEXT NOT NULL
)
"""

CREATE_SETTINGS_SQL = """
CREATE TABLE IF NOT EXISTS store_settings (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""

SELECT_RECORDS_SQL = text(
    """
    SELECT record_id, payload
    FROM records
    WHERE collection = :collection
    ORDER BY seq
    """
)

INSERT_RECORD_SQL = text(
    """
    INSERT INTO records (collection, record_id, payload)
    VALUES (:collection, :record_id, :payload)
    """
)

UPDATE_RECORD_SQL = text(
    """
    UPDATE records
    SET payload = :payload
    WHERE collection = :collection AND record_id = :record_id
    """
)

DELETE_RECORD_SQL = text(
    """
    DELETE FROM records
    WHERE collection = :collection AND record_id = :record_id
    """
)

DELETE_COLLECTION_SQL = text(
    "DELETE FROM records WHERE collection = :collection"
)

SELECT_SETTING_SQL = text(
    "SELECT value FROM store_settings WHERE key = :key"
)

DELETE_SETTING_SQL = text("DELETE FROM store_settings WHERE key = :key")

INSERT_SETTING_SQL = text(
    "INSERT INTO store_settings (key, value) VALUES (:key, :value)"
)


class SqlAlchemyRecordStore(RecordStorePort, RecordStoreMigrationPort):
    """Record store backed by a SQLAlchemy database."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        logger=None,
        today: Callable[[], date] = date.today,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the record store engine.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Clock used for configuration defaults.
            id_factory: Generator for new record ids.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._today = today
        self._id_factory = id_factory

    def initialize(self) -> None:
        """Create the tables and a default configuration when missing."""
        engine = self._db_port.get_record_store_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_RECORDS_SQL)
            conn.exec_driver_sql(CREATE_SETTINGS_SQL)
            existing = conn.execute(
                SELECT_SETTING_SQL,
                {"key": CONFIG_KEY},
            ).first()
            if existing is None:
                defaults = default_cost_configuration(self._today())
                conn.execute(
                    INSERT_SETTING_SQL,
                    {
                        "key": CONFIG_KEY,
                        "value": json.dumps(defaults.to_payload()),
                    },
                )
                self._logger.info(
                    "Initialized default cost configuration with pass "
                    f"activation on {defaults.driver_pass_activation_date}"
                )

    def get_earnings(self) -> list[EarningRecord]:
        """Return every earning record in insertion order."""
        return [
            EarningRecord.from_payload(payload)
            for payload in self.read_raw_records(EARNINGS_COLLECTION)
        ]

    def get_expenses(self) -> list[ExpenseRecord]:
        """Return every expense record in insertion order."""
        return [
            ExpenseRecord.from_payload(payload)
            for payload in self.read_raw_records(EXPENSES_COLLECTION)
        ]

    def get_config(self) -> CostConfiguration:
        """Return the stored configuration with defaults applied."""
        return resolve_cost_configuration(
            self.read_raw_config(),
            self._today(),
        )

    def add_earning(self, record: EarningRecord) -> EarningRecord:
        """Store a new earning under a freshly assigned id."""
        stored = record.with_id(self._id_factory())
        self._insert(EARNINGS_COLLECTION, stored.id, stored.to_payload())
        return stored

    def update_earning(self, record_id: str, record: EarningRecord) -> bool:
        """Replace an earning payload, preserving its id."""
        return self._update(
            EARNINGS_COLLECTION,
            record_id,
            record.with_id(record_id).to_payload(),
        )

    def delete_earning(self, record_id: str) -> bool:
        """Delete an earning by id."""
        return self._delete(EARNINGS_COLLECTION, record_id)

    def add_expense(self, record: ExpenseRecord) -> ExpenseRecord:
        """Store a new expense under a freshly assigned id."""
        stored = record.with_id(self._id_factory())
        self._insert(EXPENSES_COLLECTION, stored.id, stored.to_payload())
        return stored

    def update_expense(self, record_id: str, record: ExpenseRecord) -> bool:
        """Replace an expense payload, preserving its id."""
        return self._update(
            EXPENSES_COLLECTION,
            record_id,
            record.with_id(record_id).to_payload(),
        )

    def delete_expense(self, record_id: str) -> bool:
        """Delete an expense by id."""
        return self._delete(EXPENSES_COLLECTION, record_id)

    def save_config(self, config: CostConfiguration) -> None:
        """Replace the stored configuration document wholesale."""
        self.write_raw_config(config.to_payload())

    def clear_all(self) -> None:
        """Remove every record and restore the default configuration."""
        engine = self._db_port.get_record_store_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql("DELETE FROM records")
            conn.execute(DELETE_SETTING_SQL, {"key": CONFIG_KEY})
        self.initialize()

    def read_schema_version(self) -> int:
        """Return the recorded schema version, 0 when unset."""
        raw = self._read_setting(SCHEMA_VERSION_KEY)
        if raw is None:
            return 0
        try:
            return int(raw)
        except ValueError:
            self._logger.warning(
                f"Ignoring malformed schema version {raw!r}"
            )
            return 0

    def write_schema_version(self, version: int) -> None:
        """Record the schema version reached by the store."""
        self._write_setting(SCHEMA_VERSION_KEY, str(version))

    def read_raw_records(self, collection: str) -> list[dict[str, Any]]:
        """Return the decoded payloads of a collection in insertion order.

        Payloads that are not valid JSON objects are skipped with a warning.
        """
        engine = self._db_port.get_record_store_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_RECORDS_SQL,
                {"collection": collection},
            ).all()

        payloads = []
        for row in rows:
            try:
                payload = json.loads(row.payload)
            except json.JSONDecodeError:
                payload = None
            if not isinstance(payload, dict):
                self._logger.warning(
                    f"Skipping unreadable {collection} payload "
                    f"for record_id={row.record_id}"
                )
                continue
            if row.record_id and not payload.get("id"):
                payload["id"] = row.record_id
            payloads.append(payload)
        return payloads

    def replace_raw_records(
        self,
        collection: str,
        payloads: list[dict[str, Any]],
    ) -> None:
        """Replace every payload of a collection, keeping the given order."""
        params = [
            {
                "collection": collection,
                "record_id": str(payload.get("id") or "") or None,
                "payload": json.dumps(payload),
            }
            for payload in payloads
        ]
        engine = self._db_port.get_record_store_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_COLLECTION_SQL, {"collection": collection})
            if params:
                conn.execute(INSERT_RECORD_SQL, params)

    def read_raw_config(self) -> dict[str, Any] | None:
        """Return the stored configuration document, if readable."""
        raw = self._read_setting(CONFIG_KEY)
        if raw is None:
            return None
        try:
            document = json.loads(raw)
        except json.JSONDecodeError:
            document = None
        if not isinstance(document, dict):
            self._logger.warning("Ignoring unreadable cost configuration")
            return None
        return document

    def write_raw_config(self, document: dict[str, Any]) -> None:
        """Replace the stored configuration document."""
        self._write_setting(CONFIG_KEY, json.dumps(document))

    def _insert(
        self,
        collection: str,
        record_id: str,
        payload: dict[str, Any],
    ) -> None:
        engine = self._db_port.get_record_store_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_RECORD_SQL,
                {
                    "collection": collection,
                    "record_id": record_id,
                    "payload": json.dumps(payload),
                },
            )

    def _update(
        self,
        collection: str,
        record_id: str,
        payload: dict[str, Any],
    ) -> bool:
        engine = self._db_port.get_record_store_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_RECORD_SQL,
                {
                    "collection": collection,
                    "record_id": record_id,
                    "payload": json.dumps(payload),
                },
            )
        return result.rowcount > 0

    def _delete(self, collection: str, record_id: str) -> bool:
        engine = self._db_port.get_record_store_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DELETE_RECORD_SQL,
                {"collection": collection, "record_id": record_id},
            )
        return result.rowcount > 0

    def _read_setting(self, key: str) -> str | None:
        engine = self._db_port.get_record_store_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_SETTING_SQL, {"key": key}).first()
        return row.value if row is not None else None

    def _write_setting(self, key: str, value: str) -> None:
        engine = self._db_port.get_record_store_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_SETTING_SQL, {"key": key})
            conn.execute(INSERT_SETTING_SQL, {"key": key, "value": value})


__all__ = [
    "SqlAlchemyRecordStore",
    "CONFIG_KEY",
    "SCHEMA_VERSION_KEY",
    "CREATE_RECORDS_SQL",
    "CREATE_SETTINGS_SQL",
]
