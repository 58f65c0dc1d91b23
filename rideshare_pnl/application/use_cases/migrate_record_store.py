"""Use case applying versioned schema migrations to the record store.

Migrations run once, in order, before any summary is computed so that the
profit and loss engine only ever sees the current record shapes.

* Version 1 drops earnings saved in the retired trip-count/gross-fare shape
  and the retired mileage log.
* Version 2 backfills missing record ids and completes a partially stored
  cost configuration with defaults.
"""

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Any

from rideshare_pnl.application.ports.record_store import (
    EARNINGS_COLLECTION,
    EXPENSES_COLLECTION,
    MILEAGE_COLLECTION,
    RecordStoreMigrationPort,
)
from rideshare_pnl.domain.services.configuration import (
    default_cost_configuration,
    missing_config_fields,
)
from rideshare_pnl.infrastructure.logging.logger import get_app_logger

CURRENT_SCHEMA_VERSION = 2


@dataclass(frozen=True)
class MigrationResult:
    """Summary of a migration run.

    Attributes:
        from_version: Schema version found in the store.
        to_version: Schema version reached.
        dropped_legacy_earnings: Earnings removed for using the retired shape.
        dropped_mileage_entries: Entries removed from the mileage log.
        backfilled_ids: Records that received a missing id.
        completed_config_fields: Configuration keys filled with defaults.
    """

    from_version: int
    to_version: int
    dropped_legacy_earnings: int = 0
    dropped_mileage_entries: int = 0
    backfilled_ids: int = 0
    completed_config_fields: tuple[str, ...] = ()

    @property
    def applied(self) -> bool:
        """Return True when at least one migration step ran."""
        return self.to_version > self.from_version


def is_legacy_earning(payload: dict[str, Any]) -> bool:
    """Return True for earnings saved in the retired gross-fare shape."""
    return "grossFare" in payload and "totalRideDistance" not in payload


class MigrateRecordStoreUseCase:
    """Bring a record store up to the current schema version."""

    def __init__(
        self,
        store: RecordStoreMigrationPort,
        logger=None,
        today: Callable[[], date] = date.today,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port exposing raw stored payloads.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Clock used for configuration defaults.
            id_factory: Generator for backfilled record ids.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._today = today
        self._id_factory = id_factory

    def run(self) -> MigrationResult:
        """Apply every pending migration.

        Returns:
            MigrationResult: Versions and counts of rewritten data.
        """
        from_version = self._store.read_schema_version()
        version = from_version
        dropped_legacy = 0
        dropped_mileage = 0
        backfilled = 0
        completed: tuple[str, ...] = ()

        if version < 1:
            dropped_legacy, dropped_mileage = self._drop_retired_shapes()
            version = 1
            self._store.write_schema_version(version)
        if version < 2:
            backfilled = self._backfill_ids()
            completed = self._complete_config()
            version = 2
            self._store.write_schema_version(version)

        if version > from_version:
            self._logger.info(
                f"Record store migrated from v{from_version} to v{version}"
            )
        return MigrationResult(
            from_version=from_version,
            to_version=version,
            dropped_legacy_earnings=dropped_legacy,
            dropped_mileage_entries=dropped_mileage,
            backfilled_ids=backfilled,
            completed_config_fields=completed,
        )

    def _drop_retired_shapes(self) -> tuple[int, int]:
        earnings = self._store.read_raw_records(EARNINGS_COLLECTION)
        kept = [row for row in earnings if not is_legacy_earning(row)]
        dropped_legacy = len(earnings) - len(kept)
        if dropped_legacy:
            self._store.replace_raw_records(EARNINGS_COLLECTION, kept)
            self._logger.warning(
                f"Dropped {dropped_legacy} earnings in the retired "
                "gross-fare format; re-enter them with distance and income"
            )

        mileage = self._store.read_raw_records(MILEAGE_COLLECTION)
        if mileage:
            self._store.replace_raw_records(MILEAGE_COLLECTION, [])
            self._logger.info(
                f"Dropped {len(mileage)} mileage entries; distance is "
                "tracked on earnings"
            )
        return dropped_legacy, len(mileage)

    def _backfill_ids(self) -> int:
        backfilled = 0
        for collection in (EARNINGS_COLLECTION, EXPENSES_COLLECTION):
            payloads = self._store.read_raw_records(collection)
            changed = False
            seen: set[str] = set()
            for payload in payloads:
                record_id = str(payload.get("id") or "").strip()
                if not record_id or record_id in seen:
                    record_id = self._id_factory()
                    payload["id"] = record_id
                    backfilled += 1
                    changed = True
                seen.add(record_id)
            if changed:
                self._store.replace_raw_records(collection, payloads)
        if backfilled:
            self._logger.info(f"Assigned ids to {backfilled} records")
        return backfilled

    def _complete_config(self) -> tuple[str, ...]:
        document = self._store.read_raw_config()
        if document is None:
            return ()
        missing = missing_config_fields(document)
        if not missing:
            return ()
        defaults = default_cost_configuration(self._today()).to_payload()
        merged = dict(document)
        for key in missing:
            merged[key] = defaults[key]
        self._store.write_raw_config(merged)
        self._logger.info(
            "Completed cost configuration with defaults for "
            + ", ".join(missing)
        )
        return tuple(missing)


__all__ = [
    "CURRENT_SCHEMA_VERSION",
    "MigrateRecordStoreUseCase",
    "MigrationResult",
    "is_legacy_earning",
]
