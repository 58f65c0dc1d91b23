"""Ports for reading and writing driving log records."""

from typing import Any, Protocol

from rideshare_pnl.domain.models.records import (
    CostConfiguration,
    EarningRecord,
    ExpenseRecord,
)

EARNINGS_COLLECTION = "earnings"
EXPENSES_COLLECTION = "expenses"
MILEAGE_COLLECTION = "mileage"


class RecordStorePort(Protocol):
    """Port exposing typed access to earnings, expenses and settings."""

    def get_earnings(self) -> list[EarningRecord]:
        """Return every earning record in insertion order."""

    def get_expenses(self) -> list[ExpenseRecord]:
        """Return every expense record in insertion order."""

    def get_config(self) -> CostConfiguration:
        """Return the cost configuration with defaults applied."""

    def add_earning(self, record: EarningRecord) -> EarningRecord:
        """Store a new earning and return it with its assigned id."""

    def update_earning(self, record_id: str, record: EarningRecord) -> bool:
        """Replace an earning, keeping its id. Return False if absent."""

    def delete_earning(self, record_id: str) -> bool:
        """Delete an earning. Return False if absent."""

    def add_expense(self, record: ExpenseRecord) -> ExpenseRecord:
        """Store a new expense and return it with its assigned id."""

    def update_expense(self, record_id: str, record: ExpenseRecord) -> bool:
        """Replace an expense, keeping its id. Return False if absent."""

    def delete_expense(self, record_id: str) -> bool:
        """Delete an expense. Return False if absent."""

    def save_config(self, config: CostConfiguration) -> None:
        """Replace the stored cost configuration."""

    def clear_all(self) -> None:
        """Remove every record and reset the configuration to defaults."""


class RecordStoreMigrationPort(Protocol):
    """Port exposing raw stored payloads for schema migrations."""

    def read_schema_version(self) -> int:
        """Return the schema version recorded in the store, 0 if unset."""

    def write_schema_version(self, version: int) -> None:
        """Record the schema version reached by the store."""

    def read_raw_records(self, collection: str) -> list[dict[str, Any]]:
        """Return the stored payloads of a collection in insertion order."""

    def replace_raw_records(
        self,
        collection: str,
        payloads: list[dict[str, Any]],
    ) -> None:
        """Replace every payload of a collection."""

    def read_raw_config(self) -> dict[str, Any] | None:
        """Return the stored configuration document, if any."""

    def write_raw_config(self, document: dict[str, Any]) -> None:
        """Replace the stored configuration document."""


__all__ = [
    "EARNINGS_COLLECTION",
    "EXPENSES_COLLECTION",
    "MILEAGE_COLLECTION",
    "RecordStorePort",
    "RecordStoreMigrationPort",
]
