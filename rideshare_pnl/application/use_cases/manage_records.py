"""Use case for creating, editing and deleting records and settings."""

from collections.abc import Callable, Mapping
from datetime import date
from typing import Any

from rideshare_pnl.application.ports.record_store import RecordStorePort
from rideshare_pnl.domain.models.records import (
    CostConfiguration,
    EarningRecord,
    ExpenseRecord,
)
from rideshare_pnl.domain.services.configuration import (
    resolve_cost_configuration,
)
from rideshare_pnl.infrastructure.logging.logger import get_app_logger


class ManageRecordsUseCase:
    """Normalize submitted payloads and apply them to the record store.

    Payloads use the persisted camelCase keys, so form input, CSV rows and
    stored documents share one normalization path.
    """

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port persisting records and settings.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Clock used for configuration defaults.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._today = today

    def add_earning(self, payload: Mapping[str, Any]) -> EarningRecord:
        """Store a new earning built from a submitted payload."""
        record = EarningRecord.from_payload({**payload, "id": ""})
        stored = self._record_store.add_earning(record)
        self._logger.info(f"Added earning {stored.id} for {stored.date}")
        return stored

    def update_earning(
        self,
        record_id: str,
        payload: Mapping[str, Any],
    ) -> bool:
        """Replace an earning with a submitted payload, keeping its id."""
        record = EarningRecord.from_payload({**payload, "id": record_id})
        updated = self._record_store.update_earning(record_id, record)
        if not updated:
            self._logger.warning(f"No earning found with id={record_id}")
        return updated

    def delete_earning(self, record_id: str) -> bool:
        """Delete an earning by id."""
        deleted = self._record_store.delete_earning(record_id)
        if not deleted:
            self._logger.warning(f"No earning found with id={record_id}")
        return deleted

    def add_expense(self, payload: Mapping[str, Any]) -> ExpenseRecord:
        """Store a new expense built from a submitted payload."""
        record = ExpenseRecord.from_payload({**payload, "id": ""})
        stored = self._record_store.add_expense(record)
        self._logger.info(
            f"Added {stored.category} expense {stored.id} for {stored.date}"
        )
        return stored

    def update_expense(
        self,
        record_id: str,
        payload: Mapping[str, Any],
    ) -> bool:
        """Replace an expense with a submitted payload, keeping its id."""
        record = ExpenseRecord.from_payload({**payload, "id": record_id})
        updated = self._record_store.update_expense(record_id, record)
        if not updated:
            self._logger.warning(f"No expense found with id={record_id}")
        return updated

    def delete_expense(self, record_id: str) -> bool:
        """Delete an expense by id."""
        deleted = self._record_store.delete_expense(record_id)
        if not deleted:
            self._logger.warning(f"No expense found with id={record_id}")
        return deleted

    def get_config(self) -> CostConfiguration:
        """Return the current cost configuration."""
        return self._record_store.get_config()

    def save_config(self, payload: Mapping[str, Any]) -> CostConfiguration:
        """Resolve and store a complete replacement configuration.

        Args:
            payload: Submitted configuration using camelCase keys.

        Returns:
            CostConfiguration: The configuration that was stored.
        """
        config = resolve_cost_configuration(payload, self._today())
        self._record_store.save_config(config)
        self._logger.info(
            "Saved cost configuration: "
            f"pass={config.driver_pass_cost_per_day} "
            f"from {config.driver_pass_activation_date}, "
            f"fuel={config.fuel_price_per_liter}@"
            f"{config.fuel_consumption_rate}km/l, "
            f"maintenance={config.maintenance_cost_per_km}/km"
        )
        return config

    def clear_all(self) -> None:
        """Remove all records and restore the default configuration."""
        self._record_store.clear_all()
        self._logger.warning("Cleared all records and settings")


__all__ = ["ManageRecordsUseCase"]
