"""Domain models for driving log records and the cost configuration."""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any

from rideshare_pnl.domain.constants import (
    DEFAULT_EXPENSE_CATEGORY,
    DEFAULT_EXPENSE_TYPE,
)
from rideshare_pnl.domain.policies.normalization import (
    coerce_amount,
    coerce_count,
    coerce_optional_amount,
    normalize_date_text,
    normalize_tag,
    normalize_text,
)


def _payload_id(payload: Mapping[str, Any]) -> str:
    raw_id = payload.get("id")
    return str(raw_id).strip() if raw_id is not None else ""


@dataclass(frozen=True)
class EarningRecord:
    """Earnings logged for one driving day.

    Attributes:
        date: ISO date of the driving day.
        total_ride_distance: Kilometers driven carrying trips.
        total_income: Gross income received that day.
        number_of_trips: Informational trip count.
        id: Store-assigned identifier, empty until the record is stored.
    """

    date: str
    total_ride_distance: Decimal
    total_income: Decimal
    number_of_trips: int = 0
    id: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "EarningRecord":
        """Build a normalized record from a stored or submitted payload.

        Args:
            payload: Mapping using the persisted camelCase keys.

        Returns:
            EarningRecord: Record with every field coerced to its domain type.
        """
        return cls(
            date=normalize_date_text(payload.get("date")),
            total_ride_distance=coerce_amount(
                payload.get("totalRideDistance")
            ),
            total_income=coerce_amount(payload.get("totalIncome")),
            number_of_trips=coerce_count(payload.get("numberOfTrips")),
            id=_payload_id(payload),
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-friendly payload persisted by record stores."""
        return {
            "id": self.id,
            "date": self.date,
            "totalRideDistance": str(self.total_ride_distance),
            "totalIncome": str(self.total_income),
            "numberOfTrips": self.number_of_trips,
        }

    def with_id(self, record_id: str) -> "EarningRecord":
        """Return a copy carrying the given identifier."""
        return replace(self, id=record_id)


@dataclass(frozen=True)
class ExpenseRecord:
    """Manual cost entry independent of the driving log."""

    date: str
    amount: Decimal
    category: str = DEFAULT_EXPENSE_CATEGORY
    type: str = DEFAULT_EXPENSE_TYPE
    notes: str = ""
    odometer: Decimal | None = None
    id: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ExpenseRecord":
        """Build a normalized record from a stored or submitted payload."""
        return cls(
            date=normalize_date_text(payload.get("date")),
            amount=coerce_amount(payload.get("amount")),
            category=normalize_tag(
                payload.get("category"),
                DEFAULT_EXPENSE_CATEGORY,
            ),
            type=normalize_tag(payload.get("type"), DEFAULT_EXPENSE_TYPE),
            notes=normalize_text(payload.get("notes")),
            odometer=coerce_optional_amount(payload.get("odometer")),
            id=_payload_id(payload),
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-friendly payload persisted by record stores."""
        return {
            "id": self.id,
            "date": self.date,
            "amount": str(self.amount),
            "category": self.category,
            "type": self.type,
            "notes": self.notes,
            "odometer": (
                str(self.odometer) if self.odometer is not None else None
            ),
        }

    def with_id(self, record_id: str) -> "ExpenseRecord":
        """Return a copy carrying the given identifier."""
        return replace(self, id=record_id)


@dataclass(frozen=True)
class CostConfiguration:
    """Cost model applied to every profit/loss calculation.

    Attributes:
        driver_pass_cost_per_day: Flat daily charge for the driver pass.
        driver_pass_activation_date: ISO date from which the pass applies.
        fuel_consumption_rate: Kilometers traveled per liter of fuel.
        fuel_price_per_liter: Cost of one liter of fuel.
        maintenance_cost_per_km: Wear cost accrued per kilometer.
    """

    driver_pass_cost_per_day: Decimal
    driver_pass_activation_date: str
    fuel_consumption_rate: Decimal
    fuel_price_per_liter: Decimal
    maintenance_cost_per_km: Decimal

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-friendly configuration document."""
        return {
            "driverPassCostPerDay": str(self.driver_pass_cost_per_day),
            "driverPassActivationDate": self.driver_pass_activation_date,
            "fuelConsumptionRate": str(self.fuel_consumption_rate),
            "fuelPricePerLiter": str(self.fuel_price_per_liter),
            "maintenanceCostPerKm": str(self.maintenance_cost_per_km),
        }


CONFIG_PAYLOAD_KEYS = (
    "driverPassCostPerDay",
    "driverPassActivationDate",
    "fuelConsumptionRate",
    "fuelPricePerLiter",
    "maintenanceCostPerKm",
)


__all__ = [
    "EarningRecord",
    "ExpenseRecord",
    "CostConfiguration",
    "CONFIG_PAYLOAD_KEYS",
]
