"""Resolution of stored cost settings into a complete configuration."""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

from rideshare_pnl.domain.constants import (
    DEFAULT_DRIVER_PASS_COST_PER_DAY,
    DEFAULT_FUEL_CONSUMPTION_RATE,
    DEFAULT_FUEL_PRICE_PER_LITER,
    DEFAULT_MAINTENANCE_COST_PER_KM,
)
from rideshare_pnl.domain.models.records import (
    CONFIG_PAYLOAD_KEYS,
    CostConfiguration,
)
from rideshare_pnl.domain.policies.normalization import parse_iso_date
from rideshare_pnl.utils.decimal_utils import coerce_decimal


def default_cost_configuration(today: date) -> CostConfiguration:
    """Return the default cost model with the pass activating today.

    Args:
        today: Date the configuration is initialized on.

    Returns:
        CostConfiguration: Configuration populated with default values.
    """
    return CostConfiguration(
        driver_pass_cost_per_day=DEFAULT_DRIVER_PASS_COST_PER_DAY,
        driver_pass_activation_date=today.isoformat(),
        fuel_consumption_rate=DEFAULT_FUEL_CONSUMPTION_RATE,
        fuel_price_per_liter=DEFAULT_FUEL_PRICE_PER_LITER,
        maintenance_cost_per_km=DEFAULT_MAINTENANCE_COST_PER_KM,
    )


def resolve_cost_configuration(
    raw: Mapping[str, Any] | None,
    today: date,
) -> CostConfiguration:
    """Resolve a stored configuration document, filling every gap.

    Absent or unusable fields fall back to their defaults. Zero costs are
    kept, while the fuel consumption rate must be strictly positive.

    Args:
        raw: Stored configuration document using camelCase keys, if any.
        today: Fallback activation date for the driver pass.

    Returns:
        CostConfiguration: Fully populated configuration.
    """
    defaults = default_cost_configuration(today)
    if not raw:
        return defaults
    activation = parse_iso_date(raw.get("driverPassActivationDate"))
    return CostConfiguration(
        driver_pass_cost_per_day=_non_negative(
            raw.get("driverPassCostPerDay"),
            defaults.driver_pass_cost_per_day,
        ),
        driver_pass_activation_date=(
            activation.isoformat()
            if activation is not None
            else defaults.driver_pass_activation_date
        ),
        fuel_consumption_rate=_positive(
            raw.get("fuelConsumptionRate"),
            defaults.fuel_consumption_rate,
        ),
        fuel_price_per_liter=_non_negative(
            raw.get("fuelPricePerLiter"),
            defaults.fuel_price_per_liter,
        ),
        maintenance_cost_per_km=_non_negative(
            raw.get("maintenanceCostPerKm"),
            defaults.maintenance_cost_per_km,
        ),
    )


def missing_config_fields(raw: Mapping[str, Any] | None) -> list[str]:
    """Return the configuration keys absent from a stored document."""
    if not raw:
        return list(CONFIG_PAYLOAD_KEYS)
    return [key for key in CONFIG_PAYLOAD_KEYS if raw.get(key) in (None, "")]


def _non_negative(value, default: Decimal) -> Decimal:
    amount = coerce_decimal(value)
    if amount is None or amount < 0:
        return default
    return amount


def _positive(value, default: Decimal) -> Decimal:
    amount = coerce_decimal(value)
    if amount is None or amount <= 0:
        return default
    return amount


__all__ = [
    "default_cost_configuration",
    "resolve_cost_configuration",
    "missing_config_fields",
]
