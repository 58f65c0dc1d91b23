"""Domain models for profit and loss results."""

from dataclasses import dataclass, field
from decimal import Decimal

ZERO = Decimal("0")


@dataclass(frozen=True)
class DailyBreakdownEntry:
    """Costs and profit derived for a single earning record."""

    date: str
    ride_distance: Decimal
    income: Decimal
    number_of_trips: int
    fuel_cost: Decimal
    maintenance_cost: Decimal
    driver_pass_cost: Decimal
    daily_net_profit: Decimal
    earning_id: str = ""


@dataclass(frozen=True)
class ProfitLossSummary:
    """Fully reconciled profit and loss figures for a set of records.

    Attributes:
        total_ride_income: Sum of earning incomes.
        total_ride_distance: Sum of ride distances in kilometers.
        total_fuel_cost: Fuel cost derived from distance and fuel settings.
        total_maintenance_cost: Wear cost derived from distance.
        allocated_driver_pass_cost: Driver pass charges, one per active
            date on or after the activation date.
        total_manual_expenses: Sum of manual expense amounts.
        true_net_profit: Income minus every cost above.
        profit_per_km: Net profit per kilometer, 0 without distance.
        profit_per_day: Net profit per active day, 0 without active days.
        active_driving_days: Number of distinct dates with earnings.
            Several records sharing a date count as one day.
        daily_breakdown: Per-record figures sorted by date.
        expenses_by_category: Manual expenses grouped by category tag.
        expenses_by_type: Manual expenses grouped by type tag.
    """

    total_ride_income: Decimal = ZERO
    total_ride_distance: Decimal = ZERO
    total_fuel_cost: Decimal = ZERO
    total_maintenance_cost: Decimal = ZERO
    allocated_driver_pass_cost: Decimal = ZERO
    total_manual_expenses: Decimal = ZERO
    true_net_profit: Decimal = ZERO
    profit_per_km: Decimal = ZERO
    profit_per_day: Decimal = ZERO
    active_driving_days: int = 0
    daily_breakdown: list[DailyBreakdownEntry] = field(default_factory=list)
    expenses_by_category: dict[str, Decimal] = field(default_factory=dict)
    expenses_by_type: dict[str, Decimal] = field(default_factory=dict)

    @property
    def total_operating_cost(self) -> Decimal:
        """Return fuel, maintenance and driver pass costs combined."""
        return (
            self.total_fuel_cost
            + self.total_maintenance_cost
            + self.allocated_driver_pass_cost
        )

    @property
    def total_costs(self) -> Decimal:
        """Return operating costs plus manual expenses."""
        return self.total_operating_cost + self.total_manual_expenses

    @property
    def cost_per_km(self) -> Decimal:
        """Return operating cost per kilometer, 0 without distance."""
        if self.total_ride_distance == 0:
            return ZERO
        return self.total_operating_cost / self.total_ride_distance

    @property
    def profit_margin(self) -> Decimal:
        """Return net profit as a percentage of income, 0 without income."""
        if self.total_ride_income == 0:
            return ZERO
        return (self.true_net_profit / self.total_ride_income) * Decimal("100")


__all__ = ["DailyBreakdownEntry", "ProfitLossSummary"]
