"""Profit and loss engine for the driving log.

The engine is a pure function of the records and cost configuration it is
handed. Numeric fields are re-normalized on the way in, so malformed values
count as zero and no input shape raises.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from rideshare_pnl.domain.constants import (
    DEFAULT_EXPENSE_CATEGORY,
    DEFAULT_EXPENSE_TYPE,
)
from rideshare_pnl.domain.models.finance import (
    DailyBreakdownEntry,
    ProfitLossSummary,
)
from rideshare_pnl.domain.models.records import (
    CostConfiguration,
    EarningRecord,
    ExpenseRecord,
)
from rideshare_pnl.domain.policies.normalization import (
    coerce_amount,
    coerce_count,
    normalize_tag,
)

ZERO = Decimal("0")


def safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide two amounts, returning exactly 0 for a zero denominator."""
    if denominator == 0:
        return ZERO
    return numerator / denominator


def group_expenses_by_category(
    expenses: Iterable[ExpenseRecord],
) -> dict[str, Decimal]:
    """Sum manual expense amounts per category tag, in first-seen order."""
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        key = normalize_tag(expense.category, DEFAULT_EXPENSE_CATEGORY)
        totals[key] = totals.get(key, ZERO) + coerce_amount(expense.amount)
    return totals


def group_expenses_by_type(
    expenses: Iterable[ExpenseRecord],
) -> dict[str, Decimal]:
    """Sum manual expense amounts per type tag, in first-seen order."""
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        key = normalize_tag(expense.type, DEFAULT_EXPENSE_TYPE)
        totals[key] = totals.get(key, ZERO) + coerce_amount(expense.amount)
    return totals


def calculate_metrics(
    earnings: Sequence[EarningRecord],
    config: CostConfiguration,
    expenses: Sequence[ExpenseRecord] = (),
) -> ProfitLossSummary:
    """Derive the reconciled profit and loss summary.

    Each earning record is charged fuel and maintenance in proportion to its
    distance. The driver pass is a flat charge per calendar date on or after
    the activation date; a date with several records is charged once, on the
    first record of that date.

    Args:
        earnings: Earning records to evaluate, in any order.
        config: Fully resolved cost configuration.
        expenses: Manual expense records for the same period.

    Returns:
        ProfitLossSummary: Totals, derived ratios and the per-day breakdown
        sorted by date.
    """
    expense_list = list(expenses or ())
    total_manual_expenses = sum(
        (coerce_amount(expense.amount) for expense in expense_list),
        ZERO,
    )
    expenses_by_category = group_expenses_by_category(expense_list)
    expenses_by_type = group_expenses_by_type(expense_list)

    if not earnings:
        return ProfitLossSummary(
            total_manual_expenses=total_manual_expenses,
            true_net_profit=ZERO - total_manual_expenses,
            expenses_by_category=expenses_by_category,
            expenses_by_type=expenses_by_type,
        )

    consumption_rate = coerce_amount(config.fuel_consumption_rate)
    fuel_price = coerce_amount(config.fuel_price_per_liter)
    maintenance_rate = coerce_amount(config.maintenance_cost_per_km)
    pass_cost_per_day = coerce_amount(config.driver_pass_cost_per_day)
    activation_date = config.driver_pass_activation_date or ""

    total_ride_income = ZERO
    total_ride_distance = ZERO
    total_fuel_cost = ZERO
    total_maintenance_cost = ZERO
    allocated_driver_pass_cost = ZERO
    driving_dates: set[str] = set()
    daily_breakdown: list[DailyBreakdownEntry] = []

    for record in sorted(earnings, key=_record_date):
        record_date = _record_date(record)
        distance = coerce_amount(record.total_ride_distance)
        income = coerce_amount(record.total_income)

        fuel_used = safe_ratio(distance, consumption_rate)
        fuel_cost = fuel_used * fuel_price
        maintenance_cost = distance * maintenance_rate
        driver_pass_cost = ZERO
        if record_date >= activation_date and record_date not in driving_dates:
            driver_pass_cost = pass_cost_per_day
        driving_dates.add(record_date)

        daily_net_profit = (
            income - fuel_cost - maintenance_cost - driver_pass_cost
        )
        total_ride_income += income
        total_ride_distance += distance
        total_fuel_cost += fuel_cost
        total_maintenance_cost += maintenance_cost
        allocated_driver_pass_cost += driver_pass_cost

        daily_breakdown.append(
            DailyBreakdownEntry(
                date=record_date,
                ride_distance=distance,
                income=income,
                number_of_trips=coerce_count(record.number_of_trips),
                fuel_cost=fuel_cost,
                maintenance_cost=maintenance_cost,
                driver_pass_cost=driver_pass_cost,
                daily_net_profit=daily_net_profit,
                earning_id=record.id or "",
            )
        )

    active_driving_days = len(driving_dates)
    true_net_profit = (
        total_ride_income
        - total_fuel_cost
        - allocated_driver_pass_cost
        - total_maintenance_cost
        - total_manual_expenses
    )

    return ProfitLossSummary(
        total_ride_income=total_ride_income,
        total_ride_distance=total_ride_distance,
        total_fuel_cost=total_fuel_cost,
        total_maintenance_cost=total_maintenance_cost,
        allocated_driver_pass_cost=allocated_driver_pass_cost,
        total_manual_expenses=total_manual_expenses,
        true_net_profit=true_net_profit,
        profit_per_km=safe_ratio(true_net_profit, total_ride_distance),
        profit_per_day=safe_ratio(
            true_net_profit,
            Decimal(active_driving_days),
        ),
        active_driving_days=active_driving_days,
        daily_breakdown=daily_breakdown,
        expenses_by_category=expenses_by_category,
        expenses_by_type=expenses_by_type,
    )


def _record_date(record: EarningRecord) -> str:
    return str(record.date or "")


__all__ = [
    "calculate_metrics",
    "group_expenses_by_category",
    "group_expenses_by_type",
    "safe_ratio",
]
