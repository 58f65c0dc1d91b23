"""CLI adapter printing the profit and loss summary for a period.

Set ``SUMMARY_MONTH`` to ``YYYY-MM`` to summarize one month or to ``YYYY``
for a whole year; leave it unset for the all-time summary.
"""

import os

from rideshare_pnl.application.use_cases.get_profit_loss_summary import (
    GetProfitLossSummaryUseCase,
    period_label,
)
from rideshare_pnl.infrastructure.container import build_migrated_record_store
from rideshare_pnl.infrastructure.logging.logger import get_app_logger
from rideshare_pnl.infrastructure.settings import AppSettings


def _parse_month(
    value: str | None,
    logger,
) -> tuple[int, int | None] | None:
    """Parse a ``YYYY-MM`` month or a ``YYYY`` year.

    Args:
        value: Period string from the environment.
        logger: Logger used for warnings.

    Returns:
        tuple[int, int | None] | None: (year, month) with month None for a
        whole year, or None when unset or invalid.
    """
    if not value:
        return None
    text = value.strip()
    if text.isdigit() and len(text) == 4:
        return int(text), None
    try:
        year_text, month_text = text.split("-")
        year, month = int(year_text), int(month_text)
    except ValueError:
        logger.warning(
            f"Invalid period '{value}'. Expected format YYYY-MM or YYYY."
        )
        return None
    if not 1 <= month <= 12:
        logger.warning(f"Invalid month '{value}'. Month must be 01-12.")
        return None
    return year, month


def main() -> None:
    """Print the summary for ``SUMMARY_MONTH`` or for all time."""
    logger = get_app_logger()
    settings = AppSettings.from_env()
    period = _parse_month(os.getenv("SUMMARY_MONTH"), logger)
    year, month = period if period else (None, None)

    store = build_migrated_record_store()
    summary = GetProfitLossSummaryUseCase(store, logger=logger).execute(
        year=year,
        month=month,
    )

    symbol = settings.currency_symbol
    print(f"Profit & Loss ({period_label(year, month)})")
    print(f"Total ride income:   {symbol} {summary.total_ride_income:,.2f}")
    print(f"Total ride distance: {summary.total_ride_distance:,.1f} km")
    print(f"Fuel cost:           {symbol} {summary.total_fuel_cost:,.2f}")
    print(
        f"Maintenance cost:    {symbol} {summary.total_maintenance_cost:,.2f}"
    )
    print(
        "Driver pass cost:    "
        f"{symbol} {summary.allocated_driver_pass_cost:,.2f}"
    )
    print(
        f"Manual expenses:     {symbol} {summary.total_manual_expenses:,.2f}"
    )
    print(f"True net profit:     {symbol} {summary.true_net_profit:,.2f}")
    print(f"Profit per km:       {symbol} {summary.profit_per_km:,.2f}")
    print(f"Profit per day:      {symbol} {summary.profit_per_day:,.2f}")
    print(f"Active driving days: {summary.active_driving_days}")


if __name__ == "__main__":  # pragma: no cover
    main()
