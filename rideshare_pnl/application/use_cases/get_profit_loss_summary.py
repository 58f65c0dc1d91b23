"""Use case to compute the profit and loss summary for a period."""

import calendar

from rideshare_pnl.application.ports.record_store import RecordStorePort
from rideshare_pnl.domain.models.finance import ProfitLossSummary
from rideshare_pnl.domain.services.periods import (
    filter_by_month,
    filter_by_year,
)
from rideshare_pnl.domain.services.profit_loss import calculate_metrics
from rideshare_pnl.infrastructure.logging.logger import get_app_logger


def period_label(year: int | None = None, month: int | None = None) -> str:
    """Return a display label for a summary period.

    Args:
        year: Optional calendar year.
        month: Optional calendar month, 1 to 12.

    Returns:
        str: "All Time", the year, or "<Month name> <year>".
    """
    if year is None:
        return "All Time"
    if month is None:
        return str(year)
    return f"{calendar.month_name[month]} {year}"


def validate_period(year: int | None, month: int | None) -> None:
    """Reject period selections that cannot be resolved.

    Raises:
        ValueError: If a month is given without a year or is out of range.
    """
    if month is None:
        return
    if year is None:
        raise ValueError("A month selection requires a year.")
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}.")


class GetProfitLossSummaryUseCase:
    """Select records for a period and run the profit and loss engine."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing records and the cost configuration.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        year: int | None = None,
        month: int | None = None,
    ) -> ProfitLossSummary:
        """Return the summary for a month, a year or all time.

        Args:
            year: Optional calendar year; None summarizes every record.
            month: Optional 1-based month within ``year``.

        Returns:
            ProfitLossSummary: Reconciled totals for the selected records.

        Raises:
            ValueError: If the period selection is invalid.
        """
        validate_period(year, month)
        earnings = self._record_store.get_earnings()
        expenses = self._record_store.get_expenses()
        config = self._record_store.get_config()

        if year is not None and month is not None:
            earnings = filter_by_month(earnings, year, month)
            expenses = filter_by_month(expenses, year, month)
        elif year is not None:
            earnings = filter_by_year(earnings, year)
            expenses = filter_by_year(expenses, year)

        summary = calculate_metrics(earnings, config, expenses)
        self._logger.info(
            f"Profit/loss computed for {period_label(year, month)}: "
            f"earnings={len(earnings)}, expenses={len(expenses)}, "
            f"net={summary.true_net_profit:.2f}"
        )
        return summary


__all__ = [
    "GetProfitLossSummaryUseCase",
    "period_label",
    "validate_period",
]
