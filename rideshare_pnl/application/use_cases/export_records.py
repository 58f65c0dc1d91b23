"""Use case to export records and summaries as CSV text."""

from datetime import date

from rideshare_pnl.application.ports.record_store import RecordStorePort
from rideshare_pnl.application.use_cases.csv_records import (
    export_earnings_csv,
    export_expenses_csv,
    export_summary_csv,
)
from rideshare_pnl.application.use_cases.get_profit_loss_summary import (
    GetProfitLossSummaryUseCase,
    period_label,
)
from rideshare_pnl.infrastructure.logging.logger import get_app_logger


def export_filename(kind: str, today: date) -> str:
    """Return the download file name, e.g. ``Earnings_2026-03-01.csv``."""
    return f"{kind.capitalize()}_{today.isoformat()}.csv"


class ExportRecordsUseCase:
    """Produce CSV exports from the record store."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing the records to export.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def earnings_csv(self) -> str:
        """Return every earning record as CSV text."""
        records = self._record_store.get_earnings()
        self._logger.info(f"Exporting {len(records)} earnings")
        return export_earnings_csv(records)

    def expenses_csv(self) -> str:
        """Return every expense record as CSV text."""
        records = self._record_store.get_expenses()
        self._logger.info(f"Exporting {len(records)} expenses")
        return export_expenses_csv(records)

    def summary_csv(
        self,
        year: int | None = None,
        month: int | None = None,
    ) -> str:
        """Return the profit and loss report for a period as CSV text.

        Args:
            year: Optional calendar year; None exports the all-time summary.
            month: Optional 1-based month within ``year``.
        """
        summary = GetProfitLossSummaryUseCase(
            self._record_store,
            logger=self._logger,
        ).execute(year=year, month=month)
        return export_summary_csv(summary, period_label(year, month))


__all__ = ["ExportRecordsUseCase", "export_filename"]
