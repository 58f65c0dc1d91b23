"""Use cases to import earnings and expenses from CSV files."""

from dataclasses import dataclass

from rideshare_pnl.application.ports.record_store import RecordStorePort
from rideshare_pnl.application.use_cases.csv_records import (
    CsvImportError,
    parse_earnings_csv,
    parse_expenses_csv,
)
from rideshare_pnl.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ImportResult:
    """Result of a CSV import.

    Attributes:
        imported_count: Number of records added to the store.
        skipped_count: Number of data rows ignored as unusable.
    """

    imported_count: int
    skipped_count: int


class ImportEarningsUseCase:
    """Import earning records from CSV text."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port receiving the imported records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, text: str) -> ImportResult:
        """Parse the whole file, then add every usable record.

        Args:
            text: CSV file content.

        Returns:
            ImportResult: Imported and skipped row counts.

        Raises:
            CsvImportError: If the header lacks a required column. Nothing
                is written in that case.
        """
        try:
            parsed = parse_earnings_csv(text)
        except CsvImportError as exc:
            self._logger.warning(f"Rejected earnings import: {exc}")
            raise
        for record in parsed.records:
            self._record_store.add_earning(record)
        self._logger.info(
            f"Imported {len(parsed.records)} earnings "
            f"(skipped {parsed.skipped_count} rows)"
        )
        return ImportResult(
            imported_count=len(parsed.records),
            skipped_count=parsed.skipped_count,
        )


class ImportExpensesUseCase:
    """Import expense records from CSV text."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, text: str) -> ImportResult:
        """Parse the whole file, then add every usable record.

        Raises:
            CsvImportError: If the header lacks a required column.
        """
        try:
            parsed = parse_expenses_csv(text)
        except CsvImportError as exc:
            self._logger.warning(f"Rejected expenses import: {exc}")
            raise
        for record in parsed.records:
            self._record_store.add_expense(record)
        self._logger.info(
            f"Imported {len(parsed.records)} expenses "
            f"(skipped {parsed.skipped_count} rows)"
        )
        return ImportResult(
            imported_count=len(parsed.records),
            skipped_count=parsed.skipped_count,
        )


__all__ = [
    "ImportResult",
    "ImportEarningsUseCase",
    "ImportExpensesUseCase",
]
