"""CSV encoding and decoding of earnings, expenses and summaries.

Imports are all-or-nothing at the header level: a file missing a required
column raises ``CsvImportError`` before any record is produced. Individual
rows never raise; unusable rows are counted as skipped.
"""

import csv
import io
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from rideshare_pnl.domain.constants import category_label
from rideshare_pnl.domain.models.finance import ProfitLossSummary
from rideshare_pnl.domain.models.records import EarningRecord, ExpenseRecord
from rideshare_pnl.domain.policies.normalization import parse_iso_date

EARNINGS_HEADERS = (
    "Date",
    "Ride Distance (km)",
    "Total Income",
    "Number of Trips",
)
REQUIRED_EARNINGS_COLUMNS = ("Date", "Ride Distance (km)", "Total Income")

EXPENSES_HEADERS = ("Date", "Category", "Amount", "Type", "Notes", "Odometer")
REQUIRED_EXPENSES_COLUMNS = ("Date", "Category", "Amount")

_EARNINGS_FIELDS = {
    "Date": "date",
    "Ride Distance (km)": "totalRideDistance",
    "Total Income": "totalIncome",
    "Number of Trips": "numberOfTrips",
}
_EXPENSES_FIELDS = {
    "Date": "date",
    "Category": "category",
    "Amount": "amount",
    "Type": "type",
    "Notes": "notes",
    "Odometer": "odometer",
}


class CsvImportError(ValueError):
    """Raised when an import file is structurally unusable."""


@dataclass(frozen=True)
class ParsedRows:
    """Records decoded from a CSV file.

    Attributes:
        records: Records built from usable rows, in file order.
        skipped_count: Data rows that were ignored as unusable.
    """

    records: list
    skipped_count: int


def export_earnings_csv(records: Iterable[EarningRecord]) -> str:
    """Encode earning records as CSV text.

    Args:
        records: Earning records to export.

    Returns:
        str: CSV text with one row per record.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EARNINGS_HEADERS)
    for record in records:
        writer.writerow(
            [
                record.date,
                f"{record.total_ride_distance:.1f}",
                f"{record.total_income:.2f}",
                record.number_of_trips,
            ]
        )
    return buffer.getvalue()


def export_expenses_csv(records: Iterable[ExpenseRecord]) -> str:
    """Encode expense records as CSV text."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPENSES_HEADERS)
    for record in records:
        writer.writerow(
            [
                record.date,
                record.category,
                f"{record.amount:.2f}",
                record.type,
                record.notes,
                "" if record.odometer is None else str(record.odometer),
            ]
        )
    return buffer.getvalue()


def export_summary_csv(summary: ProfitLossSummary, period_label: str) -> str:
    """Encode a profit and loss summary as a small CSV report.

    Args:
        summary: Summary returned by the profit and loss engine.
        period_label: Human readable period, e.g. "March 2026".

    Returns:
        str: CSV report text.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Rideshare Driver Profit & Loss Statement"])
    writer.writerow(["Period", period_label])
    writer.writerow([])
    writer.writerows(
        [
            ["Total Ride Income", _money(summary.total_ride_income)],
            ["Total Ride Distance", f"{summary.total_ride_distance:.1f}"],
            ["Fuel Cost", _money(summary.total_fuel_cost)],
            ["Maintenance Cost", _money(summary.total_maintenance_cost)],
            ["Driver Pass Cost", _money(summary.allocated_driver_pass_cost)],
            ["Manual Expenses", _money(summary.total_manual_expenses)],
            ["True Net Profit", _money(summary.true_net_profit)],
            ["Profit Margin", f"{summary.profit_margin:.2f}%"],
            ["Cost per KM", _money(summary.cost_per_km)],
            ["Profit per KM", _money(summary.profit_per_km)],
            ["Profit per Day", _money(summary.profit_per_day)],
            ["Active Driving Days", summary.active_driving_days],
        ]
    )
    writer.writerow([])
    writer.writerow(["Expense Summary"])
    writer.writerow(["Category", "Amount"])
    for category, amount in summary.expenses_by_category.items():
        writer.writerow([category_label(category), _money(amount)])
    return buffer.getvalue()


def parse_earnings_csv(text: str) -> ParsedRows:
    """Decode earning records from CSV text.

    A row is skipped when it has no usable date and both its distance and
    income are zero.

    Args:
        text: CSV file content.

    Returns:
        ParsedRows: Decoded records and the number of skipped rows.

    Raises:
        CsvImportError: If a required column is missing.
    """
    records: list[EarningRecord] = []
    skipped = 0
    for payload in _read_payloads(
        text,
        REQUIRED_EARNINGS_COLUMNS,
        _EARNINGS_FIELDS,
    ):
        record = EarningRecord.from_payload(payload)
        if (
            parse_iso_date(record.date) is None
            and record.total_ride_distance == 0
            and record.total_income == 0
        ):
            skipped += 1
            continue
        records.append(record)
    return ParsedRows(records=records, skipped_count=skipped)


def parse_expenses_csv(text: str) -> ParsedRows:
    """Decode expense records from CSV text.

    A row is skipped when it has no usable date and a non-positive amount.

    Raises:
        CsvImportError: If a required column is missing.
    """
    records: list[ExpenseRecord] = []
    skipped = 0
    for payload in _read_payloads(
        text,
        REQUIRED_EXPENSES_COLUMNS,
        _EXPENSES_FIELDS,
    ):
        record = ExpenseRecord.from_payload(payload)
        if parse_iso_date(record.date) is None and record.amount <= 0:
            skipped += 1
            continue
        records.append(record)
    return ParsedRows(records=records, skipped_count=skipped)


def _read_payloads(
    text: str,
    required: Sequence[str],
    fields: dict[str, str],
) -> list[dict[str, str]]:
    rows = [
        row
        for row in csv.reader(io.StringIO(text.lstrip("\ufeff")))
        if any(cell.strip() for cell in row)
    ]
    if not rows:
        raise CsvImportError("The file is empty.")

    header = [cell.strip() for cell in rows[0]]
    missing = [column for column in required if column not in header]
    if missing:
        raise CsvImportError(
            "Missing required columns: " + ", ".join(missing)
        )

    positions = {
        fields[column]: index
        for index, column in enumerate(header)
        if column in fields
    }
    payloads = []
    for row in rows[1:]:
        payloads.append(
            {
                key: row[index] if index < len(row) else ""
                for key, index in positions.items()
            }
        )
    return payloads


def _money(value: Decimal) -> str:
    return f"{value:.2f}"


__all__ = [
    "CsvImportError",
    "ParsedRows",
    "EARNINGS_HEADERS",
    "EXPENSES_HEADERS",
    "REQUIRED_EARNINGS_COLUMNS",
    "REQUIRED_EXPENSES_COLUMNS",
    "export_earnings_csv",
    "export_expenses_csv",
    "export_summary_csv",
    "parse_earnings_csv",
    "parse_expenses_csv",
]
