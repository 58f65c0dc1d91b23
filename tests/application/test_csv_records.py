"""Tests for CSV encoding and decoding of records."""

from decimal import Decimal

import pytest

from rideshare_pnl.application.use_cases.csv_records import (
    CsvImportError,
    export_earnings_csv,
    export_expenses_csv,
    export_summary_csv,
    parse_earnings_csv,
    parse_expenses_csv,
)
from rideshare_pnl.domain.models.records import (
    CostConfiguration,
    EarningRecord,
    ExpenseRecord,
)
from rideshare_pnl.domain.services.profit_loss import calculate_metrics


def _config() -> CostConfiguration:
    return CostConfiguration(
        driver_pass_cost_per_day=Decimal("999"),
        driver_pass_activation_date="2026-02-24",
        fuel_consumption_rate=Decimal("13"),
        fuel_price_per_liter=Decimal("250"),
        maintenance_cost_per_km=Decimal("10"),
    )


def test_export_earnings_csv_formats_values() -> None:
    """Distance uses one decimal place and income two."""
    text = export_earnings_csv(
        [EarningRecord("2026-03-01", Decimal("100"), Decimal("5000"), 12)]
    )

    assert text.splitlines() == [
        "Date,Ride Distance (km),Total Income,Number of Trips",
        "2026-03-01,100.0,5000.00,12",
    ]


def test_export_expenses_csv_quotes_notes() -> None:
    """Notes containing commas must survive CSV quoting."""
    text = export_expenses_csv(
        [
            ExpenseRecord(
                date="2026-03-04",
                amount=Decimal("1500"),
                category="parking",
                notes="airport, long stay",
            )
        ]
    )

    lines = text.splitlines()
    assert lines[0] == "Date,Category,Amount,Type,Notes,Odometer"
    assert lines[1] == (
        '2026-03-04,parking,1500.00,variable,"airport, long stay",'
    )


def test_earnings_round_trip_preserves_the_summary() -> None:
    """Re-importing an export should reproduce the same summary."""
    records = [
        EarningRecord("2026-03-01", Decimal("100"), Decimal("5000"), 12),
        EarningRecord("2026-03-02", Decimal("80.5"), Decimal("4200.25"), 9),
    ]

    parsed = parse_earnings_csv(export_earnings_csv(records))

    assert parsed.skipped_count == 0
    assert calculate_metrics(parsed.records, _config()) == calculate_metrics(
        records, _config()
    )


def test_parse_earnings_csv_accepts_reordered_columns_and_bom() -> None:
    """Columns are matched by header name, ignoring a leading BOM."""
    text = (
        "\ufeffTotal Income,Date,Ride Distance (km)\n"
        "4200,2026-03-02,80\n"
    )

    parsed = parse_earnings_csv(text)

    assert parsed.records == [
        EarningRecord("2026-03-02", Decimal("80"), Decimal("4200"), 0)
    ]


def test_parse_earnings_csv_skips_only_fully_unusable_rows() -> None:
    """Rows are kept unless date, distance and income are all unusable."""
    text = (
        "Date,Ride Distance (km),Total Income,Number of Trips\n"
        ",0,0,3\n"
        "junk,abc,,\n"
        ",12,0,\n"
        "2026-03-01,0,0,0\n"
        "\n"
    )

    parsed = parse_earnings_csv(text)

    assert parsed.skipped_count == 2
    assert [record.date for record in parsed.records] == ["", "2026-03-01"]


def test_parse_earnings_csv_rejects_missing_columns() -> None:
    """A header without the income column is rejected as a whole."""
    with pytest.raises(CsvImportError, match="Total Income"):
        parse_earnings_csv("Date,Ride Distance (km)\n2026-03-01,10\n")


def test_parse_csv_rejects_empty_files() -> None:
    """Blank files cannot be imported."""
    with pytest.raises(CsvImportError, match="empty"):
        parse_expenses_csv("\n \n")


def test_parse_expenses_csv_pads_short_rows_and_skips() -> None:
    """Missing trailing cells are blank; dateless zero rows are skipped."""
    text = (
        "Date,Category,Amount,Type,Notes,Odometer\n"
        "2026-03-04,Tolls,350\n"
        ",fuel,0,variable,,\n"
        ",parking,120,,,\n"
    )

    parsed = parse_expenses_csv(text)

    assert parsed.skipped_count == 1
    assert parsed.records[0] == ExpenseRecord(
        date="2026-03-04",
        amount=Decimal("350"),
        category="tolls",
    )
    assert parsed.records[1].amount == Decimal("120")


def test_parse_expenses_csv_rejects_missing_category() -> None:
    """Expenses require a category column."""
    with pytest.raises(CsvImportError, match="Category"):
        parse_expenses_csv("Date,Amount\n2026-03-04,10\n")


def test_export_summary_csv_lists_totals_and_categories() -> None:
    """The report should carry every headline figure and category line."""
    summary = calculate_metrics(
        [EarningRecord("2026-03-01", Decimal("100"), Decimal("5000"), 12)],
        _config(),
        [ExpenseRecord("2026-03-04", Decimal("1500"), "parking")],
    )

    lines = export_summary_csv(summary, "March 2026").splitlines()

    assert lines[0] == "Rideshare Driver Profit & Loss Statement"
    assert lines[1] == "Period,March 2026"
    assert "Total Ride Income,5000.00" in lines
    assert "Driver Pass Cost,999.00" in lines
    assert "Manual Expenses,1500.00" in lines
    assert "Active Driving Days,1" in lines
    assert lines[-3] == "Expense Summary"
    assert lines[-1] == "Parking,1500.00"


def test_parse_earnings_csv_survives_out_of_range_cells() -> None:
    """A single oversized cell must not abort the rest of the file."""
    text = (
        "Date,Ride Distance (km),Total Income,Number of Trips\n"
        "2026-03-01,100,5000,1e999999999999999999\n"
        "2026-03-02,9e999999,4200,9\n"
        ",1e-999999,9e999999,\n"
        "2026-03-03,80,4000,8\n"
    )

    parsed = parse_earnings_csv(text)

    assert parsed.skipped_count == 1
    assert [record.number_of_trips for record in parsed.records] == [0, 9, 8]
    assert parsed.records[1].total_ride_distance == Decimal("0")
    summary = calculate_metrics(parsed.records, _config())
    assert summary.active_driving_days == 3
