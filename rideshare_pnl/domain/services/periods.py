"""Calendar period selection for earnings and expenses.

Months are 1-based (January is 1). Records whose date cannot be parsed
never belong to any period.
"""

from collections.abc import Iterable
from typing import Protocol, TypeVar

from rideshare_pnl.domain.policies.normalization import parse_iso_date


class DatedRecord(Protocol):
    """Any record exposing an ISO ``date`` attribute."""

    date: str


RecordT = TypeVar("RecordT", bound=DatedRecord)


def is_in_month(record_date, year: int, month: int) -> bool:
    """Return True when the date falls in the given calendar month."""
    parsed = parse_iso_date(record_date)
    if parsed is None:
        return False
    return parsed.year == year and parsed.month == month


def is_in_year(record_date, year: int) -> bool:
    """Return True when the date falls in the given calendar year."""
    parsed = parse_iso_date(record_date)
    return parsed is not None and parsed.year == year


def filter_by_month(
    records: Iterable[RecordT],
    year: int,
    month: int,
) -> list[RecordT]:
    """Keep the records dated within a calendar month.

    Args:
        records: Earning or expense records.
        year: Calendar year.
        month: Calendar month, 1 to 12.

    Returns:
        list: Matching records in their original order.
    """
    return [
        record for record in records if is_in_month(record.date, year, month)
    ]


def filter_by_year(records: Iterable[RecordT], year: int) -> list[RecordT]:
    """Keep the records dated within a calendar year."""
    return [record for record in records if is_in_year(record.date, year)]


def available_months(records: Iterable[DatedRecord]) -> list[tuple[int, int]]:
    """Return the distinct (year, month) pairs present, newest first."""
    months: set[tuple[int, int]] = set()
    for record in records:
        parsed = parse_iso_date(record.date)
        if parsed is not None:
            months.add((parsed.year, parsed.month))
    return sorted(months, reverse=True)


__all__ = [
    "DatedRecord",
    "is_in_month",
    "is_in_year",
    "filter_by_month",
    "filter_by_year",
    "available_months",
]
