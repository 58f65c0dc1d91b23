"""Tests for the input normalization policies."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from rideshare_pnl.domain.policies.normalization import (
    coerce_amount,
    coerce_count,
    coerce_optional_amount,
    normalize_date_text,
    normalize_tag,
    normalize_text,
    parse_iso_date,
)
from rideshare_pnl.utils.decimal_utils import coerce_decimal


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("12.5", Decimal("12.5")),
        (" 1,250.50 ", Decimal("1250.50")),
        (7, Decimal("7")),
        (0.1, Decimal("0.1")),
        (Decimal("3.25"), Decimal("3.25")),
        (None, Decimal("0")),
        ("", Decimal("0")),
        ("abc", Decimal("0")),
        ("-5", Decimal("0")),
        (float("nan"), Decimal("0")),
        ("Infinity", Decimal("0")),
        (True, Decimal("0")),
        ("9e999999", Decimal("0")),
        ("1e-999999", Decimal("0")),
        (10**400, Decimal("0")),
        (1e300, Decimal("0")),
        ("0E-999999", Decimal("0")),
        ("999999999999999", Decimal("999999999999999")),
    ],
)
def test_coerce_amount(raw, expected) -> None:
    """Amounts should be finite, non-negative Decimals."""
    assert coerce_amount(raw) == expected


def test_coerce_optional_amount_keeps_absence() -> None:
    """Blank optional readings stay None instead of becoming zero."""
    assert coerce_optional_amount("") is None
    assert coerce_optional_amount(None) is None
    assert coerce_optional_amount("oops") is None
    assert coerce_optional_amount("45210") == Decimal("45210")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("12", 12),
        ("3.9", 3),
        (4.2, 4),
        ("-1", 0),
        ("x", 0),
        (None, 0),
        ("100000", 100000),
        ("100001", 0),
        ("1e999999999999999999", 0),
        ("1e-999999", 0),
    ],
)
def test_coerce_count(raw, expected) -> None:
    """Counts should be non-negative integers."""
    assert coerce_count(raw) == expected


def test_parse_iso_date_accepts_dates_and_datetimes() -> None:
    """ISO dates, datetimes and date objects should all parse."""
    assert parse_iso_date("2026-03-01") == date(2026, 3, 1)
    assert parse_iso_date(" 2026-03-01T08:30:00 ") == date(2026, 3, 1)
    assert parse_iso_date(date(2026, 3, 1)) == date(2026, 3, 1)
    assert parse_iso_date(datetime(2026, 3, 1, 9)) == date(2026, 3, 1)


@pytest.mark.parametrize("raw", ["", "   ", "N/A", "2026-13-01", None, 42])
def test_parse_iso_date_returns_none_for_malformed_values(raw) -> None:
    """Malformed dates should never raise."""
    assert parse_iso_date(raw) is None


def test_normalize_date_text() -> None:
    """Parseable dates become ISO text; other text is kept trimmed."""
    assert normalize_date_text("2026-03-01T22:15:00") == "2026-03-01"
    assert normalize_date_text(date(2026, 3, 1)) == "2026-03-01"
    assert normalize_date_text(" yesterday ") == "yesterday"
    assert normalize_date_text(None) == ""


def test_normalize_tag_and_text() -> None:
    """Tags are lower-cased with a default; text is trimmed."""
    assert normalize_tag(" Parking ", "other") == "parking"
    assert normalize_tag("", "other") == "other"
    assert normalize_tag(None, "variable") == "variable"
    assert normalize_text("  new tires ") == "new tires"
    assert normalize_text(None) == ""


def test_coerce_decimal_rejects_unusable_magnitudes() -> None:
    """Huge or vanishingly small values are unusable, zero stays zero."""
    assert coerce_decimal("9e999999") is None
    assert coerce_decimal("-9e999999") is None
    assert coerce_decimal("1e-16") is None
    assert coerce_decimal("1e15") == Decimal("1e15")
    assert coerce_decimal("0E-999999") == Decimal("0")
    assert coerce_decimal("0E-999999").adjusted() == 0
