"""Normalization of raw user and file input into record field values.

Every numeric or date field that enters the domain passes through one of
these helpers. None of them raise: unusable input collapses to a documented
fallback (zero, an empty string or None).
"""

from datetime import date, datetime
from decimal import ROUND_DOWN, Decimal

from rideshare_pnl.utils.decimal_utils import coerce_decimal

ZERO = Decimal("0")
MAX_COUNT = 100_000


def coerce_amount(value) -> Decimal:
    """Normalize a money, distance or rate value.

    Args:
        value: Raw value from a form, CSV cell or stored payload.

    Returns:
        Decimal: Non-negative finite amount, 0 when the input is unusable.
    """
    amount = coerce_decimal(value)
    if amount is None or amount < 0:
        return ZERO
    return amount


def coerce_optional_amount(value) -> Decimal | None:
    """Normalize an optional reading such as an odometer value.

    Args:
        value: Raw value, possibly blank.

    Returns:
        Decimal | None: Non-negative amount, or None when absent or unusable.
    """
    amount = coerce_decimal(value)
    if amount is None or amount < 0:
        return None
    return amount


def coerce_count(value) -> int:
    """Normalize a count such as the number of trips.

    Args:
        value: Raw value from a form, CSV cell or stored payload.

    Returns:
        int: Non-negative integer, fractional parts truncated. Counts
        above MAX_COUNT are treated as unusable and become 0.
    """
    amount = coerce_amount(value)
    if amount > MAX_COUNT:
        return 0
    return int(amount.to_integral_value(rounding=ROUND_DOWN))


def parse_iso_date(value) -> date | None:
    """Parse an ISO date or datetime without raising.

    Args:
        value: Date object or ISO 8601 text.

    Returns:
        date | None: Parsed calendar date, or None when malformed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def normalize_date_text(value) -> str:
    """Normalize a record date to ``YYYY-MM-DD`` where possible.

    Unparseable text is kept trimmed so it can still be displayed; month
    filters exclude it.

    Args:
        value: Date object or raw date text.

    Returns:
        str: ISO date text, the trimmed original, or an empty string.
    """
    parsed = parse_iso_date(value)
    if parsed is not None:
        return parsed.isoformat()
    if value is None:
        return ""
    return str(value).strip()


def normalize_tag(value, default: str) -> str:
    """Normalize a category or type tag."""
    if value is None:
        return default
    cleaned = str(value).strip().lower()
    return cleaned or default


def normalize_text(value) -> str:
    """Normalize free text such as notes."""
    if value is None:
        return ""
    return str(value).strip()


__all__ = [
    "coerce_amount",
    "coerce_optional_amount",
    "coerce_count",
    "parse_iso_date",
    "normalize_date_text",
    "normalize_tag",
    "normalize_text",
]
