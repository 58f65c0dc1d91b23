"""Domain policies package."""

from .normalization import (
    coerce_amount,
    coerce_count,
    coerce_optional_amount,
    normalize_date_text,
    normalize_tag,
    normalize_text,
    parse_iso_date,
)

__all__ = [
    "coerce_amount",
    "coerce_count",
    "coerce_optional_amount",
    "normalize_date_text",
    "normalize_tag",
    "normalize_text",
    "parse_iso_date",
]
