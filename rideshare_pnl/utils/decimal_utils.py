"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation

# Non-zero values must lie within 1e-15 .. 1e15 in magnitude so that sums,
# products and quotients stay inside the default decimal context.
MAX_ADJUSTED_EXPONENT = 15


def coerce_decimal(value) -> Decimal | None:
    """Normalize raw numeric values to a finite Decimal.

    Args:
        value: Raw numeric value from user input, CSV cells or payloads.

    Returns:
        Decimal | None: Parsed value, or None when the input is blank,
        non-numeric, not finite or of unusable magnitude.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return None
        try:
            result = Decimal(text)
        except InvalidOperation:
            return None
    if not result.is_finite():
        return None
    if not result:
        return Decimal(0)
    if abs(result.adjusted()) > MAX_ADJUSTED_EXPONENT:
        return None
    return result


__all__ = ["coerce_decimal", "MAX_ADJUSTED_EXPONENT"]
