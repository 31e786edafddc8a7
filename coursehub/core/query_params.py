"""
Lenient query-string parsing.

Catalog links are shared and hand-edited, so malformed numbers fall back
to defaults instead of failing the request. Numbers too large for a
32-bit integer column count as malformed.

Dependencies: None (pure domain layer)
System role: Query parameter normalisation for list endpoints
"""

from decimal import Decimal, DecimalException

MAX_DB_INT = 2**31 - 1


def parse_positive_int(value: str | None, default: int, maximum: int | None = None) -> int:
    """
    Parse a positive integer, falling back to `default`.

    Args:
        value: Raw query value
        default: Returned for missing, malformed, zero, negative or
            out-of-range input
        maximum: Optional upper bound applied after parsing

    Returns:
        int: Parsed value
    """
    if value is None:
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    if parsed < 1 or parsed > MAX_DB_INT:
        return default
    if maximum is not None:
        return min(parsed, maximum)
    return parsed


def dollars_to_cents(value: str | None) -> int | None:
    """
    Convert a dollar amount from the query string to integer cents.

    Returns None for missing, malformed or out-of-range input so the
    bound is ignored. Fractions of a cent are truncated.
    """
    if value is None or not str(value).strip():
        return None
    try:
        dollars = Decimal(str(value).strip())
        if not dollars.is_finite():
            return None
        cents = dollars * 100
    except DecimalException:
        return None
    if abs(cents) > MAX_DB_INT:
        return None
    return int(cents)


def parse_optional_str(value: str | None) -> str | None:
    """Strip a string parameter; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None
