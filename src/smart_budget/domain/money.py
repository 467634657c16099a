"""
Helpers for turning amounts found in text or payloads into ``Decimal``.

Amounts arrive as Indian ("1,23,456.78") or international ("123,456.78")
grouped strings, plain numbers or floats from JSON. Everything is converted
to ``Decimal`` before any arithmetic so sums and projections stay exact.
"""
from decimal import ROUND_CEILING, Decimal, InvalidOperation
from typing import Union

AmountLike = Union[Decimal, int, float, str, None]

ZERO = Decimal("0")


def parse_amount(value: str | None) -> Decimal | None:
    """
    Parse a grouped numeric literal such as ``"1,234.56"``.

    Returns ``None`` when nothing numeric is left after the separators are
    removed.
    """
    if value is None:
        return None
    cleaned = value.replace(",", "").replace(" ", "").strip()
    if not cleaned:
        return None
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    return amount


def to_decimal(value: AmountLike) -> Decimal:
    """Coerce caller supplied amounts; unusable values count as zero."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() keeps 0.1 as 0.1 instead of its binary expansion
        return Decimal(str(value))
    if isinstance(value, int):
        return Decimal(value)
    parsed = parse_amount(str(value))
    return parsed if parsed is not None else ZERO


def ceil_amount(value: Decimal) -> Decimal:
    """Round up to a whole currency unit."""
    return value.to_integral_value(rounding=ROUND_CEILING)


def mean(values: list[Decimal]) -> Decimal:
    # An empty set averages to zero so thresholds collapse instead of failing.
    return sum(values, ZERO) / (len(values) or 1)
