# jewellery_store/utils/money.py
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value) -> Decimal:
    """Exact Decimal from a float, int, str or Decimal (floats go through str)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value) -> Decimal:
    """Two-place Decimal for storing prices and totals."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def money_equal(a, b, tolerance: Decimal = CENT) -> bool:
    # compared unrounded; rounding first would widen the tolerance
    return abs(to_decimal(a) - to_decimal(b)) <= tolerance
