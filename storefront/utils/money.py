# storefront/utils/money.py

from decimal import Decimal, InvalidOperation, ROUND_DOWN, ROUND_HALF_UP

Money = Decimal
CENT = Decimal("0.01")

def D(x) -> Money:
    if isinstance(x, Decimal):
        return x
    try:
        return Decimal(str(x or "0"))
    except InvalidOperation:
        raise ValueError(f"not a number: {x!r}")

def round_money(x) -> Money:
    return D(x).quantize(CENT, rounding=ROUND_HALF_UP)

def floor_money(x) -> Money:
    """Whole cents not exceeding x (for non-negative x)."""
    return D(x).quantize(CENT, rounding=ROUND_DOWN)

def to_float(x) -> float:
    return float(round_money(x))
