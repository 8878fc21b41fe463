# storefront/utils/money.py

from decimal import Decimal, ROUND_HALF_UP

Money = Decimal

def D(x) -> Money:
    return x if isinstance(x, Decimal) else Decimal(str(x or "0"))

def round_money(x: Money) -> Money:
    return D(x).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

def to_float_money(x) -> float:
    # JSON bodies carry money as plain numbers
    return float(round_money(x))
