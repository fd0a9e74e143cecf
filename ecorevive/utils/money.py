# ecorevive/utils/money.py
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_cents(amount: Decimal) -> Decimal:
    return Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)


def to_minor_units(amount: Decimal) -> int:
    """Kwota w centach jako int (format bramki platnosci)."""
    return int((to_cents(amount) * 100).to_integral_value(rounding=ROUND_HALF_UP))
