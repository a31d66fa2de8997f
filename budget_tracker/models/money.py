"""
Money helpers.

All amounts are Decimal. Rounding is always ROUND_HALF_UP (half away
from zero) so charts and reports are deterministic.
"""

from decimal import ROUND_HALF_UP, Decimal

ZERO = Decimal("0")
CENT = Decimal("0.01")
TENTH = Decimal("0.1")


def quantize_money(amount: Decimal) -> Decimal:
    """Round an amount to cents."""
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """
    Format an amount as currency, e.g. 1234.5 -> "$1,234.50".

    Negative amounts carry a leading minus: "-$800.00".
    """
    quantized = quantize_money(amount)
    sign = "-" if quantized < 0 else ""
    return f"{sign}{symbol}{abs(quantized):,.2f}"


def format_percentage(value: Decimal) -> str:
    """Format a percentage with one decimal place (no % sign)."""
    return f"{Decimal(value).quantize(TENTH, rounding=ROUND_HALF_UP)}"


def round_half_up(value: Decimal) -> int:
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
