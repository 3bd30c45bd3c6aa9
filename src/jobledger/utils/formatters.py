"""Display formatting for amounts and dates."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional


def format_currency(amount: Decimal) -> str:
    """Format an amount as Turkish lira, e.g. ``₺1.234,50``."""
    quantized = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    grouped = f"{abs(quantized):,.2f}"
    # Swap separators: 1,234.50 -> 1.234,50
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}₺{localized}"


def format_date(value: Optional[date]) -> str:
    """Format a date as ``DD.MM.YYYY``, or ``-`` when missing."""
    if value is None:
        return "-"
    return value.strftime("%d.%m.%Y")
