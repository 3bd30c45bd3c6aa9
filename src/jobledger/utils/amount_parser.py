"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "₺123.45" or "123.45 TL"
    - "1,234.56"
    - "1.234,56" and "1.500" (Turkish grouping, as ``format_currency`` prints)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove currency symbols and codes
    cleaned = re.sub(r"[₺$€£]|\bTL\b|\bTRY\b", "", amount_str.strip(), flags=re.IGNORECASE)
    cleaned = cleaned.replace(" ", "")

    # A trailing ",dd" group marks a decimal comma
    if re.fullmatch(r"-?[\d.]*\d,\d{1,2}", cleaned):
        cleaned = cleaned.replace(".", "").replace(",", ".")
    # Dots between three-digit groups are thousands separators
    elif re.fullmatch(r"-?\d{1,3}(\.\d{3})+", cleaned):
        cleaned = cleaned.replace(".", "")
    else:
        cleaned = cleaned.replace(",", "")

    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e
