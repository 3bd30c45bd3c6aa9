"""Utility functions for jobledger."""

from jobledger.utils.date_parser import parse_date
from jobledger.utils.amount_parser import parse_amount
from jobledger.utils.formatters import format_currency, format_date

__all__ = ["parse_date", "parse_amount", "format_currency", "format_date"]
