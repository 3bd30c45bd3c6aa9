"""Tests for amount parsing and display formatting."""

import pytest
from datetime import date
from decimal import Decimal

from jobledger.utils import format_currency, format_date, parse_amount


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1500", Decimal("1500")),
        ("123.45", Decimal("123.45")),
        ("₺123.45", Decimal("123.45")),
        ("123,45 TL", Decimal("123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("1.234,56", Decimal("1234.56")),
        ("-50", Decimal("-50")),
        ("1.500", Decimal("1500")),
        ("1.500.000", Decimal("1500000")),
        ("₺1.500", Decimal("1500")),
        ("1.5", Decimal("1.5")),
        ("12.500,75", Decimal("12500.75")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "12abc"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


@pytest.mark.parametrize(
    "amount,expected",
    [
        (Decimal("0"), "₺0,00"),
        (Decimal("1234.5"), "₺1.234,50"),
        (Decimal("1000000"), "₺1.000.000,00"),
        (Decimal("-200"), "-₺200,00"),
        (Decimal("0.005"), "₺0,01"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_date():
    assert format_date(date(2024, 3, 5)) == "05.03.2024"
    assert format_date(None) == "-"


@pytest.mark.parametrize("amount", [Decimal("1500"), Decimal("1234.5"), Decimal("1000000")])
def test_formatted_currency_parses_back(amount):
    assert parse_amount(format_currency(amount)) == amount
