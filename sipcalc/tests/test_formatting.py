from __future__ import annotations

import pytest

from sipcalc.core.formatting import (
    CURRENCY_FORMATS,
    CurrencyFormat,
    UnknownCurrencyError,
    format_currency,
    format_number,
    format_percentage,
    get_currency_format,
)

INR = CURRENCY_FORMATS["INR"]
USD = CURRENCY_FORMATS["USD"]


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "₹0"),
        (123, "₹123"),
        (1234, "₹1,234"),
        (123456, "₹1,23,456"),
        (1234567, "₹12,34,567"),
        (176046.64, "₹1,76,047"),
        (-1234.5, "-₹1,235"),
        (-0.4, "₹0"),
    ],
)
def test_indian_grouping(amount, expected):
    assert format_currency(amount, INR) == expected


def test_western_grouping():
    assert format_currency(176046.64, USD) == "$176,047"
    assert format_currency(999.5, USD) == "$1,000"


def test_half_up_rounding():
    assert format_number(2.5) == "3"
    assert format_number(0.5) == "1"


def test_fraction_digits():
    fmt = CurrencyFormat(code="USD", symbol="$", grouping="western", fraction_digits=2)
    assert format_currency(1234567.891, fmt) == "$1,234,567.89"
    assert format_currency(5, fmt) == "$5.00"


def test_long_indian_number():
    assert format_number(12345678901, "indian") == "12,34,56,78,901"


def test_non_finite_values_are_not_formatted():
    assert format_currency(float("nan"), INR) == "—"
    assert format_percentage(float("nan")) == "—"
    assert format_percentage(float("inf")) == "—"


def test_percentage():
    assert format_percentage(10.029150) == "10.03%"
    assert format_percentage(-3.14159, digits=1) == "-3.1%"


def test_currency_lookup_is_case_insensitive():
    assert get_currency_format("usd") is USD


def test_unknown_currency():
    with pytest.raises(UnknownCurrencyError) as excinfo:
        get_currency_format("EUR")

    assert excinfo.value.code == "EUR"


def test_amounts_beyond_default_decimal_precision():
    assert format_number(1e50) == f"{10 ** 50:,}"
    assert format_currency(-1e50, USD) == f"-${10 ** 50:,}"
    assert format_currency(1e50, INR).startswith("₹10,00,00,")
