# tests/test_domain.py
"""
Domain Tests - Unit Tests for Models, Currencies and Validators

This module contains unit tests for the ExchangeRate value object, the
supported currency set and the shared validation helpers.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- yfxrate.domain (ExchangeRate, SUPPORTED_CURRENCIES, is_supported_currency, InvalidRateError)
- yfxrate.shared.validators (is_numeric, validate_currency_code)
"""
import dataclasses
import pytest

from datetime import datetime, timezone
from decimal import Decimal

from yfxrate.domain import (
    SUPPORTED_CURRENCIES,
    ExchangeRate,
    InvalidRateError,
    is_supported_currency,
)
from yfxrate.shared.validators import is_numeric, validate_currency_code

NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class TestExchangeRate:
    def test_creation(self):
        rate = ExchangeRate("EUR", "USD", "1.2345", NOW)
        assert rate.source_currency_code == "EUR"
        assert rate.destination_currency_code == "USD"
        assert rate.rate == "1.2345"
        assert rate.timestamp == NOW
        assert rate.decimal_rate == Decimal("1.2345")

    def test_is_immutable(self):
        rate = ExchangeRate("EUR", "USD", "1.2345", NOW)
        with pytest.raises(dataclasses.FrozenInstanceError):
            rate.rate = "2"

    def test_equality_by_value(self):
        assert ExchangeRate("EUR", "USD", "1.5", NOW) == ExchangeRate("EUR", "USD", "1.5", NOW)

    @pytest.mark.parametrize("value", ["0", "0.0", "-1.2"])
    def test_non_positive_rate_rejected(self, value):
        with pytest.raises(InvalidRateError, match="positive"):
            ExchangeRate("EUR", "USD", value, NOW)

    @pytest.mark.parametrize("value", ["N/A", "", "1,5", " 1.5", "1.5\n", "\u0661.5"])
    def test_non_numeric_rate_rejected(self, value):
        with pytest.raises(InvalidRateError, match="numeric"):
            ExchangeRate("EUR", "USD", value, NOW)


class TestSupportedCurrencies:
    def test_set_is_frozen(self):
        assert isinstance(SUPPORTED_CURRENCIES, frozenset)
        assert len(SUPPORTED_CURRENCIES) == 153

    def test_codes_are_uppercase_letters(self):
        assert all(len(code) == 3 and code.isalpha() and code.isupper() for code in SUPPORTED_CURRENCIES)

    @pytest.mark.parametrize("code", ["EUR", "usd", "Gbp", "XAU", "xag", "EEK", "ZWD"])
    def test_supported(self, code):
        assert is_supported_currency(code)

    @pytest.mark.parametrize("code", ["FOO", "BAR", "", "EURO", "BTC", None])
    def test_unsupported(self, code):
        assert not is_supported_currency(code)


class TestValidators:
    @pytest.mark.parametrize("value", ["1", "-3", "+2", "1.2345", ".5", "5.", "1e-3", "2E+10"])
    def test_numeric(self, value):
        assert is_numeric(value)

    @pytest.mark.parametrize("value", [
        "", "N/A", "fooBar", "NaN", "Infinity", "1.2.3", " 1", "1 ", "0x1A",
        "1.5\n",  # trailing newline
        "\u0661\u0662",  # Arabic-Indic digits
    ])
    def test_not_numeric(self, value):
        assert not is_numeric(value)

    def test_validate_currency_code(self):
        assert validate_currency_code("EUR")
        assert validate_currency_code("eur")
        assert not validate_currency_code("EU")
        assert not validate_currency_code("EUR1")
        assert not validate_currency_code("")
        assert not validate_currency_code("EUR\n")
