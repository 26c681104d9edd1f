# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Rate Formatting Functions

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- yfxrate.adapters.formatting.formatter (format_rate, format_rate_table)
- yfxrate.domain.models (ExchangeRate for test data)
"""
import pytest  # Testing framework for writing and running tests

from datetime import datetime, timezone  # Date/time utilities for test data

from yfxrate.adapters.formatting.formatter import format_rate, format_rate_table
from yfxrate.domain.models import ExchangeRate


@pytest.fixture
def eur_usd():
    return ExchangeRate(
        source_currency_code="EUR",
        destination_currency_code="USD",
        rate="1.123456",
        timestamp=datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc),
    )


class TestFormatRate:
    def test_rate_as_received(self, eur_usd):
        assert format_rate(eur_usd) == "1 EUR = 1.123456 USD"

    def test_with_custom_decimals(self, eur_usd):
        assert format_rate(eur_usd, decimals=2) == "1 EUR = 1.12 USD"

    def test_with_time(self, eur_usd):
        result = format_rate(eur_usd, with_time=True)
        assert result == "1 EUR = 1.123456 USD (2024-03-01 09:30 UTC)"


class TestFormatRateTable:
    def test_mixed_table(self, eur_usd):
        table = {"EUR": {"USD": eur_usd, "XYZ": None}}
        assert format_rate_table(table) == "1 EUR = 1.123456 USD\n1 EUR = N/A XYZ"

    def test_empty_table(self):
        assert format_rate_table({}) == ""
