# src/yfxrate/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains adapters for external exchange rate APIs.
All providers implement the ExchangeRateProvider interface.
"""

from yfxrate.adapters.providers.base import ExchangeRateProvider
from yfxrate.adapters.providers.yahoo_finance import (
    YahooFinanceProvider,
    build_quote_url,
    parse_quote_response,
)

__all__ = [
    "ExchangeRateProvider",
    "YahooFinanceProvider",
    "build_quote_url",
    "parse_quote_response",
]
