# src/yfxrate/adapters/providers/base.py
"""
Base Provider Interface for Exchange Rate Providers

This module defines the abstract base class for all exchange rate providers.
It establishes the contract that all provider implementations must follow:
lookups return None instead of raising when no rate is available.

Files that USE this module:
- yfxrate.adapters.providers.yahoo_finance (YahooFinanceProvider implements ExchangeRateProvider)
- tests.test_providers (unit tests)

Files that this module USES:
- yfxrate.domain.models (ExchangeRate, RateTable)
"""
from abc import ABC, abstractmethod
from typing import Iterable, Mapping, Optional

from yfxrate.domain.models import ExchangeRate, RateTable


class ExchangeRateProvider(ABC):
    def load(self, source_currency_code: str, destination_currency_code: str) -> Optional[ExchangeRate]:
        """Return the rate for one pair, or None if it is not available."""
        rates = self.load_multiple({source_currency_code: [destination_currency_code]})
        return rates[source_currency_code][destination_currency_code]

    @abstractmethod
    def load_multiple(self, currency_codes: Mapping[str, Iterable[str]]) -> RateTable:
        """
        Return rates for several pairs.

        Args:
            currency_codes: Destination codes keyed by source code

        Returns:
            Mapping with the same keys, holding an ExchangeRate or None per pair
        """
        raise NotImplementedError
