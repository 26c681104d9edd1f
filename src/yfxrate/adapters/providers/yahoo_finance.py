# src/yfxrate/adapters/providers/yahoo_finance.py
"""
Yahoo! Finance Provider for Currency Exchange Rates

This module implements the Yahoo! Finance CSV quote client. Each supported
currency pair costs one GET request; the CSV body is parsed defensively and
every failure mode resolves to None rather than an exception:

- unsupported currency: no request, nothing logged
- transport failure: reported through the injected logger, if any
- unparseable, missing or non-positive rate: nothing logged

Files that USE this module:
- yfxrate.app (command line builds a YahooFinanceProvider)
- tests.test_providers (unit tests)

Files that this module USES:
- yfxrate.adapters.providers.base (ExchangeRateProvider interface)
- yfxrate.adapters.http.client (HttpClient protocol, TransportError)
- yfxrate.domain (ExchangeRate, RateTable, supported currencies)
- yfxrate.config (settings for the quote endpoint)
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import FrozenSet, Iterable, Mapping, Optional

import requests

from yfxrate.adapters.http.client import HttpClient, TransportError
from yfxrate.adapters.providers.base import ExchangeRateProvider
from yfxrate.config import settings
from yfxrate.domain.currencies import SUPPORTED_CURRENCIES, is_supported_currency
from yfxrate.domain.models import ExchangeRate, RateTable
from yfxrate.shared.validators import is_numeric, normalize_currency_code

log = logging.getLogger(__name__)


def build_quote_url(base_url: str, source_currency_code: str, destination_currency_code: str) -> str:
    """
    Build the quote URL for a currency pair.

    Requests CSV output with the symbol and last trade price fields
    (f=sl1). The symbol is the two codes, as given, followed by "=X". It is
    not percent-encoded, because the service expects the literal "=".
    """
    return (
        f"{base_url}?e=.csv&f=sl1"
        f"&s={source_currency_code}{destination_currency_code}=X"
    )


def parse_quote_response(body: str) -> Optional[str]:
    """
    Parse a Yahoo! Finance CSV quote.

    The first column is the echoed symbol, the second the rate. A rate of
    "N/A" or 0 means the service has no rate for the pair.

    Args:
        body: Raw response body

    Returns:
        The rate as the exact numeric string received, or None if the body
        could not be parsed or holds no positive rate
    """
    fields = body.split(",")
    if len(fields) < 2:
        return None
    # The value may be followed by a newline.
    amount = fields[1].strip()
    if not is_numeric(amount):
        return None
    if Decimal(amount) <= 0:
        return None
    return amount


class YahooFinanceProvider(ExchangeRateProvider):
    """Retrieves currency exchange rates from Yahoo! Finance."""

    def __init__(
        self,
        http_client: HttpClient,
        logger: Optional[logging.Logger] = None,
        base_url: Optional[str] = None,
    ):
        """
        Initialize Yahoo! Finance provider.

        Args:
            http_client: Object performing blocking GET requests
            logger: Optional logger for transport failures; None keeps them silent
            base_url: Optional quote endpoint (defaults to settings.yahoo_quotes_url)
        """
        self.http_client = http_client
        self.logger = logger
        self.base_url = base_url or settings.yahoo_quotes_url

    @staticmethod
    def supported_currencies() -> FrozenSet[str]:
        """Return the codes of all currencies Yahoo! Finance offers rates for."""
        return SUPPORTED_CURRENCIES

    def load_multiple(self, currency_codes: Mapping[str, Iterable[str]]) -> RateTable:
        rates: RateTable = {}
        for source_currency_code, destination_currency_codes in currency_codes.items():
            rates[source_currency_code] = {}
            for destination_currency_code in destination_currency_codes:
                rates[source_currency_code][destination_currency_code] = self._request(
                    source_currency_code, destination_currency_code
                )
        return rates

    def _request(self, source_currency_code: str, destination_currency_code: str) -> Optional[ExchangeRate]:
        """
        Request a single rate.

        Returns:
            ExchangeRate, or None if a currency is unsupported, the request
            failed, or the response held no usable rate
        """
        if not (is_supported_currency(source_currency_code)
                and is_supported_currency(destination_currency_code)):
            log.debug("Unsupported pair %s/%s, skipping", source_currency_code, destination_currency_code)
            return None

        url = build_quote_url(self.base_url, source_currency_code, destination_currency_code)
        try:
            resp = self.http_client.get(url)
        except (requests.exceptions.RequestException, TransportError) as e:
            if self.logger is not None:
                self.logger.error(
                    "The request to the Yahoo! Finance server failed. Reason: %s.", e
                )
            return None

        rate = parse_quote_response(resp.text)
        if rate is None:
            log.debug("No rate in Yahoo! Finance response for %s/%s", source_currency_code, destination_currency_code)
            return None

        return ExchangeRate(
            source_currency_code=normalize_currency_code(source_currency_code),
            destination_currency_code=normalize_currency_code(destination_currency_code),
            rate=rate,
            timestamp=datetime.now(timezone.utc),
        )
