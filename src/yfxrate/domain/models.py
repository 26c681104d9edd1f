# src/yfxrate/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains the exchange rate value object and the rate table
shape returned by batch lookups.

Files that USE this module:
- yfxrate.adapters.providers.* (providers create ExchangeRate instances)
- yfxrate.adapters.formatting.formatter (renders rates and tables)
- tests.* (tests use domain models for test data)

Files that this module USES:
- yfxrate.domain.errors (InvalidRateError)
- yfxrate.shared.validators (is_numeric)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from datetime import datetime  # Date/time utilities for timestamps
from decimal import Decimal  # Exact decimal arithmetic for rate values
from typing import Dict, Optional  # Type hints for mappings and optional values

from yfxrate.domain.errors import InvalidRateError
from yfxrate.shared.validators import is_numeric


@dataclass(frozen=True)
class ExchangeRate:
    """
    A rate between two currencies at a point in time.

    Attributes:
        source_currency_code: Code of the currency being priced
        destination_currency_code: Code of the currency the price is expressed in
        rate: Units of destination currency per unit of source currency,
              kept as the exact decimal literal received
        timestamp: When the rate was retrieved
    """
    source_currency_code: str
    destination_currency_code: str
    rate: str
    timestamp: datetime

    def __post_init__(self) -> None:
        if not is_numeric(self.rate):
            raise InvalidRateError(f"Rate must be a numeric string, got {self.rate!r}")
        if Decimal(self.rate) <= 0:
            raise InvalidRateError(f"Rate must be positive, got {self.rate}")

    @property
    def decimal_rate(self) -> Decimal:
        """The rate as a Decimal."""
        return Decimal(self.rate)


# source code -> destination code -> rate, or None when no rate was available
RateTable = Dict[str, Dict[str, Optional[ExchangeRate]]]
