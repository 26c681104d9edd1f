# src/yfxrate/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models, the supported currency set and
domain errors. No dependencies on infrastructure or external systems.
"""

from yfxrate.domain.models import ExchangeRate, RateTable
from yfxrate.domain.currencies import SUPPORTED_CURRENCIES, is_supported_currency
from yfxrate.domain.errors import DomainError, InvalidRateError

__all__ = [
    "ExchangeRate",
    "RateTable",
    "SUPPORTED_CURRENCIES",
    "is_supported_currency",
    "DomainError",
    "InvalidRateError",
]
