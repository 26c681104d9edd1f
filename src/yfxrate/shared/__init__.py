# src/yfxrate/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from yfxrate.shared.validators import (
    is_numeric,
    normalize_currency_code,
    validate_currency_code,
)
from yfxrate.shared.logging_conf import setup_logging

__all__ = [
    "is_numeric",
    "normalize_currency_code",
    "validate_currency_code",
    "setup_logging",
]
