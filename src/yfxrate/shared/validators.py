# src/yfxrate/shared/validators.py
"""
Input Validation Utilities - Currency Codes and Numeric Literals

This module provides the small validation helpers shared by the domain
models, the Yahoo! Finance provider and the command line.

Files that USE this module:
- yfxrate.domain.models (is_numeric for ExchangeRate construction)
- yfxrate.domain.currencies (normalize_currency_code for lookups)
- yfxrate.adapters.providers.yahoo_finance (is_numeric when parsing quotes)
- yfxrate.app (validate_currency_code for CLI arguments)

Files that this module USES:
- None (pure utility functions)
"""
import re

# Optionally signed integer or decimal literal, with an optional exponent.
_NUMERIC_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)

_CURRENCY_CODE_RE = re.compile(r"[A-Za-z]{3}")


def is_numeric(value: str) -> bool:
    """
    Check whether a string is a plain numeric literal.

    Accepts values such as "12", "-3", "1.2345", ".5" and "1e-3".
    Only ASCII digits count. Rejects sentinels like "N/A", "NaN" or
    "Infinity", and anything with surrounding whitespace or newlines.

    Args:
        value: String to check

    Returns:
        True if the string is a numeric literal, False otherwise
    """
    if not isinstance(value, str) or not value:
        return False
    return bool(_NUMERIC_RE.fullmatch(value))


def normalize_currency_code(code: str) -> str:
    """Upper-case a currency code for comparison."""
    return code.upper()


def validate_currency_code(code: str) -> bool:
    """
    Validate the shape of a currency code.

    Args:
        code: Currency code as typed by a user

    Returns:
        True if the code is three ASCII letters (any case), False otherwise
    """
    if not code:
        return False
    return bool(_CURRENCY_CODE_RE.fullmatch(code))
