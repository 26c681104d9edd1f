# src/yfxrate/domain/currencies.py
"""
Supported Currencies - Codes Quoted by Yahoo! Finance

This module holds the fixed set of currency codes the Yahoo! Finance quote
service offers rates for. Besides ISO 4217 codes it includes a few legacy
codes (EEK, LTL, ZWD, ...) and metal pseudo-codes (XAU, XAG, XPT, XPD,
XAL, XCP) that the service still answers for.

Files that USE this module:
- yfxrate.adapters.providers.yahoo_finance (support check before requesting)
- tests.test_currencies (unit tests)

Files that this module USES:
- yfxrate.shared.validators (normalize_currency_code)
"""
from typing import FrozenSet

from yfxrate.shared.validators import normalize_currency_code

SUPPORTED_CURRENCIES: FrozenSet[str] = frozenset({
    "AUD", "ALL", "DZD", "XAL", "ARS", "AWG", "GBP", "BHD", "BBD", "BZD",
    "BTN", "BWP", "BND", "BIF", "BSD", "BDT", "BYR", "BMB", "BOB", "BRL",
    "BGN", "CAD", "KHR", "KYD", "XAF", "COP", "XCP", "HRK", "CZK", "CNY",
    "CVE", "XOF", "CLP", "MKF", "CRC", "CUP", "EUR", "DJF", "XCD", "EGP",
    "ERN", "ETB", "FJD", "DKK", "DOP", "ECS", "SVC", "EEK", "FKP", "HKD",
    "INR", "GHC", "XAU", "GNF", "HTG", "HUF", "IRR", "ILS", "IDR", "GMD",
    "GIP", "GTQ", "GYD", "HNL", "ISK", "IQD", "JPY", "JOD", "KES", "LAK",
    "LBP", "LRD", "LTL", "JMD", "KZT", "KWD", "LVL", "LSL", "LYD", "MOP",
    "MWK", "MVR", "MRO", "MXN", "MNT", "MMK", "MKD", "MYR", "MTL", "MUR",
    "MDL", "MAD", "NAD", "ANG", "NIO", "KPW", "OMR", "NPR", "NZD", "NGN",
    "NOK", "XPF", "XPD", "PGK", "PEN", "XPT", "QAR", "RUB", "PKR", "PAB",
    "PYG", "PHP", "PLN", "RON", "RWF", "CHF", "WST", "SAR", "SLL", "SGD",
    "SIT", "SOS", "LKR", "SDG", "SEK", "KRW", "STD", "SCR", "XAG", "SKK",
    "SBD", "ZAR", "SHP", "SZL", "SYP", "USD", "TRY", "TZS", "TTD", "AED",
    "UAH", "THB", "TWD", "TOP", "TND", "UGX", "UYU", "VUV", "VND", "ZMK",
    "VEF", "YER", "ZWD",
})


def is_supported_currency(currency_code: str) -> bool:
    """
    Check if Yahoo! Finance quotes a currency.

    Args:
        currency_code: Currency code in any case

    Returns:
        True if the upper-cased code is in SUPPORTED_CURRENCIES
    """
    if not isinstance(currency_code, str):
        return False
    return normalize_currency_code(currency_code) in SUPPORTED_CURRENCIES
