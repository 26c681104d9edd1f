# src/yfxrate/adapters/formatting/formatter.py
"""
Rate Formatter - Text Formatting and Presentation

This module renders exchange rates and rate tables as plain text for the
command line.

Files that USE this module:
- yfxrate.app (prints looked-up rates)
- tests.test_formatter (unit tests)

Files that this module USES:
- yfxrate.domain.models (ExchangeRate, RateTable)
"""
from __future__ import annotations

from typing import List, Optional

from yfxrate.domain.models import ExchangeRate, RateTable


def format_rate(rate: ExchangeRate, decimals: Optional[int] = None, with_time: bool = False) -> str:
    """
    Format an exchange rate as a single line.

    Args:
        rate: Rate to format
        decimals: Number of decimal places; None prints the rate as received
        with_time: Whether to include the retrieval timestamp (default: False)

    Returns:
        String like "1 EUR = 1.2345 USD"
    """
    if decimals is None:
        value = rate.rate
    else:
        value = f"{rate.decimal_rate:.{decimals}f}"
    msg = f"1 {rate.source_currency_code} = {value} {rate.destination_currency_code}"
    if with_time:
        msg = f"{msg} ({rate.timestamp.strftime('%Y-%m-%d %H:%M UTC')})"
    return msg


def format_rate_table(table: RateTable, decimals: Optional[int] = None, with_time: bool = False) -> str:
    """
    Format a rate table, one pair per line.

    Pairs without a rate are shown as "N/A", using the codes as requested.
    """
    lines: List[str] = []
    for source_currency_code, rates in table.items():
        for destination_currency_code, rate in rates.items():
            if rate is None:
                lines.append(f"1 {source_currency_code} = N/A {destination_currency_code}")
            else:
                lines.append(format_rate(rate, decimals=decimals, with_time=with_time))
    return "\n".join(lines)
