# src/yfxrate/app.py
"""
Application Entry Point - Command Line Rate Lookup

This module serves as the composition root for the yfxrate command line.
It wires settings, logging, the HTTP transport and the Yahoo! Finance
provider, looks up the requested pairs and prints them.

Usage:
    yfxrate EUR USD GBP        # EUR->USD and EUR->GBP
    python -m yfxrate EUR USD --decimals 2 --with-time

Exit status is 0 when every pair produced a rate, 1 otherwise.

Files that USE this module:
- yfxrate.__main__ (python -m yfxrate)
- the "yfxrate" console script

Files that this module USES:
- yfxrate.shared.logging_conf (setup_logging for logging configuration)
- yfxrate.shared.validators (validate_currency_code for arguments)
- yfxrate.config (settings for configuration management)
- yfxrate.adapters.http.client (RequestsHttpClient transport)
- yfxrate.adapters.providers.yahoo_finance (YahooFinanceProvider)
- yfxrate.adapters.formatting.formatter (format_rate_table for output)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command line argument parsing
import logging  # Standard library for logging messages and errors
from typing import List, Optional  # Type hints for argv

from yfxrate import __version__
from yfxrate.config import settings  # Application settings (loaded from env / .env)
from yfxrate.shared.logging_conf import setup_logging  # Configure logging with file rotation
from yfxrate.shared.validators import validate_currency_code  # Currency code shape check
from yfxrate.adapters.http.client import RequestsHttpClient  # requests-based transport
from yfxrate.adapters.providers.yahoo_finance import YahooFinanceProvider  # Rate lookups
from yfxrate.adapters.formatting.formatter import format_rate_table  # Output rendering


def _currency_code(value: str) -> str:
    if not validate_currency_code(value):
        raise argparse.ArgumentTypeError(f"invalid currency code: {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yfxrate",
        description="Look up currency exchange rates from Yahoo! Finance.",
    )
    parser.add_argument("source", type=_currency_code, help="source currency code, e.g. EUR")
    parser.add_argument(
        "destinations", nargs="+", type=_currency_code, metavar="destination",
        help="one or more destination currency codes",
    )
    parser.add_argument("--decimals", type=int, default=None, help="round rates to this many places")
    parser.add_argument("--with-time", action="store_true", help="show retrieval timestamps")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, fetch the requested rates and print them.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else settings.log_level_value,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_stdout=settings.log_stdout or args.verbose,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)

    with RequestsHttpClient(
        timeout=settings.http_timeout_seconds,
        user_agent=settings.http_user_agent,
    ) as http_client:
        provider = YahooFinanceProvider(http_client, logger=logger, base_url=settings.yahoo_quotes_url)
        # dict.fromkeys drops repeated destinations but keeps their order
        table = provider.load_multiple({args.source: list(dict.fromkeys(args.destinations))})

    print(format_rate_table(table, decimals=args.decimals, with_time=args.with_time))

    missing = [dst for dst, rate in table[args.source].items() if rate is None]
    if missing:
        logger.info("No rate available for %s -> %s", args.source, ", ".join(missing))
        return 1
    return 0
