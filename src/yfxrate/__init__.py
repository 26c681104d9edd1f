# src/yfxrate/__init__.py
"""
yfxrate - Yahoo! Finance Exchange Rate Provider

Looks up currency-pair exchange rates from the Yahoo! Finance CSV quote
service and returns them as typed ExchangeRate values, or None when no
rate is available.
"""

__version__ = "1.0.0"
