# src/yfxrate/adapters/formatting/__init__.py
"""
Formatting Adapters - Text Formatting

This package contains text formatting for command line output.
"""

from yfxrate.adapters.formatting.formatter import format_rate, format_rate_table

__all__ = [
    "format_rate",
    "format_rate_table",
]
