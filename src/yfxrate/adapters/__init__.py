# src/yfxrate/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- HTTP (transport)
- Providers (APIs)
- Formatting (output)
"""

__all__ = []
