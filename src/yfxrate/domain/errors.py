# src/yfxrate/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised when a value object
is constructed from invalid data. Rate lookups never raise these for
normal failure modes; they resolve to None instead.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidRateError(DomainError):
    """Raised when a rate value is invalid (e.g., non-numeric, negative or zero)."""
    pass
