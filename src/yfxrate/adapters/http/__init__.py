# src/yfxrate/adapters/http/__init__.py
"""
HTTP Adapters - Transport used by providers.
"""

from yfxrate.adapters.http.client import (
    HttpClient,
    HttpResponse,
    RequestsHttpClient,
    TransportError,
)

__all__ = [
    "HttpClient",
    "HttpResponse",
    "RequestsHttpClient",
    "TransportError",
]
