# src/yfxrate/adapters/http/client.py
"""
HTTP Client - Blocking GET Transport for Providers

This module defines the minimal HTTP capability providers depend on and a
default implementation backed by a requests Session. Timeouts, headers and
status checks are configured here, never in the providers.

Files that USE this module:
- yfxrate.adapters.providers.yahoo_finance (HttpClient, TransportError)
- yfxrate.app (builds RequestsHttpClient)
- tests.test_http_client (unit tests)

Files that this module USES:
- yfxrate.config (timeout and User-Agent defaults)
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests

from yfxrate.config import settings

log = logging.getLogger(__name__)


class TransportError(Exception):
    """Raised by HttpClient implementations that do not use requests when a GET fails."""
    pass


class HttpResponse(Protocol):
    text: str


class HttpClient(Protocol):
    def get(self, url: str) -> HttpResponse:
        """
        Perform a blocking GET.

        Implementations raise requests.exceptions.RequestException or
        TransportError on connection errors, timeouts and non-2xx statuses.
        """
        ...


class RequestsHttpClient:
    """HttpClient backed by a requests Session."""

    def __init__(
        self,
        timeout: Optional[int] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            timeout: HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            user_agent: User-Agent header value (defaults to settings.http_user_agent)
            session: Optional pre-built session, mainly for tests
        """
        self.timeout = timeout or settings.http_timeout_seconds
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = user_agent or settings.http_user_agent

    def get(self, url: str) -> requests.Response:
        """
        GET a URL and return the response.

        Raises:
            requests.exceptions.RequestException: On connection errors,
                timeouts and non-2xx statuses
        """
        log.debug("GET %s (timeout=%ss)", url, self.timeout)
        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsHttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
