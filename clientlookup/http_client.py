"""
http_client.py - HTTP Client for Remote Client Data
====================================================
This module fetches client data from a remote JSON endpoint.

Behaviour:
----------
- One blocking GET per load. Failures are not retried.
- Any non-2xx status is reported as a NetworkError carrying the status
  code and reason, e.g. "Failed to fetch data: HTTP 404 - Not Found".
- Connection failures and timeouts are reported as NetworkError.
- A 2xx body that is not valid JSON is reported as ParseError.
"""

import logging

import requests

from .config import Settings
from .errors import NetworkError, ParseError
from .models import JsonValue, reject_json_constant

logger = logging.getLogger(__name__)


class HttpClient:
    """
    HTTP client for downloading client JSON.

    Usage:
        client = HttpClient(settings)
        try:
            data = client.get_json("https://clients.example.com/clients.json")
        finally:
            client.close()
    """

    def __init__(self, settings: Settings):
        self.settings = settings

        # A Session keeps default headers in one place
        self.s = requests.Session()
        self.s.headers.update({"Accept": "application/json"})

        self.timeout = settings.timeout_sec

    def get_json(self, url: str) -> JsonValue:
        """
        GET url and decode the response body as JSON.

        Returns:
            The decoded JSON value, with no schema checks applied

        Raises:
            NetworkError: On connection errors, timeouts or a non-2xx status
            ParseError: If the response body is not valid JSON
        """
        logger.debug(f"GET {url}")

        try:
            r = self.s.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(
                f"Network error when accessing {url}: {type(e).__name__}: {e}"
            ) from e

        logger.debug(f"[{r.status_code}] {url} ({r.headers.get('content-type', '')})")

        if not 200 <= r.status_code < 300:
            raise NetworkError(f"Failed to fetch data: HTTP {r.status_code} - {r.reason}")

        try:
            return r.json(parse_constant=reject_json_constant)
        except ValueError as e:
            raise ParseError(f"Invalid JSON data at {url}: {e}") from e

    def close(self):
        """Close the HTTP session and release its connections."""
        self.s.close()
