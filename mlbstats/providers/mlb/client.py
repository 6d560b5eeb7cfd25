"""MLB HTTP client.

Handles raw HTTP requests to the MLB Stats API and mlb.com pages.
No data transformation - just fetch and return JSON or HTML.

Transient failures (network errors, timeouts, 429 and 5xx) are retried via
with_retry with exponential backoff. Other non-2xx responses fail at once.
"""

import logging
import threading
import time
from collections.abc import Callable

import httpx

from mlbstats.core.errors import FetchError, UpstreamUnavailableError
from mlbstats.providers.mlb.constants import (
    API_HEADERS,
    BROWSER_HEADERS,
    MLB_API_BASE_URL,
)
from mlbstats.utilities.retry import with_retry

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_RETRY_COUNT = 3
DEFAULT_RETRY_DELAY = 1.0


def _is_transient_status(status_code: int) -> bool:
    return status_code == 429 or status_code >= 500


class MLBStatsClient:
    """Low-level client for statsapi.mlb.com and www.mlb.com.

    The underlying httpx.Client is created lazily and shared across threads
    (request handlers and the pre-warm scheduler).
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        retry_count: int = DEFAULT_RETRY_COUNT,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        transport: httpx.BaseTransport | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._timeout = timeout
        self._retry_count = retry_count
        self._retry_delay = retry_delay
        self._transport = transport
        self._sleep = sleep
        self._client: httpx.Client | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings) -> "MLBStatsClient":
        return cls(
            timeout=settings.mlb_timeout,
            retry_count=settings.mlb_retry_count,
            retry_delay=settings.mlb_retry_delay,
        )

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            with self._lock:
                # Double-check after acquiring lock
                if self._client is None:
                    self._client = httpx.Client(
                        timeout=self._timeout,
                        follow_redirects=True,
                        transport=self._transport,
                    )
        return self._client

    def _send(self, url: str, params: dict | None, headers: dict) -> httpx.Response:
        """Single GET. Raises UpstreamUnavailableError for retryable failures."""
        try:
            response = self._get_client().get(url, params=params, headers=headers)
        except httpx.TimeoutException as e:
            raise UpstreamUnavailableError(f"Timeout fetching {url}: {e}", url=url) from e
        except httpx.RequestError as e:
            raise UpstreamUnavailableError(f"Request failed for {url}: {e}", url=url) from e

        if response.is_success:
            logger.debug("[FETCH] %s", url.removeprefix(MLB_API_BASE_URL))
            return response

        message = f"HTTP {response.status_code} for {url}"
        if _is_transient_status(response.status_code):
            raise UpstreamUnavailableError(message, url=url, status_code=response.status_code)
        raise FetchError(message, url=url, status_code=response.status_code)

    def _request(
        self,
        url: str,
        params: dict | None = None,
        headers: dict | None = None,
        retry: bool = True,
    ) -> httpx.Response:
        headers = headers or API_HEADERS
        if not retry:
            return self._send(url, params, headers)
        try:
            return with_retry(
                lambda: self._send(url, params, headers),
                retries=self._retry_count,
                delay=self._retry_delay,
                retry_on=(UpstreamUnavailableError,),
                sleep=self._sleep,
            )
        except FetchError as e:
            logger.warning("[MLB] %s", e)
            raise

    def get_json(self, path: str, params: dict | None = None, retry: bool = True) -> dict:
        """GET a Stats API path (e.g. '/standings') and return the JSON body.

        Raises:
            FetchError: Non-2xx response or unreadable body
            UpstreamUnavailableError: Transient failure after all retries
        """
        url = f"{MLB_API_BASE_URL}{path}"
        response = self._request(url, params=params, headers=API_HEADERS, retry=retry)
        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(f"Invalid JSON from {url}", url=url) from e
        if not isinstance(data, dict):
            raise FetchError(f"Unexpected payload from {url}", url=url)
        return data

    def get_html(self, url: str) -> str:
        """GET a public mlb.com page with browser headers."""
        response = self._request(url, headers=BROWSER_HEADERS)
        return response.text

    def close(self) -> None:
        """Close the HTTP client."""
        with self._lock:
            if self._client:
                self._client.close()
                self._client = None
