import os
from typing import Any, Dict, Optional

import httpx
from loguru import logger
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from facr_scraper.config.settings import settings
from facr_scraper.models.enums import Source

# Define common HTTP status codes that warrant a retry
RETRYABLE_STATUS_CODES = {408, 429, 500, 502, 503, 504}

# fotbal.cz answers 404 to clients that do not look like a browser
BROWSER_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/126.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8",
    "Accept-Language": "cs-CZ,cs;q=0.9,en;q=0.8",
}


class ScraperError(Exception):
    """Custom exception for scraper-related errors."""

    pass


class UpstreamStatusError(ScraperError):
    """An upstream page answered with something other than 200."""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"Received status code {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class RateLimitError(UpstreamStatusError):
    """Exception raised for rate limit errors (429)."""

    def __init__(self, url: str):
        super().__init__(429, url)


def build_client(headers: Optional[Dict[str, str]] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout),
        follow_redirects=True,
        headers=headers,
    )


class BaseScraper:
    """Shared HTTP plumbing for the fotbal.cz, is.fotbal.cz and search clients."""

    source: Source = Source.UNKNOWN
    headers: Dict[str, str] = {}

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._owns_client = client is None
        self.client = client or build_client()

    @retry(
        stop=stop_after_attempt(settings.http_max_attempts),
        wait=wait_exponential(multiplier=settings.http_retry_backoff, min=0, max=10),
        retry=retry_if_exception_type(
            (httpx.RequestError, httpx.HTTPStatusError, RateLimitError)
        ),
        reraise=True,  # Reraise the exception after max attempts
    )
    async def _send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Sends one request; retryable failures raise so tenacity retries them."""
        logger.debug(f"{self.source.value}: {method} {url} params={params}")
        response = await self.client.request(
            method, url, headers={**self.headers, **(headers or {})}, params=params
        )
        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            logger.warning(
                f"Rate limit hit (429) for {self.source.value} at {url}. Retry-After: {retry_after}"
            )
            raise RateLimitError(url)
        if response.status_code in RETRYABLE_STATUS_CODES:
            logger.warning(
                f"Retryable status {response.status_code} from {self.source.value} at {url}"
            )
            response.raise_for_status()
        return response

    async def _make_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Makes an HTTP request with retry logic; anything but 200 is an error."""
        try:
            response = await self._send(method, url, headers=headers, params=params)
        except RateLimitError:
            raise
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Max retries exceeded for {self.source.value} request to {url}: {e.response.status_code}"
            )
            raise UpstreamStatusError(e.response.status_code, url) from e
        except httpx.RequestError as e:
            logger.error(f"Request error for {self.source.value} at {url}: {e!r}")
            raise ScraperError(f"Request to {url} failed: {e!r}") from e

        if response.status_code != httpx.codes.OK:
            logger.warning(
                f"Non-200 response from {self.source.value} at {url}: {response.status_code}"
            )
            raise UpstreamStatusError(response.status_code, url)
        logger.debug(f"Request successful: {response.status_code} for {url}")
        return response

    async def fetch_html(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> str:
        response = await self._make_request("GET", url, headers=headers, params=params)
        return response.text

    def save_debug_html(self, filename: str, body: str) -> None:
        """Writes a fetched document to the debug directory when enabled."""
        if not settings.debug_save_html:
            return
        try:
            os.makedirs(settings.debug_html_dir, exist_ok=True)
            path = os.path.join(settings.debug_html_dir, filename)
            with open(path, "w", encoding="utf-8") as f:
                f.write(body)
            logger.info(f"Saved debug HTML: {path}")
        except OSError as e:
            logger.error(f"Failed writing debug HTML {filename}: {e}")

    async def close(self):
        """Closes the underlying HTTP client if this scraper created it."""
        if self._owns_client:
            await self.client.aclose()
            logger.info(f"Closed HTTP client for {self.source.value}")
