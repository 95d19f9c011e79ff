"""HTTP retrieval of job pages.

Caller-side glue: the extractor never touches the network. Pages are fetched
with httpx, retrying with exponential backoff when the site rate-limits us.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Optional

import httpx

from .errors import FetchError

logger = logging.getLogger(__name__)

# Some job boards refuse requests without a browser-like user agent.
HEADERS: Dict[str, str] = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}


class PageFetcher:
    """Fetch HTML pages over HTTP."""

    def __init__(
        self,
        timeout_s: float = 20.0,
        max_retries: int = 3,
        backoff_s: float = 2.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._timeout = timeout_s
        self._max_retries = max_retries
        self._backoff_s = backoff_s
        self._transport = transport

    def fetch(self, url: str) -> str:
        """Return the body of `url` as text.

        Raises:
            FetchError: on a non-2xx response (after 429 retries) or a transport error.
        """
        retries = 0
        with httpx.Client(
            timeout=self._timeout,
            follow_redirects=True,
            headers=HEADERS,
            transport=self._transport,
        ) as client:
            while True:
                try:
                    resp = client.get(url)
                    resp.raise_for_status()
                    break
                except httpx.HTTPStatusError as exc:
                    if exc.response.status_code == 429 and retries < self._max_retries:
                        sleep_s = self._backoff_s * (2**retries)
                        logger.debug("Rate limited by %s, retrying in %.1fs", url, sleep_s)
                        time.sleep(sleep_s)
                        retries += 1
                        continue
                    raise FetchError(f"HTTP {exc.response.status_code} for {url}") from exc
                except (httpx.HTTPError, httpx.InvalidURL) as exc:
                    raise FetchError(f"Request to {url} failed: {exc}") from exc

        logger.debug("Fetched %s (%d bytes)", url, len(resp.content))
        return resp.text
