"""Message handling around the extractor.

Callers send a dict with an `action` and get back `{success, text?, error?, site?}`,
where `site` is the catalog category of a recognized job-board URL.
The only action is `detectJobDescription`, carrying either an `html` page
snapshot or a `url` to fetch.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from .catalog import detect_site
from .document import parse_html
from .errors import ExtractionError, FetchError
from .extractor import DescriptionExtractor
from .fetch import PageFetcher
from .models import ExtractionResponse

logger = logging.getLogger(__name__)

DETECT_ACTION = "detectJobDescription"
NOT_FOUND_ERROR = "No job description detected"
NO_RESULTS_ERROR = "No results"


class DescriptionService:
    """Answer extraction requests using a shared extractor and fetcher."""

    def __init__(
        self,
        extractor: Optional[DescriptionExtractor] = None,
        fetcher: Optional[PageFetcher] = None,
    ) -> None:
        self.extractor = extractor or DescriptionExtractor()
        self.fetcher = fetcher or PageFetcher()

    def handle(self, message: Mapping[str, Any]) -> Dict[str, Any]:
        """Dispatch one message and return the wire-shaped response."""
        if not isinstance(message, Mapping):
            return ExtractionResponse(success=False, error="Invalid message").to_message()

        action = message.get("action")
        if action == DETECT_ACTION:
            resp = self.detect(html=message.get("html"), url=message.get("url"))
        else:
            resp = ExtractionResponse(success=False, error=f"Unknown action: {action}")
        return resp.to_message()

    def detect(self, html: Optional[str] = None, url: Optional[str] = None) -> ExtractionResponse:
        """Extract a description from an HTML snapshot, or from `url` when no snapshot is given."""
        if html is None and not url:
            return ExtractionResponse(success=False, error=NO_RESULTS_ERROR)
        if url is not None and not isinstance(url, str):
            return ExtractionResponse(success=False, error=f"url must be a string, got {type(url).__name__}")

        site = detect_site(url)
        if html is None:
            try:
                html = self.fetcher.fetch(url)
            except FetchError as exc:
                logger.info("Fetch failed: %s", exc)
                return ExtractionResponse(success=False, error=str(exc), site=site)

        if not isinstance(html, str):
            return ExtractionResponse(success=False, error=f"html must be a string, got {type(html).__name__}")

        try:
            text = self.extractor.extract(parse_html(html))
        except ExtractionError as exc:
            return ExtractionResponse(success=False, error=str(exc), site=site)

        if not text:
            return ExtractionResponse(success=False, error=NOT_FOUND_ERROR, site=site)
        return ExtractionResponse(success=True, text=text, site=site)
