"""Locate the job description inside an arbitrary document.

Two strategies run in fixed order:

1. Selector strategy: walk the selector catalog and take the first selector
   that matches anything, joining the text of all its matches.
2. Heading strategy: find a heading (or bold/strong run) whose text contains a
   description keyword, then take the content that follows it. Three shapes
   are tried per heading: the next sibling, the parent's next sibling, and the
   parent's remaining children.

Every selector and every heading candidate is tried in isolation and reported
as an `Attempt`. A broken selector or an odd tree shape only costs that one
attempt; the first successful attempt wins.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence

from .catalog import HEADING_SELECTOR
from .document import ElementHandle, as_document
from .errors import InvalidDocumentError
from .models import Attempt, ExtractorConfig
from .normalize import clean_text
from .utils import contains_any

logger = logging.getLogger(__name__)


# --- heading tiers --------------------------------------------------------

def next_sibling_text(heading: ElementHandle) -> Optional[str]:
    """Text of the element right after the heading."""
    sib = heading.next_sibling
    if sib is None:
        return None
    return clean_text(sib.text) or None


def parent_next_sibling_text(heading: ElementHandle) -> Optional[str]:
    """Text of the element right after the heading's parent."""
    parent = heading.parent
    if parent is None or parent.next_sibling is None:
        return None
    return clean_text(parent.next_sibling.text) or None


def trailing_children_text(heading: ElementHandle) -> Optional[str]:
    """Joined text of the parent's children that come after the heading."""
    parent = heading.parent
    if parent is None:
        return None

    parts: List[str] = []
    found = False
    for child in parent.children:
        if found:
            parts.append(child.text + "\n")
        elif child == heading:
            found = True

    return clean_text("".join(parts)) or None


HEADING_TIERS: Sequence[Callable[[ElementHandle], Optional[str]]] = (
    next_sibling_text,
    parent_next_sibling_text,
    trailing_children_text,
)


def first_match(attempts: Iterable[Attempt]) -> Optional[Attempt]:
    """Consume attempts lazily and return the first match, logging faults on the way."""
    for attempt in attempts:
        if attempt.outcome == "fault":
            logger.debug("Skipping %r: %s", attempt.source, attempt.error)
        elif attempt.ok:
            return attempt
    return None


def _describe(exc: Exception) -> str:
    return f"{type(exc).__name__}: {exc}"


class DescriptionExtractor:
    """Extract a cleaned job description from a document, or None."""

    def __init__(self, config: Optional[ExtractorConfig] = None) -> None:
        self.config = config or ExtractorConfig()
        self._selectors = self.config.selectors
        self._keywords = list(self.config.keywords)

    def extract(self, document: Any) -> Optional[str]:
        """Run the selector strategy, then the heading strategy.

        Args:
            document: A bs4 tree or any object with the `ElementHandle` capabilities.

        Returns:
            The cleaned description, or None when neither strategy found one.

        Raises:
            InvalidDocumentError: if `document` is None or not document-like.
        """
        doc = self._validate(document)

        text = self.parse_using_selectors(doc)
        if text:
            return text

        return self.parse_using_headings(doc)

    # --- selector strategy ------------------------------------------------

    def parse_using_selectors(self, doc: ElementHandle) -> Optional[str]:
        """Text of the first catalog selector that matches, or None."""
        attempt = first_match(self._try_selector(doc, s) for s in self._selectors)
        if attempt is None:
            return None
        logger.debug("Description found via selector %r", attempt.source)
        return attempt.text

    @staticmethod
    def _try_selector(doc: ElementHandle, selector: str) -> Attempt:
        try:
            elements = doc.select(selector)
            if not elements:
                return Attempt(source=selector, outcome="absent")
            combined = "".join(el.text + "\n" for el in elements)
        except Exception as exc:
            return Attempt(source=selector, outcome="fault", error=_describe(exc))
        return Attempt(source=selector, outcome="match", text=clean_text(combined))

    # --- heading strategy -------------------------------------------------

    def parse_using_headings(self, doc: ElementHandle) -> Optional[str]:
        """Text following the first keyword heading that has usable content, or None."""
        try:
            headings = doc.select(HEADING_SELECTOR)
        except Exception as exc:
            logger.debug("Heading query failed: %s", _describe(exc))
            return None

        attempt = first_match(self._try_heading(h) for h in headings)
        if attempt is None:
            return None
        logger.debug("Description found after heading %r", attempt.source)
        return attempt.text

    def _try_heading(self, heading: ElementHandle) -> Attempt:
        label = "<heading>"
        try:
            heading_text = heading.text
            label = heading_text.strip()[:80]
            if not contains_any(heading_text, self._keywords):
                return Attempt(source=label, outcome="absent")

            for tier in HEADING_TIERS:
                text = tier(heading)
                if text:
                    return Attempt(source=label, outcome="match", text=text)
        except Exception as exc:
            return Attempt(source=label, outcome="fault", error=_describe(exc))

        return Attempt(source=label, outcome="absent")

    # --- input validation -------------------------------------------------

    @staticmethod
    def _validate(document: Any) -> ElementHandle:
        try:
            return as_document(document)
        except InvalidDocumentError as exc:
            logger.warning("Rejected document: %s", exc)
            raise


def extract(document: Any, config: Optional[ExtractorConfig] = None) -> Optional[str]:
    """Extract a job description using the built-in (or given) configuration."""
    return DescriptionExtractor(config).extract(document)
