"""Exceptions raised by the engine.

Ordinary "nothing found" outcomes are never exceptions; the extractor returns None.
"""

from __future__ import annotations


class ExtractionError(Exception):
    """Base exception for job description extraction errors."""
    pass


class InvalidDocumentError(ExtractionError, TypeError):
    """Raised when the supplied document lacks the element capabilities we need."""
    pass


class FetchError(ExtractionError):
    """Raised when a page cannot be retrieved over HTTP."""
    pass
