"""Job description extraction engine.

The package is structured so the decision logic stays small and testable:
- `catalog.py` holds the static selector catalog, heading keywords and job sites.
- `extractor.py` runs the selector and heading strategies over a document.
- `normalize.py` cleans whatever text a strategy produced.
- `document.py` adapts BeautifulSoup trees to the element interface the extractor reads.
- `service.py` and `fetch.py` are caller-side glue (message handling, HTTP retrieval).
"""

from .errors import ExtractionError, FetchError, InvalidDocumentError
from .extractor import DescriptionExtractor, extract
from .normalize import clean_text

__all__ = [
    "DescriptionExtractor",
    "ExtractionError",
    "FetchError",
    "InvalidDocumentError",
    "clean_text",
    "extract",
]
