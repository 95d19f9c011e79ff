"""Text normalization for extracted descriptions.

The cleanup is a fixed sequence of regex passes. Order matters: whitespace is
collapsed before newlines, and leftover tags are stripped only after whitespace
has been normalized.
"""

from __future__ import annotations

import re
from typing import Optional


# Any whitespace except newline; "\s+" would fold line breaks into spaces too.
SPACE_RUN_RE = re.compile(r"[^\S\n]+")
NEWLINE_RUN_RE = re.compile(r"\n+")
TAG_RE = re.compile(r"<[^>]*>")


def _clean_once(text: str) -> str:
    t = text.strip()
    t = SPACE_RUN_RE.sub(" ", t)
    t = NEWLINE_RUN_RE.sub("\n", t)
    t = TAG_RE.sub("", t)
    return t.strip()


def clean_text(text: Optional[str]) -> str:
    """Trim, collapse whitespace and newlines, and strip stray `<...>` fragments.

    Empty or None input yields "". Stripping a tag can leave behind a fresh run
    of spaces (e.g. "a <br> b"), so the pass is repeated until the text stops
    changing; this keeps `clean_text(clean_text(s)) == clean_text(s)`.
    """
    if not text:
        return ""

    cleaned = _clean_once(text)
    while True:
        again = _clean_once(cleaned)
        if again == cleaned:
            return cleaned
        cleaned = again
