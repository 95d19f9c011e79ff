"""Utility helpers shared across the engine."""

from __future__ import annotations

from typing import Iterable, List


def uniq_preserve_order(items: Iterable[str]) -> List[str]:
    """Deduplicate while preserving first-seen order."""
    seen = set()
    out: List[str] = []
    for it in items:
        if not it:
            continue
        key = it.strip().lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(it)
    return out


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    """True if any phrase is a substring of `text` (case-insensitive)."""
    t = (text or "").lower()
    return any(p in t for p in phrases)
