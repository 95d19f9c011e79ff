"""Element interface read by the extractor, and its BeautifulSoup adapter.

The extractor only ever needs five things from a node: a descendant query, its
text, its parent, its next element sibling and its element children. Any object
providing those works; BeautifulSoup trees are wrapped in `SoupNode` so callers
can hand over a parsed page directly.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, Sequence

from bs4 import BeautifulSoup, Tag

from .errors import InvalidDocumentError


REQUIRED_CAPABILITIES = ("select", "text", "parent", "next_sibling", "children")


class ElementHandle(Protocol):
    """A read-only handle to one element of a document tree."""

    def select(self, selector: str) -> Sequence["ElementHandle"]:
        ...

    @property
    def text(self) -> str:
        ...

    @property
    def parent(self) -> Optional["ElementHandle"]:
        ...

    @property
    def next_sibling(self) -> Optional["ElementHandle"]:
        ...

    @property
    def children(self) -> Sequence["ElementHandle"]:
        ...


class SoupNode:
    """Wrap a bs4 `Tag` (or `BeautifulSoup`) as an `ElementHandle`.

    Text nodes are skipped for `next_sibling` and `children`, mirroring the DOM's
    element-only accessors. Two wrappers are equal when they wrap the same tag.
    """

    __slots__ = ("tag",)

    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    def select(self, selector: str) -> List["SoupNode"]:
        # soupsieve raises SelectorSyntaxError for malformed selectors; callers isolate it.
        return [SoupNode(t) for t in self.tag.select(selector)]

    @property
    def text(self) -> str:
        return self.tag.get_text()

    @property
    def parent(self) -> Optional["SoupNode"]:
        p = self.tag.parent
        return SoupNode(p) if p is not None else None

    @property
    def next_sibling(self) -> Optional["SoupNode"]:
        for sib in self.tag.next_siblings:
            if isinstance(sib, Tag):
                return SoupNode(sib)
        return None

    @property
    def children(self) -> List["SoupNode"]:
        return [SoupNode(c) for c in self.tag.children if isinstance(c, Tag)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SoupNode):
            return NotImplemented
        return self.tag is other.tag

    def __hash__(self) -> int:
        return id(self.tag)

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag.name}>)"


def missing_capabilities(obj: Any) -> List[str]:
    """Names from REQUIRED_CAPABILITIES that `obj` does not provide."""
    missing = [name for name in REQUIRED_CAPABILITIES if not hasattr(obj, name)]
    if "select" not in missing and not callable(getattr(obj, "select")):
        missing.append("select")
    return missing


def as_document(obj: Any) -> ElementHandle:
    """Return `obj` as an `ElementHandle`, wrapping bs4 trees.

    Raises:
        InvalidDocumentError: if `obj` is None or lacks the element capabilities.
    """
    if obj is None:
        raise InvalidDocumentError("document is None")

    if isinstance(obj, SoupNode):
        return obj
    if isinstance(obj, Tag):
        return SoupNode(obj)

    missing = missing_capabilities(obj)
    if missing:
        raise InvalidDocumentError(
            f"{type(obj).__name__} is not a document: missing {', '.join(missing)}"
        )
    return obj


def parse_html(markup: str) -> BeautifulSoup:
    """Parse raw markup for callers; the extractor itself never parses HTML."""
    return BeautifulSoup(markup or "", "html.parser")
