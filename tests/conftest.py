"""Shared fixtures and a minimal duck-typed document tree.

`FakeNode` / `FakeDocument` implement the element interface without bs4 so
tests can inject faults (raising selectors, raising tree walks).
"""

from typing import Dict, List, Optional, Union

import pytest
from bs4 import BeautifulSoup


class FakeNode:
    def __init__(self, text: str = "", children: Optional[List["FakeNode"]] = None, broken: bool = False):
        self._own_text = text
        self._children = list(children or [])
        self._parent: Optional["FakeNode"] = None
        self.broken = broken
        for c in self._children:
            c._parent = self

    def select(self, selector: str) -> List["FakeNode"]:
        return []

    @property
    def text(self) -> str:
        return self._own_text + "".join(c.text for c in self._children)

    @property
    def parent(self) -> Optional["FakeNode"]:
        return self._parent

    @property
    def next_sibling(self) -> Optional["FakeNode"]:
        if self.broken:
            raise RuntimeError("detached node")
        if self._parent is None:
            return None
        siblings = self._parent._children
        idx = siblings.index(self)
        return siblings[idx + 1] if idx + 1 < len(siblings) else None

    @property
    def children(self) -> List["FakeNode"]:
        return list(self._children)


class FakeDocument(FakeNode):
    """Root node whose `select` answers from a fixed table (or raises)."""

    def __init__(self, children: List[FakeNode], selections: Dict[str, Union[List[FakeNode], Exception]]):
        super().__init__(children=children)
        self.selections = selections

    def select(self, selector: str) -> List[FakeNode]:
        hit = self.selections.get(selector, [])
        if isinstance(hit, Exception):
            raise hit
        return hit


@pytest.fixture
def soup():
    """Parse markup with the same parser the service uses."""
    def _parse(markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup, "html.parser")
    return _parse
