"""
Document Query Facade.

Analyzers only talk to a parsed page through `DocumentQuery`, so any parser
backend can satisfy them. `SoupDocument` is the BeautifulSoup backend used by
the command line and the tests.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from bs4 import BeautifulSoup, Comment, Declaration, Doctype, ProcessingInstruction, Tag

AttributePredicate = Callable[[Optional[str]], bool]

# Subtrees that never count as readable page content.
NON_CONTENT_TAGS = frozenset([
    "script", "style", "noscript", "template", "nav", "footer", "aside", "header",
    "head", "title",
])

# Elements that start a new line of text; inline elements join their neighbours.
BLOCK_TAGS = frozenset([
    "address", "article", "blockquote", "br", "dd", "div", "dl", "dt", "figcaption",
    "figure", "form", "h1", "h2", "h3", "h4", "h5", "h6", "hr", "li", "main", "ol",
    "p", "pre", "section", "table", "td", "th", "tr", "ul",
])

_NON_TEXT_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


class DocumentQuery(ABC):
    """Read-only query capability over a parsed markup tree."""

    @abstractmethod
    def select(self, tag: str) -> List[Any]:
        """All elements named `tag`, in document order."""

    @abstractmethod
    def select_where(self, tag: str, attribute: str, predicate: AttributePredicate) -> List[Any]:
        """
        Elements named `tag` for which `predicate` accepts the value of
        `attribute`. The predicate receives None when the attribute is absent.
        """

    @abstractmethod
    def attribute(self, element: Any, name: str) -> Optional[str]:
        """Attribute value, or None when the element does not carry it."""

    @abstractmethod
    def text(self, element: Any = None) -> str:
        """Text of `element`, or the visible body text when no element is given."""

    def count(self, tag: str, attribute: Optional[str] = None,
              predicate: Optional[AttributePredicate] = None) -> int:
        if attribute is None:
            return len(self.select(tag))
        if predicate is None:
            predicate = _is_present
        return len(self.select_where(tag, attribute, predicate))

    def first_attribute(self, tag: str, attribute: str, value: str, name: str) -> Optional[str]:
        matches = self.select_where(tag, attribute, lambda v: v == value)
        if not matches:
            return None
        return self.attribute(matches[0], name)


def _is_present(value: Optional[str]) -> bool:
    return value is not None


class SoupDocument(DocumentQuery):
    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    @property
    def soup(self) -> BeautifulSoup:
        return self._soup

    def select(self, tag: str) -> List[Tag]:
        return self._soup.find_all(tag)

    def select_where(self, tag: str, attribute: str, predicate: AttributePredicate) -> List[Tag]:
        return [el for el in self._soup.find_all(tag) if predicate(self.attribute(el, attribute))]

    def attribute(self, element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if value is None:
            return None
        # bs4 splits multi-valued attributes such as rel and class
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return str(value)

    def text(self, element: Tag = None) -> str:
        if element is not None:
            return element.get_text()
        root = self._soup.body or self._soup
        parts = []
        for node in root.descendants:
            if isinstance(node, Tag):
                if node.name in BLOCK_TAGS and not _inside_non_content(node):
                    parts.append("\n")
                continue
            if isinstance(node, _NON_TEXT_STRINGS) or _inside_non_content(node):
                continue
            parts.append(str(node))
        return "".join(parts)


def _inside_non_content(node) -> bool:
    return any(parent.name in NON_CONTENT_TAGS for parent in node.parents)


def parse_document(markup: str | bytes) -> SoupDocument:
    return SoupDocument(BeautifulSoup(markup, "html.parser"))
