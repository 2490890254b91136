"""Shared HTML utilities for converted document processing."""

from __future__ import annotations

from docx2sections.config import HTML_PARSER

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


def parse_html(html: str) -> BeautifulSoup:
    """Parse converter output into a fresh document tree."""
    return BeautifulSoup(html, HTML_PARSER)


def find_document_root(soup: BeautifulSoup) -> Tag:
    """Find the element whose children are the document's blocks.

    Searches for the root in the following order:
    1. <body> element
    2. The soup itself as fallback
    """
    if soup.body:
        return soup.body
    return soup


def block_children(root: Tag) -> tuple[Tag, ...]:
    """Return the element children of ``root`` in document order.

    Bare text and comments between blocks are skipped.
    """
    return tuple(child for child in root.children if isinstance(child, Tag))
