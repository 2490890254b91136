"""Render sections into standalone HTML documents."""

from __future__ import annotations

from typing import Iterable

from bs4.element import Tag
from lxml import html as lxml_html

from docx2sections.config import HEADING_STYLE

_DOCTYPE = "<!DOCTYPE html>"
_SHELL = (
    _DOCTYPE + "<html>"
    "<head><style>{style}</style></head>"
    "<body>{body}</body>"
    "</html>"
)


def render_nodes(nodes: Iterable[Tag]) -> str:
    """Serialize nodes back to markup, in order."""
    return "".join(str(node) for node in nodes)


def wrap_in_shell(markup: str) -> str:
    """Place ``markup`` in the fixed document shell."""
    return _SHELL.format(style=HEADING_STYLE, body=markup)


def format_document(html: str) -> str:
    """Break a full document onto lines for readability.

    Whitespace is only added between elements, never inside text, so the
    rendered content is unchanged.
    """
    tree = lxml_html.document_fromstring(html)
    return lxml_html.tostring(
        tree, pretty_print=True, doctype=_DOCTYPE, encoding="unicode"
    )


def render_section_document(nodes: Iterable[Tag]) -> str:
    """Full output document for one section's nodes."""
    return format_document(wrap_in_shell(render_nodes(nodes)))
