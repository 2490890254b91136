"""Test setup for docx2sections."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from bs4.element import Tag

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from docx2sections.html_utils import block_children, find_document_root, parse_html  # noqa: E402


def blocks_from(html: str) -> tuple[Tag, ...]:
    """Parse an HTML fragment and return the body's element children."""
    return block_children(find_document_root(parse_html(html)))


@pytest.fixture
def blocks():
    """Factory turning an HTML fragment into a tuple of block tags."""
    return blocks_from


@pytest.fixture
def scenario_a_html() -> str:
    """Leading paragraph, then two headed sections."""
    return """
    <p>Preamble</p>
    <h1>Intro</h1>
    <p>Intro body</p>
    <h2>Details</h2>
    <ul><li>one</li><li>two</li></ul>
    """
