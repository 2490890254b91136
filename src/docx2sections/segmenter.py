"""Partition a flat run of block nodes into heading-bounded sections."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from bs4 import BeautifulSoup
from bs4.element import Tag

from docx2sections.config import HEADING_TAGS, ORPHAN_SECTION_NAME
from docx2sections.exceptions import InputValidationError, SegmentationError
from docx2sections.schemas import Section


@dataclass
class _OpenSection:
    name: str
    start: int


def is_heading(node: Tag) -> bool:
    """Return True when ``node`` is one of h1..h6."""
    return (node.name or "").lower() in HEADING_TAGS


def heading_text(node: Tag) -> str:
    """Text content of a heading, empty when it has none."""
    return node.get_text() or ""


def segment(children: Sequence[Tag]) -> list[Section]:
    """Split ``children`` into sections, one per heading.

    Every heading opens a section that holds the heading itself and all
    following non-heading nodes up to the next heading. Nodes ahead of the
    first heading go into a section named ``"orphan"``.

    Args:
        children: Direct element children of the document root, in order.

    Returns:
        Sections in input order. Their contents concatenate back to
        ``children`` exactly.

    Raises:
        InputValidationError: If ``children`` is not a sequence of tags.
        SegmentationError: If a non-heading node arrives with no open section.
    """
    nodes = _validate(children)
    sections: list[Section] = []
    current: _OpenSection | None = None

    for index, node in enumerate(nodes):
        if is_heading(node):
            if current is not None:
                sections.append(_close(current, index, nodes))
            current = _OpenSection(name=heading_text(node), start=index)
        elif index == 0:
            current = _OpenSection(name=ORPHAN_SECTION_NAME, start=index)
        elif current is None:
            raise SegmentationError(
                f"Node <{node.name}> at index {index} has no open section"
            )

    if current is not None:
        sections.append(_close(current, len(nodes), nodes))
    return sections


def _close(current: _OpenSection, stop: int, nodes: tuple[Tag, ...]) -> Section:
    return Section(name=current.name, start=current.start, stop=stop, nodes=nodes)


def _validate(children: Sequence[Tag]) -> tuple[Tag, ...]:
    # A soup or tag is iterable but is a tree, not a run of blocks.
    if isinstance(children, (str, bytes, BeautifulSoup, Tag)) or not isinstance(
        children, Sequence
    ):
        raise InputValidationError(
            f"Expected a sequence of tags, got {type(children).__name__}"
        )
    for index, node in enumerate(children):
        if not isinstance(node, Tag):
            raise InputValidationError(
                f"Item {index} is {type(node).__name__}, not a tag"
            )
    return tuple(children)
