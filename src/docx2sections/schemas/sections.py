"""Section model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from bs4.element import Tag


@dataclass(frozen=True)
class Section:
    """A named run of top-level nodes bounded by headings.

    The section does not own copies of its nodes. It covers the half-open
    range ``[start, stop)`` of the node tuple it was cut from.
    """

    name: str
    start: int
    stop: int
    nodes: Sequence[Tag]

    @property
    def content(self) -> tuple[Tag, ...]:
        return tuple(self.nodes[self.start : self.stop])

    def __len__(self) -> int:
        return self.stop - self.start
