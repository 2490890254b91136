"""Split run output models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class WrittenSection(BaseModel):
    """A section file that was written to disk."""

    name: str
    filename: str
    path: Path
    node_count: int = Field(..., ge=1)


class SplitResult(BaseModel):
    """Report of one split run.

    Attributes:
        source: The document the sections were taken from.
        dest_dir: Directory the section files were written to.
        sections: One entry per write, in write order. Under the overwrite
            policy two entries may share a path; only the later one is on disk.
    """

    source: Path
    dest_dir: Path
    sections: list[WrittenSection] = Field(default_factory=list)

    @property
    def paths(self) -> list[Path]:
        """Distinct output paths, in first-write order."""
        seen: list[Path] = []
        for section in self.sections:
            if section.path not in seen:
                seen.append(section.path)
        return seen
