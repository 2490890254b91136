"""Split pipeline: Word document -> HTML -> sections -> files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from docx2sections.config import DOCX2SECTIONS_DEST_DIR, DOCX2SECTIONS_ON_CONFLICT
from docx2sections.converter import convert_docx_to_html
from docx2sections.exceptions import InputValidationError
from docx2sections.html_utils import block_children, find_document_root, parse_html
from docx2sections.schemas import Section, SplitResult
from docx2sections.segmenter import segment
from docx2sections.writer import write_sections

logger = logging.getLogger(__name__)

_HTML_SUFFIXES = (".html", ".htm")


@dataclass
class SplitOptions:
    """Options for a split run.

    Attributes:
        dest_dir: Directory to write section files into.
        on_conflict: What to do when sections share a file name
            ("overwrite", "suffix" or "error").
        source_is_html: Treat the source as already-converted HTML. When
            False the type is taken from the file extension.
    """

    dest_dir: Path = DOCX2SECTIONS_DEST_DIR
    on_conflict: str = DOCX2SECTIONS_ON_CONFLICT
    source_is_html: bool = False


def split_html(html: str) -> list[Section]:
    """Parse HTML and segment the children of its body."""
    root = find_document_root(parse_html(html))
    return segment(block_children(root))


def load_source_html(source: Path, *, source_is_html: bool = False) -> str:
    """Return HTML for ``source``, converting Word documents with mammoth.

    Raises:
        InputValidationError: If the file is missing, unreadable, not UTF-8
            or of an unknown type.
        ConversionError: If Word conversion fails.
    """
    suffix = source.suffix.lower()
    if source_is_html or suffix in _HTML_SUFFIXES:
        if not source.is_file():
            raise InputValidationError(f"Document not found: {source}")
        try:
            return source.read_text(encoding="utf-8")
        except (UnicodeDecodeError, OSError) as exc:
            raise InputValidationError(f"Cannot read {source}: {exc}") from exc
    if suffix == ".docx":
        return convert_docx_to_html(source)
    raise InputValidationError(
        f"Unsupported source type {suffix or '(none)'!r}; expected .docx or .html"
    )


def split_document(source: str | Path, options: SplitOptions | None = None) -> SplitResult:
    """Split a document into one HTML file per heading.

    The whole document is converted and segmented before anything is
    written, so input errors leave the destination untouched.

    Args:
        source: Path to a .docx file, or an HTML file.
        options: Run options. Uses defaults if None.

    Returns:
        A report of the files written.
    """
    opts = options or SplitOptions()
    source_path = Path(source)

    html = load_source_html(source_path, source_is_html=opts.source_is_html)
    sections = split_html(html)
    logger.info("Found %d sections in %s", len(sections), source_path.name)

    written = write_sections(sections, opts.dest_dir, on_conflict=opts.on_conflict)
    return SplitResult(source=source_path, dest_dir=Path(opts.dest_dir), sections=written)
