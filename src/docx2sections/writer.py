"""Write sections to disk as individual HTML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from docx2sections.exceptions import WriteError
from docx2sections.naming import assign_filenames
from docx2sections.render import render_section_document
from docx2sections.schemas import Section, WrittenSection

logger = logging.getLogger(__name__)


def ensure_dest_dir(dest_dir: Path) -> Path:
    """Create ``dest_dir`` if missing. Only the leaf directory is created.

    Raises:
        WriteError: If the directory cannot be created or the path is a file.
    """
    try:
        dest_dir.mkdir(parents=False, exist_ok=True)
    except OSError as exc:
        raise WriteError(f"Cannot create destination {dest_dir}: {exc}") from exc
    return dest_dir


def write_sections(
    sections: Sequence[Section],
    dest_dir: str | Path,
    *,
    on_conflict: str = "overwrite",
) -> list[WrittenSection]:
    """Write each section as ``<dest_dir>/<name>.html``.

    Files are written in section order and existing files are replaced.
    A failure stops the run; files written before it are left in place.

    Args:
        sections: Sections produced by :func:`docx2sections.segmenter.segment`.
        dest_dir: Output directory. Its parent must already exist.
        on_conflict: Collision policy, see :func:`docx2sections.naming.assign_filenames`.

    Returns:
        One entry per file written, in write order.

    Raises:
        InputValidationError: If ``on_conflict`` is unknown.
        NameConflictError: If names collide under the error policy.
        WriteError: If the directory or a file cannot be written.
    """
    dest = Path(dest_dir)
    filenames = assign_filenames(sections, on_conflict=on_conflict)
    ensure_dest_dir(dest)

    written: list[WrittenSection] = []
    for section, filename in zip(sections, filenames):
        path = dest / filename
        document = render_section_document(section.content)
        try:
            path.write_text(document, encoding="utf-8")
        except OSError as exc:
            raise WriteError(f"Cannot write section {section.name!r} to {path}: {exc}") from exc
        logger.debug("Wrote %s (%d nodes)", path, len(section))
        written.append(
            WrittenSection(
                name=section.name,
                filename=filename,
                path=path,
                node_count=len(section),
            )
        )

    logger.info("Wrote %d section files to %s", len(written), dest)
    return written
