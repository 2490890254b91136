"""Output file naming for sections."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable

from docx2sections.config import CONFLICT_POLICIES
from docx2sections.exceptions import InputValidationError, NameConflictError
from docx2sections.schemas import Section

logger = logging.getLogger(__name__)

_EXTENSION = ".html"


def section_filename(section: Section, position: int) -> str:
    """Return the file name for ``section``.

    The name is the section name with surrounding whitespace removed plus
    ``.html``. Unsafe characters are not escaped. A name that strips to
    nothing falls back to ``section-NNN.html`` using the 1-based ``position``.
    """
    stem = section.name.strip()
    if not stem:
        stem = f"section-{position:03d}"
    return f"{stem}{_EXTENSION}"


def assign_filenames(
    sections: Iterable[Section], *, on_conflict: str = "overwrite"
) -> list[str]:
    """Compute one file name per section, applying the collision policy.

    Policies:
        overwrite: keep duplicate names; later sections replace earlier files.
        suffix: rename the second and later duplicates ``name-2.html``,
            ``name-3.html`` and so on, skipping names already taken.
        error: raise before anything is written.

    Raises:
        InputValidationError: If ``on_conflict`` is not a known policy.
        NameConflictError: Under the error policy, if any name repeats.
    """
    if on_conflict not in CONFLICT_POLICIES:
        raise InputValidationError(
            f"Unknown conflict policy {on_conflict!r}; expected one of {', '.join(CONFLICT_POLICIES)}"
        )

    names = [
        section_filename(section, position)
        for position, section in enumerate(sections, start=1)
    ]
    counts = Counter(names)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if not duplicates:
        return names

    if on_conflict == "error":
        raise NameConflictError(
            f"Sections share output file names: {', '.join(duplicates)}"
        )
    if on_conflict == "overwrite":
        for name in duplicates:
            logger.warning(
                "%d sections map to %s; only the last one will be kept",
                counts[name],
                name,
            )
        return names

    taken = set(names)
    seen: set[str] = set()
    resolved: list[str] = []
    for name in names:
        if name not in seen:
            seen.add(name)
            resolved.append(name)
            continue
        stem = name[: -len(_EXTENSION)]
        n = 2
        while f"{stem}-{n}{_EXTENSION}" in taken:
            n += 1
        renamed = f"{stem}-{n}{_EXTENSION}"
        taken.add(renamed)
        seen.add(renamed)
        logger.info("Renamed duplicate %s to %s", name, renamed)
        resolved.append(renamed)
    return resolved
