"""Local configuration for docx2sections."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_DEST_DIR = "./output"
DEFAULT_ON_CONFLICT = "overwrite"
DEFAULT_LOG_LEVEL = "INFO"

CONFLICT_POLICIES = ("overwrite", "suffix", "error")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
ORPHAN_SECTION_NAME = "orphan"
HEADING_STYLE = "h1,h2,h3,h4,h5,h6 {font-size: 1rem; font-weight: bold}"
HTML_PARSER = "lxml"

DOCX2SECTIONS_DEST_DIR = Path(os.getenv("DOCX2SECTIONS_DEST_DIR", DEFAULT_DEST_DIR)).expanduser()
DOCX2SECTIONS_ON_CONFLICT = os.getenv("DOCX2SECTIONS_ON_CONFLICT", DEFAULT_ON_CONFLICT)
DOCX2SECTIONS_LOG_LEVEL = os.getenv("DOCX2SECTIONS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
