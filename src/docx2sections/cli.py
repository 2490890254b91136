"""Command line entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from docx2sections.config import (
    CONFLICT_POLICIES,
    DOCX2SECTIONS_DEST_DIR,
    DOCX2SECTIONS_LOG_LEVEL,
    DOCX2SECTIONS_ON_CONFLICT,
    LOG_LEVELS,
)
from docx2sections.exceptions import Docx2SectionsError
from docx2sections.splitting import SplitOptions, split_document
from docx2sections.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docx2sections",
        description="Split a Word document into one HTML file per heading.",
    )
    parser.add_argument("--file", required=True, help="Path to the .docx (or converted .html) document")
    parser.add_argument(
        "--dest",
        default=str(DOCX2SECTIONS_DEST_DIR),
        help="Destination folder (default: %(default)s)",
    )
    parser.add_argument("--html", action="store_true", help="Treat --file as already-converted HTML")
    parser.add_argument(
        "--on-conflict",
        choices=CONFLICT_POLICIES,
        default=DOCX2SECTIONS_ON_CONFLICT,
        help="What to do when two headings give the same file name (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=DOCX2SECTIONS_LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    options = SplitOptions(
        dest_dir=Path(args.dest),
        on_conflict=args.on_conflict,
        source_is_html=args.html,
    )
    try:
        result = split_document(args.file, options)
    except Docx2SectionsError as exc:
        logger.debug("Split failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for section in result.sections:
        print(section.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
