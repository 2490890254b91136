"""Logging setup shared by the command line entry points."""

from __future__ import annotations

import logging

from docx2sections.config import DOCX2SECTIONS_LOG_LEVEL

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | int = DOCX2SECTIONS_LOG_LEVEL) -> None:
    """Attach a stderr handler to the package logger.

    Calling again only updates the level.
    """
    package_logger = logging.getLogger("docx2sections")
    package_logger.setLevel(level)
    if package_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
