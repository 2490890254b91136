"""Convert Word documents to HTML."""

from __future__ import annotations

import logging
from pathlib import Path

import mammoth

from docx2sections.exceptions import ConversionError, InputValidationError

logger = logging.getLogger(__name__)


def convert_docx_to_html(docx_path: Path) -> str:
    """Convert a .docx file to a flat HTML fragment using mammoth.

    Mammoth maps Word heading styles to h1..h6 and body paragraphs to <p>,
    producing the flat block run the segmenter expects. Conversion messages
    (unrecognised styles and the like) are logged as warnings.

    Args:
        docx_path: Path to the Word document.

    Returns:
        HTML fragment without <html> or <body> wrappers.

    Raises:
        InputValidationError: If the file does not exist.
        ConversionError: If mammoth cannot read or convert the file.
    """
    if not docx_path.is_file():
        raise InputValidationError(f"Document not found: {docx_path}")

    try:
        with docx_path.open("rb") as docx_file:
            result = mammoth.convert_to_html(docx_file)
    except Exception as exc:
        raise ConversionError(f"Could not convert {docx_path}: {exc}") from exc

    for message in result.messages:
        logger.warning("%s: %s", docx_path.name, message.message)
    return result.value
