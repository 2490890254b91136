"""docx2sections: split Word documents into per-heading HTML files."""

from docx2sections.exceptions import (
    ConversionError,
    Docx2SectionsError,
    InputValidationError,
    NameConflictError,
    SegmentationError,
    WriteError,
)
from docx2sections.schemas import Section, SplitResult, WrittenSection
from docx2sections.segmenter import segment
from docx2sections.splitting import SplitOptions, split_document, split_html
from docx2sections.writer import write_sections

__all__ = [
    "ConversionError",
    "Docx2SectionsError",
    "InputValidationError",
    "NameConflictError",
    "Section",
    "SegmentationError",
    "SplitOptions",
    "SplitResult",
    "WriteError",
    "WrittenSection",
    "segment",
    "split_document",
    "split_html",
    "write_sections",
]
