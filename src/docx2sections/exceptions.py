"""Custom exceptions for docx2sections."""


class Docx2SectionsError(Exception):
    """Base exception for docx2sections operations."""


class InputValidationError(Docx2SectionsError):
    """Input to a split operation is malformed or missing."""


class SegmentationError(Docx2SectionsError):
    """Segmenter reached a state its invariants rule out."""


class ConversionError(Docx2SectionsError):
    """Error during document to HTML conversion."""


class NameConflictError(Docx2SectionsError):
    """Two sections resolve to the same output file name."""


class WriteError(Docx2SectionsError):
    """Error while creating the destination or writing a section file."""
