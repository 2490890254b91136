"""Shared schemas for docx2sections."""

from docx2sections.schemas.output import SplitResult, WrittenSection
from docx2sections.schemas.sections import Section

__all__ = ["Section", "SplitResult", "WrittenSection"]
