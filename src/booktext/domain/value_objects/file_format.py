"""File format identifiers for book parsers."""

from enum import StrEnum


class FileFormat(StrEnum):
    """Book container formats. PDF, DOCX and TXT are reserved identifiers."""

    EPUB = "epub"
    MARKDOWN = "markdown"
    PDF = "pdf"
    DOCX = "docx"
    TXT = "txt"
