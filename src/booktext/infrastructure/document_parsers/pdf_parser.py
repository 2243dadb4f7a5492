"""Placeholder parser for .pdf: recognized by extension, not yet extracted."""

from booktext.domain.exceptions import ParseError
from booktext.domain.value_objects import FileFormat
from booktext.infrastructure.document_parsers.base import (
    BookFile,
    ParserCapabilities,
    ParseResult,
)


class PdfParser:
    """Claims .pdf files so they fail with a typed error instead of as unsupported."""

    format = FileFormat.PDF
    capabilities = ParserCapabilities(
        extensions=("pdf",),
        mime_types=("application/pdf",),
        supports_large_files=False,
        description="PDF format parser (not implemented yet)",
    )

    def can_parse(self, file: BookFile) -> bool:
        return file.name.lower().endswith(".pdf")

    def parse(self, file: BookFile) -> ParseResult:
        raise ParseError("PDF parsing is not yet implemented", FileFormat.PDF)
