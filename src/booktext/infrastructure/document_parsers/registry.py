"""Registry: detect format by file name, route to a parser, normalize errors to ParseError."""

import asyncio
import logging
from dataclasses import dataclass

from booktext.domain.exceptions import ParseError
from booktext.domain.value_objects import FileFormat
from booktext.infrastructure.document_parsers.base import (
    BookFile,
    BookParser,
    ParseResult,
)
from booktext.infrastructure.document_parsers.epub_parser import EpubParser
from booktext.infrastructure.document_parsers.markdown_parser import MarkdownParser
from booktext.infrastructure.document_parsers.pdf_parser import PdfParser

logger = logging.getLogger(__name__)

# Format reported when no parser claims a file.
DEFAULT_ERROR_FORMAT = FileFormat.EPUB


@dataclass(frozen=True)
class SupportedFormats:
    """Extensions of all registered parsers and the matching file-picker accept string."""

    extensions: list[str]
    accept: str


class ParserRegistry:
    """Maps FileFormat to parser instances.

    Register parsers once at startup; afterwards the registry is only read
    and can be shared between concurrent parses.
    """

    def __init__(self) -> None:
        self._parsers: dict[FileFormat, BookParser] = {}

    def register(self, parser: BookParser) -> None:
        """Add or replace the parser for ``parser.format``."""
        self._parsers[parser.format] = parser

    def detect_format(self, file: BookFile) -> FileFormat | None:
        """Return the format of the first registered parser claiming the file, or None."""
        for parser in self._parsers.values():
            if parser.can_parse(file):
                return parser.format
        return None

    def get_parser(self, format: FileFormat) -> BookParser | None:
        return self._parsers.get(format)

    def parse_file(self, file: BookFile) -> ParseResult:
        """
        Detect format, run the matching parser, return ParseResult.
        Raises ParseError for unsupported files and for any parser failure.
        """
        format = self.detect_format(file)
        if format is None:
            logger.info("No parser claims %s", file.name)
            raise ParseError(f"Unsupported file format: {file.name}", DEFAULT_ERROR_FORMAT)

        parser = self.get_parser(format)
        if parser is None:
            raise ParseError(f"No parser available for format: {format}", format)

        try:
            return parser.parse(file)
        except Exception as e:
            logger.warning("Parsing %s as %s failed: %s", file.name, format, e)
            raise ParseError(
                f"Failed to parse {format} file: {e}", format, cause=e
            ) from e

    async def parse_file_async(self, file: BookFile) -> ParseResult:
        """Run parse_file in the default executor so the event loop is not blocked."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.parse_file, file)

    def get_supported_formats(self) -> SupportedFormats:
        """Return extensions in registration order (not deduplicated) for UI filters."""
        extensions: list[str] = []
        for parser in self._parsers.values():
            extensions.extend(parser.capabilities.extensions)
        return SupportedFormats(
            extensions=extensions,
            accept=",".join(f".{ext}" for ext in extensions),
        )


def create_default_registry(include_pdf: bool = True) -> ParserRegistry:
    """Build a registry with EPUB and Markdown parsers, plus the PDF placeholder."""
    registry = ParserRegistry()
    registry.register(EpubParser())
    registry.register(MarkdownParser())
    if include_pdf:
        registry.register(PdfParser())
    return registry
