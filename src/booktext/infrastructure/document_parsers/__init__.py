"""Document parsers: extract text and metadata from book files."""

from booktext.infrastructure.document_parsers.base import (
    BookFile,
    BookParser,
    ParserCapabilities,
    ParseResult,
)
from booktext.infrastructure.document_parsers.registry import (
    ParserRegistry,
    SupportedFormats,
    create_default_registry,
)

__all__ = [
    "BookFile",
    "BookParser",
    "ParseResult",
    "ParserCapabilities",
    "ParserRegistry",
    "SupportedFormats",
    "create_default_registry",
]
