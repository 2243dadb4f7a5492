"""Extract book use case."""

import logging

from booktext.application.dto.extracted_book import ExtractedBook
from booktext.domain.entities import BookMetadata
from booktext.domain.exceptions import TextTooLong
from booktext.infrastructure.document_parsers import BookFile, ParserRegistry

logger = logging.getLogger(__name__)


class ExtractBookUseCase:
    """Parse a book and check the text fits the summarization model's context window."""

    def __init__(self, registry: ParserRegistry, char_limit: int) -> None:
        self._registry = registry
        self._char_limit = char_limit

    async def execute(self, file: BookFile) -> ExtractedBook:
        """Parse file; raises ParseError or TextTooLong."""
        result = await self._registry.parse_file_async(file)
        metadata = BookMetadata(
            title=result.title,
            author=result.author,
            raw_text_length=len(result.text),
            format=result.format,
        )
        logger.info(
            "Extracted %r (%s, %d chars)",
            metadata.title,
            metadata.format,
            metadata.raw_text_length,
        )
        if metadata.raw_text_length > self._char_limit:
            raise TextTooLong(metadata.raw_text_length, self._char_limit)
        return ExtractedBook(metadata=metadata, text=result.text)
