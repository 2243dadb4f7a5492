"""Parser for .epub (e-book)."""

import io
import logging
import re
import zipfile

from bs4 import BeautifulSoup

from booktext.domain.exceptions import ParseError
from booktext.domain.value_objects import FileFormat
from booktext.infrastructure.document_parsers.base import (
    BookFile,
    ParserCapabilities,
    ParseResult,
)
from booktext.infrastructure.document_parsers.epub_container import (
    read_entry,
    read_package,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_EPUB_SUFFIX = re.compile(r"\.epub$", re.IGNORECASE)

PARAGRAPH_SEPARATOR = "\n\n"


def extract_document_text(markup: bytes | str) -> str:
    """Flatten an (X)HTML content document to a single whitespace-collapsed line."""
    soup = BeautifulSoup(markup, "lxml")
    for tag in soup(["script", "style"]):
        tag.decompose()
    root = soup.body or soup
    return _WHITESPACE.sub(" ", root.get_text()).strip()


class EpubParser:
    """EPUB parser that concatenates content documents in spine order."""

    format = FileFormat.EPUB
    capabilities = ParserCapabilities(
        extensions=("epub",),
        mime_types=("application/epub+zip",),
        supports_large_files=True,
        description="Electronic Publication (EPUB) format parser",
    )

    def can_parse(self, file: BookFile) -> bool:
        return file.name.lower().endswith(".epub")

    def parse(self, file: BookFile) -> ParseResult:
        """Extract text from spine documents and title/author from the OPF."""
        try:
            return self._parse(file)
        except ParseError:
            raise
        except Exception as e:
            raise ParseError(f"EPUB parsing failed: {e}", FileFormat.EPUB, cause=e) from e

    def _parse(self, file: BookFile) -> ParseResult:
        try:
            zf = zipfile.ZipFile(io.BytesIO(file.read_bytes()))
        except zipfile.BadZipFile as e:
            raise ParseError(
                f"EPUB parsing failed: invalid or corrupted archive: {e}",
                FileFormat.EPUB,
                cause=e,
            ) from e

        with zf:
            package = read_package(zf)
            parts: list[str] = []
            for path in package.reading_order:
                content = read_entry(zf, path)
                if not content:
                    logger.debug("Content document %s missing from %s, skipping", path, file.name)
                    continue
                parts.append(extract_document_text(content) + PARAGRAPH_SEPARATOR)

        logger.debug("Extracted %d documents from %s", len(parts), file.name)
        return ParseResult(
            text="".join(parts),
            title=package.title or _EPUB_SUFFIX.sub("", file.base_name) or file.base_name,
            author=package.author,
            format=FileFormat.EPUB,
        )
