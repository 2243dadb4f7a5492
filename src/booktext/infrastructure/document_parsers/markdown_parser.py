"""Parser for Markdown (.md, .markdown) with optional frontmatter."""

import logging
import re

from booktext.domain.exceptions import ParseError
from booktext.domain.value_objects import FileFormat
from booktext.infrastructure.document_parsers.base import (
    BookFile,
    ParserCapabilities,
    ParseResult,
)

logger = logging.getLogger(__name__)

# ---\n<frontmatter>\n---\n<body>, anchored at the very start of the file.
_FRONTMATTER = re.compile(r"\A---\s*\n(.*?)\n---\s*\n(.*)\Z", re.DOTALL)
_TITLE = re.compile(r"^title:[ \t]*(.+)$", re.MULTILINE)
_AUTHOR = re.compile(r"^author:[ \t]*(.+)$", re.MULTILINE)
_MD_SUFFIX = re.compile(r"\.md(arkdown)?$", re.IGNORECASE)


def split_frontmatter(text: str) -> tuple[str, dict[str, str]]:
    """Split a leading frontmatter block from the body.

    Only ``title:`` and ``author:`` lines are read; values are taken verbatim
    up to the end of line, so quoted or nested YAML stays literal. Without a
    frontmatter block the whole text is the body and metadata is empty.
    """
    match = _FRONTMATTER.match(text)
    if not match:
        return text.strip(), {}

    frontmatter, body = match.groups()
    metadata: dict[str, str] = {}
    for key, pattern in (("title", _TITLE), ("author", _AUTHOR)):
        found = pattern.search(frontmatter)
        if found and found.group(1).strip():
            metadata[key] = found.group(1).strip()
    return body.strip(), metadata


class MarkdownParser:
    """Markdown parser; body text keeps its line breaks and indentation."""

    format = FileFormat.MARKDOWN
    capabilities = ParserCapabilities(
        extensions=("md", "markdown"),
        mime_types=("text/markdown", "text/x-markdown"),
        supports_large_files=True,
        description="Markdown format parser with frontmatter support",
    )

    def can_parse(self, file: BookFile) -> bool:
        name = file.name.lower()
        return name.endswith(".md") or name.endswith(".markdown")

    def parse(self, file: BookFile) -> ParseResult:
        try:
            text = file.read_text()
            body, metadata = split_frontmatter(text)
        except Exception as e:
            raise ParseError(
                f"Markdown parsing failed: {e}", FileFormat.MARKDOWN, cause=e
            ) from e

        if not metadata:
            logger.debug("No frontmatter metadata in %s", file.name)
        return ParseResult(
            text=body,
            title=metadata.get("title")
            or _MD_SUFFIX.sub("", file.base_name)
            or file.base_name,
            author=metadata.get("author"),
            format=FileFormat.MARKDOWN,
        )
