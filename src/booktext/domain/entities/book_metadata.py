"""Book metadata entity."""

from dataclasses import dataclass

from booktext.domain.value_objects import FileFormat


@dataclass(frozen=True)
class BookMetadata:
    """Title, author and extracted text size of a parsed book."""

    title: str
    author: str | None
    raw_text_length: int
    format: FileFormat
