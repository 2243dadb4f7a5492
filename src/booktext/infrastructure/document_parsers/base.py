"""Base protocol and value types for book parsers."""

from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Protocol

from booktext.domain.value_objects import FileFormat


@dataclass(frozen=True)
class BookFile:
    """In-memory input file: a name for sniffing and fallback titles, plus raw bytes."""

    name: str
    data: bytes

    @classmethod
    def from_path(cls, path: str | Path) -> "BookFile":
        p = Path(path)
        return cls(name=p.name, data=p.read_bytes())

    @property
    def base_name(self) -> str:
        """File name without any directory part."""
        return PurePath(self.name).name

    def read_bytes(self) -> bytes:
        return self.data

    def read_text(self) -> str:
        """Decode as UTF-8, dropping a leading BOM. Raises UnicodeDecodeError."""
        return self.data.decode("utf-8-sig")


@dataclass(frozen=True)
class ParserCapabilities:
    """Static description of what a parser accepts; used for UI hinting only."""

    extensions: tuple[str, ...]
    mime_types: tuple[str, ...]
    supports_large_files: bool
    description: str


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing a book: extracted text and metadata."""

    text: str
    title: str
    author: str | None
    format: FileFormat


class BookParser(Protocol):
    """Parser that extracts text and metadata from one book format."""

    format: FileFormat
    capabilities: ParserCapabilities

    def can_parse(self, file: BookFile) -> bool:
        """Cheap name-based check; must not read file content."""
        ...

    def parse(self, file: BookFile) -> ParseResult:
        """Extract text and metadata. Raises ParseError on failure."""
        ...
