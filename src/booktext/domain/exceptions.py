"""Domain exceptions."""

from booktext.domain.value_objects import FileFormat


class BookTextError(Exception):
    """Base exception for booktext."""

    pass


class ParseError(BookTextError):
    """Parsing a book failed.

    Tagged with the format that was being processed. When the failure was
    caused by another exception, that exception is kept in ``cause`` and is
    also chained as ``__cause__`` by the raising code.
    """

    def __init__(
        self,
        message: str,
        format: FileFormat,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.format = format
        self.cause = cause


class TextTooLong(BookTextError):
    """Extracted text exceeds the downstream model context window."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(
            f"The book is too long ({length / 1_000_000:.1f}M chars). "
            f"It exceeds the context window of {limit} chars."
        )
        self.length = length
        self.limit = limit
