"""Unit tests for domain exceptions."""

import pytest

from booktext.domain.exceptions import BookTextError, ParseError, TextTooLong
from booktext.domain.value_objects import FileFormat


def test_parse_error_inherits_booktext_error() -> None:
    """ParseError is a subclass of BookTextError."""
    assert issubclass(ParseError, BookTextError)


def test_text_too_long_inherits_booktext_error() -> None:
    """TextTooLong is a subclass of BookTextError."""
    assert issubclass(TextTooLong, BookTextError)


def test_parse_error_without_cause() -> None:
    """ParseError keeps its message and format, cause defaults to None."""
    err = ParseError("bad", FileFormat.PDF)
    assert str(err) == "bad"
    assert err.message == "bad"
    assert err.format == FileFormat.PDF
    assert err.cause is None


def test_parse_error_requires_format() -> None:
    """A ParseError cannot be raised without naming its format."""
    with pytest.raises(TypeError):
        ParseError("bad")


def test_parse_error_keeps_cause() -> None:
    """ParseError keeps the wrapped exception."""
    cause = ValueError("inner")
    err = ParseError("outer", FileFormat.MARKDOWN, cause=cause)
    assert err.format == FileFormat.MARKDOWN
    assert err.cause is cause


def test_text_too_long_message() -> None:
    """TextTooLong reports length and limit."""
    err = TextTooLong(length=4_200_000, limit=3_500_000)
    assert err.length == 4_200_000
    assert err.limit == 3_500_000
    assert "4.2M chars" in str(err)
