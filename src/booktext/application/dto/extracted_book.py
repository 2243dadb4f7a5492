"""Extracted book DTO."""

from dataclasses import dataclass

from booktext.domain.entities import BookMetadata


@dataclass
class ExtractedBook:
    """Output of book extraction: metadata plus the normalized text blob."""

    metadata: BookMetadata
    text: str
