"""Domain entities."""

from booktext.domain.entities.book_metadata import BookMetadata

__all__ = [
    "BookMetadata",
]
