"""Application DTOs."""

from booktext.application.dto.extracted_book import ExtractedBook

__all__ = ["ExtractedBook"]
