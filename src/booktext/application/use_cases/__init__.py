"""Application use cases."""

from booktext.application.use_cases.extract_book import ExtractBookUseCase

__all__ = ["ExtractBookUseCase"]
