"""Domain value objects."""

from booktext.domain.value_objects.file_format import FileFormat

__all__ = [
    "FileFormat",
]
