"""booktext - plain text and metadata extraction from EPUB and Markdown books."""

__version__ = "0.1.0"
