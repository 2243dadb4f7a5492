"""Application entry point and composition root."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from booktext import __version__
from booktext.application.use_cases.extract_book import ExtractBookUseCase
from booktext.config import Settings, get_settings
from booktext.domain.exceptions import BookTextError
from booktext.infrastructure.document_parsers import (
    BookFile,
    ParserRegistry,
    create_default_registry,
)

logger = logging.getLogger(__name__)


def create_registry(settings: Settings | None = None) -> ParserRegistry:
    """Composition root - build the parser registry from settings."""
    settings = settings or get_settings()
    return create_default_registry(include_pdf=settings.enable_pdf_stub)


def create_extract_book(settings: Settings | None = None) -> ExtractBookUseCase:
    settings = settings or get_settings()
    return ExtractBookUseCase(
        registry=create_registry(settings),
        char_limit=settings.context_window_char_limit,
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="booktext",
        description="Extract plain text and metadata from EPUB and Markdown books",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print metadata as JSON
  booktext book.epub

  # Also write the extracted text
  booktext notes.md --output notes.txt

  # List supported extensions
  booktext --formats
        """,
    )
    parser.add_argument("input", type=Path, nargs="?", help="Input book file")
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the extracted text to this file",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Print supported extensions and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"booktext {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _build_arg_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.formats:
        formats = create_registry(settings).get_supported_formats()
        print(json.dumps({"extensions": formats.extensions, "accept": formats.accept}))
        return 0

    if args.input is None:
        print("Error: input file required", file=sys.stderr)
        return 1
    if not args.input.is_file():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        file = BookFile.from_path(args.input)
        book = asyncio.run(create_extract_book(settings).execute(file))
        if args.output:
            args.output.write_text(book.text, encoding="utf-8")
            logger.info("Wrote %d chars to %s", len(book.text), args.output)
    except (BookTextError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(
        json.dumps(
            {
                "title": book.metadata.title,
                "author": book.metadata.author,
                "format": str(book.metadata.format),
                "raw_text_length": book.metadata.raw_text_length,
            },
            ensure_ascii=False,
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
