"""Pytest fixtures for booktext tests."""

from __future__ import annotations

import io
import zipfile
from collections.abc import Callable

import pytest

from booktext.infrastructure.document_parsers import (
    BookFile,
    ParserRegistry,
    create_default_registry,
)

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="{opf_path}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""


def opf_xml(
    manifest: list[tuple[str, str]],
    spine: list[str | None],
    title: str | None = None,
    creator: str | None = None,
) -> str:
    """Build an OPF package document. A None spine entry becomes an itemref without idref."""
    meta = []
    if title is not None:
        meta.append(f"<dc:title>{title}</dc:title>")
    if creator is not None:
        meta.append(f"<dc:creator>{creator}</dc:creator>")
    items = "".join(
        f'<item id="{item_id}" href="{href}" media-type="application/xhtml+xml"/>'
        for item_id, href in manifest
    )
    refs = "".join(
        f'<itemref idref="{idref}"/>' if idref is not None else "<itemref/>"
        for idref in spine
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<package xmlns="http://www.idpf.org/2007/opf" version="3.0" unique-identifier="id">'
        '<metadata xmlns:dc="http://purl.org/dc/elements/1.1/">'
        f"{''.join(meta)}"
        "</metadata>"
        f"<manifest>{items}</manifest>"
        f"<spine>{refs}</spine>"
        "</package>"
    )


def xhtml(body: str, head: str = "") -> str:
    """Build an XHTML content document around a body fragment."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<html xmlns="http://www.w3.org/1999/xhtml">'
        f"<head><title>ignored</title>{head}</head>"
        f"<body>{body}</body></html>"
    )


def zip_bytes(entries: dict[str, str | bytes]) -> bytes:
    """Write entries into an in-memory zip archive (mimetype first, uncompressed)."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        zf.writestr("mimetype", "application/epub+zip", compress_type=zipfile.ZIP_STORED)
        for path, content in entries.items():
            zf.writestr(path, content, compress_type=zipfile.ZIP_DEFLATED)
    return buf.getvalue()


def epub_bytes(
    chapters: dict[str, str],
    spine: list[str | None] | None = None,
    title: str | None = "Sample Book",
    creator: str | None = "Jane Doe",
    opf_path: str = "OEBPS/content.opf",
    manifest: list[tuple[str, str]] | None = None,
) -> bytes:
    """Build a minimal EPUB. ``chapters`` maps href (relative to the OPF) to XHTML."""
    if manifest is None:
        manifest = [(f"item{i}", href) for i, href in enumerate(chapters, 1)]
    if spine is None:
        spine = [item_id for item_id, _ in manifest]
    folder = opf_path.rsplit("/", 1)[0] if "/" in opf_path else ""
    entries: dict[str, str | bytes] = {
        "META-INF/container.xml": CONTAINER_XML.format(opf_path=opf_path),
        opf_path: opf_xml(manifest, spine, title=title, creator=creator),
    }
    for href, content in chapters.items():
        entries[f"{folder}/{href}" if folder else href] = content
    return zip_bytes(entries)


@pytest.fixture
def make_epub() -> Callable[..., BookFile]:
    """Factory: make_epub(chapters, name="book.epub", **epub_bytes_kwargs) -> BookFile."""

    def _make(chapters: dict[str, str], name: str = "book.epub", **kwargs) -> BookFile:
        return BookFile(name=name, data=epub_bytes(chapters, **kwargs))

    return _make


@pytest.fixture
def make_zip() -> Callable[..., BookFile]:
    """Factory: make_zip(entries, name="book.epub") -> BookFile with arbitrary archive members."""

    def _make(entries: dict[str, str | bytes], name: str = "book.epub") -> BookFile:
        return BookFile(name=name, data=zip_bytes(entries))

    return _make


@pytest.fixture
def container() -> Callable[[str], str]:
    """container.xml text pointing at the given package document path."""
    return lambda opf_path: CONTAINER_XML.format(opf_path=opf_path)


@pytest.fixture
def opf() -> Callable[..., str]:
    return opf_xml


@pytest.fixture
def chapter() -> Callable[..., str]:
    return xhtml


@pytest.fixture
def sample_epub(make_epub, chapter) -> BookFile:
    """Two-chapter book: "Sample Book" by Jane Doe with bodies Hello and World."""
    return make_epub(
        {
            "ch1.xhtml": chapter("<p>Hello</p>"),
            "ch2.xhtml": chapter("<p>World</p>"),
        },
        name="sample.epub",
    )


@pytest.fixture
def registry() -> ParserRegistry:
    """Fresh default registry for each test."""
    return create_default_registry()
