"""EPUB container resolution: locate the package document and build the reading order."""

import logging
import zipfile
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag

from booktext.domain.exceptions import ParseError
from booktext.domain.value_objects import FileFormat

logger = logging.getLogger(__name__)

CONTAINER_PATH = "META-INF/container.xml"


@dataclass
class PackageDocument:
    """Parsed OPF package document.

    ``manifest`` maps item id to href as written in the OPF; ``spine`` holds
    the idrefs in declared order. Hrefs are relative to ``folder``.
    """

    path: str
    title: str | None = None
    author: str | None = None
    manifest: dict[str, str] = field(default_factory=dict)
    spine: list[str] = field(default_factory=list)

    @property
    def folder(self) -> str:
        """Directory holding the package document ('' at archive root)."""
        idx = self.path.rfind("/")
        return self.path[:idx] if idx >= 0 else ""

    def resolve(self, href: str) -> str:
        if not self.folder:
            return href
        return f"{self.folder}/{href}"

    @property
    def reading_order(self) -> list[str]:
        """Archive paths of spine documents in spine order.

        Idrefs without a manifest entry are skipped. Order is kept as is and
        repeated documents are not collapsed.
        """
        order: list[str] = []
        for idref in self.spine:
            href = self.manifest.get(idref)
            if not href:
                logger.debug("Spine idref %r has no manifest entry, skipping", idref)
                continue
            order.append(self.resolve(href))
        return order


def _named(local_name: str):
    """Tag matcher that ignores namespace prefixes (dc:title -> title)."""

    def match(tag: Tag) -> bool:
        return tag.name.rsplit(":", 1)[-1] == local_name

    return match


def _first_text(parent: Tag | None, local_name: str) -> str | None:
    if parent is None:
        return None
    tag = parent.find(_named(local_name), recursive=False)
    if tag is None:
        return None
    text = tag.get_text().strip()
    return text or None


def read_entry(zf: zipfile.ZipFile, path: str) -> bytes | None:
    """Return raw bytes of an archive member, or None when it does not exist."""
    try:
        return zf.read(path)
    except KeyError:
        return None


def find_package_path(zf: zipfile.ZipFile) -> str:
    """Read META-INF/container.xml and return the package document path."""
    raw = read_entry(zf, CONTAINER_PATH)
    if not raw:
        raise ParseError(
            f"Invalid EPUB: missing container descriptor ({CONTAINER_PATH})",
            FileFormat.EPUB,
        )
    container = BeautifulSoup(raw, "lxml-xml")
    rootfile = container.find(_named("rootfile"))
    full_path = rootfile.get("full-path") if rootfile is not None else None
    if not full_path:
        raise ParseError(
            "Invalid EPUB: cannot find package document path",
            FileFormat.EPUB,
        )
    return full_path


def parse_package_document(markup: bytes | str, path: str) -> PackageDocument:
    """Parse OPF markup into metadata, manifest and spine."""
    opf = BeautifulSoup(markup, "lxml-xml")
    package = PackageDocument(path=path)

    metadata = opf.find(_named("metadata"))
    package.title = _first_text(metadata, "title")
    package.author = _first_text(metadata, "creator")

    manifest = opf.find(_named("manifest"))
    if manifest is not None:
        for item in manifest.find_all(_named("item"), recursive=False):
            # Duplicate ids: last one wins.
            package.manifest[item.get("id") or ""] = item.get("href") or ""

    spine = opf.find(_named("spine"))
    if spine is not None:
        for itemref in spine.find_all(_named("itemref"), recursive=False):
            idref = itemref.get("idref")
            if not idref:
                continue
            package.spine.append(idref)

    logger.debug(
        "Package %s: %d manifest items, %d spine entries",
        path,
        len(package.manifest),
        len(package.spine),
    )
    return package


def read_package(zf: zipfile.ZipFile) -> PackageDocument:
    """Resolve and parse the package document of an opened EPUB archive."""
    opf_path = find_package_path(zf)
    raw = read_entry(zf, opf_path)
    if not raw:
        raise ParseError(
            f"Invalid EPUB: package document missing ({opf_path})",
            FileFormat.EPUB,
        )
    return parse_package_document(raw, opf_path)
