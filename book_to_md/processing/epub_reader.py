"""EPUB reader converting chapter XHTML with markdownify."""

import logging
import posixpath
from pathlib import Path
from typing import Optional, Union

import ebooklib
from ebooklib import epub

from ..post_processing.html_markdown import html_to_markdown
from .converter_interface import BookReaderBase
from .models import Chapter, DocumentMetadata, ImageMap, ImageResource


logger = logging.getLogger(__name__)

IMAGE_ITEM_TYPES = (ebooklib.ITEM_IMAGE, ebooklib.ITEM_COVER)


class EpubReader(BookReaderBase):
    """Reads an EPUB book, one chapter per spine document."""

    extensions = (".epub",)

    def __init__(self, path: Union[str, Path]):
        """Open an EPUB book.

        Args:
            path: Path to the EPUB file.
        """
        self.path = Path(path)
        self.book = epub.read_epub(str(self.path), options={"ignore_ncx": True})

    @property
    def name(self) -> str:
        return "epub"

    def chapters(self, image_map: Optional[ImageMap] = None) -> list[Chapter]:
        """Convert spine documents to markdown in reading order.

        Args:
            image_map: Original image href -> output-relative path.

        Returns:
            One chapter per non-empty spine document.
        """
        chapters = []
        for idref, _linear in self.book.spine:
            item = self.book.get_item_with_id(idref)
            if item is None or item.get_type() != ebooklib.ITEM_DOCUMENT:
                logger.debug(f"Skipping spine entry {idref!r}")
                continue

            html = item.get_content().decode("utf-8", errors="ignore")
            if not html.strip():
                continue

            chapter_map = chapter_image_map(image_map, item.get_name()) if image_map else None
            chapters.append(Chapter(content=html_to_markdown(html, chapter_map)))

        return chapters

    def images(self) -> list[ImageResource]:
        """Return image and cover items keyed by their manifest href."""
        return [
            ImageResource(original_href=item.get_name(), data=item.get_content())
            for item in self.book.get_items()
            if item.get_type() in IMAGE_ITEM_TYPES
        ]

    def metadata(self) -> DocumentMetadata:
        """Extract Dublin Core metadata."""
        return DocumentMetadata(
            title=self._first("title"),
            authors=[str(value) for value, _attrs in self.book.get_metadata("DC", "creator")],
            publisher=self._first("publisher"),
            language=self._first("language"),
            description=self._first("description"),
            source_file=str(self.path)
        )

    def _first(self, name: str) -> Optional[str]:
        values = self.book.get_metadata("DC", name)
        if values and values[0][0]:
            return str(values[0][0])
        return None


def chapter_image_map(image_map: ImageMap, chapter_href: str) -> ImageMap:
    """Re-key an image map by paths relative to a chapter document.

    Manifest hrefs are relative to the package document, while a chapter in
    ``Text/`` refers to ``Images/fig.png`` as ``../Images/fig.png``.

    Args:
        image_map: Manifest href -> output-relative path.
        chapter_href: Manifest href of the chapter document.

    Returns:
        Chapter-relative href -> output-relative path.
    """
    base = posixpath.dirname(chapter_href)
    if not base:
        return dict(image_map)
    return {
        posixpath.relpath(original, base): path
        for original, path in image_map.items()
    }
