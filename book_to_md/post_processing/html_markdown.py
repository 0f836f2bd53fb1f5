"""Conversion of chapter XHTML to normalized markdown."""

import logging
from typing import Optional

from bs4 import BeautifulSoup
from markdownify import MarkdownConverter

from ..processing.models import ImageMap
from .image_paths import ImagePathRewriter
from .whitespace_normalizer import normalize_markdown


logger = logging.getLogger(__name__)


def html_to_markdown(html: str, image_map: Optional[ImageMap] = None) -> str:
    """Convert an XHTML chapter to markdown with extracted image paths.

    Only the ``<body>`` is converted, so the document ``<title>`` does not
    leak into the text.

    Args:
        html: Chapter markup.
        image_map: Original image href -> output-relative path.

    Returns:
        Normalized markdown.
    """
    soup = BeautifulSoup(html, "html.parser")
    body = soup.body or soup

    markdown = MarkdownConverter(heading_style="ATX").convert_soup(body)

    if image_map:
        markdown = ImagePathRewriter().rewrite(markdown, image_map)

    return normalize_markdown(markdown.lstrip("\n"))
