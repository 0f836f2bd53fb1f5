"""Post-processing of rendered and converted markdown."""

from .html_markdown import html_to_markdown
from .image_paths import ImagePathRewriter
from .metadata_header import format_metadata
from .whitespace_normalizer import MarkdownNormalizer, normalize_markdown

__all__ = [
    "ImagePathRewriter",
    "MarkdownNormalizer",
    "normalize_markdown",
    "html_to_markdown",
    "format_metadata",
]
