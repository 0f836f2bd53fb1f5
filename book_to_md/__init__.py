"""Book-to-MD: DOCX and EPUB to Markdown conversion."""

from .pipeline import ConversionPipeline, PipelineConfig, quick_convert
from .processing import (
    BookReaderBase,
    Chapter,
    ConversionResult,
    DocumentMetadata,
    DocxReader,
    EpubReader,
)
from .rendering import DocumentWalker, RenderConfig, render_document
from .post_processing import ImagePathRewriter, MarkdownNormalizer, normalize_markdown

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "ConversionPipeline",
    "PipelineConfig",
    "quick_convert",
    # Models
    "Chapter",
    "ConversionResult",
    "DocumentMetadata",
    # Readers
    "BookReaderBase",
    "DocxReader",
    "EpubReader",
    # Rendering
    "DocumentWalker",
    "RenderConfig",
    "render_document",
    # Post-processing
    "ImagePathRewriter",
    "MarkdownNormalizer",
    "normalize_markdown",
]
