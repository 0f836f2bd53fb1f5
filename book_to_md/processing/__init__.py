"""Processing module: document model, readers and image extraction."""

from .models import (
    Chapter,
    Container,
    ConversionResult,
    ConvertedChapter,
    DocumentMetadata,
    Hyperlink,
    ImageMap,
    ImageResource,
    LineBreak,
    Media,
    NumberFormat,
    NumberingDefinitions,
    NumberingReference,
    Paragraph,
    Run,
    Tab,
    Table,
    TableCell,
    TableRow,
    TextSegment,
)
from .converter_interface import BookReaderBase
from .docx_reader import DocxReader
from .epub_reader import EpubReader
from .images import build_image_map, write_images

__all__ = [
    "BookReaderBase",
    "DocxReader",
    "EpubReader",
    "build_image_map",
    "write_images",
    "Chapter",
    "ConvertedChapter",
    "ConversionResult",
    "DocumentMetadata",
    "ImageMap",
    "ImageResource",
    "Container",
    "Paragraph",
    "Run",
    "TextSegment",
    "LineBreak",
    "Tab",
    "Media",
    "Hyperlink",
    "NumberingReference",
    "NumberFormat",
    "NumberingDefinitions",
    "Table",
    "TableRow",
    "TableCell",
]
