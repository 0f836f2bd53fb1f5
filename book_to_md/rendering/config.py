"""Configuration shared by the Markdown renderers."""

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Configuration for rendering the document model to Markdown."""
    # Folder that DOCX packages store media under, relative to the package root
    media_prefix: str = "word/"
    # Directory used for image links that are missing from the image map
    fallback_image_dir: str = "images"
    # Indentation added per list level
    list_indent: str = "  "
    # Joins paragraphs and line breaks inside a table cell
    cell_separator: str = "<br>"
