"""Paragraph classification into headings, list items and plain text."""

from typing import Optional

from ..processing.models import Paragraph
from .config import RenderConfig
from .inline import InlineRunFormatter
from .numbering import ListNumberingResolver


# Paragraph style id -> heading level
HEADING_STYLES = {
    "Title": 1,
    "title": 1,
    "Subtitle": 2,
    "subtitle": 2,
}
for _level in range(1, 7):
    HEADING_STYLES[f"Heading{_level}"] = _level
    HEADING_STYLES[f"heading{_level}"] = _level
    HEADING_STYLES[f"heading {_level}"] = _level


def heading_level(style_id: Optional[str]) -> Optional[int]:
    """Return the heading level (1-6) for a paragraph style id, if any."""
    if style_id is None:
        return None
    return HEADING_STYLES.get(style_id)


class ParagraphRenderer:
    """Renders a paragraph as a heading, list item or plain block.

    A heading style wins over list numbering. List items end with a single
    newline so consecutive items form a tight list; headings and plain
    paragraphs end with a blank line.
    """

    def __init__(
        self,
        inline: InlineRunFormatter,
        numbering: ListNumberingResolver,
        config: Optional[RenderConfig] = None
    ):
        """Initialize the renderer.

        Args:
            inline: Formatter for the paragraph content.
            numbering: Resolver for list markers.
            config: Render configuration.
        """
        self.inline = inline
        self.numbering = numbering
        self.config = config or RenderConfig()

    def render_inline(self, paragraph: Paragraph) -> str:
        return self.inline.format_inline(paragraph.content)

    def render(self, paragraph: Paragraph) -> str:
        """Render one paragraph as a Markdown block.

        Args:
            paragraph: The paragraph to render.

        Returns:
            Markdown for the paragraph, including its trailing newlines.
        """
        level = heading_level(paragraph.style_id)
        numbering = paragraph.numbering
        text = self.render_inline(paragraph).strip()

        # Keep the spacing of an empty paragraph without emitting a marker
        if not text and level is None and numbering is None:
            return "\n"

        if level is not None:
            return f"{'#' * level} {text}\n\n"

        if numbering is not None:
            indent = self.config.list_indent * numbering.level
            marker = self.numbering.resolve_marker(numbering.list_id, numbering.level)
            return f"{indent}{marker} {text}\n"

        return f"{text}\n\n"
