"""Inline formatting of runs and hyperlinks."""

import logging

from ..processing.models import (
    Hyperlink,
    InlineItem,
    LineBreak,
    Media,
    Run,
    Tab,
    TextSegment,
)
from .relationships import RelationshipResolver


logger = logging.getLogger(__name__)


class InlineRunFormatter:
    """Renders runs and hyperlinks into inline Markdown."""

    def __init__(self, resolver: RelationshipResolver):
        """Initialize the formatter.

        Args:
            resolver: Resolver for image and hyperlink targets.
        """
        self.resolver = resolver

    def format_inline(self, items: list[InlineItem]) -> str:
        """Render all inline items of a paragraph.

        Args:
            items: Runs and hyperlinks in document order.

        Returns:
            Concatenated inline Markdown.
        """
        parts = []
        for item in items:
            if isinstance(item, Run):
                parts.append(self.format_run(item))
            elif isinstance(item, Hyperlink):
                parts.append(self.format_hyperlink(item))
            else:
                logger.debug(f"Skipping unsupported inline item {type(item).__name__}")
        return "".join(parts)

    def run_text(self, run: Run) -> str:
        """Concatenate the segments of a run without applying emphasis."""
        parts = []
        for segment in run.segments:
            if isinstance(segment, TextSegment):
                parts.append(segment.text)
            elif isinstance(segment, LineBreak):
                parts.append("\n")
            elif isinstance(segment, Tab):
                parts.append("\t")
            elif isinstance(segment, Media):
                path = self.resolver.resolve_media(segment.embed_id)
                if path is not None:
                    parts.append(f"![{segment.alt_text}]({path})")
        return "".join(parts)

    def format_run(self, run: Run) -> str:
        """Render a run with its bold, italic and strike formatting.

        Blank text is returned as-is so no empty emphasis markers are emitted.

        Args:
            run: The run to render.

        Returns:
            Inline Markdown for the run.
        """
        text = self.run_text(run)
        if not text.strip():
            return text

        if run.strike:
            text = f"~~{text}~~"
        if run.bold and run.italic:
            text = f"***{text}***"
        elif run.bold:
            text = f"**{text}**"
        elif run.italic:
            text = f"*{text}*"
        return text

    def format_hyperlink(self, link: Hyperlink) -> str:
        """Render a hyperlink.

        Falls back to the bare target when there is no display text, and to
        the display text alone when the target cannot be resolved.

        Args:
            link: The hyperlink to render.

        Returns:
            Inline Markdown for the link.
        """
        display = self.run_text(link.run) if link.run is not None else ""
        target = self.resolver.resolve_hyperlink(link.anchor, link.relationship_id)

        if target is None:
            return display
        if not display:
            return target
        return f"[{display}]({target})"
