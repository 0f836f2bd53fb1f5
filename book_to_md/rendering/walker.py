"""Document tree traversal producing the raw Markdown stream."""

import logging
from typing import Optional

from ..processing.models import (
    Container,
    DocumentNode,
    ImageMap,
    NumberingDefinitions,
    Paragraph,
    RelationshipTable,
    Table,
)
from .config import RenderConfig
from .inline import InlineRunFormatter
from .numbering import ListCounterState, ListNumberingResolver
from .paragraph import ParagraphRenderer
from .relationships import RelationshipResolver
from .table import TableRenderer


logger = logging.getLogger(__name__)


class DocumentWalker:
    """Walks a document tree in order and renders each block.

    The relationship table, numbering definitions and image map are shared
    read-only by every render. List counters are created per ``render``
    call, so separate renders never share mutable state.
    """

    def __init__(
        self,
        relationships: RelationshipTable,
        numbering: NumberingDefinitions,
        image_map: Optional[ImageMap] = None,
        config: Optional[RenderConfig] = None
    ):
        """Initialize the walker.

        Args:
            relationships: Relationship id -> target.
            numbering: Numbering definitions of the document.
            image_map: Original asset reference -> output-relative path.
            config: Render configuration.
        """
        self.config = config or RenderConfig()
        self.numbering = numbering
        self.resolver = RelationshipResolver(relationships, image_map, self.config)
        self.inline = InlineRunFormatter(self.resolver)

    def render(self, root: DocumentNode) -> str:
        """Render a document tree to raw (un-normalized) Markdown.

        Args:
            root: The body container, or a single paragraph or table.

        Returns:
            Markdown for every node in document order.

        Raises:
            ValueError: If ``root`` is None.
        """
        if root is None:
            raise ValueError("Cannot render a document without a root node")

        numbering = ListNumberingResolver(self.numbering, ListCounterState())
        paragraphs = ParagraphRenderer(self.inline, numbering, self.config)
        tables = TableRenderer(paragraphs, self.config)

        output: list[str] = []
        self._walk(root, paragraphs, tables, output)
        return "".join(output)

    def _walk(
        self,
        node: DocumentNode,
        paragraphs: ParagraphRenderer,
        tables: TableRenderer,
        output: list[str]
    ) -> None:
        if isinstance(node, Paragraph):
            output.append(paragraphs.render(node))
        elif isinstance(node, Table):
            output.append(tables.render_table(node))
        elif isinstance(node, Container):
            for child in node.children:
                self._walk(child, paragraphs, tables, output)
        else:
            logger.debug(f"Skipping unsupported node {type(node).__name__}")


def render_document(
    root: DocumentNode,
    relationships: RelationshipTable,
    numbering: NumberingDefinitions,
    image_map: Optional[ImageMap] = None
) -> str:
    """Render a document tree to raw Markdown.

    Args:
        root: The body container.
        relationships: Relationship id -> target.
        numbering: Numbering definitions of the document.
        image_map: Original asset reference -> output-relative path.

    Returns:
        Raw Markdown, to be passed through the normalizer.
    """
    return DocumentWalker(relationships, numbering, image_map).render(root)
