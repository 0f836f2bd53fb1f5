"""Rendering of the document model to Markdown."""

from .config import RenderConfig
from .inline import InlineRunFormatter
from .numbering import ListCounterState, ListNumberingResolver
from .paragraph import ParagraphRenderer, heading_level
from .relationships import RelationshipResolver
from .table import TableRenderer
from .walker import DocumentWalker, render_document

__all__ = [
    "RenderConfig",
    "RelationshipResolver",
    "InlineRunFormatter",
    "ListCounterState",
    "ListNumberingResolver",
    "ParagraphRenderer",
    "heading_level",
    "TableRenderer",
    "DocumentWalker",
    "render_document",
]
