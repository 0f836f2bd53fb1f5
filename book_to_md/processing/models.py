"""Data models for document to Markdown conversion."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional, Union


# Relationship id -> target path or URL
RelationshipTable = Mapping[str, str]

# Original asset reference -> output-relative path, in insertion order
ImageMap = dict[str, str]


@dataclass
class TextSegment:
    """Literal text inside a run."""
    text: str


@dataclass
class LineBreak:
    """Hard line break inside a run."""


@dataclass
class Tab:
    """Tab character inside a run."""


@dataclass
class Media:
    """Embedded image referenced through the relationship table."""
    embed_id: str
    alt_text: str = ""


RunSegment = Union[TextSegment, LineBreak, Tab, Media]


@dataclass
class Run:
    """A span of inline content sharing one set of character formatting."""
    segments: list[RunSegment] = field(default_factory=list)
    bold: bool = False
    italic: bool = False
    strike: bool = False


@dataclass
class Hyperlink:
    """A link around an optional display run.

    Either ``anchor`` (a bookmark inside the document) or
    ``relationship_id`` (an external target) may be set.
    """
    run: Optional[Run] = None
    anchor: Optional[str] = None
    relationship_id: Optional[str] = None


InlineItem = Union[Run, Hyperlink]


@dataclass(frozen=True)
class NumberingReference:
    """Points a paragraph at a list definition and indent level."""
    list_id: int
    level: int

    def __post_init__(self):
        if self.list_id < 0 or self.level < 0:
            raise ValueError(
                f"Numbering reference must be non-negative, got "
                f"list_id={self.list_id} level={self.level}"
            )


@dataclass
class Paragraph:
    """A block of inline items with optional heading style and numbering."""
    content: list[InlineItem] = field(default_factory=list)
    style_id: Optional[str] = None
    numbering: Optional[NumberingReference] = None


@dataclass
class TableCell:
    paragraphs: list[Paragraph] = field(default_factory=list)


@dataclass
class TableRow:
    cells: list[TableCell] = field(default_factory=list)


@dataclass
class Table:
    rows: list[TableRow] = field(default_factory=list)


@dataclass
class Container:
    """Transparent wrapper (structured document tags) around child nodes."""
    children: list["DocumentNode"] = field(default_factory=list)


DocumentNode = Union[Paragraph, Table, Container]


class NumberFormat(Enum):
    """Marker style of one list level."""
    BULLET = "bullet"
    DECIMAL = "decimal"
    UPPER_ROMAN = "upperRoman"
    LOWER_ROMAN = "lowerRoman"
    UPPER_LETTER = "upperLetter"
    LOWER_LETTER = "lowerLetter"
    NONE = "none"

    @classmethod
    def from_word(cls, value: Optional[str]) -> Optional["NumberFormat"]:
        """Map a ``w:numFmt`` value, returning None for unsupported formats."""
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def is_ordinal(self) -> bool:
        return self not in (NumberFormat.BULLET, NumberFormat.NONE)


@dataclass(frozen=True)
class NumberingDefinitions:
    """Numbering instances and the abstract definitions they point to."""
    # list id (w:numId) -> abstract numbering id
    instances: Mapping[int, int] = field(default_factory=dict)
    # abstract numbering id -> {level: format}
    abstract: Mapping[int, Mapping[int, NumberFormat]] = field(default_factory=dict)

    def format_for(self, list_id: int, level: int) -> Optional[NumberFormat]:
        """Resolve the format of a list level, or None if any link is missing."""
        abstract_id = self.instances.get(list_id)
        if abstract_id is None:
            return None
        levels = self.abstract.get(abstract_id)
        if levels is None:
            return None
        return levels.get(level)


@dataclass
class ImageResource:
    """An embedded image as stored inside the source package."""
    original_href: str
    data: bytes


@dataclass
class DocumentMetadata:
    """Metadata extracted from the source document."""
    title: Optional[str] = None
    authors: list[str] = field(default_factory=list)
    publisher: Optional[str] = None
    language: Optional[str] = None
    description: Optional[str] = None
    source_file: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "authors": self.authors,
            "publisher": self.publisher,
            "language": self.language,
            "description": self.description,
            "source_file": self.source_file
        }


@dataclass
class Chapter:
    """Already-converted Markdown for one logical unit of the source."""
    content: str
    title: Optional[str] = None


@dataclass
class ConvertedChapter:
    """A chapter with its resolved title and output file name."""
    title: str
    filename: str
    content: str


@dataclass
class ConversionResult:
    """Result of converting one input file."""
    chapters: list[ConvertedChapter] = field(default_factory=list)
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
    image_map: ImageMap = field(default_factory=dict)
    output_path: Optional[Path] = None
