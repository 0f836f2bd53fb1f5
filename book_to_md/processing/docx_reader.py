"""DOCX reader building the document model with python-docx."""

import logging
from pathlib import Path
from typing import Optional, Union

import docx
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.oxml import parse_xml
from docx.oxml.ns import qn

from ..post_processing.whitespace_normalizer import normalize_markdown
from ..rendering.walker import render_document
from .converter_interface import BookReaderBase
from .models import (
    Chapter,
    Container,
    DocumentMetadata,
    DocumentNode,
    Hyperlink,
    ImageMap,
    ImageResource,
    LineBreak,
    Media,
    NumberFormat,
    NumberingDefinitions,
    NumberingReference,
    Paragraph,
    RelationshipTable,
    Run,
    RunSegment,
    Tab,
    Table,
    TableCell,
    TableRow,
    TextSegment,
)


logger = logging.getLogger(__name__)

W_VAL = qn("w:val")

# Package folder holding embedded media
MEDIA_PARTNAME_PREFIX = "/word/media/"

# Company element of the extended (app.xml) properties part
EP_COMPANY = (
    "{http://schemas.openxmlformats.org/officeDocument/2006/extended-properties}Company"
)

# w:val values that switch a toggle property off
FALSE_VALUES = {"false", "0", "off"}


class DocxReader(BookReaderBase):
    """Reads a DOCX package and renders it as a single chapter.

    The body is converted into the document model and rendered with the
    package's relationship table and numbering definitions.
    """

    extensions = (".docx",)

    def __init__(self, path: Union[str, Path]):
        """Open a DOCX package.

        Args:
            path: Path to the DOCX file.
        """
        self.path = Path(path)
        self.document = docx.Document(str(self.path))

    @property
    def name(self) -> str:
        return "docx"

    def body(self) -> Container:
        """Return the document body as a container node."""
        return parse_body(self.document.element.body)

    def relationships(self) -> RelationshipTable:
        """Return the relationship id -> target table of the main document part."""
        return {
            rel_id: rel.target_ref
            for rel_id, rel in self.document.part.rels.items()
        }

    def numbering_definitions(self) -> NumberingDefinitions:
        """Return the numbering definitions, empty if the package has none."""
        for rel in self.document.part.rels.values():
            if rel.reltype == RT.NUMBERING:
                return parse_numbering(rel.target_part.element)
        logger.debug(f"No numbering part in {self.path.name}")
        return NumberingDefinitions()

    def chapters(self, image_map: Optional[ImageMap] = None) -> list[Chapter]:
        """Render the document body as one chapter.

        Args:
            image_map: Original image reference -> output-relative path.

        Returns:
            A single chapter holding the whole document.
        """
        markdown = render_document(
            self.body(),
            self.relationships(),
            self.numbering_definitions(),
            image_map
        )
        return [Chapter(content=normalize_markdown(markdown))]

    def images(self) -> list[ImageResource]:
        """Return all media parts of the package keyed by their package path."""
        images = []
        for part in self.document.part.package.iter_parts():
            partname = str(part.partname)
            if partname.startswith(MEDIA_PARTNAME_PREFIX):
                images.append(ImageResource(
                    original_href=partname.lstrip("/"),
                    data=part.blob
                ))
        return images

    def metadata(self) -> DocumentMetadata:
        """Extract metadata from the core and extended properties."""
        props = self.document.core_properties
        return DocumentMetadata(
            title=props.title or None,
            authors=[props.author] if props.author else [],
            publisher=self.company(),
            language=props.language or None,
            description=props.comments or None,
            source_file=str(self.path)
        )

    def company(self) -> Optional[str]:
        """Return the Company of the extended properties, used as publisher."""
        for rel in self.document.part.package.rels.values():
            if rel.reltype == RT.EXTENDED_PROPERTIES:
                company = parse_xml(rel.target_part.blob).find(EP_COMPANY)
                if company is not None and company.text and company.text.strip():
                    return company.text.strip()
                return None
        return None


def parse_body(body) -> Container:
    """Convert a ``w:body`` element into a container of block nodes."""
    return Container(children=_parse_blocks(body))


def _parse_blocks(parent) -> list[DocumentNode]:
    nodes: list[DocumentNode] = []
    for child in parent.iterchildren():
        if child.tag == qn("w:p"):
            nodes.append(parse_paragraph(child))
        elif child.tag == qn("w:tbl"):
            nodes.append(parse_table(child))
        elif child.tag == qn("w:sdt"):
            content = child.find(qn("w:sdtContent"))
            if content is not None:
                nodes.append(Container(children=_parse_blocks(content)))
    return nodes


def parse_paragraph(p) -> Paragraph:
    """Convert a ``w:p`` element into a Paragraph.

    Args:
        p: The paragraph element.

    Returns:
        Paragraph with style id, numbering reference and inline content.
    """
    style_id = None
    numbering = None

    p_pr = p.find(qn("w:pPr"))
    if p_pr is not None:
        p_style = p_pr.find(qn("w:pStyle"))
        if p_style is not None:
            style_id = p_style.get(W_VAL)
        num_pr = p_pr.find(qn("w:numPr"))
        if num_pr is not None:
            numbering = _parse_numbering_reference(num_pr)

    content = []
    for child in p.iterchildren():
        if child.tag == qn("w:r"):
            content.append(parse_run(child))
        elif child.tag == qn("w:hyperlink"):
            content.append(parse_hyperlink(child))

    return Paragraph(content=content, style_id=style_id, numbering=numbering)


def _parse_numbering_reference(num_pr) -> Optional[NumberingReference]:
    num_id = _int_val(num_pr.find(qn("w:numId")))
    level = _int_val(num_pr.find(qn("w:ilvl")))
    if num_id is None or level is None:
        return None
    if num_id < 0 or level < 0:
        logger.debug(f"Ignoring negative numbering reference {num_id}/{level}")
        return None
    return NumberingReference(list_id=num_id, level=level)


def parse_run(r) -> Run:
    """Convert a ``w:r`` element into a Run.

    Args:
        r: The run element.

    Returns:
        Run with its text, breaks, tabs, images and formatting flags.
    """
    r_pr = r.find(qn("w:rPr"))

    segments: list[RunSegment] = []
    for child in r.iterchildren():
        if child.tag == qn("w:t"):
            segments.append(TextSegment(child.text or ""))
        elif child.tag in (qn("w:br"), qn("w:cr")):
            segments.append(LineBreak())
        elif child.tag == qn("w:tab"):
            segments.append(Tab())
        elif child.tag == qn("w:drawing"):
            media = _parse_drawing(child)
            if media is not None:
                segments.append(media)

    return Run(
        segments=segments,
        bold=_toggle(r_pr, "w:b"),
        italic=_toggle(r_pr, "w:i"),
        strike=_toggle(r_pr, "w:strike") or _toggle(r_pr, "w:dstrike")
    )


def _parse_drawing(drawing) -> Optional[Media]:
    # Inline pictures first, then floating (anchored) ones
    for frame in (drawing.find(qn("wp:inline")), drawing.find(qn("wp:anchor"))):
        if frame is None:
            continue
        blip = frame.find(".//" + qn("a:blip"))
        if blip is None:
            continue
        embed_id = blip.get(qn("r:embed"))
        if not embed_id:
            continue
        doc_pr = frame.find(qn("wp:docPr"))
        alt_text = doc_pr.get("descr", "") if doc_pr is not None else ""
        return Media(embed_id=embed_id, alt_text=alt_text)
    return None


def parse_hyperlink(h) -> Hyperlink:
    """Convert a ``w:hyperlink`` element into a Hyperlink.

    The runs inside the link are merged into one unformatted display run.
    """
    segments: list[RunSegment] = []
    for r in h.iterchildren(qn("w:r")):
        segments.extend(parse_run(r).segments)

    return Hyperlink(
        run=Run(segments=segments) if segments else None,
        anchor=h.get(qn("w:anchor")),
        relationship_id=h.get(qn("r:id"))
    )


def parse_table(tbl) -> Table:
    """Convert a ``w:tbl`` element into a Table of paragraph cells."""
    rows = []
    for tr in tbl.iterchildren(qn("w:tr")):
        cells = [
            TableCell(paragraphs=[parse_paragraph(p) for p in tc.iterchildren(qn("w:p"))])
            for tc in tr.iterchildren(qn("w:tc"))
        ]
        rows.append(TableRow(cells=cells))
    return Table(rows=rows)


def parse_numbering(numbering) -> NumberingDefinitions:
    """Read numbering instances and abstract definitions from ``w:numbering``.

    Args:
        numbering: Root element of the numbering part.

    Returns:
        NumberingDefinitions linking list ids to per-level formats.
    """
    abstract: dict[int, dict[int, NumberFormat]] = {}
    for abstract_num in numbering.iterchildren(qn("w:abstractNum")):
        abstract_id = _int_attr(abstract_num, qn("w:abstractNumId"))
        if abstract_id is None:
            continue
        levels: dict[int, NumberFormat] = {}
        for lvl in abstract_num.iterchildren(qn("w:lvl")):
            level = _int_attr(lvl, qn("w:ilvl"))
            num_fmt = lvl.find(qn("w:numFmt"))
            if level is None or num_fmt is None:
                continue
            number_format = NumberFormat.from_word(num_fmt.get(W_VAL))
            if number_format is None:
                logger.debug(f"Unsupported number format {num_fmt.get(W_VAL)!r}")
                continue
            levels[level] = number_format
        abstract[abstract_id] = levels

    instances: dict[int, int] = {}
    for num in numbering.iterchildren(qn("w:num")):
        num_id = _int_attr(num, qn("w:numId"))
        abstract_id = _int_val(num.find(qn("w:abstractNumId")))
        if num_id is None or abstract_id is None:
            continue
        instances[num_id] = abstract_id

    return NumberingDefinitions(instances=instances, abstract=abstract)


def _toggle(r_pr, tag: str) -> bool:
    if r_pr is None:
        return False
    el = r_pr.find(qn(tag))
    if el is None:
        return False
    value = el.get(W_VAL)
    return value is None or value.lower() not in FALSE_VALUES


def _int_val(el) -> Optional[int]:
    if el is None:
        return None
    return _int_attr(el, W_VAL)


def _int_attr(el, name: str) -> Optional[int]:
    value = el.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.debug(f"Ignoring non-integer attribute {name}={value!r}")
        return None
